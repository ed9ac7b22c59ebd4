from tictactoe.config import Config


def test_config_lives_in_package():
    assert Config.__module__ == 'tictactoe.config'


def test_config_defaults_are_typed():
    assert isinstance(Config.PORT, int)
    assert isinstance(Config.ROOM_IDLE_TTL_SEC, int)
    assert isinstance(Config.REAPER_INTERVAL_SEC, int)
    assert Config.CORS_ORIGINS


def test_flask_app_loads_test_config(flask_app):
    assert flask_app.config['TESTING'] is True
    assert flask_app.config['ROOM_IDLE_TTL_SEC'] == 0
