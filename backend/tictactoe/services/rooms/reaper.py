from tictactoe import socketio


def start_room_reaper(app) -> bool:
    """Start the idle-room reaper as a Socket.IO background task.

    - No-ops in TESTING mode or when ROOM_IDLE_TTL_SEC is 0
    - Wakes every REAPER_INTERVAL_SEC and expires rooms idle past the TTL
    Returns whether a worker was started.
    """
    ttl = int(app.config.get('ROOM_IDLE_TTL_SEC', 0))
    if ttl <= 0 or app.config.get('TESTING'):
        return False
    interval = max(1, int(app.config.get('REAPER_INTERVAL_SEC', 30)))
    coordinator = app.extensions['room_coordinator']

    def _worker():
        app.logger.info(f"[reaper-start] ttl={ttl}s interval={interval}s")
        while True:
            socketio.sleep(interval)
            with app.app_context():
                try:
                    expired = coordinator.reap_idle(ttl)
                except Exception:
                    app.logger.exception("[reaper-error] sweep failed")
                    continue
                if expired:
                    app.logger.info(f"[reaper-sweep] expired={expired}")

    socketio.start_background_task(_worker)
    return True
