import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    # Comma-separated list; '*' allows any origin
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    # Optional: directory holding a built frontend to serve at '/'
    FRONTEND_DIR = os.environ.get('FRONTEND_DIR') or None
    # Idle-room expiry (seconds). 0 disables the reaper.
    ROOM_IDLE_TTL_SEC = int(os.environ.get('ROOM_IDLE_TTL_SEC', '0'))
    REAPER_INTERVAL_SEC = int(os.environ.get('REAPER_INTERVAL_SEC', '30'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
