import os

BASEDIR = os.path.abspath(os.path.dirname(__file__))


def _env_flag(name, default='0'):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


def _env_origins(default):
    raw = os.environ.get('ALLOWED_ORIGINS')
    if not raw:
        return default
    return [o.strip() for o in raw.split(',') if o.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Line-delimited word list used by automatic mode
    WORDS_FILE = os.environ.get('WORDS_FILE') or os.path.join(BASEDIR, 'impostor', 'data', 'words.txt')
    # manual | automatic
    DEFAULT_MODE = os.environ.get('DEFAULT_MODE', 'manual')
    # Never below 2, enforced by the session operations
    MIN_PLAYERS = int(os.environ.get('MIN_PLAYERS', '2'))
    # Drop a player from the roster when their socket disconnects without leaving
    REMOVE_ON_DISCONNECT = _env_flag('REMOVE_ON_DISCONNECT')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    ALLOWED_ORIGINS = _env_origins(['http://localhost:3000', 'http://127.0.0.1:3000'])
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')
    HOST = os.environ.get('HOST', 'localhost')
    PORT = int(os.environ.get('PORT', '3000'))


class ProductionConfig(Config):
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '8080'))
    ALLOWED_ORIGINS = _env_origins(['http://localhost:3000'])


class TestingConfig(Config):
    TESTING = True
    LOG_LEVEL = 'ERROR'
    PORT = 3001


config_by_name = {
    'development': Config,
    'production': ProductionConfig,
    'testing': TestingConfig,
}


def get_config(env=None):
    """Return the config class for APP_ENV, falling back to development."""
    env = env or os.environ.get('APP_ENV', 'development')
    return config_by_name.get(env, Config)
