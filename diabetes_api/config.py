"""
Configuration settings for the Diabetes Risk Admin API
"""
import os


def _env_flag(name, default='false'):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


def _demo_credentials_from_env(raw):
    """Parse ``user:secret,user:secret`` into a list of pairs."""
    pairs = []
    for item in raw.split(','):
        item = item.strip()
        if not item or ':' not in item:
            continue
        username, secret = item.split(':', 1)
        pairs.append((username.strip(), secret.strip()))
    return pairs


def _engine_options(uri, pool_size):
    """Bounded connection pool for server databases; SQLite keeps its defaults."""
    if uri.startswith('sqlite'):
        return {}
    return {
        'pool_size': pool_size,
        'max_overflow': 0,
        'pool_pre_ping': True,
    }


# Demonstration logins used when no admin record matches.
# Known weakness: disable with DEMO_LOGIN_ENABLED=false outside of demos.
DEFAULT_DEMO_CREDENTIALS = [
    ('admin', '123456'),
    ('superadmin', '654321'),
    ('operator', '000000'),
]


class Config:
    """Flask application configuration"""

    # Flask secret key, also used to sign tokens when TOKEN_SIGNING is on
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    # MySQL example: mysql+pymysql://root:@localhost/diabetes
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'diabetes.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    DB_POOL_SIZE = int(os.environ.get('DB_POOL_SIZE', 10))
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options(SQLALCHEMY_DATABASE_URI, DB_POOL_SIZE)

    # Bearer tokens
    TOKEN_SIGNING = _env_flag('TOKEN_SIGNING')
    TOKEN_MAX_AGE_MS = int(os.environ.get('TOKEN_MAX_AGE_MS', 24 * 60 * 60 * 1000))

    # Demo login fallback
    DEMO_LOGIN_ENABLED = _env_flag('DEMO_LOGIN_ENABLED', 'true')
    DEMO_CREDENTIALS = _demo_credentials_from_env(os.environ.get('DEMO_CREDENTIALS', '')) \
        or list(DEFAULT_DEMO_CREDENTIALS)

    # Error responses include the traceback when set
    EXPOSE_STACK = _env_flag('EXPOSE_STACK')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    API_VERSION = '1.0.0'


class ProductionConfig(Config):
    """Production configuration"""
    TOKEN_SIGNING = _env_flag('TOKEN_SIGNING', 'true')
    DEMO_LOGIN_ENABLED = _env_flag('DEMO_LOGIN_ENABLED', 'false')
    EXPOSE_STACK = False


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    TOKEN_SIGNING = False
    DEMO_LOGIN_ENABLED = True
    DEMO_CREDENTIALS = list(DEFAULT_DEMO_CREDENTIALS)
    EXPOSE_STACK = False


CONFIGS = {
    'development': Config,
    'production': ProductionConfig,
    'testing': TestConfig,
}


def config_from_env(environ=None):
    """Config class named by ``APP_CONFIG`` (default ``development``)."""
    environ = os.environ if environ is None else environ
    name = environ.get('APP_CONFIG', 'development').strip().lower()
    try:
        return CONFIGS[name]
    except KeyError:
        raise ValueError(f'Unknown APP_CONFIG {name!r}; expected one of {sorted(CONFIGS)}') from None
