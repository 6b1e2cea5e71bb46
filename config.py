"""
Configuration management for the No-Dues clearance application
"""
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: str = 'false') -> bool:
    return os.environ.get(name, default).lower() in ['true', 'on', '1']


def _env_list(name: str, default: str) -> list:
    raw = os.environ.get(name, default)
    return [item.strip().lower() for item in raw.split(',') if item.strip()]


class Config:
    """Base configuration class"""

    # Flask Configuration
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Database Configuration
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        f"mysql+pymysql://{os.environ.get('MYSQL_USER', 'root')}:{os.environ.get('MYSQL_PASSWORD', '')}@{os.environ.get('MYSQL_HOST', 'localhost')}/{os.environ.get('MYSQL_DB', 'nodues')}"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }

    # Clearance workflow
    CLEARANCE_DEPARTMENTS = _env_list('CLEARANCE_DEPARTMENTS', 'library,accounts,hostel,department')
    REQUIRE_REQUEST_VERIFICATION = _env_flag('REQUIRE_REQUEST_VERIFICATION')
    VERIFICATION_TOKEN_TTL_HOURS = int(os.environ.get('VERIFICATION_TOKEN_TTL_HOURS', 24))
    DEFAULT_PAGE_SIZE = int(os.environ.get('DEFAULT_PAGE_SIZE', 20))
    MAX_PAGE_SIZE = int(os.environ.get('MAX_PAGE_SIZE', 100))

    # Email Configuration
    MAIL_ENABLED = _env_flag('MAIL_ENABLED')
    MAIL_SERVER = os.environ.get('MAIL_SERVER', 'smtp.gmail.com')
    MAIL_PORT = int(os.environ.get('MAIL_PORT', 587))
    MAIL_USE_TLS = _env_flag('MAIL_USE_TLS', 'true')
    MAIL_USERNAME = os.environ.get('MAIL_USERNAME')
    MAIL_PASSWORD = os.environ.get('MAIL_PASSWORD')
    MAIL_SENDER_NAME = os.environ.get('MAIL_SENDER_NAME', 'No-Dues Portal')

    # Links and artifacts
    FRONTEND_URL = os.environ.get('FRONTEND_URL', 'http://localhost:5173')
    CERTIFICATE_DIR = os.environ.get('CERTIFICATE_DIR', '/certificates')

    # Application Settings
    DEBUG = _env_flag('FLASK_DEBUG')
    TESTING = False

    @staticmethod
    def init_app(app):
        """Initialize application with configuration"""
        pass


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///nodues.db'
    SQLALCHEMY_ENGINE_OPTIONS = {}


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    SECRET_KEY = os.environ.get('SECRET_KEY')

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)

        # Ensure SECRET_KEY is set in production
        if not app.config['SECRET_KEY']:
            raise ValueError("SECRET_KEY environment variable must be set in production")


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    CLEARANCE_DEPARTMENTS = ['library', 'accounts', 'hostel', 'department']
    REQUIRE_REQUEST_VERIFICATION = False
    MAIL_ENABLED = False
    DEFAULT_PAGE_SIZE = 20
    MAX_PAGE_SIZE = 100


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
