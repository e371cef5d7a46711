# File: cyberlearn_app/core/config.py
# Core Infrastructure Layer: application settings read from the environment.

import os
from dotenv import load_dotenv

load_dotenv()

# Project root (this file lives in cyberlearn_app/core/)
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))

# Local SQLite fallback when no database URL is configured
DATABASE_PATH = os.path.join(BASE_DIR, "database", "cyberlearn.db")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'on')


def _database_uri() -> str:
    uri = os.environ.get('SQLALCHEMY_DATABASE_URI') or os.environ.get('DATABASE_URL')
    if not uri:
        return f'sqlite:///{DATABASE_PATH}'
    # Hosted Postgres providers still hand out the legacy scheme
    if uri.startswith('postgres://'):
        uri = 'postgresql://' + uri[len('postgres://'):]
    return uri


class Config:
    """Cấu hình ứng dụng CyberLearn."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, though env is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Single static admin credential pair
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME', 'admin')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD', 'admin123')

    # Seed the starter cybersecurity course into empty tables
    SEED_CONTENT = _env_flag('SEED_CONTENT', True)

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(BASE_DIR, 'logs')
    LOG_JSON = _env_flag('LOG_JSON', False)

    PORT = int(os.environ.get('PORT', 3000))

    @classmethod
    def init_app(cls, app):
        """Khởi tạo các thư mục cần thiết."""
        if app.config['SQLALCHEMY_DATABASE_URI'] == f'sqlite:///{DATABASE_PATH}':
            os.makedirs(os.path.dirname(DATABASE_PATH), exist_ok=True)
