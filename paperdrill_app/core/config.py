# File: paperdrill_app/core/config.py
# Core configuration layer, values come from the environment (.env supported).

import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()

# Project root: paperdrill_app/core/ -> two levels up
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))

# Local SQLite file used by the `sql` store backend
DATABASE_PATH = os.path.join(BASE_DIR, "database", "paperdrill.db")


def _env_flag(name: str, default: str = 'false') -> bool:
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """PaperDrill application configuration."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, env is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    # Shared secret gating the whole app
    APP_PASSWORD = os.environ.get('APP_PASSWORD', '')

    # Record store: 'sql' (local SQLite/SQLAlchemy) or 'sheets' (Google Sheets)
    STORE_BACKEND = os.environ.get('STORE_BACKEND', 'sql').strip().lower()

    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Google Sheets backend
    GOOGLE_SERVICE_ACCOUNT_EMAIL = os.environ.get('GOOGLE_SERVICE_ACCOUNT_EMAIL', '')
    GOOGLE_PRIVATE_KEY = os.environ.get('GOOGLE_PRIVATE_KEY', '').replace('\\n', '\n')
    GOOGLE_SHEET_ID = os.environ.get('GOOGLE_SHEET_ID', '')

    # Fixed offset (hours from UTC) defining the learner's calendar day
    DISPLAY_UTC_OFFSET_HOURS = float(os.environ.get('DISPLAY_UTC_OFFSET_HOURS', '9'))

    # Answer checking: 'collapse' (single spaces) or 'strip' (no whitespace at all)
    ANSWER_WHITESPACE_MODE = os.environ.get('ANSWER_WHITESPACE_MODE', 'collapse').strip().lower()

    # In-memory learner workspaces kept at once (least recently used evicted)
    WORKSPACE_REGISTRY_SIZE = int(os.environ.get('WORKSPACE_REGISTRY_SIZE', '16'))

    # Session cookie
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    REMEMBER_COOKIE_DURATION = timedelta(days=7)
    SESSION_COOKIE_HTTPONLY = True
    REMEMBER_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = os.environ.get('APP_ENV', 'development') == 'production'
    REMEMBER_COOKIE_SECURE = SESSION_COOKIE_SECURE

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR') or None
    LOG_JSON = _env_flag('LOG_JSON')

    @staticmethod
    def ensure_directories() -> None:
        """Create the local database directory if it is missing."""
        os.makedirs(os.path.dirname(DATABASE_PATH), exist_ok=True)
