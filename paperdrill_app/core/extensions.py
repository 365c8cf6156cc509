# File: paperdrill_app/core/extensions.py
# Flask extension singletons, bound to the app in bootstrap.register_extensions

import sqlite3

from flask_login import LoginManager
from flask_sqlalchemy import SQLAlchemy
from flask_wtf import CSRFProtect
from sqlalchemy import event
from sqlalchemy.engine import Engine

# Local record store (STORE_BACKEND=sql)
db = SQLAlchemy()


@event.listens_for(Engine, "connect")
def _tune_sqlite(dbapi_connection, _connection_record):
    """The seed script and the web process may hold the file at once."""
    if not isinstance(dbapi_connection, sqlite3.Connection):
        return
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA journal_mode=WAL;")
        cursor.execute("PRAGMA busy_timeout=5000;")
    finally:
        cursor.close()


# One shared-password learner; the access gate does the redirecting
login_manager = LoginManager()
login_manager.login_view = "auth.login"
login_manager.session_protection = "basic"

# HTML forms only; JSON API blueprints are exempted in the module registry
csrf_protect = CSRFProtect()

__all__ = ["db", "login_manager", "csrf_protect"]
