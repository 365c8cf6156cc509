# File: paperdrill_app/store/__init__.py
"""Record store backends and the per-app accessor."""

from flask import current_app

from .base import (
    ARTICLE_COLUMNS,
    ARTICLES_TABLE,
    LOG_COLUMNS,
    LOG_TABLE,
    RecordStore,
)

_EXTENSION_KEY = 'paperdrill.store'


def build_store(app) -> RecordStore:
    """Instantiate the backend named by ``STORE_BACKEND``."""
    backend = app.config.get('STORE_BACKEND', 'sql')
    if backend == 'sheets':
        from .sheets_store import SheetsRecordStore

        return SheetsRecordStore.from_service_account(
            app.config['GOOGLE_SERVICE_ACCOUNT_EMAIL'],
            app.config['GOOGLE_PRIVATE_KEY'],
            app.config['GOOGLE_SHEET_ID'],
        )
    if backend == 'sql':
        from .sql_store import SqlRecordStore

        return SqlRecordStore()
    raise ValueError(f"Unknown STORE_BACKEND {backend!r}")


def get_store() -> RecordStore:
    """Return the record store bound to the current app, creating it once."""
    app = current_app._get_current_object()
    store = app.extensions.get(_EXTENSION_KEY)
    if store is None:
        store = build_store(app)
        app.extensions[_EXTENSION_KEY] = store
        app.logger.info(f"Record store ready: {type(store).__name__}")
    return store


def set_store(app, store: RecordStore) -> None:
    """Bind an explicit store instance to ``app`` (tests, scripts)."""
    app.extensions[_EXTENSION_KEY] = store


__all__ = [
    'ARTICLE_COLUMNS',
    'ARTICLES_TABLE',
    'LOG_COLUMNS',
    'LOG_TABLE',
    'RecordStore',
    'build_store',
    'get_store',
    'set_store',
]
