# File: paperdrill_app/modules/auth/gate.py
"""Request gate: everything except the login page and the API needs the session cookie."""

from flask import Flask, redirect, request, url_for
from flask_login import current_user

from .config import AuthModuleDefaultConfig


def is_public_path(path: str) -> bool:
    return (
        path in AuthModuleDefaultConfig.PUBLIC_PATHS
        or path.startswith(AuthModuleDefaultConfig.PUBLIC_PREFIXES)
        or 'favicon.ico' in path
    )


def register_access_gate(app: Flask) -> None:

    @app.before_request
    def require_shared_password():
        path = request.path
        authenticated = current_user.is_authenticated

        if authenticated and path == '/login':
            return redirect(url_for('catalog.index'))
        if is_public_path(path):
            return None
        if not authenticated:
            return redirect(url_for('auth.login'))
        return None
