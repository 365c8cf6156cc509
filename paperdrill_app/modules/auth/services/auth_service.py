"""
Auth Service - shared password check and cookie session.
"""
import hmac
from datetime import timedelta

from flask import current_app, session
from flask_login import login_user, logout_user

from paperdrill_app.modules.exercise.services.workspace import drop_workspace
from ..config import AuthModuleDefaultConfig
from ..models import Learner


class AuthService:
    """Service for the shared-password gate."""

    @staticmethod
    def check_password(password) -> bool:
        expected = current_app.config.get('APP_PASSWORD') or ''
        if not expected or not isinstance(password, str):
            return False
        return hmac.compare_digest(password.encode('utf-8'), expected.encode('utf-8'))

    @staticmethod
    def login(password) -> bool:
        """
        Verify the password and start a 7-day session.

        Returns:
            True when the learner is now logged in.
        """
        if not AuthService.check_password(password):
            current_app.logger.warning("Rejected login attempt")
            return False
        # A fresh login starts from an empty workspace
        drop_workspace()
        session.permanent = True
        login_user(
            Learner(),
            remember=True,
            duration=timedelta(days=AuthModuleDefaultConfig.AUTH_SESSION_LIFETIME_DAYS),
        )
        current_app.logger.info("Learner logged in")
        return True

    @staticmethod
    def logout() -> None:
        logout_user()
