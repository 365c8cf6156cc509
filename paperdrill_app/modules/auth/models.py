from __future__ import annotations

from typing import Optional

from flask_login import UserMixin

from .config import AuthModuleDefaultConfig


class Learner(UserMixin):
    """The single identity behind the shared password; not persisted."""

    def __init__(self, learner_id: str = AuthModuleDefaultConfig.LEARNER_ID):
        self.id = learner_id

    @classmethod
    def load(cls, user_id: str) -> Optional["Learner"]:
        if user_id == AuthModuleDefaultConfig.LEARNER_ID:
            return cls(user_id)
        return None
