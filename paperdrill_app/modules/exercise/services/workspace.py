# File: paperdrill_app/modules/exercise/services/workspace.py
"""
In-memory learner workspace.

One workspace per logged-in browser session, keyed by an id kept in the
signed Flask session cookie. It holds the single active exercise and the
last catalog snapshot; nothing here survives a process restart.

Only authenticated requests create workspaces. The registry is an LRU
capped at ``WORKSPACE_REGISTRY_SIZE`` entries.
"""

import uuid
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional

from flask import current_app, session

from paperdrill_app.modules.catalog.schemas import Article, Catalog
from ..config import ExerciseDefaultConfig
from ..logics.session_engine import ExerciseSession

_EXTENSION_KEY = 'paperdrill.workspaces'


@dataclass
class Workspace:
    article: Optional[Article] = None
    exercise: Optional[ExerciseSession] = None
    catalog: Optional[Catalog] = None

    def clear_exercise(self) -> None:
        self.article = None
        self.exercise = None


class WorkspaceRegistry:
    def __init__(self, capacity: int = ExerciseDefaultConfig.WORKSPACE_REGISTRY_SIZE):
        self.capacity = max(1, int(capacity))
        self._workspaces: 'OrderedDict[str, Workspace]' = OrderedDict()

    def find(self, key: Optional[str]) -> Optional[Workspace]:
        if not key or key not in self._workspaces:
            return None
        self._workspaces.move_to_end(key)
        return self._workspaces[key]

    def get(self, key: str) -> Workspace:
        workspace = self.find(key)
        if workspace is None:
            workspace = self._workspaces[key] = Workspace()
            while len(self._workspaces) > self.capacity:
                evicted, _ = self._workspaces.popitem(last=False)
                current_app.logger.info(f"Workspace {evicted} evicted")
        return workspace

    def drop(self, key: Optional[str]) -> None:
        if key:
            self._workspaces.pop(key, None)

    def __len__(self) -> int:
        return len(self._workspaces)


def get_registry() -> WorkspaceRegistry:
    app = current_app._get_current_object()
    registry = app.extensions.get(_EXTENSION_KEY)
    if registry is None:
        registry = WorkspaceRegistry(
            app.config.get('WORKSPACE_REGISTRY_SIZE', ExerciseDefaultConfig.WORKSPACE_REGISTRY_SIZE)
        )
        app.extensions[_EXTENSION_KEY] = registry
    return registry


def find_workspace() -> Optional[Workspace]:
    """Workspace of the current browser session, or None; never creates one."""
    return get_registry().find(session.get(ExerciseDefaultConfig.WORKSPACE_SESSION_KEY))


def get_workspace() -> Workspace:
    """Workspace of the current browser session, created on first use."""
    key = session.get(ExerciseDefaultConfig.WORKSPACE_SESSION_KEY)
    if not key:
        key = uuid.uuid4().hex
        session[ExerciseDefaultConfig.WORKSPACE_SESSION_KEY] = key
    return get_registry().get(key)


def drop_workspace() -> None:
    get_registry().drop(session.pop(ExerciseDefaultConfig.WORKSPACE_SESSION_KEY, None))
