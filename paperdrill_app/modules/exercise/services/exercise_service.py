from typing import Optional

from flask import current_app

from paperdrill_app.core.error_handlers import InvalidTransitionError, NotFoundError
from paperdrill_app.modules.catalog.services.catalog_service import CatalogService
from paperdrill_app.store import get_store
from ..config import ExerciseDefaultConfig
from ..logics import session_engine as engine
from ..logics.normalizer import WhitespaceMode
from ..logics.session_engine import ExerciseSession
from .workspace import Workspace, find_workspace, get_workspace


class ExerciseService:
    """
    Glue between HTTP handlers and the pure session engine.
    Follows 3-Layer Architecture (Layer 2: workspace + orchestration).
    """

    @staticmethod
    def whitespace_mode() -> WhitespaceMode:
        return WhitespaceMode.parse(
            current_app.config.get('ANSWER_WHITESPACE_MODE', ExerciseDefaultConfig.ANSWER_WHITESPACE_MODE)
        )

    @staticmethod
    def open(article_id: str, workspace: Optional[Workspace] = None) -> ExerciseSession:
        """
        Start (or resume) the exercise for ``article_id``.
        Opening a different article replaces the active exercise.
        """
        workspace = workspace or get_workspace()
        current = workspace.exercise
        if current is not None and current.article_id == article_id:
            return current

        article = workspace.catalog.get(article_id) if workspace.catalog else None
        if article is None:
            article = CatalogService.get_article(get_store(), article_id)
        if article.is_done:
            raise InvalidTransitionError(f"Article {article_id} is already done")

        session = engine.start(article.id, article.sentences)
        workspace.article = article
        workspace.exercise = session
        current_app.logger.info(f"Exercise started for {article_id} ({session.total} sentences)")
        return session

    @staticmethod
    def _active_workspace(workspace: Optional[Workspace] = None) -> Workspace:
        workspace = workspace or find_workspace()
        if workspace is None or workspace.exercise is None:
            raise NotFoundError('No active exercise', resource='exercise')
        return workspace

    @staticmethod
    def current(workspace: Optional[Workspace] = None) -> ExerciseSession:
        return ExerciseService._active_workspace(workspace).exercise

    @staticmethod
    def apply(action: str, workspace: Optional[Workspace] = None, **params) -> ExerciseSession:
        """Run one engine transition against the active exercise and keep the result."""
        workspace = ExerciseService._active_workspace(workspace)
        session = workspace.exercise
        if action == 'place':
            session = engine.place(session, params['pool_index'], params.get('word'))
        elif action == 'remove':
            session = engine.remove(session, params['tile_id'])
        elif action == 'reorder':
            session = engine.reorder(session, params['tile_id'], params['position'])
        elif action == 'check':
            session = engine.check_answer(session, ExerciseService.whitespace_mode())
        elif action == 'retry':
            session = engine.retry(session)
        elif action == 'reveal':
            session = engine.reveal(session)
        elif action == 'hide':
            session = engine.hide(session)
        elif action == 'advance':
            session = engine.advance(session)
        elif action == 'skip':
            session = engine.skip(session)
        else:
            raise ValueError(f"Unknown exercise action {action!r}")
        workspace.exercise = session
        if session.completed:
            current_app.logger.info(f"Exercise completed for {session.article_id}")
        return session

    @staticmethod
    def exit(workspace: Optional[Workspace] = None) -> None:
        """Drop the active exercise; progress is not kept."""
        workspace = workspace or find_workspace()
        if workspace is not None:
            workspace.clear_exercise()
