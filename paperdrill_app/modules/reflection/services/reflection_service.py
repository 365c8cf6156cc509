"""
Reflection Service
==================
Saves the learner's notes for a finished article.

Two separate writes with different failure policies:
- ``save_reflection``: the article row is the source of truth. A missing id
  raises ``NotFoundError``; store failures propagate.
- ``record_completion``: the ledger row is best-effort telemetry. Any
  failure is logged and reported as ``False``, never raised.
"""

from datetime import datetime
from typing import Mapping, Optional

from flask import current_app

from paperdrill_app.core.error_handlers import NotFoundError, RowNotFoundError
from paperdrill_app.modules.catalog.schemas import ArticleStatus
from paperdrill_app.modules.stats.services.daily_stats_service import DailyStatsService
from paperdrill_app.store import ARTICLES_TABLE, RecordStore
from ..schemas import Reflection, ReflectionOutcome


class ReflectionService:

    @staticmethod
    def save_reflection(store: RecordStore, article_id: str, reflection: Reflection) -> None:
        """Write the four notes and mark the article Done (fail-loud)."""
        values = reflection.to_row()
        values['status'] = ArticleStatus.DONE.value
        try:
            store.update_row(ARTICLES_TABLE, 'id', article_id, values)
        except RowNotFoundError as e:
            raise NotFoundError(resource=f"article:{article_id}") from e
        current_app.logger.info(f"Reflection saved for article {article_id}")

    @staticmethod
    def record_completion(
        store: RecordStore,
        article_id: str,
        title: str,
        stats: Optional[Mapping[str, object]],
        now: Optional[datetime] = None,
    ) -> bool:
        """Append the ledger row (fail-silent). Without stats there is nothing to count, so no row."""
        if stats is None:
            current_app.logger.warning(f"No stats for article {article_id}, ledger row skipped")
            return False
        try:
            DailyStatsService.append_completion(store, article_id, title, stats, now)
        except Exception as e:
            current_app.logger.error(f"Log sheet error for article {article_id}: {e}", exc_info=True)
            return False
        return True

    @staticmethod
    def submit_reflection(
        store: RecordStore,
        article_id: str,
        title: str,
        reflection: Reflection,
        stats: Optional[Mapping[str, object]],
        now: Optional[datetime] = None,
    ) -> ReflectionOutcome:
        """
        Save the notes, then append the ledger row. An unknown id stops
        before the ledger is touched.
        """
        ReflectionService.save_reflection(store, article_id, reflection)
        recorded = ReflectionService.record_completion(store, article_id, title, stats, now)
        return ReflectionOutcome(saved=True, ledger_recorded=recorded)
