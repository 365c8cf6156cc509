# File: paperdrill_app/modules/stats/services/daily_stats_service.py
from datetime import datetime
from typing import Mapping, Optional

from flask import current_app

from paperdrill_app.store import LOG_TABLE, RecordStore
from paperdrill_app.utils.time_utils import local_today
from ..config import StatsConfig
from ..logics.ledger_logic import build_ledger_entry, compute_daily_stats
from ..schemas import DailyStats, LedgerEntry


class DailyStatsService:
    """Reads and appends the per-day completion ledger."""

    @staticmethod
    def offset_hours() -> float:
        return float(current_app.config.get('DISPLAY_UTC_OFFSET_HOURS', StatsConfig.DISPLAY_UTC_OFFSET_HOURS))

    @staticmethod
    def today(now: Optional[datetime] = None):
        """The learner's calendar day at the configured fixed offset."""
        return local_today(DailyStatsService.offset_hours(), now)

    @staticmethod
    def get_today_stats(store: RecordStore, now: Optional[datetime] = None) -> DailyStats:
        """Recompute today's counters from every ledger row."""
        rows = store.list_rows(LOG_TABLE)
        return compute_daily_stats(rows, DailyStatsService.today(now))

    @staticmethod
    def append_completion(
        store: RecordStore,
        article_id: str,
        title: str,
        stats: Optional[Mapping[str, object]],
        now: Optional[datetime] = None,
    ) -> LedgerEntry:
        """
        Append one completion row. Errors propagate; callers decide
        whether the ledger write is allowed to fail.
        """
        entry = build_ledger_entry(article_id, title, stats, DailyStatsService.today(now))
        store.append_row(LOG_TABLE, entry.to_row())
        current_app.logger.info(
            f"Ledger row added for {article_id} on {entry.date}: "
            f"{entry.count_sentences} sentences / {entry.count_words} words"
        )
        return entry
