from datetime import datetime
from typing import Optional

from flask import current_app

from paperdrill_app.core.error_handlers import NotFoundError
from paperdrill_app.modules.stats.services.daily_stats_service import DailyStatsService
from paperdrill_app.store import ARTICLES_TABLE, RecordStore
from ..logics.catalog_logic import article_from_row
from ..schemas import Article, Catalog


class CatalogService:
    """Loads articles and today's stats from the record store."""

    @staticmethod
    def load_catalog(store: RecordStore, now: Optional[datetime] = None) -> Catalog:
        """Fresh read of both tables; nothing is cached here."""
        articles = [article_from_row(row) for row in store.list_rows(ARTICLES_TABLE)]
        daily_stats = DailyStatsService.get_today_stats(store, now)
        current_app.logger.debug(
            f"Catalog loaded: {len(articles)} articles, today {daily_stats.papers} papers"
        )
        return Catalog(articles=articles, daily_stats=daily_stats)

    @staticmethod
    def get_article(store: RecordStore, article_id: str) -> Article:
        for row in store.list_rows(ARTICLES_TABLE):
            if str(row.get('id', '')) == article_id:
                return article_from_row(row)
        raise NotFoundError(resource=f"article:{article_id}")
