# File: paperdrill_app/store/seed.py
"""Load article rows from a JSON export into the configured record store."""

from __future__ import annotations

import json
import logging
from typing import Iterable, List, Mapping

from ..core.error_handlers import RowNotFoundError, ValidationError
from .base import ARTICLE_COLUMNS, ARTICLES_TABLE, RecordStore

logger = logging.getLogger(__name__)


def _json_cell(value) -> str:
    if value is None or isinstance(value, str):
        return value or ''
    return json.dumps(value, ensure_ascii=False)


def article_to_row(item: Mapping[str, object]) -> dict:
    """
    Convert one exported article to Articles-table cells.

    Accepts the API shape (``gameData``, ``tags`` as list) as well as raw
    column names. Only columns present in ``item`` appear in the result.
    """
    if not item.get('id'):
        raise ValidationError('Article without id', errors={'item': dict(item)})

    row = {column: item[column] for column in ARTICLE_COLUMNS if column in item}
    if isinstance(row.get('tags'), (list, tuple, set)):
        row['tags'] = ', '.join(sorted(str(t) for t in row['tags']))
    if 'stats' in row:
        row['stats'] = _json_cell(row['stats'])
    if 'gameData' in item:
        row['game_data'] = item['gameData']
    if 'game_data' in row:
        row['game_data'] = _json_cell(row['game_data'])
    return row


def import_articles(store: RecordStore, items: Iterable[Mapping[str, object]]) -> List[str]:
    """Upsert every item by id; returns the ids written."""
    written = []
    for item in items:
        row = article_to_row(item)
        values = {k: v for k, v in row.items() if k != 'id'}
        try:
            store.update_row(ARTICLES_TABLE, 'id', row['id'], values)
            logger.info("Updated article %s", row['id'])
        except RowNotFoundError:
            store.append_row(ARTICLES_TABLE, row)
            logger.info("Added article %s", row['id'])
        written.append(row['id'])
    return written
