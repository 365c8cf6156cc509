# File: paperdrill_app/store/base.py
"""
Record store contract.

The app persists two tables of string cells: ``articles`` (keyed by ``id``)
and ``log`` (append-only completion ledger). Backends only have to list
rows, update one row located by key, and append a row.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Mapping

ARTICLES_TABLE = 'articles'
LOG_TABLE = 'log'

ARTICLE_COLUMNS = (
    'id', 'title', 'tags', 'status',
    'purpose', 'methods', 'results', 'memo',
    'stats', 'game_data',
)
LOG_COLUMNS = ('date', 'article_id', 'title', 'count_sentences', 'count_words')

TABLE_COLUMNS: Dict[str, tuple] = {
    ARTICLES_TABLE: ARTICLE_COLUMNS,
    LOG_TABLE: LOG_COLUMNS,
}

Row = Dict[str, str]


def check_table(table: str) -> tuple:
    """Return the column layout of ``table`` or raise ``KeyError``."""
    try:
        return TABLE_COLUMNS[table]
    except KeyError:
        raise KeyError(f"Unknown table {table!r}") from None


def cell(value) -> str:
    """Render a Python value the way a spreadsheet cell stores it."""
    if value is None:
        return ''
    return str(value)


class RecordStore(ABC):
    """Key-columned record store reached through list/update/append."""

    @abstractmethod
    def list_rows(self, table: str) -> List[Row]:
        """Return every row of ``table`` as a column -> cell string mapping."""

    @abstractmethod
    def update_row(self, table: str, key: str, key_value: str, values: Mapping[str, object]) -> Row:
        """
        Overwrite ``values`` on the first row whose ``key`` column equals ``key_value``.

        Raises:
            RowNotFoundError: no such row.
            StoreError: the backend failed.
        """

    @abstractmethod
    def append_row(self, table: str, values: Mapping[str, object]) -> Row:
        """Append a new row; missing columns are stored empty."""
