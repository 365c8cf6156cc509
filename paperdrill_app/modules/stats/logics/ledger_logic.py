from datetime import date
from typing import Iterable, Mapping, Optional, Union

from ..schemas import DailyStats, LedgerEntry


def _count(value) -> int:
    """Ledger cells are strings; blanks and junk count as zero."""
    if value is None or value == '':
        return 0
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return 0


def compute_daily_stats(rows: Iterable[Mapping[str, object]], today: Union[date, str]) -> DailyStats:
    """
    Pure logic: sum the ledger rows stamped with ``today``.
    No DB or Flask context involved.
    """
    day = today.isoformat() if isinstance(today, date) else str(today)
    stats = DailyStats()
    for row in rows:
        if str(row.get('date', '')).strip() != day:
            continue
        stats.papers += 1
        stats.sentences += _count(row.get('count_sentences'))
        stats.words += _count(row.get('count_words'))
    return stats


def build_ledger_entry(
    article_id: str,
    title: str,
    stats: Optional[Mapping[str, object]],
    today: Union[date, str],
) -> LedgerEntry:
    """Republish the article's stored counts under today's date."""
    stats = stats or {}
    return LedgerEntry(
        date=today.isoformat() if isinstance(today, date) else str(today),
        article_id=article_id,
        title=title or '',
        count_sentences=_count(stats.get('sentences')),
        count_words=_count(stats.get('words')),
    )
