# File: paperdrill_app/modules/catalog/logics/catalog_logic.py
"""Pure catalog rules: row parsing, the playable filter, optimistic completion."""

from __future__ import annotations

import json
from dataclasses import replace
from typing import Iterable, List, Mapping, Optional

from paperdrill_app.core.error_handlers import MalformedPayloadError
from paperdrill_app.modules.stats.schemas import DailyStats
from ..schemas import Article, ArticleStats, ArticleStatus, Catalog, Sentence


def parse_tags(raw: Optional[str]) -> frozenset:
    """'nlp, ml ,,nlp' -> {'nlp', 'ml'}"""
    if not raw:
        return frozenset()
    return frozenset(tag.strip() for tag in str(raw).split(',') if tag.strip())


def _decode_json(raw: Optional[str], column: str, row_id: str):
    if raw is None or str(raw).strip() == '':
        return None
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as e:
        raise MalformedPayloadError(f"Column {column} of article {row_id} is not valid JSON: {e}",
                                    column=column, row_id=row_id) from e


def _parse_stats(data, row_id: str) -> Optional[ArticleStats]:
    if data is None:
        return None
    if not isinstance(data, dict):
        raise MalformedPayloadError(f"Stats of article {row_id} must be an object", column='stats', row_id=row_id)
    try:
        return ArticleStats(sentences=int(data.get('sentences') or 0), words=int(data.get('words') or 0))
    except (TypeError, ValueError) as e:
        raise MalformedPayloadError(f"Stats of article {row_id} are not numbers: {e}",
                                    column='stats', row_id=row_id) from e


def _parse_sentences(data, row_id: str) -> Optional[tuple]:
    if data is None:
        return None
    if not isinstance(data, list):
        raise MalformedPayloadError(f"Game data of article {row_id} must be a list", column='game_data', row_id=row_id)
    sentences = []
    for entry in data:
        try:
            sentences.append(Sentence(
                reference=' '.join(str(entry['original']).split()),
                hint=str(entry.get('japanese') or ''),
                words=tuple(str(w) for w in entry['words']),
            ))
        except (KeyError, TypeError, AttributeError) as e:
            raise MalformedPayloadError(f"Bad sentence in article {row_id}: {e}",
                                        column='game_data', row_id=row_id) from e
    return tuple(sentences)


def article_from_row(row: Mapping[str, object]) -> Article:
    """Build an Article from Articles-table cells; malformed JSON is fatal."""
    row_id = str(row.get('id', ''))
    return Article(
        id=row_id,
        title=str(row.get('title') or ''),
        tags=parse_tags(row.get('tags')),
        status=ArticleStatus.parse(row.get('status')),
        stats=_parse_stats(_decode_json(row.get('stats'), 'stats', row_id), row_id),
        sentences=_parse_sentences(_decode_json(row.get('game_data'), 'game_data', row_id), row_id),
    )


def playable_articles(articles: Iterable[Article]) -> List[Article]:
    """Articles the learner can open: not Done, with a non-empty exercise."""
    return [a for a in articles if a.is_playable]


def pending_articles(articles: Iterable[Article]) -> List[Article]:
    """Not Done but still waiting for exercise data."""
    return [a for a in articles if not a.is_done and not a.has_exercise]


def apply_completion(catalog: Catalog, article_id: str) -> Catalog:
    """
    Reflect a local completion without re-fetching: the article turns Done
    and today's counters grow by its stored stats. An article without stats
    writes no ledger row, so the counters stay put.
    """
    target = catalog.get(article_id)
    if target is None:
        return catalog
    articles = [a.mark_done() if a.id == article_id else a for a in catalog.articles]
    if target.stats is None:
        return replace(catalog, articles=articles)
    daily = DailyStats(
        papers=catalog.daily_stats.papers + 1,
        sentences=catalog.daily_stats.sentences + target.stats.sentences,
        words=catalog.daily_stats.words + target.stats.words,
    )
    return replace(catalog, articles=articles, daily_stats=daily)
