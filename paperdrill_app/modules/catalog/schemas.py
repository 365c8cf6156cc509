from dataclasses import dataclass, field, replace
from enum import Enum
from typing import FrozenSet, List, Optional, Tuple

from paperdrill_app.modules.stats.schemas import DailyStats


class ArticleStatus(str, Enum):
    NEW = 'New'
    DONE = 'Done'

    @classmethod
    def parse(cls, raw: Optional[str]) -> 'ArticleStatus':
        """Blank or unknown statuses read as New."""
        if raw and raw.strip().lower() == cls.DONE.value.lower():
            return cls.DONE
        return cls.NEW


@dataclass(frozen=True)
class Sentence:
    """
    One reconstruction target.

    ``words`` joined by single spaces in stored order reproduces
    ``reference``; upstream data is trusted on that.
    """
    reference: str
    hint: str
    words: Tuple[str, ...]

    def to_dict(self) -> dict:
        return {'original': self.reference, 'japanese': self.hint, 'words': list(self.words)}


@dataclass(frozen=True)
class ArticleStats:
    sentences: int = 0
    words: int = 0

    def to_dict(self) -> dict:
        return {'sentences': self.sentences, 'words': self.words}


@dataclass(frozen=True)
class Article:
    id: str
    title: str
    tags: FrozenSet[str] = frozenset()
    status: ArticleStatus = ArticleStatus.NEW
    stats: Optional[ArticleStats] = None
    sentences: Optional[Tuple[Sentence, ...]] = None

    @property
    def is_done(self) -> bool:
        return self.status is ArticleStatus.DONE

    @property
    def has_exercise(self) -> bool:
        return bool(self.sentences)

    @property
    def is_playable(self) -> bool:
        return self.has_exercise and not self.is_done

    def mark_done(self) -> 'Article':
        return replace(self, status=ArticleStatus.DONE)

    def to_dict(self) -> dict:
        """API wire shape."""
        return {
            'id': self.id,
            'title': self.title,
            'tags': sorted(self.tags),
            'status': self.status.value,
            'stats': self.stats.to_dict() if self.stats else None,
            'gameData': [s.to_dict() for s in self.sentences] if self.sentences is not None else None,
        }


@dataclass
class Catalog:
    """A loaded article list plus today's counters."""
    articles: List[Article] = field(default_factory=list)
    daily_stats: DailyStats = field(default_factory=DailyStats)

    def get(self, article_id: str) -> Optional[Article]:
        for article in self.articles:
            if article.id == article_id:
                return article
        return None

    def to_dict(self) -> dict:
        return {
            'articles': [a.to_dict() for a in self.articles],
            'dailyStats': self.daily_stats.to_dict(),
        }
