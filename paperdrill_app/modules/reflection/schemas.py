from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Tuple


@dataclass
class Reflection:
    """Free-text notes written after finishing an article; every field may be empty."""
    purpose: str = ''
    methods: str = ''
    results: str = ''
    memo: str = ''

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> 'Reflection':
        return cls(**{name: str(data.get(name) or '') for name in ('purpose', 'methods', 'results', 'memo')})

    def to_row(self) -> dict:
        return {'purpose': self.purpose, 'methods': self.methods, 'results': self.results, 'memo': self.memo}


@dataclass
class ReflectionOutcome:
    saved: bool
    ledger_recorded: bool


@dataclass
class ArticleSummary:
    article_id: str
    title: str
    sentences: List[Tuple[str, str]] = field(default_factory=list)  # (reference, hint)
    sentence_count: Optional[int] = None
    word_count: Optional[int] = None
