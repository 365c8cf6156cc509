from dataclasses import dataclass


@dataclass
class DailyStats:
    """Today's completion counters."""
    papers: int = 0
    sentences: int = 0
    words: int = 0

    def to_dict(self) -> dict:
        return {'papers': self.papers, 'sentences': self.sentences, 'words': self.words}


@dataclass
class LedgerEntry:
    """One completion row of the ledger."""
    date: str
    article_id: str
    title: str
    count_sentences: int
    count_words: int

    def to_row(self) -> dict:
        return {
            'date': self.date,
            'article_id': self.article_id,
            'title': self.title,
            'count_sentences': self.count_sentences,
            'count_words': self.count_words,
        }
