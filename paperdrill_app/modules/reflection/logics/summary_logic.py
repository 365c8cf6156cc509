from paperdrill_app.modules.catalog.schemas import Article
from ..schemas import ArticleSummary


def summarize(article: Article) -> ArticleSummary:
    """
    End-of-article review: every reference sentence with its hint, plus the
    counts stored on the article (the exercise never recounts words itself).
    """
    return ArticleSummary(
        article_id=article.id,
        title=article.title,
        sentences=[(s.reference, s.hint) for s in (article.sentences or ())],
        sentence_count=article.stats.sentences if article.stats else None,
        word_count=article.stats.words if article.stats else None,
    )
