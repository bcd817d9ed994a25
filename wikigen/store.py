# wikigen/store.py
from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from .errors import DuplicateSlug
from .models import Article


class ArticleStore:
    """
    Slug -> article persistence over an explicit SQLAlchemy session.

    Category comparisons are case-insensitive everywhere; the earliest
    persisted casing of a category (lowest id) is its canonical form.
    """

    def __init__(self, session):
        self.session = session

    def find_by_slug(self, slug: str) -> Optional[Article]:
        return self.session.query(Article).filter_by(slug=slug).first()

    def list_by_category(self, category: str):
        return (
            self.session.query(Article.title, Article.created, Article.slug)
            .filter(func.lower(Article.category) == func.lower(category))
            .order_by(Article.created.desc(), Article.id.desc())
            .all()
        )

    def distinct_categories(self) -> List[str]:
        first_ids = select(func.min(Article.id)).group_by(func.lower(Article.category))
        rows = (
            self.session.query(Article.category)
            .filter(Article.id.in_(first_ids))
            .order_by(func.lower(Article.category), Article.category)
            .all()
        )
        return [r.category for r in rows]

    def canonical_category(self, category: str) -> Optional[str]:
        row = (
            self.session.query(Article.category)
            .filter(func.lower(Article.category) == func.lower(category))
            .order_by(Article.id)
            .first()
        )
        return row.category if row else None

    def insert(self, article: Article) -> Article:
        self.session.add(article)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            if self.find_by_slug(article.slug) is not None:
                raise DuplicateSlug(article.slug)
            raise
        return article

    def count(self) -> int:
        return self.session.query(func.count(Article.id)).scalar() or 0

    def count_by_category(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for name in self.distinct_categories():
            counts[name] = (
                self.session.query(func.count(Article.id))
                .filter(func.lower(Article.category) == func.lower(name))
                .scalar()
            )
        return counts
