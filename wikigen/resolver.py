# wikigen/resolver.py
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Union

from .errors import DuplicateSlug, GenerationError, GenerationFailure
from .generation import GeneratedArticle, parse_payload, topic_from_slug
from .models import Article
from .store import ArticleStore

log = logging.getLogger(__name__)

MAX_ATTEMPTS = 2


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ArticleResolver:
    """
    Turns a slug into an article: stored copy if there is one, otherwise a
    freshly generated, validated and persisted one.

    All failures inside an attempt (transport, unparsable output, missing
    fields) share one budget of `max_attempts`. When it runs out the result
    is a `GenerationFailure` value, never an exception.
    """

    def __init__(
        self,
        store: ArticleStore,
        generator,
        clock: Optional[Callable[[], datetime]] = None,
        max_attempts: int = MAX_ATTEMPTS,
    ):
        self.store = store
        self.generator = generator
        self.clock = clock or _utcnow
        self.max_attempts = max_attempts

    def resolve(self, slug: str) -> Union[Article, GenerationFailure]:
        if not slug:
            raise ValueError("slug must be non-empty")

        existing = self.store.find_by_slug(slug)
        if existing is not None:
            log.debug("cache hit for %r", slug)
            return existing

        generated, reasons = self._generate(slug)
        if generated is None:
            log.error("giving up on %r after %d attempts", slug, len(reasons))
            return GenerationFailure(slug=slug, attempts=len(reasons), reasons=reasons)

        return self._persist(slug, generated)

    def _generate(self, slug: str):
        topic = topic_from_slug(slug)
        categories = self.store.distinct_categories()
        log.info("generating %r (topic %r, %d known categories)", slug, topic, len(categories))

        reasons: List[str] = []
        for attempt in range(1, self.max_attempts + 1):
            try:
                raw = self.generator.generate(topic, categories)
                return parse_payload(raw), reasons
            except GenerationError as e:
                reasons.append(f"{type(e).__name__}: {e}")
                log.warning("attempt %d/%d for %r failed: %s", attempt, self.max_attempts, slug, e)
        return None, reasons

    def _persist(self, slug: str, generated: GeneratedArticle) -> Article:
        category = self.store.canonical_category(generated.category) or generated.category
        article = Article(
            category=category,
            created=self.clock(),
            title=generated.title,
            body=generated.body,
            slug=slug,
        )
        try:
            return self.store.insert(article)
        except DuplicateSlug:
            log.warning("%r was stored concurrently, serving the stored copy", slug)
            stored = self.store.find_by_slug(slug)
            if stored is None:
                raise
            return stored
