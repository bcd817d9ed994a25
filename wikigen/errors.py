# wikigen/errors.py
from dataclasses import dataclass, field
from typing import List


class WikigenError(Exception):
    pass


class GenerationError(WikigenError):
    """One generation attempt failed; the resolver may try again."""


class MalformedGeneration(GenerationError):
    pass


class GenerationTransportError(GenerationError):
    pass


class DuplicateSlug(WikigenError):
    def __init__(self, slug: str):
        super().__init__(f"article with slug {slug!r} already exists")
        self.slug = slug


@dataclass(frozen=True)
class GenerationFailure:
    """
    Terminal result of a resolution whose attempts all failed.
    Returned, not raised: callers render a not-found page from it.
    """
    slug: str
    attempts: int
    reasons: List[str] = field(default_factory=list)
