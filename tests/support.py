"""Shared fixtures: a scripted generator and an app on in-memory SQLite."""

import json
import unittest
from datetime import datetime, timezone

from wikigen import create_app, db
from wikigen.models import Article
from wikigen.store import ArticleStore

NOW = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def payload(category="Astronomy", title="Solar Eclipses", body="<html><body><h1>Solar Eclipses</h1></body></html>"):
    return json.dumps({"category": category, "title": title, "body": body})


class StubGenerator:
    """
    Replays `responses` in order, repeating the last one. Exceptions in the
    list are raised instead of returned.
    """

    def __init__(self, *responses):
        self.responses = list(responses) or [payload()]
        self.calls = []

    def generate(self, topic, known_categories):
        self.calls.append((topic, list(known_categories)))
        r = self.responses[min(len(self.calls), len(self.responses)) - 1]
        if isinstance(r, Exception):
            raise r
        return r


def make_app(generator):
    return create_app(
        {"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite://", "LLM_API_KEY": None},
        generator=generator,
    )


def add_article(slug, category, created=NOW, title=None, body=None):
    a = Article(
        slug=slug,
        category=category,
        created=created,
        title=title or slug.replace("-", " ").title(),
        body=body if body is not None else f"<html><body>{slug}</body></html>",
    )
    return ArticleStore(db.session).insert(a)


class AppTestCase(unittest.TestCase):
    def setUp(self):
        self.generator = StubGenerator()
        self.app = make_app(self.generator)
        self.ctx = self.app.app_context()
        self.ctx.push()
        self.store = ArticleStore(db.session)

    def tearDown(self):
        db.session.remove()
        self.ctx.pop()
