# wikigen/scripts/warm_articles.py
"""
Generates articles ahead of the first visitor.

    python -m wikigen.scripts.warm_articles solar-eclipses "black holes"
    python -m wikigen.scripts.warm_articles --topics-file topics.txt
"""
import argparse
import os
from typing import List, Optional

from slugify import slugify

from wikigen import create_app, db
from wikigen.errors import GenerationFailure
from wikigen.resolver import ArticleResolver
from wikigen.store import ArticleStore


def read_topics(topics: List[str], topics_file: Optional[str]) -> List[str]:
    out = list(topics)
    if topics_file:
        if not os.path.exists(topics_file):
            raise SystemExit(f"File not found: {topics_file}")
        with open(topics_file, "r", encoding="utf-8") as f:
            out.extend(line.strip() for line in f if line.strip() and not line.strip().startswith("#"))
    return out


def main(argv=None, app=None) -> int:
    p = argparse.ArgumentParser(description="Resolve (and generate if missing) articles for topics.")
    p.add_argument("topics", nargs="*", help="topics or slugs")
    p.add_argument("--topics-file", dest="topics_file")
    args = p.parse_args(argv)

    slugs = []
    for t in read_topics(args.topics, args.topics_file):
        s = slugify(t)
        if s and s not in slugs:
            slugs.append(s)
    if not slugs:
        p.error("no topics given")

    app = app or create_app()
    failed = 0
    with app.app_context():
        resolver = ArticleResolver(ArticleStore(db.session), app.extensions["wikigen"]["generator"])
        for slug in slugs:
            result = resolver.resolve(slug)
            if isinstance(result, GenerationFailure):
                failed += 1
                print(f"[fail] {slug}: " + "; ".join(result.reasons))
            else:
                print(f"[ok] {slug} -> {result.category} | {result.title}")
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
