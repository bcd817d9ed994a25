# wikigen/scripts/check_articles.py
from wikigen import create_app, db
from wikigen.models import Article
from wikigen.store import ArticleStore


def main(app=None):
    app = app or create_app()
    with app.app_context():
        store = ArticleStore(db.session)
        print(f"Total: {store.count()}")
        for name, n in store.count_by_category().items():
            print(f"  {name}: {n}")
        empty = db.session.query(Article)\
            .filter((Article.body == None) | (Article.body == "")).all()  # noqa: E711
        print(f"Empty body: {len(empty)}")
        for a in empty:
            print("-", a.slug, "|", (a.title or "")[:80])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
