from flask import Blueprint, abort, current_app, redirect, render_template, request, url_for
from slugify import slugify

from . import db
from .errors import GenerationFailure
from .presentation import with_navigation
from .resolver import ArticleResolver
from .store import ArticleStore

main_bp = Blueprint("main", __name__)


def _store() -> ArticleStore:
    return ArticleStore(db.session)


def _resolver() -> ArticleResolver:
    return ArticleResolver(_store(), current_app.extensions["wikigen"]["generator"])


@main_bp.get("/")
def index():
    return render_template("index.html", categories=_store().distinct_categories())


@main_bp.get("/search")
def search():
    slug = slugify(request.args.get("q") or "")
    if not slug:
        return redirect(url_for("main.index"))
    return redirect(url_for("main.article", slug=slug))


@main_bp.get("/category/<path:name>")
def category(name):
    store = _store()
    return render_template(
        "category.html",
        name=name,
        articles=store.list_by_category(name),
        categories=store.distinct_categories(),
    )


@main_bp.get("/favicon.ico")
def favicon():
    return "", 204


@main_bp.get("/<slug>")
def article(slug):
    canonical = slugify(slug)
    if not canonical:
        abort(404)
    if canonical != slug:
        return redirect(url_for("main.article", slug=canonical), code=301)

    result = _resolver().resolve(slug)
    categories = _store().distinct_categories()
    if isinstance(result, GenerationFailure):
        return render_template("not_found.html", categories=categories), 404
    return with_navigation(result.body, categories)


@main_bp.app_errorhandler(404)
def not_found(_e):
    return render_template("not_found.html", categories=_store().distinct_categories()), 404
