# wikigen/presentation.py
from typing import Iterable

from flask import render_template


def capfirst(value) -> str:
    s = str(value or "")
    return s[:1].upper() + s[1:]


def render_navigation(categories: Iterable[str]) -> str:
    return render_template("_navigation.html", categories=list(categories))


def with_navigation(body: str, categories: Iterable[str]) -> str:
    """Puts the navigation block before the first </body>, or appends it."""
    nav = render_navigation(categories)
    if "</body>" in body:
        return body.replace("</body>", nav + "</body>", 1)
    return body + nav
