# wikigen/__init__.py
import logging

from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import text as sql_text

db = SQLAlchemy()

log = logging.getLogger(__name__)


def create_app(test_config=None, generator=None):
    """
    App factory. `test_config` overrides environment settings; `generator`
    replaces the OpenAI-backed client (anything with `generate(topic, categories)`).
    """
    from dotenv import load_dotenv; load_dotenv()
    from .config import configure_logging, load_config
    from .generation import GenerationClient
    from .presentation import capfirst

    app = Flask(__name__)
    app.config.update(load_config())
    if test_config:
        app.config.update(test_config)

    if app.config["SQLALCHEMY_DATABASE_URI"].startswith("postgresql"):
        # keep pooled connections from going stale behind a proxy
        app.config.setdefault("SQLALCHEMY_ENGINE_OPTIONS", {"pool_pre_ping": True, "pool_recycle": 300})

    configure_logging(app.config["LOG_LEVEL"])

    db.init_app(app)

    # models must be imported before create_all
    from .models import Article  # noqa: F401

    with app.app_context():
        db.create_all()

    app.extensions["wikigen"] = {
        "generator": generator or GenerationClient.from_config(app.config),
    }
    app.add_template_filter(capfirst)

    from .main import main_bp

    @app.get("/healthz")
    def healthz():
        try:
            db.session.execute(sql_text("SELECT 1"))
            db_ok = True
        except Exception as e:
            db.session.rollback()
            log.warning("health check: database unavailable: %s", e)
            db_ok = False
        return {"ok": db_ok, "db_ok": db_ok, "model": app.config["LLM_MODEL"]}, (200 if db_ok else 503)

    app.register_blueprint(main_bp)
    return app
