# gunicorn.conf.py
import os

def env_int(name, default):
    try:
        return int(os.environ.get(name, default))
    except ValueError:
        return int(default)

wsgi_app = "wsgi:application"
bind     = f"0.0.0.0:{os.environ.get('PORT', '3000')}"
workers  = env_int("WEB_CONCURRENCY", 2)
# a generation request can take two LLM calls; stay above 2 * LLM_TIMEOUT
timeout  = env_int("GUNICORN_TIMEOUT", 150)
loglevel = os.environ.get("GUNICORN_LOGLEVEL", "info")
