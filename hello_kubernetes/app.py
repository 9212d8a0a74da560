import logging
from functools import partial

from flask import Flask, Response

from hello_kubernetes.config import Config

GREETING = "Hello Kubernetes World"


def home(logger):
    """Logs the call and returns the greeting."""
    logger.info("Home api called")
    return Response(GREETING, status=200, mimetype="text/plain")


# --- Route table: (method, path) -> (endpoint, handler) ---
ROUTES = {
    ("GET", "/"): ("home", home),
}


def create_app(config=None, logger=None):
    """Builds the Flask app and registers every route in ROUTES."""
    config = config or Config()
    app = Flask(__name__)
    # The per-request INFO record must always be emitted.
    app.logger.setLevel(logging.INFO)
    logger = logger or app.logger

    for (method, path), (endpoint, handler) in ROUTES.items():
        app.add_url_rule(
            path,
            endpoint=endpoint,
            view_func=partial(handler, logger),
            methods=[method],
        )
    return app
