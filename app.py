import logging

from flask import Flask, request
from werkzeug.exceptions import MethodNotAllowed, NotFound

from config import Config
from log_store import LogStore
from routes import ROUTES

logger = logging.getLogger(__name__)


def create_app(config=None, routes=ROUTES):
    """Flask application factory."""
    app = Flask(__name__)

    if config is None:
        config = Config.from_env()

    store = LogStore()

    # Store components on app for access in handlers and tests
    app.config["components"] = {
        "config": config,
        "store": store,
    }

    for route in routes:
        app.add_url_rule(
            route.path,
            endpoint=route.endpoint,
            view_func=route.handler,
            methods=[route.method],
            strict_slashes=route.strict_slashes,
        )

    @app.errorhandler(MethodNotAllowed)
    def method_not_allowed(e):
        # Only GET routes exist; a method mismatch is reported as a missing route.
        logger.debug("No %s route for %s", request.method, request.path)
        return NotFound().get_response()

    return app


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = Config.from_env()
    app = create_app(config)
    server = config["server"]
    base_url = config.base_url

    logger.info("SDET Challenge API server is running on %s", base_url)
    logger.info("Logs endpoint: %s/api/logs", base_url)
    logger.info("API Documentation: %s/api-docs", base_url)
    logger.info("Health check: %s/", base_url)

    app.run(host=server["host"], port=server["port"], debug=server["debug"], threaded=True)


# For gunicorn: `gunicorn 'app:create_app()'`
if __name__ == "__main__":
    main()
