import os
import threading

import pytest
from werkzeug.serving import make_server

from app import create_app
from config import Config


@pytest.fixture
def mixed_logs():
    return [
        "[INFO] a",
        "[ERROR] b",
        "[INFO] c",
        "[WARN] d",
        "[ERROR] e",
    ]


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def app(config):
    """Create a Flask test app."""
    application = create_app(config)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def base_url(app):
    """Base URL of a running server.

    Uses ``API_BASE_URL`` when set, otherwise serves the test app on an
    OS-picked port from a background thread.
    """
    external = os.environ.get("API_BASE_URL")
    if external:
        yield external.rstrip("/")
        return

    server = make_server("127.0.0.1", 0, app, threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_port}"
    finally:
        server.shutdown()
        thread.join(timeout=5)
