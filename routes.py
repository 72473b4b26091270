"""Route handlers and the immutable routing table registered by create_app."""

from typing import Callable, NamedTuple

from flask import current_app, jsonify, render_template_string, request, url_for

from openapi import build_openapi_spec

HEALTH_MESSAGE = "SDET Challenge API is running"

API_DOCS_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>{{ title }}</title>
    <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@5/swagger-ui.css">
    <style>
        .swagger-ui .topbar { display: none }
    </style>
</head>
<body>
    <div id="swagger-ui"></div>
    <script src="https://unpkg.com/swagger-ui-dist@5/swagger-ui-bundle.js"></script>
    <script>
        window.ui = SwaggerUIBundle({
            url: "{{ spec_url }}",
            dom_id: "#swagger-ui",
            deepLinking: true,
        });
    </script>
</body>
</html>
"""


class Route(NamedTuple):
    method: str
    path: str
    endpoint: str
    handler: Callable
    strict_slashes: bool = True


def _health_payload():
    return {
        "message": HEALTH_MESSAGE,
        "endpoints": {
            "logs": "/api/logs",
            "docs": "/api-docs",
        },
    }


def index():
    return jsonify(_health_payload())


def list_logs():
    store = current_app.config["components"]["store"]
    return jsonify({"logs": store.get_logs()})


def api_docs():
    docs = current_app.config["components"]["config"]["docs"]
    return render_template_string(
        API_DOCS_PAGE,
        title=f"{docs['title']} Documentation",
        spec_url=url_for("openapi_spec"),
    )


def openapi_spec():
    docs = current_app.config["components"]["config"]["docs"]
    return jsonify(build_openapi_spec(
        docs,
        server_url=request.host_url.rstrip("/"),
        health_example=_health_payload(),
    ))


ROUTES = (
    Route("GET", "/", "index", index),
    Route("GET", "/api/logs", "list_logs", list_logs),
    # Also served with a trailing slash.
    Route("GET", "/api-docs", "api_docs", api_docs, strict_slashes=False),
    Route("GET", "/api-docs/openapi.json", "openapi_spec", openapi_spec),
)
