"""OpenAPI 3.0 document for the HTTP API, served under /api-docs."""

from log_store import SAMPLE_LOGS


def _schemas(health_example):
    endpoints = health_example["endpoints"]
    return {
        "LogsResponse": {
            "type": "object",
            "properties": {
                "logs": {
                    "type": "array",
                    "items": {"type": "string", "example": SAMPLE_LOGS[0]},
                    "description": "Array of log entries with timestamps and messages",
                },
            },
            "example": {"logs": list(SAMPLE_LOGS)},
        },
        "HealthResponse": {
            "type": "object",
            "properties": {
                "message": {"type": "string", "example": health_example["message"]},
                "endpoints": {
                    "type": "object",
                    "properties": {
                        name: {"type": "string", "example": path}
                        for name, path in endpoints.items()
                    },
                },
            },
        },
    }


def _json_response(description, schema_name):
    return {
        "description": description,
        "content": {
            "application/json": {
                "schema": {"$ref": f"#/components/schemas/{schema_name}"},
            },
        },
    }


def build_openapi_spec(docs_config, server_url, health_example):
    """Build the OpenAPI document.

    ``docs_config`` is the ``docs`` config section and ``health_example``
    the body served by ``GET /``.
    """
    return {
        "openapi": "3.0.0",
        "info": {
            "title": docs_config["title"],
            "version": docs_config["version"],
            "description": docs_config["description"],
            "contact": {"name": docs_config["contact"]},
        },
        "servers": [{"url": server_url, "description": "Development server"}],
        "paths": {
            "/": {
                "get": {
                    "summary": "Health check and API information",
                    "description": (
                        "Returns the status of the API and available endpoints. "
                        "Use this to verify the service is running."
                    ),
                    "tags": ["Health"],
                    "responses": {
                        "200": _json_response("API is running successfully", "HealthResponse"),
                    },
                },
            },
            "/api/logs": {
                "get": {
                    "summary": "Retrieve application logs",
                    "description": (
                        "Returns a collection of log entries. Each entry carries a "
                        "level (INFO, ERROR, WARN), a timestamp and a message."
                    ),
                    "tags": ["Logs"],
                    "responses": {
                        "200": _json_response("Successfully retrieved logs", "LogsResponse"),
                        "500": {"description": "Internal server error"},
                    },
                },
            },
        },
        "components": {"schemas": _schemas(health_example)},
    }
