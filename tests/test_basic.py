"""
Basic application tests.

Validates that the FastAPI app starts correctly, the health endpoint
responds as expected, and the entry points are wired.
"""

import io
import json
import logging
from unittest.mock import patch
from wsgiref.util import setup_testing_defaults

from fastapi.testclient import TestClient

from setservice.__main__ import build_parser, main
from setservice.core.config import Settings
from setservice.main import create_app
from setservice.shared.logging import configure_logging

client = TestClient(create_app())


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        """Health endpoint must return status and version fields."""
        body = client.get("/health").json()
        assert body["status"] == "ok"
        assert body["version"] == Settings().version

    def test_health_reports_configured_version(self) -> None:
        app = create_app(app_settings=Settings(version="9.9.9"))
        body = TestClient(app).get("/health").json()
        assert body["version"] == "9.9.9"


class TestDocs:
    """Interactive docs are only served in debug mode."""

    def test_docs_hidden_by_default(self) -> None:
        assert client.get("/docs").status_code == 404

    def test_docs_served_in_debug(self) -> None:
        app = create_app(app_settings=Settings(debug=True))
        assert TestClient(app).get("/docs").status_code == 200


class TestEntryPoints:
    """Tests for the CLI and WSGI wrappers."""

    def test_serve_defaults(self) -> None:
        args = build_parser().parse_args(["serve"])
        assert args.host == "127.0.0.1"
        assert args.port == 8080

    def test_serve_runs_uvicorn(self) -> None:
        with patch("uvicorn.run") as run:
            main(["serve", "--host", "0.0.0.0", "--port", "9000"])
        run.assert_called_once_with(
            "setservice.main:app", host="0.0.0.0", port=9000, reload=False
        )

    def test_wsgi_application_serves_requests(self) -> None:
        from setservice.wsgi import application

        environ: dict = {}
        setup_testing_defaults(environ)
        environ["PATH_INFO"] = "/health"
        started: list[str] = []

        def start_response(status, headers, exc_info=None):
            started.append(status)

        body = b"".join(application(environ, start_response))
        assert started == ["200 OK"]
        assert json.loads(body)["status"] == "ok"


class TestLogging:
    """Tests for configure_logging."""

    def test_level_names_are_case_insensitive(self) -> None:
        assert configure_logging("debug", stream=io.StringIO()) == logging.DEBUG
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        stream = io.StringIO()
        assert configure_logging("chatty", stream=stream) == logging.INFO
        assert "Unknown log level" in stream.getvalue()

    def test_uvicorn_loggers_are_quieted(self) -> None:
        configure_logging("DEBUG", stream=io.StringIO())
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

    def test_records_use_application_format(self) -> None:
        stream = io.StringIO()
        configure_logging("INFO", stream=stream)
        logging.getLogger("setservice.test").info("hello")
        assert "| INFO     | setservice.test | hello" in stream.getvalue()
