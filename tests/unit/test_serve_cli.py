"""
Unit tests for the serve CLI.
"""

import pytest

from article_analyzer.cli import serve
from article_analyzer.config import get_settings


@pytest.fixture
def run_calls(monkeypatch):
    """Record uvicorn.run calls instead of starting a server."""
    calls = []
    monkeypatch.setattr(serve.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    return calls


class TestServeCli:
    """Tests for python -m article_analyzer.cli.serve."""

    def test_defaults(self, run_calls):
        assert serve.main([]) == 0

        ((app, kwargs),) = run_calls
        assert app == "article_analyzer.main:app"
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 8000
        assert kwargs["workers"] == 1
        assert kwargs["reload"] is False
        assert kwargs["log_level"] == get_settings().LOG_LEVEL.lower()

    def test_bind_options(self, run_calls):
        serve.main(["--host", "0.0.0.0", "--port", "9000", "--workers", "3"])

        ((_, kwargs),) = run_calls
        assert (kwargs["host"], kwargs["port"], kwargs["workers"]) == ("0.0.0.0", 9000, 3)

    def test_reload_runs_single_process(self, run_calls):
        serve.main(["--reload", "--workers", "4"])

        ((_, kwargs),) = run_calls
        assert kwargs["reload"] is True
        assert kwargs["workers"] is None
