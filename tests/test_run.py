"""
Tests for the relay startup script.
"""

import logging
import os
import sys
from unittest.mock import patch

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
import run  # noqa: E402


class TestRun:

    def test_exits_without_credential_before_binding(self, monkeypatch):
        monkeypatch.delenv("RETELL_API_KEY", raising=False)

        with patch("run.uvicorn.run") as mock_uvicorn_run:
            with patch("run.create_app") as mock_create_app:
                with pytest.raises(SystemExit) as exc_info:
                    run.main([])

        assert exc_info.value.code == 1
        mock_uvicorn_run.assert_not_called()
        mock_create_app.assert_not_called()

    def test_starts_server_with_settings(self, monkeypatch):
        monkeypatch.setenv("RETELL_API_KEY", "key_123")
        monkeypatch.setenv("PORT", "9090")

        with patch("run.uvicorn.run") as mock_uvicorn_run:
            run.main(["--host", "127.0.0.1", "--log-level", "DEBUG"])

        mock_uvicorn_run.assert_called_once()
        app = mock_uvicorn_run.call_args[0][0]
        assert app.state.retell_client.api_key == "key_123"
        kwargs = mock_uvicorn_run.call_args.kwargs
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 9090
        assert kwargs["log_level"] == "debug"

    def test_port_argument_overrides_env(self, monkeypatch):
        monkeypatch.setenv("RETELL_API_KEY", "key_123")

        with patch("run.uvicorn.run") as mock_uvicorn_run:
            run.main(["--port", "7000"])

        assert mock_uvicorn_run.call_args.kwargs["port"] == 7000

    def test_log_level_from_env_reaches_app_logger(self, monkeypatch):
        monkeypatch.setenv("RETELL_API_KEY", "key_123")
        monkeypatch.setenv("LOG_LEVEL", "warning")

        with patch("run.uvicorn.run") as mock_uvicorn_run:
            run.main([])

        assert logging.getLogger("webcall").level == logging.WARNING
        assert mock_uvicorn_run.call_args.kwargs["log_level"] == "warning"

    def test_log_level_argument_overrides_env(self, monkeypatch):
        monkeypatch.setenv("RETELL_API_KEY", "key_123")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        with patch("run.uvicorn.run"):
            run.main(["--log-level", "ERROR"])

        assert logging.getLogger("webcall").level == logging.ERROR
