"""Tests for settings loading."""

from __future__ import annotations

import logging

from server.config import Settings
from server.logging_config import setup_logging


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        for name in ("OPENAI_API_KEY", "PRIMARY_MODEL", "TEMPERATURE", "CARD_PROBABILITY",
                     "TWO_INSIGHTS_PROBABILITY", "ALLOWED_ORIGINS", "LOG_LEVEL", "LOG_DIR"):
            monkeypatch.delenv(name, raising=False)
        s = Settings.from_env(dotenv=False)
        assert s.openai_api_key == ""
        assert s.primary_model == "gpt-4o-mini"
        assert s.temperature == 0.9
        assert s.card_probability == 0.35
        assert s.two_insights_probability == 0.5
        assert s.allowed_origins == ("*",)
        assert s.log_dir is None

    def test_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-abc")
        monkeypatch.setenv("CARD_PROBABILITY", "0.1")
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.test, https://b.test")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        s = Settings.from_env(dotenv=False)
        assert s.openai_api_key == "sk-abc"
        assert s.card_probability == 0.1
        assert s.allowed_origins == ("https://a.test", "https://b.test")
        assert s.log_level == "DEBUG"

    def test_file_logging(self, tmp_path) -> None:
        root = logging.getLogger()
        saved = list(root.handlers), root.level
        try:
            path = setup_logging("INFO", str(tmp_path / "logs"))
            logging.getLogger("services.test").info("[test] hello")
            for h in root.handlers:
                h.flush()
            assert path is not None and "[test] hello" in path.read_text(encoding="utf-8")
        finally:
            for h in root.handlers:
                h.close()
            root.handlers[:] = saved[0]
            root.setLevel(saved[1])


class TestLoggingBootstrap:
    def test_import_keeps_root_handlers(self) -> None:
        import importlib

        import server.main

        root = logging.getLogger()
        marker = logging.NullHandler()
        root.addHandler(marker)
        try:
            importlib.reload(server.main)
            assert marker in root.handlers
        finally:
            root.removeHandler(marker)

    def test_server_startup_configures_logging(self, tmp_path) -> None:
        from fastapi.testclient import TestClient

        from server.main import create_app

        root = logging.getLogger()
        saved = list(root.handlers), root.level
        log_dir = tmp_path / "logs"
        try:
            app = create_app(Settings(openai_api_key="sk-test", log_dir=str(log_dir)))
            assert not (log_dir / "companion.log").exists()
            with TestClient(app):
                assert (log_dir / "companion.log").exists()
        finally:
            for h in root.handlers:
                h.close()
            root.handlers[:] = saved[0]
            root.setLevel(saved[1])
