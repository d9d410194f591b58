"""Tests for settings, localized messages and logging setup."""

import logging

import pytest

from social_graph_api.app.core.config import Settings
from social_graph_api.app.core.messages import MESSAGES, get_message
from social_graph_api.app.main import configure_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("API_PORT", "API_PREFIX", "APP_LANGUAGE", "ALLOW_DUPLICATE_FRIENDS",
                     "CASCADE_REMOVE_ALL", "EMPTY_LIST_IS_ERROR"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings.from_env()

        assert settings.port == 8080
        assert settings.api_prefix == ""
        assert settings.language == "ru"
        assert settings.allow_duplicate_friends is True
        assert settings.cascade_remove_all is False
        assert settings.empty_list_is_error is True

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("API_PORT", "9000")
        monkeypatch.setenv("API_PREFIX", "/api/v1/")
        monkeypatch.setenv("ALLOW_DUPLICATE_FRIENDS", "no")
        monkeypatch.setenv("CASCADE_REMOVE_ALL", "1")
        monkeypatch.setenv("EMPTY_LIST_IS_ERROR", "false")

        settings = Settings.from_env()

        assert settings.port == 9000
        assert settings.api_prefix == "/api/v1"
        assert settings.allow_duplicate_friends is False
        assert settings.cascade_remove_all is True
        assert settings.empty_list_is_error is False


class TestMessages:
    def test_catalogs_share_keys(self):
        assert set(MESSAGES["ru"]) == set(MESSAGES["en"])

    def test_formats_parameters(self):
        assert get_message("friends_linked", "ru", source="Аня", target="Боря") == "Аня и Боря теперь друзья"
        assert get_message("user_deleted", "en", name="Bob") == "Bob deleted"

    def test_unknown_language_falls_back_to_russian(self):
        assert get_message("user_not_found", "de") == "Пользователь не найден"

    def test_unknown_key_raises(self):
        with pytest.raises(KeyError):
            get_message("no_such_key", "en")


def _bare_root(monkeypatch):
    # Called from the test body: pytest attaches its capture handlers
    # to the root logger before the call phase starts.
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    return root


class TestConfigureLogging:
    def test_configures_once(self, monkeypatch):
        root = _bare_root(monkeypatch)
        configure_logging("debug")
        configure_logging("error")

        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

    def test_adds_file_handler(self, monkeypatch, tmp_path):
        root = _bare_root(monkeypatch)
        logfile = tmp_path / "graph.log"

        configure_logging("info", str(logfile))
        logging.getLogger("social_graph_api.test").info("hello")
        for handler in root.handlers:
            handler.flush()

        assert len(root.handlers) == 2
        assert "[INFO] social_graph_api.test: hello" in logfile.read_text(encoding="utf-8")
        root.handlers[1].close()
