"""Tests for configuration and logging setup."""

import json
import logging

import pytest

from admin_forms.config import AdminFormsConfig, get_config, update_config
from admin_forms.logs import LOGGER_NAMES, disable_logging, enable_logging, setup_logging


class TestConfig:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for key in ("ADMIN_FORMS_LOG_LEVEL", "MCP_TRANSPORT", "MCP_PORT", "ADMIN_FORMS_INDENT_JSON"):
            monkeypatch.delenv(key, raising=False)
        config = AdminFormsConfig.from_env()
        assert config.log_level == "INFO"
        assert config.mcp_transport == "stdio"
        assert config.mcp_port == 8080
        assert config.indent_json_output == 2

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("ADMIN_FORMS_LOG_LEVEL", "debug")
        monkeypatch.setenv("ADMIN_FORMS_VERBOSE_OUTPUT", "True")
        monkeypatch.setenv("MCP_PORT", "9000")
        config = AdminFormsConfig.from_env()
        assert config.log_level == "DEBUG"
        assert config.verbose_output is True
        assert config.mcp_port == 9000

    def test_update_config(self):
        original = get_config().indent_json_output
        try:
            update_config(indent_json_output=4, unknown_setting=True)
            assert get_config().indent_json_output == 4
            assert not hasattr(get_config(), "unknown_setting")
        finally:
            update_config(indent_json_output=original)


class TestLogging:
    """Tests for logger wiring."""

    @pytest.fixture(autouse=True)
    def restore_loggers(self):
        yield
        enable_logging()
        setup_logging(console=False)

    def test_json_lines_file(self, tmp_path):
        path = tmp_path / "admin-forms.jsonl"
        setup_logging(console=False, verbose=True, file_path=str(path))

        logging.getLogger("admin-forms").debug("Validated form 'login'")
        for handler in logging.getLogger("admin-forms").handlers:
            handler.flush()

        entry = json.loads(path.read_text().splitlines()[0])
        assert entry["logger"] == "admin-forms"
        assert entry["level"] == "DEBUG"
        assert entry["message"] == "Validated form 'login'"

    def test_level(self):
        setup_logging(level="WARNING", console=False)
        for name in LOGGER_NAMES:
            assert logging.getLogger(name).level == logging.WARNING

    def test_disable(self):
        disable_logging()
        assert all(logging.getLogger(name).disabled for name in LOGGER_NAMES)
        enable_logging()
        assert not any(logging.getLogger(name).disabled for name in LOGGER_NAMES)
