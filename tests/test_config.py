"""Tests for environment-driven settings and logging setup."""

import logging

import pytest

from clara import prompts
from clara.config import load_settings, parse_edit_mode
from clara.logger import get_logger, setup_logging
from clara.schemas import EditMode


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("GEMINI_API_KEY", "API_KEY", "CLARA_TEXT_MODEL", "CLARA_IMAGE_MODEL",
                 "CLARA_EDIT_MODEL", "CLARA_DEFAULT_STYLE", "CLARA_EDIT_MODE", "CLARA_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:

    def test_defaults(self, clean_env):
        settings = load_settings()
        assert settings.api_key is None
        assert settings.text_model == prompts.MODEL_TEXT
        assert settings.image_model == prompts.MODEL_IMAGE_GEN
        assert settings.edit_model == prompts.MODEL_IMAGE_EDIT
        assert settings.default_style == "Cartoon"
        assert settings.edit_mode == EditMode.CONTEXT_AWARE

    def test_api_key_fallback(self, clean_env):
        clean_env.setenv("API_KEY", "legacy")
        assert load_settings().api_key == "legacy"
        clean_env.setenv("GEMINI_API_KEY", "primary")
        assert load_settings().api_key == "primary"
        assert load_settings("from-secrets").api_key == "from-secrets"

    def test_overrides(self, clean_env):
        clean_env.setenv("CLARA_TEXT_MODEL", "text-x")
        clean_env.setenv("CLARA_EDIT_MODE", "context-free")
        clean_env.setenv("CLARA_DEFAULT_STYLE", "Watercolor")
        settings = load_settings()
        assert settings.text_model == "text-x"
        assert settings.edit_mode == EditMode.CONTEXT_FREE
        assert settings.default_style == prompts.DEFAULT_STYLE

    @pytest.mark.parametrize("value", [None, "", "sideways"])
    def test_unknown_edit_mode(self, value):
        assert parse_edit_mode(value) == EditMode.CONTEXT_AWARE


class TestLogging:

    def test_setup_is_idempotent(self):
        setup_logging("DEBUG")
        logger = setup_logging("WARNING")
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_namespace(self):
        assert get_logger("app").name == "clara.app"
        assert get_logger("clara.pipeline").name == "clara.pipeline"
        assert get_logger().name == "clara"
