"""
Unit tests for backend/quizelo/core/config.py
Tests: Settings defaults, CORS parsing, numeric validators, missing key is not fatal
No network required.
"""

import sys
import os
import pytest
from pydantic import ValidationError

BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "backend"))
sys.path.insert(0, BACKEND_DIR)

os.environ.setdefault("SEGMIND_API_KEY", "test-segmind-key")

from quizelo.core.config import settings, Settings, get_settings


class TmpSettings(Settings):
    model_config = {"env_file": None}


class TestSettingsDefaults:

    def test_settings_is_singleton(self):
        assert isinstance(settings, Settings)
        assert get_settings() is settings

    def test_segmind_url_default(self):
        assert settings.SEGMIND_API_URL.startswith("https://api.segmind.com/")

    def test_generation_defaults(self):
        assert settings.LLM_TEMPERATURE_CREATIVE == 0.9
        assert settings.LLM_MAX_TOKENS == 4000

    def test_quiz_defaults(self):
        assert settings.QUIZ_QUESTION_COUNT == 10
        assert settings.QUIZ_MAX_ANSWER_SHARE == 0.4
        assert settings.QUESTION_CACHE_CAPACITY == 100
        assert settings.PROMPT_PREVIOUS_QUESTIONS == 5

    def test_environment_is_valid(self):
        assert settings.ENVIRONMENT in ("development", "staging", "production")


class TestValidators:

    def test_cors_string_split(self):
        tmp = TmpSettings(CORS_ORIGINS="http://a.com, http://b.com")
        assert tmp.CORS_ORIGINS == ["http://a.com", "http://b.com"]

    def test_cors_list_preserved(self):
        tmp = TmpSettings(CORS_ORIGINS=["http://localhost:3000"])
        assert tmp.CORS_ORIGINS == ["http://localhost:3000"]

    def test_missing_key_is_not_fatal(self, caplog):
        tmp = TmpSettings(SEGMIND_API_KEY="")
        assert tmp.SEGMIND_API_KEY == ""
        assert "SEGMIND_API_KEY is empty" in caplog.text

    def test_zero_capacity_rejected(self):
        with pytest.raises(ValidationError):
            TmpSettings(QUESTION_CACHE_CAPACITY=0)

    @pytest.mark.parametrize("share", [0, -0.1, 1.5])
    def test_share_out_of_range_rejected(self, share):
        with pytest.raises(ValidationError):
            TmpSettings(QUIZ_MAX_ANSWER_SHARE=share)

    @pytest.mark.parametrize("field", ["QUESTION_CACHE_RECALL", "PROMPT_PREVIOUS_QUESTIONS"])
    def test_negative_history_window_rejected(self, field):
        with pytest.raises(ValidationError):
            TmpSettings(**{field: -1})

    @pytest.mark.parametrize("field", ["QUESTION_CACHE_RECALL", "PROMPT_PREVIOUS_QUESTIONS"])
    def test_zero_history_window_allowed(self, field):
        assert getattr(TmpSettings(**{field: 0}), field) == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
