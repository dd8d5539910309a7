"""Tests for environment-driven settings."""
import pytest

from dollcode.config import Settings, load_settings


class TestLoadSettings:
    def test_defaults(self):
        assert load_settings({}) == Settings()
        assert Settings().log_level == "WARNING"
        assert Settings().output_format == "text"

    def test_values_normalized(self):
        settings = load_settings({
            "DOLLCODE_LOG_LEVEL": "debug",
            "DOLLCODE_OUTPUT_FORMAT": "JSON",
            "DOLLCODE_LOG_FORMAT": "%(message)s",
        })
        assert settings.log_level == "DEBUG"
        assert settings.output_format == "json"
        assert settings.log_format == "%(message)s"

    def test_blank_log_format_is_default(self):
        assert load_settings({"DOLLCODE_LOG_FORMAT": ""}).log_format is None

    def test_bad_level(self):
        with pytest.raises(ValueError, match="DOLLCODE_LOG_LEVEL"):
            load_settings({"DOLLCODE_LOG_LEVEL": "loud"})

    def test_bad_format(self):
        with pytest.raises(ValueError, match="DOLLCODE_OUTPUT_FORMAT"):
            load_settings({"DOLLCODE_OUTPUT_FORMAT": "xml"})

    def test_reads_os_environ(self, clean_env):
        clean_env.setenv("DOLLCODE_OUTPUT_FORMAT", "msgpack")
        assert load_settings().output_format == "msgpack"
