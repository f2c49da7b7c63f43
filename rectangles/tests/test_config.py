import pytest

from rectangles.config import (
    config_context,
    default_log_level,
    get_config,
    reset_config,
    set_config,
)
from rectangles.exceptions import RectanglesParameterError


class TestConfig:
    def test_defaults(self):
        assert get_config("keyword.add") == "rec"
        assert get_config("keyword.stop") == "stop"

    def test_set_config(self):
        set_config("keyword.stop", "done")
        assert get_config("keyword.stop") == "done"

        reset_config()
        assert get_config("keyword.stop") == "stop"

    def test_config_context(self):
        with config_context("keyword.add", "add"):
            assert get_config("keyword.add") == "add"

        assert get_config("keyword.add") == "rec"

    def test_config_context_requires_pairs(self):
        with pytest.raises(ValueError):
            with config_context("keyword.add"):
                pass

    def test_unknown_key(self):
        with pytest.raises(KeyError):
            set_config("keyword.undo", "undo")  # type: ignore

        with pytest.raises(KeyError):
            get_config("keyword.undo")  # type: ignore

    @pytest.mark.parametrize("value", ["", " rec", "add rec", None])
    def test_invalid_keyword(self, value):
        with pytest.raises(RectanglesParameterError):
            set_config("keyword.add", value)

        assert get_config("keyword.add") == "rec"

    def test_log_level(self):
        set_config("logging.level", "DEBUG")
        assert get_config("logging.level") == "DEBUG"

        with pytest.raises(RectanglesParameterError):
            set_config("logging.level", "LOUD")

    def test_default_log_level(self, monkeypatch):
        monkeypatch.delenv("RECTANGLES_LOG_LEVEL", raising=False)
        assert default_log_level() == "WARNING"

        monkeypatch.setenv("RECTANGLES_LOG_LEVEL", "info")
        assert default_log_level() == "INFO"
