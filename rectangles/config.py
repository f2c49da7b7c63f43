import logging
import os
from contextlib import contextmanager
from copy import copy
from typing import Optional

from rectangles.exceptions import RectanglesParameterError

try:
    from typing import TypedDict
except ImportError:
    from typing_extensions import TypedDict

try:
    from typing import Literal
except ImportError:
    from typing_extensions import Literal


def default_log_level() -> str:
    log_level = os.environ.get("RECTANGLES_LOG_LEVEL")
    if not log_level:
        log_level = "WARNING"
    return log_level.upper()


Config = TypedDict(
    "Config",
    {
        "keyword.add": str,
        "keyword.stop": str,
        "logging.level": str,
    },
)

# https://github.com/python/mypy/issues/6262
CONFIG_KEYS = Literal[
    "keyword.add",
    "keyword.stop",
    "logging.level",
]


_default_config: Config = {
    "keyword.add": "rec",
    "keyword.stop": "stop",
    "logging.level": default_log_level(),
}

config = copy(_default_config)


def reset_config():
    for key, value in _default_config.items():
        config[key] = value  # type: ignore


def check_config_value(key: CONFIG_KEYS, value: Optional[str]):
    """Raise `RectanglesParameterError` when `value` is not allowed for
    `key`."""
    if key.startswith("keyword.") and (
        not value or value != value.strip() or " " in value
    ):
        raise RectanglesParameterError(
            f"Config '{key}' must be a single non-empty word, got {value!r}"
        )

    if key == "logging.level" and not isinstance(
        logging.getLevelName(str(value).upper()), int
    ):
        raise RectanglesParameterError(
            f"Config '{key}' must be a logging level name, got {value!r}"
        )


def set_config(key: CONFIG_KEYS, value: Optional[str]):
    if key not in config:
        raise KeyError(f"Non existing config '{key}'")

    check_config_value(key, value)
    config[key] = value


def get_config(key: Optional[CONFIG_KEYS] = None):
    if key is None:
        return config
    elif key in config:
        return config[key]  # type: ignore
    else:
        raise KeyError(f"Non existing config '{key}'")


@contextmanager
def config_context(*args):
    """Set some config items for within a certain context. Code borrowed partly from
    pandas."""
    if len(args) % 2 != 0 or len(args) < 2:
        raise ValueError(
            "Need to invoke as config_context(key, value, [(key, value), ...])."
        )

    configs = list(zip(args[::2], args[1::2]))

    undo = {key: get_config(key) for key, _ in configs}
    try:
        for key, value in configs:
            set_config(key, value)

        yield

    finally:
        for key, value in undo.items():
            config[key] = value
