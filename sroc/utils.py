import re
from typing import Any, Mapping, TypeVar

T = TypeVar("T", bound=Mapping[str, Any])

WORD_PATTERN = re.compile(r"[A-Za-z0-9_]+")


def resolve_config(config: Mapping[str, Any] | None, default_config: T) -> T:
    _config = dict(default_config)
    if config:
        for key in _config:
            if key in config:
                _config[key] = config[key]
    return _config  # type: ignore[return-value]


def is_single_word(text: str) -> bool:
    """Keys and section names are one ASCII word: letters, digits and underscores."""
    return bool(WORD_PATTERN.fullmatch(text))
