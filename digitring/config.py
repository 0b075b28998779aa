"""Number settings shared by the codec, the console entry point and the GUI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import InvalidBase

MAX_RENDERABLE_BASE = 36
BASE_ENV_VAR = "DIGITRING_BASE"
CONVERSION_BASE_ENV_VAR = "DIGITRING_CONVERSION_BASE"
LOG_LEVEL_ENV_VAR = "DIGITRING_LOG_LEVEL"


def check_base(base: int) -> int:
    """Return ``base`` if digits of it can be rendered as characters."""
    if base < 2 or base > MAX_RENDERABLE_BASE:
        raise InvalidBase(base, MAX_RENDERABLE_BASE)
    return base


@dataclass(frozen=True)
class NumberSettings:
    """Working base for new numbers and the base they are converted to."""

    base: int = 3
    conversion_base: int = 8

    def __post_init__(self) -> None:
        check_base(self.base)
        check_base(self.conversion_base)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "NumberSettings":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            base=_read_int(env, BASE_ENV_VAR, defaults.base),
            conversion_base=_read_int(env, CONVERSION_BASE_ENV_VAR, defaults.conversion_base),
        )


def _read_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from None


DEFAULT_SETTINGS = NumberSettings()
