"""Decimal text and file glue around digit rings."""

from __future__ import annotations

import logging
import string
from pathlib import Path
from typing import Union

from .arithmetic import convert_base
from .config import DEFAULT_SETTINGS, check_base
from .errors import InvalidNumber
from .linked_list import DigitRing

logger = logging.getLogger(__name__)

DIGIT_CHARACTERS = string.digits + string.ascii_lowercase

PathLike = Union[str, Path]


def from_decimal(text: str, base: int = DEFAULT_SETTINGS.base) -> DigitRing:
    """Parse an unsigned decimal integer into a ring of ``base`` digits.

    Blank text produces an empty ring. The text is read as a base-10 ring
    and converted, so its length is not bounded by int/str conversion limits.
    """
    check_base(base)
    cleaned = text.strip()
    if not cleaned:
        return DigitRing(base)
    if not cleaned.isdecimal():
        if cleaned.startswith("-") and cleaned[1:].isdecimal():
            raise InvalidNumber("Number must be non-negative.")
        raise InvalidNumber(f"Invalid number format: {cleaned!r}.")
    decimal = DigitRing(10, (int(character) for character in cleaned))
    return convert_base(decimal, base)


def to_decimal(ring: DigitRing) -> str:
    """Render the ring's value in decimal; an empty ring reads as ``"0"``."""
    return "".join(str(digit) for digit in convert_base(ring, 10))


def to_digit_string(ring: DigitRing) -> str:
    """Render the ring's digits in its own base, using ``0-9a-z``."""
    check_base(ring.base)
    return "".join(DIGIT_CHARACTERS[digit] for digit in ring)


def load(path: PathLike, base: int = DEFAULT_SETTINGS.base) -> DigitRing:
    """Read a decimal number from the first line of ``path``."""
    file_path = Path(path)
    try:
        with file_path.open(encoding="utf-8") as handle:
            first_line = handle.readline()
    except FileNotFoundError:
        logger.error("Number file not found: %s", file_path)
        raise
    ring = from_decimal(first_line, base)
    logger.info("Loaded %d base-%d digits from %s", len(ring), base, file_path)
    return ring


def save(ring: DigitRing, path: PathLike) -> Path:
    """Write the ring's decimal value to ``path`` and return the path."""
    file_path = Path(path)
    file_path.write_text(to_decimal(ring), encoding="utf-8")
    logger.info("Saved base-%d number to %s", ring.base, file_path)
    return file_path
