"""Value-producing operations over digit rings: addition and base conversion."""

from __future__ import annotations

import logging

from .config import DEFAULT_SETTINGS, NumberSettings
from .errors import BaseMismatch, InvalidBase
from .linked_list import DigitRing

logger = logging.getLogger(__name__)


def add(left: DigitRing, right: DigitRing) -> DigitRing:
    """Return a new ring holding ``left + right``.

    Both operands are walked backward from their least significant digit in
    lock-step, the way long addition is done by hand. Each column produces
    one digit of the result, prepended so the result stays most significant
    first, and a leftover carry becomes a new leading digit.
    """
    if left.base != right.base:
        raise BaseMismatch(left.base, right.base)
    base = left.base
    result = DigitRing(base)

    left_node = left.head.prev if left.head is not None else None
    right_node = right.head.prev if right.head is not None else None
    left_remaining = len(left)
    right_remaining = len(right)
    carry = 0

    while left_remaining > 0 or right_remaining > 0 or carry > 0:
        left_digit = left_node.value if left_remaining > 0 and left_node is not None else 0
        right_digit = right_node.value if right_remaining > 0 and right_node is not None else 0

        total = left_digit + right_digit + carry
        carry, digit = divmod(total, base)
        result.insert(0, digit)

        if left_remaining > 0 and left_node is not None:
            left_node = left_node.prev
            left_remaining -= 1
        if right_remaining > 0 and right_node is not None:
            right_node = right_node.prev
            right_remaining -= 1

    logger.debug("Added %d-digit and %d-digit rings in base %d into %d digits", len(left), len(right), base, len(result))
    return result


def to_int(ring: DigitRing) -> int:
    """Fold the digits into a Python integer; an empty ring is zero."""
    value = 0
    for digit in ring:
        value = value * ring.base + digit
    return value


def from_int(value: int, base: int) -> DigitRing:
    """Build a ring holding ``value`` in ``base`` with no leading zeros."""
    if value < 0:
        raise ValueError("value must be non-negative.")
    if base < 2:
        raise InvalidBase(base)
    remainders: list[int] = []
    while True:
        value, remainder = divmod(value, base)
        remainders.append(remainder)
        if value == 0:
            break
    return DigitRing(base, reversed(remainders))


def convert_base(ring: DigitRing, new_base: int) -> DigitRing:
    """Return an independent ring with the same value written in ``new_base``."""
    converted = from_int(to_int(ring), new_base)
    logger.debug("Converted %d digits from base %d to %d digits in base %d", len(ring), ring.base, len(converted), new_base)
    return converted


def change_scale(ring: DigitRing, settings: NumberSettings = DEFAULT_SETTINGS) -> DigitRing:
    """Convert ``ring`` to the configured conversion base."""
    return convert_base(ring, settings.conversion_base)
