"""Exceptions raised by digit rings and the helpers built on them."""

from __future__ import annotations


class DigitRingError(Exception):
    """Base class for every digit ring failure."""


class InvalidDigit(DigitRingError, ValueError):
    """A digit does not fit in the ring's base."""

    def __init__(self, digit: object, base: int) -> None:
        super().__init__(f"Digit {digit!r} is not valid for base {base}.")
        self.digit = digit
        self.base = base


class InvalidBase(DigitRingError, ValueError):
    """A base is outside the supported radix range."""

    def __init__(self, base: int, maximum: int | None = None) -> None:
        if maximum is None:
            message = f"Base must be at least 2, got {base}."
        else:
            message = f"Base must be between 2 and {maximum}, got {base}."
        super().__init__(message)
        self.base = base


class IndexOutOfRange(DigitRingError, IndexError):
    """A position does not address a digit of the ring."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Index: {index}, Size: {size}")
        self.index = index
        self.size = size


class EmptyRing(DigitRingError, ValueError):
    """An operation needs at least one digit."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Cannot {operation} on an empty ring.")


class BaseMismatch(DigitRingError, ValueError):
    """Two rings taking part in one operation use different bases."""

    def __init__(self, left: int, right: int) -> None:
        super().__init__(f"Operands use different bases: {left} and {right}.")
        self.left = left
        self.right = right


class InvalidNumber(DigitRingError, ValueError):
    """Text cannot be read as a non-negative decimal integer."""
