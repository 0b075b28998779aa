from __future__ import annotations

import pytest

from digitring.arithmetic import add, change_scale, convert_base, from_int, to_int
from digitring.config import NumberSettings
from digitring.errors import BaseMismatch
from digitring.linked_list import DigitRing


@pytest.mark.parametrize(
    "base, left, right, expected",
    [
        (3, [1, 1], [1, 1], [2, 2]),
        (3, [2, 2], [1], [1, 0, 0]),
        (3, [1], [2, 2], [1, 0, 0]),
        (10, [9, 9, 9], [1], [1, 0, 0, 0]),
        (2, [1, 0, 1], [1, 1], [1, 0, 0, 0]),
        (8, [7], [0], [7]),
    ],
)
def test_add_propagates_carry(base: int, left: list[int], right: list[int], expected: list[int]) -> None:
    result = add(DigitRing(base, left), DigitRing(base, right))

    assert result.to_list() == expected
    assert result.base == base


def test_add_matches_integer_sum() -> None:
    left = from_int(987654321, 7)
    right = from_int(123456789, 7)

    assert to_int(add(left, right)) == 987654321 + 123456789


def test_add_leaves_operands_untouched() -> None:
    left = DigitRing(3, [2, 2])
    right = DigitRing(3, [1])

    result = add(left, right)
    result.append(0)

    assert left.to_list() == [2, 2]
    assert right.to_list() == [1]


def test_add_with_empty_operand() -> None:
    assert add(DigitRing(3), DigitRing(3, [1, 2])).to_list() == [1, 2]
    assert add(DigitRing(3), DigitRing(3)).to_list() == []


def test_add_requires_matching_bases() -> None:
    with pytest.raises(BaseMismatch):
        add(DigitRing(3, [1]), DigitRing(8, [1]))


def test_to_int_and_from_int() -> None:
    assert to_int(DigitRing(3, [1, 0, 0])) == 9
    assert to_int(DigitRing(3)) == 0
    assert from_int(0, 5).to_list() == [0]
    assert from_int(64, 8).to_list() == [1, 0, 0]
    with pytest.raises(ValueError):
        from_int(-1, 3)


def test_convert_base_produces_independent_ring() -> None:
    ring = DigitRing(3, [1, 0, 0])

    converted = convert_base(ring, 8)

    assert converted.to_list() == [1, 1]
    assert converted.base == 8
    assert ring.to_list() == [1, 0, 0]
    assert ring.base == 3


@pytest.mark.parametrize(
    "digits, source, target",
    [
        ([2, 1, 0, 2], 3, 8),
        ([1, 0, 1, 1, 0], 2, 16),
        ([7, 7, 7], 8, 3),
        ([0], 3, 8),
        ([3, 5], 36, 2),
    ],
)
def test_convert_base_round_trip(digits: list[int], source: int, target: int) -> None:
    ring = DigitRing(source, digits)

    back = convert_base(convert_base(ring, target), source)

    assert back.to_list() == digits


def test_convert_empty_ring_gives_single_zero() -> None:
    assert convert_base(DigitRing(3), 8).to_list() == [0]


def test_change_scale_uses_conversion_base() -> None:
    ring = DigitRing(3, [2, 2, 2])

    assert change_scale(ring).to_list() == [3, 2]
    assert change_scale(ring, NumberSettings(base=3, conversion_base=16)).to_list() == [1, 10]
