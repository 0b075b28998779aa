from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from digitring.gui import DigitRingWindow  # noqa: E402


@pytest.fixture(scope="module")
def app() -> object:
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


def test_status_follows_reordering(app: object) -> None:
    window = DigitRingWindow()
    window._left_input.setText("7")

    window._handle_show_left()
    assert window.status_text == "A = 7"

    window._handle_sort_ascending()
    assert window.status_text == "sorted = 5"

    window._handle_shift_left()
    assert window.status_text == "rotated = 7"


def test_status_shows_sum_and_conversion(app: object) -> None:
    window = DigitRingWindow()
    window._left_input.setText("8")
    window._right_input.setText("1")

    window._handle_add()
    assert window.status_text == "A + B = 9"

    window._handle_convert()
    assert window.status_text == "base 8 value = 9"


def test_invalid_input_is_reported(app: object) -> None:
    window = DigitRingWindow()
    window._left_input.setText("-3")

    window._handle_show_left()

    assert "non-negative" in window.status_text
