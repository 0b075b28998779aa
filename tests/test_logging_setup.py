from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from digitring.logging_setup import setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_sets_level_case_insensitively() -> None:
    setup_logging("debug")

    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging("chatty")
