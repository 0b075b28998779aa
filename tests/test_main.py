from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from digitring.__main__ import main


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("DIGITRING_BASE", "DIGITRING_CONVERSION_BASE", "DIGITRING_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_add_prints_sum_in_working_base(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--add", "8", "1"]) == 0

    assert capsys.readouterr().out.strip() == "100 (base 3) = 9"


def test_convert_prints_conversion_base(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--convert", "26"]) == 0

    assert capsys.readouterr().out.strip() == "32 (base 8)"


def test_environment_changes_bases(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("DIGITRING_BASE", "10")
    monkeypatch.setenv("DIGITRING_CONVERSION_BASE", "16")

    assert main(["--convert", "255"]) == 0

    assert capsys.readouterr().out.strip() == "ff (base 16)"


def test_invalid_number_reports_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--add", "-1", "2"]) == 1

    assert "non-negative" in capsys.readouterr().err


def test_add_accepts_very_long_numbers(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--add", "1" * 5000, "1"]) == 0

    assert capsys.readouterr().out.strip().endswith("= " + "1" * 4999 + "2")


def test_unknown_log_level_reports_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--add", "1", "1", "--log-level", "chatty"]) == 1

    assert capsys.readouterr().err.startswith("error: Unknown log level")


def test_bad_base_in_environment_reports_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("DIGITRING_BASE", "three")

    assert main(["--convert", "5"]) == 1

    assert "DIGITRING_BASE" in capsys.readouterr().err


def test_unsupported_base_in_environment_reports_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("DIGITRING_CONVERSION_BASE", "1")

    assert main(["--convert", "5"]) == 1

    assert "Base must be between 2 and 36" in capsys.readouterr().err
