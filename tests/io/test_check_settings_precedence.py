from __future__ import annotations

import logging
from pathlib import Path

import pytest

from assignable.core.constants import MAX_DEPTH
from assignable.core.engine import Checker
from assignable.io.config import CheckSettings
from assignable.io.errors import IoConfigError

ENV_KEYS = ["ASSIGNABLE_MAX_DEPTH", "ASSIGNABLE_TRACE"]


def _write_toml(tmp: Path, content: str, name: str = "assignable.toml") -> Path:
    p = tmp / name
    p.write_text(content)
    return p


def _clear_env(monkeypatch) -> None:
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_settings_precedence_env_over_toml(tmp_path: Path, monkeypatch) -> None:
    # Arrange TOML
    _write_toml(
        tmp_path,
        """
        [check]
        max_depth = 32
        trace = false
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    # Arrange ENV that should override TOML
    monkeypatch.setenv("ASSIGNABLE_MAX_DEPTH", "16")
    monkeypatch.setenv("ASSIGNABLE_TRACE", "yes")

    # Act
    s = CheckSettings.load()

    # Assert precedence: env > TOML
    assert s.max_depth == 16
    assert s.trace is True


def test_settings_from_toml_when_no_env(tmp_path: Path, monkeypatch) -> None:
    _write_toml(
        tmp_path,
        """
        [check]
        max_depth = 32
        trace = true
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = CheckSettings.load()

    assert s.max_depth == 32
    assert s.trace is True


def test_settings_accept_top_level_keys(tmp_path: Path, monkeypatch) -> None:
    _write_toml(tmp_path, "max_depth = 8\n")
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    assert CheckSettings.load().max_depth == 8


def test_settings_from_pyproject_tool_table(tmp_path: Path, monkeypatch) -> None:
    _write_toml(
        tmp_path,
        """
        [project]
        name = "demo"

        [tool.assignable.check]
        max_depth = 12
        """.strip(),
        name="pyproject.toml",
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = CheckSettings.load()

    assert s.max_depth == 12
    assert s.trace is False


def test_settings_explicit_path(tmp_path: Path, monkeypatch) -> None:
    cfg = _write_toml(tmp_path, "[check]\nmax_depth = 5\n", name="custom.toml")
    monkeypatch.chdir(tmp_path.parent)
    _clear_env(monkeypatch)

    assert CheckSettings.load(cfg).max_depth == 5


def test_settings_defaults_without_files_or_env(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = CheckSettings.load()

    assert s == CheckSettings()
    assert s.max_depth == MAX_DEPTH
    assert s.trace is False


@pytest.mark.parametrize("bad", ["abc", "0", "-3"])
def test_invalid_env_depth_is_ignored(
    bad: str, tmp_path: Path, monkeypatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)
    monkeypatch.setenv("ASSIGNABLE_MAX_DEPTH", bad)

    with caplog.at_level(logging.WARNING, logger="assignable.io.config"):
        s = CheckSettings.load()

    assert s.max_depth == MAX_DEPTH
    assert any("max_depth" in r.getMessage() for r in caplog.records)


def test_unreadable_toml_falls_back_to_defaults(tmp_path: Path, monkeypatch) -> None:
    _write_toml(tmp_path, "[check\nmax_depth = ")
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    assert CheckSettings.load() == CheckSettings()


@pytest.mark.parametrize("bad", [0, -1])
def test_non_positive_depth_is_rejected(bad: int) -> None:
    with pytest.raises(IoConfigError):
        CheckSettings(max_depth=bad)


def test_settings_build_checker() -> None:
    chk = CheckSettings(max_depth=10, trace=True).checker()
    assert chk == Checker(max_depth=10, trace=True)
