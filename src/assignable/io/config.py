"""
Configuration for assignability checks.

Defines CheckSettings, a frozen dataclass carrying the runtime knobs of
assignable.core.engine.Checker. Defaults are sourced from assignable.core.constants
(the single source of truth).

Source of truth
- assignable.core.constants.MAX_DEPTH

Import DAG discipline
- Depends only on stdlib and assignable.core.
- assignable.core never imports this module; a Checker is built from settings here.

Notes
- Precedence: environment > TOML > defaults.
- Unparseable values are skipped, leaving the previous value in place.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from assignable.core.constants import MAX_DEPTH as CORE_MAX_DEPTH
from assignable.core.engine import Checker

from .errors import IoConfigError

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "t", "yes", "y", "on"}


@dataclass(frozen=True)
class CheckSettings:
    """
    Runtime settings for assignability checks.

    Attributes:
        max_depth (int): Nesting depth past which a comparison is reported as not
            assignable (default from assignable.core.constants).
        trace (bool): Log every decided pair at DEBUG via the
            ``assignable.core.engine`` logger.

    Raises:
        IoConfigError: If max_depth < 1.

    Examples:
        >>> from assignable.io import CheckSettings
        >>> CheckSettings(max_depth=64).checker().max_depth
        64
    """

    max_depth: int = CORE_MAX_DEPTH
    trace: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.max_depth, int) or self.max_depth < 1:
            raise IoConfigError(f"max_depth must be a positive integer (got {self.max_depth!r})")

    def checker(self) -> Checker:
        """Build a Checker bound to these settings."""
        return Checker(max_depth=self.max_depth, trace=self.trace)

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: CheckSettings, cfg: dict[str, Any] | None) -> CheckSettings:
        """Apply a loose config mapping onto CheckSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        def _bool(v: Any) -> bool:
            if isinstance(v, bool):
                return v
            if isinstance(v, (int, float)):
                return bool(v)
            if isinstance(v, str):
                return v.strip().lower() in _TRUTHY
            return False

        # max_depth
        if "max_depth" in cfg:
            try:
                s = replace(s, max_depth=int(cfg["max_depth"]))
            except (TypeError, ValueError, IoConfigError):
                logger.warning("ignoring invalid max_depth %r", cfg["max_depth"])

        # trace
        if "trace" in cfg:
            s = replace(s, trace=_bool(cfg["trace"]))

        return s

    @classmethod
    def from_env(
        cls, base: CheckSettings | None = None, prefix: str = "ASSIGNABLE_"
    ) -> CheckSettings:
        """
        Build CheckSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - ASSIGNABLE_MAX_DEPTH
            - ASSIGNABLE_TRACE (1/0/true/false/yes/no/on/off)
        """
        s = base or cls()

        def get(name: str) -> str | None:
            return os.getenv(prefix + name)

        mapping: dict[str, Any] = {}
        v = get("MAX_DEPTH")
        if v:
            mapping["max_depth"] = v
        v = get("TRACE")
        if v:
            mapping["trace"] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> CheckSettings:
        """
        Build CheckSettings from a TOML file.

        Search order when `path` is None:
            1) ./assignable.toml (with either a [check] table or direct keys)
            2) ./pyproject.toml under [tool.assignable.check]

        Returns defaults if no file is present or readable.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.warning("could not read %s: %s", p, exc)
                return None

        cfg: dict[str, Any] | None = None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "assignable.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                # Expect [tool.assignable.check]
                tool = data.get("tool", {})
                cfg = (
                    tool.get("assignable", {}).get("check", {})  # type: ignore[assignment]
                    if isinstance(tool, dict)
                    else None
                )
            else:
                # assignable.toml - accept either [check] table or top-level keys
                top = data
                if "check" in top and isinstance(top["check"], dict):
                    cfg = top["check"]
                else:
                    cfg = top
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> CheckSettings:
        """
        Load CheckSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (assignable.toml, pyproject.toml).

        Returns:
            CheckSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
