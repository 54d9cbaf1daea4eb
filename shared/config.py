"""
WordShift Configuration Management
===================================

Centralized configuration for the WordShift toolkit using Python
dataclasses and TOML-based persistence.

Two sections are recognised in the TOML file::

    [global]
    log_level = "DEBUG"
    log_file = "wordshift.log"

    [game]
    min_word_length = 4
    shift_min = 1
    shift_max = 9

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "wordshift.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class GameConfig:
    """Configuration for the Caesar-shift guessing game.

    The shift range is inclusive on both ends.  ``default_shift`` is only
    used by the stateless ``encode`` / ``decode`` CLI commands.
    """

    min_word_length: int = 4
    shift_min: int = 1
    shift_max: int = 9
    default_shift: int = 3
    seed: Optional[int] = None

    def validate(self) -> GameConfig:
        """Check the numeric bounds and return ``self``.

        Raises:
            ValueError: If a field has the wrong type, the shift range is
                empty or starts below 1, or the minimum word length is not
                positive.
        """
        for name in ("min_word_length", "shift_min", "shift_max", "default_shift"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(
                    f"{name} must be an integer, got {type(value).__name__}"
                )
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, int)
        ):
            raise ValueError(
                f"seed must be an integer, got {type(self.seed).__name__}"
            )
        if self.min_word_length < 1:
            raise ValueError(
                f"min_word_length must be >= 1, got {self.min_word_length}"
            )
        if self.shift_min < 1:
            raise ValueError(f"shift_min must be >= 1, got {self.shift_min}")
        if self.shift_max < self.shift_min:
            raise ValueError(
                f"shift_max ({self.shift_max}) must be >= "
                f"shift_min ({self.shift_min})"
            )
        return self


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity, log destination, console mode."""

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_json: bool = False
    quiet: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class WordShiftConfig:
    """Master configuration aggregating global and game settings.

    Usage:
        >>> config = WordShiftConfig.load()                  # from default path
        >>> config = WordShiftConfig.load("custom.toml")     # from custom path
        >>> print(config.game.shift_max)
        9
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    game: GameConfig = field(default_factory=GameConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> WordShiftConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``wordshift.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated, validated :class:`WordShiftConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
            ValueError: If the ``[game]`` section holds inconsistent bounds.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        config = cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            game=cls._build_section(GameConfig, raw.get("game", {})),
        )
        config.game.validate()
        return config

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are silently ignored so that
        forward-compatible config files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> WordShiftConfig:
    """Module-level convenience wrapper around :meth:`WordShiftConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = WordShiftConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
