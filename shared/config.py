"""
Keysmith Configuration Management
==================================

Centralized configuration for the Keysmith generator using Python
dataclasses and TOML-based persistence.

Configuration is kept apart from code: every default the CLI falls back to
(password length, PIN length, enabled character classes, log verbosity)
lives here and can be overridden from a TOML file.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Optional


# ---------------------------------------------------------------------------
# Default configuration file path in the user's home directory
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path("~/.keysmith/config.toml").expanduser()


# ========================== Section Configs ================================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity and log destinations.

    The log level defaults to WARNING so that a plain invocation prints
    nothing but the generated secret.
    """

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_json: bool = False


@dataclass(frozen=False, slots=True)
class GeneratorConfig:
    """Defaults applied when the CLI does not specify a value.

    ``password_length`` and ``pin_length`` are validated with the same
    range checks as command-line input before they are used.
    """

    password_length: int = 12
    pin_length: int = 4
    include_numbers: bool = False
    include_symbols: bool = False
    require_each_class: bool = False


@dataclass(frozen=False, slots=True)
class OutputConfig:
    """Output format selection (``console`` or ``json``)."""

    format: str = "console"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class KeysmithConfig:
    """Master configuration aggregating all sections.

    Usage:
        >>> config = KeysmithConfig.load()                  # from default path
        >>> config = KeysmithConfig.load("custom.toml")     # from custom path
        >>> config.generator.password_length
        12
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> KeysmithConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for
        ``~/.keysmith/config.toml``.  Missing keys fall back to dataclass
        defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`KeysmithConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
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

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            generator=cls._build_section(GeneratorConfig, raw.get("generator", {})),
            output=cls._build_section(OutputConfig, raw.get("output", {})),
        )

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

        Unknown keys in the TOML source are ignored so that newer config
        files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)
