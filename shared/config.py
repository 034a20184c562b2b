"""
TinyRemap Configuration Management
===================================

Centralized configuration for the TinyRemap tools using Python
dataclasses and TOML-based persistence.

Configuration is kept apart from code: every tunable lives in a
``config.toml`` at the project root (or a file passed with ``--config``)
and anything missing falls back to the dataclass defaults below.

References:
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
    - FabricMC. Tiny v1 mapping format.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class ConverterConfig:
    """Configuration for the yarn -> tiny mapping converter.

    Controls the accepted input version tag, text encodings, and how the
    output file is written.
    """

    supported_version: str = "v1"
    input_encoding: str = "utf-8"
    output_encoding: str = "utf-8"
    atomic_write: bool = True
    max_warnings_shown: int = 20


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings shared across all TinyRemap tools.

    Controls logging verbosity and log destinations.
    """

    log_level: str = "INFO"
    log_file: str | None = None
    log_json: bool = False
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class RemapConfig:
    """Master configuration aggregating tool-specific and global settings.

    Usage:
        >>> config = RemapConfig.load()                  # from default path
        >>> config = RemapConfig.load("custom.toml")     # from custom path
        >>> print(config.converter.supported_version)
        'v1'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    converter: ConverterConfig = field(default_factory=ConverterConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> RemapConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys gracefully fall back to dataclass
        defaults -- no ``KeyError`` is raised.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated :class:`RemapConfig` instance.

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
            converter=cls._build_section(ConverterConfig, raw.get("converter", {})),
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

        Unknown keys in the TOML source are silently ignored so that
        forward-compatible config files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> RemapConfig:
    """Module-level convenience wrapper around :meth:`RemapConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = RemapConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
