"""Configuration loading and management for Boltzmann Lens.

Configuration sources are merged in priority order:
    1. Defaults (defined in HighlightConfig)
    2. Global config (~/.boltzmann-lens.toml)
    3. Project config (./boltzmann-lens.toml)
    4. Explicit config file
    5. Environment variables (BOLTZMANN_* prefix)
    6. Keyword overrides (typically CLI flags)

Example:
    >>> config = load_config(complexity_threshold=0.7)
    >>> config.complexity_threshold
    0.7
    >>> config.highlight_alpha
    0.3
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

GLOBAL_CONFIG_NAME = ".boltzmann-lens.toml"
PROJECT_CONFIG_NAME = "boltzmann-lens.toml"
ENV_PREFIX = "BOLTZMANN_"


@dataclass(frozen=True)
class HighlightConfig:
    """Options controlling which nodes become highlights and how they look.

    Attributes:
        Filtering:
            complexity_threshold: Minimum normalized complexity (0-1) to keep
            min_complexity_per_loc: Minimum attenuated (pre-normalization)
                complexity to keep; a density floor

        Appearance:
            highlight_alpha: Alpha channel magnitude for emitted colors (0-1)

        Attenuation:
            attenuation: Reweight node complexity with the project graph

        Display:
            show_complexity_inset: Show the total complexity inset at file top
            show_file_complexity: Show the complexity badge next to file names
    """

    complexity_threshold: float = 0.5
    min_complexity_per_loc: float = 0.0
    highlight_alpha: float = 0.3
    attenuation: bool = False
    show_complexity_inset: bool = True
    show_file_complexity: bool = True

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not 0.0 <= self.complexity_threshold <= 1.0:
            raise ValueError("complexity_threshold must be between 0.0 and 1.0")
        if not 0.0 <= self.highlight_alpha <= 1.0:
            raise ValueError("highlight_alpha must be between 0.0 and 1.0")
        if self.min_complexity_per_loc < 0:
            raise ValueError("min_complexity_per_loc must be non-negative")


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> HighlightConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides; ``None`` values are ignored so CLI
            options left unset fall through to lower-priority sources

    Returns:
        Validated HighlightConfig instance

    Raises:
        ConfigurationError: If a config file is missing or invalid, or a
            value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        merged.update(_load_config_file(global_config, "global"))

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_config_file(project_config, "project"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_config_file(config_file, "explicit"))

    merged.update(_load_env_vars())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return HighlightConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_config_file(path: Path, source: str) -> dict[str, Any]:
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(
            f"Invalid {source} config '{path}': {e}", details={"path": str(path)}
        )
    # Accept both a flat file and a [highlights] table
    section = data.get("highlights", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid {source} config '{path}': [highlights] must be a table")
    return dict(section)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from BOLTZMANN_* environment variables.

    Supported environment variables:
        BOLTZMANN_COMPLEXITY_THRESHOLD: float
        BOLTZMANN_MIN_COMPLEXITY_PER_LOC: float
        BOLTZMANN_HIGHLIGHT_ALPHA: float
        BOLTZMANN_ATTENUATION: bool (true/false/1/0)
        BOLTZMANN_SHOW_COMPLEXITY_INSET: bool
        BOLTZMANN_SHOW_FILE_COMPLEXITY: bool

    Returns:
        Dict of field_name -> parsed_value for any BOLTZMANN_* vars found.
    """
    type_hints = get_type_hints(HighlightConfig)
    result: dict[str, Any] = {}

    for config_field in fields(HighlightConfig):
        env_key = f"{ENV_PREFIX}{config_field.name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            result[config_field.name] = _parse_env_value(env_value, type_hints[config_field.name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    if type_hint is bool:
        lower = value.strip().lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is float:
        return float(value)

    return value


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
