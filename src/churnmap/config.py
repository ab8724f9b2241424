"""Configuration loading and management for churnmap.

Configuration sources are merged in priority order:
    1. Defaults (defined in ChurnMapConfig)
    2. Global config (~/.churnmap.toml)
    3. Project config (./churnmap.toml)
    4. Explicit config file
    5. Environment variables (CHURNMAP_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, workers=4)
    >>> config.verbosity
    'verbose'
    >>> config.workers
    4
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

_VERBOSITIES = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class ChurnMapConfig:
    """Configuration for a visualize/clear run.

    Attributes:
        History queries:
            git_executable: Name or path of the git binary
            commit_id_min_length: Shortest hex prefix accepted as a commit id.
                git abbreviates to 7 by default but grows the length on
                large repositories, and --pretty=oneline prints the full
                40 (SHA-1) or 64 (SHA-256) characters.
            timeout_seconds: Per-line timeout for a git log -L call
            workers: Parallel history queries (1 = one process at a time)

        Rendering:
            owner_tag: Tag attached to every decoration churnmap creates
            annotation_arrow: Glyph placed before the commit count
            annotation_style: rich style of the trailing annotation

        Output control:
            verbosity: Logging verbosity level
    """

    # History queries
    git_executable: str = "git"
    commit_id_min_length: int = 7
    timeout_seconds: int = 30
    workers: int = 1

    # Rendering
    owner_tag: str = "churn-owned"
    annotation_arrow: str = "⟶"
    annotation_style: str = "dim italic"

    # Output control
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.git_executable:
            raise InvalidConfigError("git_executable", self.git_executable, "must not be empty")
        if not 4 <= self.commit_id_min_length <= 64:
            raise InvalidConfigError(
                "commit_id_min_length", self.commit_id_min_length, "must be between 4 and 64"
            )
        if self.timeout_seconds < 1:
            raise InvalidConfigError("timeout_seconds", self.timeout_seconds, "must be at least 1")
        if self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if not self.owner_tag:
            raise InvalidConfigError("owner_tag", self.owner_tag, "must not be empty")
        if self.verbosity not in _VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"must be one of {', '.join(_VERBOSITIES)}"
            )


DEFAULT_CONFIG = ChurnMapConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> ChurnMapConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep lower-priority values.

    Returns:
        Validated ChurnMapConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a merged value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".churnmap.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "churnmap.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(
                f"Config file not found: {config_file}", details={"path": str(config_file)}
            )
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    # Fold verbosity boolean flags into the verbosity field
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ChurnMapConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CHURNMAP_* environment variables.

    Supported environment variables:
        CHURNMAP_GIT_EXECUTABLE: str
        CHURNMAP_COMMIT_ID_MIN_LENGTH: int
        CHURNMAP_TIMEOUT_SECONDS: int
        CHURNMAP_WORKERS: int
        CHURNMAP_OWNER_TAG: str
        CHURNMAP_ANNOTATION_ARROW: str
        CHURNMAP_ANNOTATION_STYLE: str
        CHURNMAP_VERBOSITY: quiet/normal/verbose
    """
    type_hints = get_type_hints(ChurnMapConfig)

    result: dict[str, Any] = {}

    for field_name in ChurnMapConfig.__dataclass_fields__:
        env_key = f"CHURNMAP_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If TOML support is missing or parsing fails
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

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}", details={"path": str(path)})
