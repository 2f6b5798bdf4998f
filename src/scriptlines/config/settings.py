"""scriptlines configuration settings."""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import IO, Any, cast

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scriptlines.exceptions import ConfigurationError, check_config_keys

logger = structlog.get_logger(__name__)

# suffix -> (open mode, reader)
_READERS: dict[str, tuple[str, Callable[[IO[Any]], Any]]] = {
    ".yml": ("r", yaml.safe_load),
    ".yaml": ("r", yaml.safe_load),
    ".toml": ("rb", tomllib.load),
    ".json": ("r", json.load),
}

CONFIG_FILE_NAMES = ("config.yaml", "config.toml", "config.json")
PROJECT_FILE_NAMES = ("scriptlines.yaml", "scriptlines.toml", "scriptlines.json")


def read_config_file(path: Path) -> dict[str, Any]:
    """Read one configuration file into a plain mapping.

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: On an unknown suffix or a misspelled key
    """
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in _READERS:
        raise ConfigurationError(
            message=f"Unsupported configuration file format: {suffix}",
            hint="Use one of the supported formats: .yml, .yaml, .toml, or .json",
            details={
                "file": str(path),
                "detected_format": suffix,
                "supported_formats": list(_READERS),
            },
        )

    mode, reader = _READERS[suffix]
    encoding = None if "b" in mode else "utf-8"
    with path.open(mode, encoding=encoding) as f:
        data = reader(f) or {}
    check_config_keys(data)
    return cast("dict[str, Any]", data)


class EditorConfiguration(BaseModel):
    """Editor options a caller hands to the core on each request.

    The core never looks these up on its own; they travel with the call.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    autocomplete_enabled: bool = Field(
        default=True,
        alias="autocompleteEnabled",
        description="Whether autocomplete suggestions are produced at all",
    )
    delay_ms: int = Field(
        default=150,
        alias="delayMs",
        description="Debounce delay the caller applies before asking again",
        ge=0,
    )


class ScriptLinesSettings(BaseSettings):
    """Settings for the scriptlines command line.

    Later sources win: defaults, then ``.env``, then ``SCRIPTLINES_*``
    variables, then config files in the order given, then CLI flags.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCRIPTLINES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        pattern="^(?i)(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console, json, structured)",
        pattern="^(?i)(console|json|structured)$",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file, rotated at 10MB",
    )

    autocomplete_enabled: bool = Field(
        default=True,
        description="Produce autocomplete suggestions while typing",
    )
    autocomplete_delay_ms: int = Field(
        default=150,
        description="Debounce delay in milliseconds before suggestions refresh",
        ge=0,
    )

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path | None:
        """Expand ``~`` and environment variables in the log file path."""
        if v is None:
            return None
        if isinstance(v, Path):
            return v.resolve()
        if not isinstance(v, str):
            raise ValueError(
                f"log_file must be a str or Path, got {type(v).__name__}: {v!r}"
            )
        return Path(os.path.expandvars(v)).expanduser().resolve()

    @field_validator("log_level", "log_format", mode="before")
    @classmethod
    def normalize_case(cls, v: Any, info: ValidationInfo) -> str:
        """Accept log levels and formats in any case."""
        if not isinstance(v, str):
            raise ValueError(
                f"{info.field_name} must be a string, got {type(v).__name__}"
            )
        return v.upper() if info.field_name == "log_level" else v.lower()

    def editor_configuration(self) -> EditorConfiguration:
        """Build the per-call editor configuration from these settings."""
        return EditorConfiguration(
            autocomplete_enabled=self.autocomplete_enabled,
            delay_ms=self.autocomplete_delay_ms,
        )

    @classmethod
    def from_file(cls, config_path: Path | str) -> ScriptLinesSettings:
        """Load settings from a YAML, TOML or JSON file.

        Raises:
            ConfigurationError: If the format or a key is not recognised.
            FileNotFoundError: If the file doesn't exist.
        """
        return cls(**read_config_file(Path(config_path)))

    @classmethod
    def from_multiple_sources(
        cls,
        config_files: list[Path | str] | None = None,
        env_file: Path | str | None = None,
        cli_args: dict[str, Any] | None = None,
    ) -> ScriptLinesSettings:
        """Merge config files, environment and CLI arguments.

        Missing config files are skipped with a warning. ``None`` values in
        ``cli_args`` mean "flag not given" and are ignored.
        """
        data: dict[str, Any] = {}
        for config_file in config_files or []:
            try:
                data.update(read_config_file(Path(config_file)))
            except FileNotFoundError:
                logger.warning(
                    "Configuration file not found, using defaults",
                    config_file=str(config_file),
                )

        data.update({k: v for k, v in (cli_args or {}).items() if v is not None})

        if env_file:
            settings = cast(Any, cls)(_env_file=env_file, **data)
            return cast("ScriptLinesSettings", settings)
        return cls(**data)


_settings: ScriptLinesSettings | None = None


def _get_config_paths() -> list[Path]:
    """Existing user and project config files, lowest priority first."""
    user_dir = Path.home() / ".config" / "scriptlines"
    candidates = [user_dir / name for name in CONFIG_FILE_NAMES]
    candidates += [Path.cwd() / name for name in PROJECT_FILE_NAMES]

    existing = []
    for path in candidates:
        try:
            if path.is_file():
                existing.append(path)
        except OSError:
            continue
    return existing


def get_settings() -> ScriptLinesSettings:
    """Get the global settings, discovering config files on first call."""
    global _settings
    if _settings is None:
        _settings = ScriptLinesSettings.from_multiple_sources(
            config_files=list(_get_config_paths())
        )
    return _settings


def set_settings(settings: ScriptLinesSettings) -> None:
    """Replace the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Forget the global settings so the next lookup reloads them."""
    global _settings
    _settings = None


def get_settings_for_cli(
    config_file: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> ScriptLinesSettings:
    """Resolve settings for one CLI invocation.

    Args:
        config_file: Explicit config file; replaces the discovered user
            and project files when given.
        cli_overrides: Flag values; ``None`` entries are ignored.

    Raises:
        FileNotFoundError: If ``config_file`` is given but doesn't exist.
    """
    if config_file is not None:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        config_files: list[Path | str] = [config_file]
    else:
        config_files = list(_get_config_paths())
    return ScriptLinesSettings.from_multiple_sources(
        config_files=config_files, cli_args=cli_overrides
    )
