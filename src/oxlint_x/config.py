"""Configuration management for oxlint-x using pydantic-settings.

Supports hierarchical configuration from:
1. Environment variables (highest priority)
2. JSON settings file
3. Default values (lowest priority)

Environment variables use the format: OXLINT_X_<SECTION>__<FIELD>
Example: OXLINT_X_RUNNER__TIMEOUT_SECONDS=60

These settings control the bridge itself. The oxlint rule configuration
(.oxlintrc.json plus inline options) is resolved separately by
oxlint_x.core.config_resolver.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

APP_NAME = "oxlint-x"
ENV_PREFIX = "OXLINT_X_"
TEMP_DIR_NAME = ".oxlint-temp"
DEFAULT_CONFIG_FILE_NAME = ".oxlintrc.json"


class JsonConfigSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source for loading from JSON file."""

    def __init__(self, settings_cls: type[BaseSettings], json_file: Path):
        super().__init__(settings_cls)
        self.json_file = json_file

    def get_field_value(
        self, field: Any, field_name: str
    ) -> tuple[Any, str, bool]:
        """Get field value - required by base class but not used in v2."""
        return None, "", False

    def __call__(self) -> dict[str, Any]:
        """Load configuration from JSON file."""
        if self.json_file.exists():
            with open(self.json_file, encoding="utf-8") as f:
                return _strip_comment_fields(json.load(f))
        return {}


class RunnerConfig(BaseModel):
    """Settings for locating and executing the oxlint binary."""

    binary_path: str | None = None  # None = node_modules/.bin, then PATH
    search_root: str | None = None  # None = current working directory
    timeout_seconds: float = Field(default=30.0, gt=0)
    max_output_bytes: int = Field(default=10 * 1024 * 1024, gt=0)  # 10MB

    @field_validator("binary_path")
    @classmethod
    def binary_path_must_not_be_blank(cls, v: str | None) -> str | None:
        """Validate that an explicit binary path is not whitespace-only."""
        if v is not None and not v.strip():
            raise ValueError("binary_path must be a non-empty string")
        return v


class FilesConfig(BaseModel):
    """Settings for config discovery and scratch files."""

    config_file_name: str = DEFAULT_CONFIG_FILE_NAME
    temp_dir: str | None = None  # None = <cwd>/node_modules/.oxlint-temp
    default_extension: str = "js"


class LoggingConfig(BaseModel):
    """Logging configuration section."""

    level: str = "WARNING"
    file: str | None = None

    @field_validator("level")
    @classmethod
    def level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level


# Module-level variables
_json_config_file: Path | None = None  # For settings_customise_sources
_settings_cache: "Settings | None" = None  # For singleton pattern


def _strip_comment_fields(data: Any) -> Any:
    """Recursively strip keys starting with _ or $ from dict.

    Args:
        data: Dictionary to clean (or any other type, which is returned as-is)

    Returns:
        Dictionary with comment fields removed, or original value if not a dict
    """
    if not isinstance(data, dict):
        return data
    return {
        k: _strip_comment_fields(v) if isinstance(v, dict) else v
        for k, v in data.items()
        if not k.startswith('_') and not k.startswith('$')
    }


class Settings(BaseSettings):
    """Root configuration model with nested sections.

    Loads configuration from (in priority order):
    1. Environment variables with OXLINT_X_ prefix
    2. JSON settings file (if provided)
    3. Default values
    """

    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    files: FilesConfig = Field(default_factory=FilesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
    )

    @property
    def temp_dir(self) -> Path:
        """Directory for scratch files handed to oxlint."""
        if self.files.temp_dir:
            return Path(self.files.temp_dir)
        return Path.cwd() / "node_modules" / TEMP_DIR_NAME

    @classmethod
    def from_file(cls, config_path: Path | str) -> "Settings":
        """Load settings from a JSON settings file.

        Args:
            config_path: Path to JSON settings file

        Returns:
            Settings instance loaded from file, or default Settings if file doesn't exist
        """
        path = Path(config_path)
        if not path.exists():
            return cls()
        raw = json.loads(path.read_text(encoding='utf-8'))
        cleaned = _strip_comment_fields(raw)
        return cls(**cleaned)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add JSON settings file support.

        Priority order (highest to lowest):
        1. Environment variables
        2. JSON settings file (if _json_config_file module variable is set)
        3. Default values
        """
        if _json_config_file is not None:
            json_source = JsonConfigSettingsSource(settings_cls, json_file=_json_config_file)
            return (env_settings, json_source, init_settings)
        return (env_settings, init_settings)


def get_settings(config_path: Path | str | None = None, *, _force_reload: bool = False) -> Settings:
    """Load settings from optional JSON settings file and environment variables.

    Implements singleton pattern - returns cached settings unless _force_reload=True
    or config_path is provided.

    Args:
        config_path: Optional path to JSON settings file. If provided, bypasses cache.
        _force_reload: If True, bypasses cache and creates fresh Settings instance

    Returns:
        Settings instance with merged configuration
    """
    global _json_config_file, _settings_cache

    if _settings_cache is not None and not _force_reload and config_path is None:
        return _settings_cache

    if config_path:
        _json_config_file = Path(config_path)
        try:
            settings = Settings()
        finally:
            _json_config_file = None  # Reset after use
    else:
        settings = Settings()

    if config_path is None:
        _settings_cache = settings

    return settings
