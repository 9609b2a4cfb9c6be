"""Configuration management with hierarchical loading."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from hourglass.cli.utils import parse_format_option
from hourglass.domain.models import DEFAULT_UNITS, UnitDefinition, UnitTable
from hourglass.infrastructure.exceptions import ConfigError, FormatSpecError
from hourglass.infrastructure.logger import get_logger
from hourglass.services.duration_service import DurationService

logger = get_logger(__name__)


def _default_format() -> list[Any]:
    return ["d", {"special": "h:mm"}]


class Config(BaseModel):
    """Main configuration model.

    ``format`` keeps the host representation (see coerce_format_spec);
    it is turned into a FormatSpec when the service is built.
    """

    version: str = "0.1.0"
    log_level: str = "INFO"
    units: list[UnitDefinition] = Field(default_factory=lambda: list(DEFAULT_UNITS.units))
    format: Any = Field(default_factory=_default_format)

    def unit_table(self) -> UnitTable:
        """Return the configured units as a UnitTable."""
        return UnitTable(units=tuple(self.units))


class ConfigManager:
    """Manage configuration loading from multiple sources with hierarchy."""

    def __init__(self, project_root: Path | None = None) -> None:
        """Initialize config manager.

        Args:
            project_root: Root directory of the project (default: current directory)
        """
        self.project_root = project_root or Path.cwd()
        self._config: Config | None = None

    def load_config(self) -> Config:
        """Load configuration from all sources in hierarchy order.

        Configuration hierarchy (highest priority last):
        1. System defaults (embedded in Config model)
        2. Project defaults (.hourglass/config.yaml)
        3. User overrides (~/.hourglass/config.yaml)
        4. Project overrides (.hourglass/local.yaml)
        5. Environment variables (HOURGLASS_* prefix)

        Returns:
            Merged configuration

        Raises:
            ConfigError: If a file cannot be parsed or a value is invalid
        """
        if self._config is not None:
            return self._config

        config_dict: dict[str, Any] = {}
        sources: list[str] = []

        for path in (
            self.project_root / ".hourglass" / "config.yaml",
            Path.home() / ".hourglass" / "config.yaml",
            self.project_root / ".hourglass" / "local.yaml",
        ):
            if path.exists():
                config_dict = self._merge_dicts(config_dict, self._load_yaml(path))
                sources.append(str(path))

        config_dict = self._apply_env_vars(config_dict)

        try:
            self._config = Config(**config_dict)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

        logger.debug("config_loaded", sources=sources)
        return self._config

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """Load YAML configuration file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping at the top of {path}")
        return data

    def _merge_dicts(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge two dictionaries; lists are replaced, not merged."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value
        return result

    def _apply_env_vars(self, config_dict: dict[str, Any]) -> dict[str, Any]:
        """Apply environment variables with HOURGLASS_ prefix."""
        if log_level := os.getenv("HOURGLASS_LOG_LEVEL"):
            config_dict["log_level"] = log_level

        if fmt := os.getenv("HOURGLASS_FORMAT"):
            try:
                config_dict["format"] = parse_format_option(fmt)
            except ValueError as e:
                raise ConfigError(f"Invalid HOURGLASS_FORMAT: {e}") from e

        return config_dict

    def build_service(self) -> DurationService:
        """Create a DurationService with compiled patterns for the loaded config.

        Raises:
            ConfigError: If the configured format is malformed
        """
        config = self.load_config()
        try:
            return DurationService(units=config.unit_table(), default_format=config.format)
        except (FormatSpecError, ValidationError) as e:
            raise ConfigError(str(e)) from e
