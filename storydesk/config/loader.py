"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import structlog
import yaml

from ..errors import ConfigurationError
from .defaults import (
    AliasParams,
    CalendarParams,
    DefaultConfig,
    MatcherParams,
    ReportParams,
    get_default_config,
)
from .validation import ConfigValidator

logger = structlog.get_logger(__name__)

CONFIG_FILENAME = "storydesk.yaml"

_SECTIONS = {
    "matcher": MatcherParams,
    "aliases": AliasParams,
    "calendar": CalendarParams,
    "reports": ReportParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load workspace overrides from the YAML file, if present."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        with open(config_file) as f:
            file_config = yaml.safe_load(f)

        if file_config is None:
            return {}

        if not isinstance(file_config, dict):
            raise ConfigurationError(f"{config_file} must contain a mapping at the top level")

        logger.debug("Loaded configuration file", path=str(config_file))
        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Workspace YAML file
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Merge, validate and build typed configuration.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            logger.error(
                "Configuration validation failed",
                errors=[f"{e.field}: {e.message}" for e in errors],
            )
            raise ConfigurationError(
                f"Invalid configuration: {len(errors)} error(s)", errors=errors
            )

        return self._build_config(config)

    def _build_config(self, config: dict[str, Any]) -> DefaultConfig:
        """Turn a merged dictionary back into frozen parameter dataclasses."""
        unknown_sections = set(config) - set(_SECTIONS)
        if unknown_sections:
            raise ConfigurationError(f"Unknown configuration sections: {sorted(unknown_sections)}")

        sections = {}
        for section_name, params_cls in _SECTIONS.items():
            values = config.get(section_name, {})
            known = {f.name for f in fields(params_cls)}
            unknown = set(values) - known
            if unknown:
                raise ConfigurationError(
                    f"Unknown keys in '{section_name}' section: {sorted(unknown)}"
                )
            sections[section_name] = params_cls(
                **{key: self._freeze(key, value) for key, value in values.items()}
            )

        return DefaultConfig(**sections)

    def _freeze(self, key: str, value: Any) -> Any:
        """Convert YAML lists and mappings into the tuples the dataclasses hold."""
        if key == "deadline_types" and isinstance(value, dict):
            return tuple((field, label) for field, label in value.items())
        if isinstance(value, (list, tuple)):
            return tuple(self._freeze(key, v) if isinstance(v, (list, tuple)) else v for v in value)
        return value

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
