"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from ..logging import get_logger
from .defaults import (
    DefaultConfig,
    DocumentParams,
    FidelityParams,
    ImageParams,
    LoggingParams,
    OutputParams,
    get_default_config,
)
from .validation import ConfigValidator

logger = get_logger(__name__)

CONFIG_FILENAME = "guide.yaml"

SECTION_TYPES = {
    "document": DocumentParams,
    "images": ImageParams,
    "output": OutputParams,
    "fidelity": FidelityParams,
    "logging": LoggingParams,
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
        """Load overrides from guide.yaml, if present."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        try:
            with open(config_file, encoding="utf-8") as f:
                file_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Cannot parse {config_file}: {e}",
                context={"path": str(config_file)}
            ) from e

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"{config_file} must contain a mapping at the top level",
                context={"path": str(config_file)}
            )

        logger.debug("Loaded configuration file", path=str(config_file))
        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides, e.g. from the command line (highest priority)
        2. guide.yaml in the config directory
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Merge, validate and build the typed configuration."""
        merged = self.merge_config(overrides)
        errors = ConfigValidator.validate_config(merged)
        if errors:
            summary = "; ".join(f"{e.field}: {e.message}" for e in errors)
            raise ConfigurationError(
                f"Invalid configuration: {summary}",
                errors=errors,
                context={"config_dir": str(self.config_dir)}
            )
        return self.build(merged)

    @staticmethod
    def build(config: dict[str, Any]) -> DefaultConfig:
        """Convert a validated configuration dict into dataclasses."""
        sections = {}
        for name, params_type in SECTION_TYPES.items():
            values = dict(config.get(name, {}))
            known = {f.name for f in fields(params_type)}
            values = {k: v for k, v in values.items() if k in known}
            if "scale_factors" in values:
                values["scale_factors"] = tuple(values["scale_factors"])
            sections[name] = params_type(**values)
        return DefaultConfig(**sections)

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
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
