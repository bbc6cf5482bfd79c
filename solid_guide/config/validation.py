"""Configuration validation utilities."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

OUTPUT_METHODS = ("stdout", "file")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_document_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate document parameters."""
        errors = []

        for name in ("title", "code_language"):
            if name in params:
                value = params[name]
                if not isinstance(value, str) or not value.strip():
                    errors.append(ValidationError(
                        field=f"document.{name}",
                        message="Must be a non-empty string",
                        value=value
                    ))

        if "intro" in params and not isinstance(params["intro"], str):
            errors.append(ValidationError(
                field="document.intro",
                message="Must be a string",
                value=params["intro"]
            ))

        for name in ("include_violations", "include_recap"):
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=f"document.{name}",
                    message="Must be a boolean",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_image_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate image parameters."""
        errors = []

        if "enabled" in params and not isinstance(params["enabled"], bool):
            errors.append(ValidationError(
                field="images.enabled",
                message="Must be a boolean",
                value=params["enabled"]
            ))

        if "base_path" in params and not isinstance(params["base_path"], str):
            errors.append(ValidationError(
                field="images.base_path",
                message="Must be a string",
                value=params["base_path"]
            ))

        if "extension" in params:
            value = params["extension"]
            if not isinstance(value, str) or not value or value.startswith("."):
                errors.append(ValidationError(
                    field="images.extension",
                    message="Must be a non-empty string without a leading dot",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_output_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate output parameters."""
        errors = []

        if "method" in params and params["method"] not in OUTPUT_METHODS:
            errors.append(ValidationError(
                field="output.method",
                message=f"Must be one of {', '.join(OUTPUT_METHODS)}",
                value=params["method"]
            ))

        if "path" in params:
            value = params["path"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="output.path",
                    message="Must be a non-empty string",
                    value=value
                ))
            elif Path(value).name in ("", ".."):
                errors.append(ValidationError(
                    field="output.path",
                    message="Must name a file, not a directory",
                    value=value
                ))

        for name in ("overwrite", "create_dirs"):
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=f"output.{name}",
                    message="Must be a boolean",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_fidelity_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate fidelity check parameters."""
        errors = []

        if "max_public_methods" in params:
            value = params["max_public_methods"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="fidelity.max_public_methods",
                    message="Must be a positive integer",
                    value=value
                ))

        if "scale_factors" in params:
            value = params["scale_factors"]
            if (not isinstance(value, (list, tuple)) or not value
                    or not all(_is_number(v) and v > 0 for v in value)):
                errors.append(ValidationError(
                    field="fidelity.scale_factors",
                    message="Must be a non-empty list of positive numbers",
                    value=value
                ))

        if "tolerance" in params:
            value = params["tolerance"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="fidelity.tolerance",
                    message="Must be a non-negative number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params and not isinstance(params["format_json"], bool):
            errors.append(ValidationError(
                field="logging.format_json",
                message="Must be a boolean",
                value=params["format_json"]
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        sections = {
            "document": ConfigValidator.validate_document_params,
            "images": ConfigValidator.validate_image_params,
            "output": ConfigValidator.validate_output_params,
            "fidelity": ConfigValidator.validate_fidelity_params,
            "logging": ConfigValidator.validate_logging_params,
        }

        for section, validate in sections.items():
            if section not in config:
                continue
            if not isinstance(config[section], dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                ))
                continue
            errors.extend(validate(config[section]))

        unknown = sorted(set(config) - set(sections))
        for section in unknown:
            errors.append(ValidationError(
                field=section,
                message="Unknown configuration section",
                value=config[section]
            ))

        return errors
