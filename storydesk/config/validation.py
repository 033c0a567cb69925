"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_matcher_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate fuzzy matching thresholds."""
        errors = []

        for name in ("fuzzy_min_substring_length", "fuzzy_min_word_length", "fuzzy_min_shared_words"):
            if name in params and not _is_positive_int(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a positive integer",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_alias_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate alias lists: non-empty sequences of non-empty strings."""
        errors = []

        for name, value in params.items():
            if isinstance(value, str) or not isinstance(value, (list, tuple)) or not value:
                errors.append(ValidationError(
                    field=name,
                    message="Must be a non-empty list of column keys",
                    value=value
                ))
                continue

            if not all(isinstance(key, str) and key for key in value):
                errors.append(ValidationError(
                    field=name,
                    message="Column keys must be non-empty strings",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_calendar_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate calendar presentation parameters."""
        errors = []

        if "label_style" in params and params["label_style"] not in ("short", "long"):
            errors.append(ValidationError(
                field="label_style",
                message="Must be 'short' or 'long'",
                value=params["label_style"]
            ))

        if "week_starts_on" in params and params["week_starts_on"] not in ("sunday", "monday"):
            errors.append(ValidationError(
                field="week_starts_on",
                message="Must be 'sunday' or 'monday'",
                value=params["week_starts_on"]
            ))

        return errors

    @staticmethod
    def validate_report_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate report parameters."""
        errors = []

        if "link_thresholds" in params:
            value = params["link_thresholds"]
            if not isinstance(value, (list, tuple)) or not all(
                isinstance(v, (int, float)) and not isinstance(v, bool) and v >= 0 for v in value
            ):
                errors.append(ValidationError(
                    field="link_thresholds",
                    message="Must be a list of non-negative numbers",
                    value=value
                ))

        if "deadline_types" in params:
            value = params["deadline_types"]
            if isinstance(value, dict):
                pairs = list(value.items())
            elif isinstance(value, (list, tuple)):
                pairs = value
            else:
                pairs = None

            if pairs is None or not all(
                isinstance(pair, (list, tuple)) and len(pair) == 2
                and all(isinstance(part, str) and part for part in pair)
                for pair in pairs
            ):
                errors.append(ValidationError(
                    field="deadline_types",
                    message="Must map sheet fields to display labels",
                    value=value
                ))

        if "tracked_statuses" in params:
            value = params["tracked_statuses"]
            if isinstance(value, str) or not isinstance(value, (list, tuple)) or not value or not all(
                isinstance(status, str) and status for status in value
            ):
                errors.append(ValidationError(
                    field="tracked_statuses",
                    message="Must be a non-empty list of status names",
                    value=value
                ))

        for name in ("unassigned_brand", "untitled_label", "production_field"):
            if name in params and not isinstance(params[name], str):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a string",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        validators = {
            "matcher": ConfigValidator.validate_matcher_params,
            "aliases": ConfigValidator.validate_alias_params,
            "calendar": ConfigValidator.validate_calendar_params,
            "reports": ConfigValidator.validate_report_params,
        }

        for section, validate in validators.items():
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            errors.extend(validate(params))

        return errors
