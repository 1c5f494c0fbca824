"""Configuration file loader with error reporting.

Loads JSON facade configurations and turns file system, JSON syntax and
Pydantic validation failures into a single :class:`ConfigError` carrying
actionable details.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from facades.application.config.schema import FacadeConfiguration


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, json_parse, validation, ...)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, validation errors)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("grid", "spacing_x"))
        'grid.spacing_x'
        >>> _format_json_path(("holes", "sizes", 2))
        'holes.sizes[2]'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        path = detail["path"] or "<root>"
        value = detail.get("value")
        if value is not None and not isinstance(value, dict):
            lines.append(f"  - {path}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {detail['message']}")
    return "\n".join(lines)


def load_config_from_dict(
    data: dict[str, Any], path: Path | None = None
) -> FacadeConfiguration:
    """Load and validate a facade configuration from a dictionary.

    Args:
        data: Dictionary containing configuration data
        path: Originating file, used only for error reporting

    Returns:
        A validated FacadeConfiguration instance

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return FacadeConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> FacadeConfiguration:
    """Load and validate a facade configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated FacadeConfiguration instance

    Raises:
        ConfigError: If the file cannot be loaded or validated. The
            error_type attribute is one of "file_not_found",
            "permission_denied", "file_read_error", "json_parse" or
            "validation".
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Config file must contain a JSON object: {path}",
            error_type="validation",
            path=path,
        )

    return load_config_from_dict(data, path=path)
