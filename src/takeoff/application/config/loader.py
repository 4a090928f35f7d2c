"""Takeoff file loader with error reporting.

This module loads and parses JSON takeoff files. File system errors, JSON
syntax errors and schema errors are all raised as ConfigError with a
category and the details needed to point the user at the problem.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from takeoff.application.config.schemas import TakeoffFile


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message.
        error_type: Category of error: ``file_not_found``,
            ``permission_denied``, ``file_read_error``, ``json_parse`` or
            ``validation``.
        path: Path to the configuration file, if there is one.
        details: Extra information (line/column for JSON errors, one entry
            per failing field for validation errors).
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
        >>> _format_json_path(("config", "tier", "skill_tier"))
        'config.tier.skill_tier'
        >>> _format_json_path(("config", "buildingSides", 0))
        'config.buildingSides[0]'
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
    error: PydanticValidationError, prefix: tuple[str, ...] = ()
) -> list[dict[str, Any]]:
    """Turn a Pydantic ValidationError into path/message/value dicts."""
    return [
        {
            "path": _format_json_path(prefix + tuple(err["loc"])),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, dict):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None) -> TakeoffFile:
    """Validate the root model and the calculator configuration it carries."""
    try:
        takeoff = TakeoffFile.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e

    try:
        takeoff.calculator_config()
    except PydanticValidationError as e:
        details = _extract_validation_errors(e, prefix=("config",))
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e
    return takeoff


def load_config(path: Path) -> TakeoffFile:
    """Load and validate a takeoff file.

    Args:
        path: Path to the JSON file.

    Returns:
        A validated TakeoffFile.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, or does
            not match the schema. ``error_type`` tells which.

    Example:
        >>> try:
        ...     takeoff = load_config(Path("deck.json"))
        ... except ConfigError as e:
        ...     print(f"Error: {e}")
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
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> TakeoffFile:
    """Load and validate a takeoff file from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data, None)
