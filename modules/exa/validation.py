"""Argument validation driven by the manifest's parameter definitions.

One generic pass handles defaults, type checks, clamping of numeric ranges,
enum membership, string length, patterns, URI format, and truncation of
oversized arrays. Cross-field rules (``one_of``) are checked separately by
``check_one_of`` once the individual fields are known to be well-formed.
"""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import urlparse

import structlog

from modules.exa.errors import ValidationError
from shared.schemas.tools import ToolDefinition, ToolParameter

logger = structlog.get_logger()

_PATTERN_HINTS = {
    r"^\d{4}-\d{2}-\d{2}$": "YYYY-MM-DD format",
}


def is_valid_uri(value: str) -> bool:
    """Return True if the value parses with both a scheme and a host part."""
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc)


def validate_arguments(tool: ToolDefinition, raw: dict[str, Any] | None) -> dict[str, Any]:
    """Validate and normalize raw call arguments against a tool definition.

    Returns a new dict holding every declared parameter that has a value
    (supplied or defaulted). Undeclared arguments are dropped, and an empty
    string for an optional parameter counts as not supplied.

    Raises:
        ValidationError: On a missing required field, a type mismatch, an
            enum/length/pattern/format violation.
    """
    raw = raw or {}
    if not isinstance(raw, dict):
        raise ValidationError("arguments must be an object")
    for name in raw:
        if tool.get_parameter(name) is None:
            logger.debug("unknown_argument_ignored", tool=tool.name, argument=name)

    normalized: dict[str, Any] = {}
    for param in tool.parameters:
        value = raw.get(param.name)
        if _is_absent(value) or (value == "" and not param.required):
            if param.required:
                raise ValidationError(f"{param.name} is required")
            if param.default is not None:
                normalized[param.name] = param.default
            continue
        normalized[param.name] = _check(param, value)
    return normalized


def check_one_of(tool: ToolDefinition, args: dict[str, Any]) -> None:
    """Enforce that exactly one of the tool's ``one_of`` alternatives is supplied."""
    if not tool.one_of:
        return

    satisfied = [
        group for group in tool.one_of
        if all(name in args for name in group)
    ]
    names = " or ".join("+".join(group) for group in tool.one_of)
    if not satisfied:
        raise ValidationError(f"Either {names} must be provided")
    if len(satisfied) > 1:
        raise ValidationError(f"Provide either {names}, not both")


def _is_absent(value: Any) -> bool:
    if value is None:
        return True
    # An empty list supplies nothing
    return isinstance(value, list) and not value


def _check(param: ToolParameter, value: Any) -> Any:
    if param.type == "string":
        return _check_string(param, value)
    if param.type == "integer":
        return _check_integer(param, value)
    if param.type == "number":
        return _check_number(param, value)
    if param.type == "boolean":
        if not isinstance(value, bool):
            raise ValidationError(f"{param.name} must be a boolean")
        return value
    if param.type == "array":
        return _check_array(param, value)
    if param.type == "object":
        if not isinstance(value, dict):
            raise ValidationError(f"{param.name} must be an object")
        return value
    raise ValidationError(f"{param.name} has unsupported type '{param.type}'")


def _check_string(param: ToolParameter, value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{param.name} must be a string")

    if param.min_length is not None and len(value.strip()) < param.min_length:
        if param.min_length == 1:
            raise ValidationError(f"{param.name} is required and must be a non-empty string")
        raise ValidationError(f"{param.name} must be at least {param.min_length} characters")
    if param.max_length is not None and len(value) > param.max_length:
        raise ValidationError(f"{param.name} must be at most {param.max_length} characters")

    if param.enum and value not in param.enum:
        allowed = ", ".join(param.enum)
        raise ValidationError(f"{param.name} must be one of: {allowed}")

    if param.pattern and not re.fullmatch(param.pattern, value, flags=re.ASCII):
        hint = _PATTERN_HINTS.get(param.pattern, f"match pattern {param.pattern}")
        raise ValidationError(f"{param.name} must be in {hint}")

    if param.format == "uri" and not is_valid_uri(value):
        raise ValidationError(f"{param.name} must be a valid URL")

    return value


def _check_integer(param: ToolParameter, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{param.name} must be an integer")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(f"{param.name} must be an integer")
        value = int(value)
    return _clamp(param, value)


def _check_number(param: ToolParameter, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{param.name} must be a number")
    return _clamp(param, value)


def _clamp(param: ToolParameter, value):
    # Out-of-range numbers are pulled into bounds rather than rejected
    if param.minimum is not None:
        value = max(param.minimum, value)
    if param.maximum is not None:
        value = min(param.maximum, value)
    return value


def _check_array(param: ToolParameter, value: Any) -> list:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        raise ValidationError(f"{param.name} must be an array")

    if param.max_items is not None:
        value = value[: param.max_items]

    if param.items == "string":
        for item in value:
            if not isinstance(item, str):
                raise ValidationError(f"{param.name} must contain only strings")
            if param.items_format == "uri" and not is_valid_uri(item):
                raise ValidationError(f"{param.name} contains an invalid URL: {item}")
    return list(value)
