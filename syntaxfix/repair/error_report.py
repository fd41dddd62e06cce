"""Decodes the serialized error report sent alongside the content to fix."""

import json
from typing import Any

from syntaxfix.repair.exceptions import InputError
from syntaxfix.repair.models import ErrorItem, ErrorReport, FormatKind

_ERROR_PREFIX = "Failed to parse error details: "
_VALID_FORMAT_KINDS = frozenset(kind.value for kind in FormatKind)


def parse_error_report(raw: str) -> ErrorReport:
    """Decode a serialized error report.

    Expected shape: ``{"type": "JSON"|"XML", "message": str,
    "allErrors": [{"line"?, "column"?, "message"}] | null}``.

    Raises:
        InputError: if the payload is not valid JSON or has the wrong shape.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as exc:
        raise InputError(f"{_ERROR_PREFIX}{exc}") from exc

    if not isinstance(data, dict):
        raise InputError(f"{_ERROR_PREFIX}error details must be an object")
    return ErrorReport(
        format_kind=_build_format_kind(data.get("type")),
        summary=_build_summary(data.get("message")),
        items=_build_items(data.get("allErrors")),
    )


def _build_format_kind(raw: Any) -> FormatKind:
    if not isinstance(raw, str) or raw not in _VALID_FORMAT_KINDS:
        raise InputError(
            f"{_ERROR_PREFIX}'type' must be one of {sorted(_VALID_FORMAT_KINDS)}, got {raw!r}"
        )
    return FormatKind(raw)


def _build_summary(raw: Any) -> str:
    if not isinstance(raw, str):
        raise InputError(f"{_ERROR_PREFIX}'message' must be a string")
    return raw


def _build_items(raw: Any) -> tuple[ErrorItem, ...] | None:
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise InputError(f"{_ERROR_PREFIX}'allErrors' must be a list or null")
    return tuple(_build_item(item, i) for i, item in enumerate(raw))


def _build_item(raw: Any, index: int) -> ErrorItem:
    if not isinstance(raw, dict):
        raise InputError(f"{_ERROR_PREFIX}error at index {index} must be an object")
    message = raw.get("message")
    if not isinstance(message, str):
        raise InputError(f"{_ERROR_PREFIX}error at index {index}: 'message' must be a string")
    return ErrorItem(
        message=message,
        line=_build_position(raw.get("line"), "line", index),
        column=_build_position(raw.get("column"), "column", index),
    )


def _build_position(raw: Any, name: str, index: int) -> int | None:
    if raw is None:
        return None
    # bool is an int subclass
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        raise InputError(
            f"{_ERROR_PREFIX}error at index {index}: '{name}' must be a non-negative integer or null"
        )
    return raw
