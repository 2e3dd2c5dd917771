from __future__ import annotations

from typing import Any, Iterable


def sanitize_text(value: str) -> str:
    """Trim and drop non-printable characters, keeping newlines and tabs."""
    stripped = value.strip()
    return "".join(ch for ch in stripped if ch.isprintable() or ch in {"\n", "\t"})


def sanitize_string_fields(data: Any, field_names: Iterable[str]) -> Any:
    if not isinstance(data, dict):
        return data
    sanitized = dict(data)
    for field_name in field_names:
        current = sanitized.get(field_name)
        if isinstance(current, str):
            sanitized[field_name] = sanitize_text(current)
    return sanitized


def upper_case_fields(data: Any, field_names: Iterable[str]) -> Any:
    if not isinstance(data, dict):
        return data
    normalized = dict(data)
    for field_name in field_names:
        current = normalized.get(field_name)
        if isinstance(current, str):
            normalized[field_name] = current.strip().upper()
    return normalized
