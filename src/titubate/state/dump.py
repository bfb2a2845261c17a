"""Human-readable rendering of state mappings for diagnostics.

The format is ``{k1 = |v1|,k2 = |v2|}``. It is meant for logs and error
messages, not for round-tripping: there is no parser for it.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from numbers import Number
from typing import Any

_BYTES_TYPES = (bytes, bytearray, memoryview)


def qualified_type_name(value: Any) -> str:
    """Return ``module.QualName`` for the runtime type of *value*."""
    cls = type(value)
    return f"{cls.__module__}.{cls.__qualname__}"


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:  # noqa: BLE001
        return "<unprintable>"


def render_value(value: Any, *, encoding: str = "utf-8", errors: str = "replace") -> str:
    """Render a single state value the way ``dump`` shows it."""
    if value is None:
        return "null"

    if isinstance(value, str):
        return value

    # bytes-likes are Collections too, so they go first.
    if isinstance(value, _BYTES_TYPES):
        return bytes(value).decode(encoding, errors)

    if isinstance(value, Collection) and not isinstance(value, Mapping):
        return _safe_str(value)

    # bool is an int subclass but not a number for rendering purposes.
    if isinstance(value, Number) and not isinstance(value, bool):
        return _safe_str(value)

    return f"{qualified_type_name(value)} -> {_safe_str(value)}"


def dump_mapping(
    mapping: Mapping[str, Any],
    *,
    encoding: str = "utf-8",
    errors: str = "replace",
    sort_keys: bool = False,
) -> str:
    """Render *mapping* as ``{key = |value|,...}``.

    Entries appear in the mapping's iteration order unless *sort_keys* is
    set. Never raises for any value: objects without a dedicated rendering
    fall back to ``<type name> -> <str(value)>``, and a value whose
    ``__str__`` fails renders as ``<unprintable>``.
    """
    keys = sorted(mapping) if sort_keys else list(mapping)
    parts = [
        f"{key} = |{render_value(mapping[key], encoding=encoding, errors=errors)}|"
        for key in keys
    ]
    return "{" + ",".join(parts) + "}"
