"""Strict value types backing the typed ``State`` accessors.

Python has a single unbounded ``int``, so the fixed-width accessors are
expressed as range-constrained ``int`` types. All validation runs in
pydantic strict mode: nothing is coerced, so ``"5"`` is not an int,
``True`` is not an int and ``b"x"`` is not a string.
"""

from __future__ import annotations

import functools
from typing import Annotated, Any, get_args, get_origin

from pydantic import Field, TypeAdapter

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]
"""Signed 32-bit integer."""

Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]
"""Signed 64-bit integer."""

TEXT_ADAPTER: TypeAdapter[str] = TypeAdapter(str)
INT32_ADAPTER: TypeAdapter[int] = TypeAdapter(Int32)
INT64_ADAPTER: TypeAdapter[int] = TypeAdapter(Int64)


@functools.lru_cache(maxsize=128)
def _cached_adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


def adapter_for(type_: Any) -> TypeAdapter[Any]:
    """Return a ``TypeAdapter`` for *type_*, cached when *type_* is hashable.

    Raises ``pydantic.PydanticSchemaGenerationError`` when pydantic cannot
    build a schema for *type_*.
    """
    try:
        hash(type_)
    except TypeError:
        return TypeAdapter(type_)
    return _cached_adapter(type_)


def describe_type(type_: Any) -> str:
    """Short human-readable name for a type or annotated type."""
    if get_origin(type_) is Annotated:
        type_ = get_args(type_)[0]
    return getattr(type_, "__name__", None) or str(type_)
