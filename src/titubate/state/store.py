"""Mutable state kept during a test run.

A :class:`State` is a passive bag of string keys to arbitrary values. It
has no locking and no lifecycle of its own; confine an instance to one
thread or guard it externally.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from titubate.config import StateConfig
from titubate.exceptions import StateTypeMismatchError
from titubate.state.dump import dump_mapping
from titubate.state.types import INT32_ADAPTER, INT64_ADAPTER, TEXT_ADAPTER, adapter_for, describe_type

_logger = logging.getLogger(__name__)


class State:
    """String-keyed store of heterogeneous values.

    ``State(other)`` and ``other.copy()`` produce a shallow copy: the new
    store has its own mapping, so setting or removing keys on one never
    affects the other, but mutable values are shared by reference.
    """

    def __init__(
        self,
        source: State | Mapping[str, Any] | None = None,
        *,
        config: StateConfig | None = None,
    ) -> None:
        if isinstance(source, State):
            self._entries: dict[str, Any] = dict(source._entries)
            self._config = config if config is not None else source._config
        else:
            self._entries = dict(source) if source is not None else {}
            self._config = config if config is not None else StateConfig()

    @property
    def config(self) -> StateConfig:
        return self._config

    def copy(self) -> State:
        """Return a shallow copy of this state."""
        return State(self)

    __copy__ = copy

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set(self, key: str, value: Any) -> None:
        """Set *key* to *value*, replacing any existing entry."""
        self._entries[key] = value

    def remove(self, key: str) -> None:
        """Remove *key*; does nothing when it is absent."""
        self._entries.pop(key, None)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has(self, key: str) -> bool:
        """Return ``True`` if *key* has an entry, even one holding ``None``."""
        return key in self._entries

    def get(self, key: str, default: Any = None) -> Any:
        return self._entries.get(key, default)

    def get_string(self, key: str) -> str | None:
        """Get a value as a string.

        Raises
        ------
        StateTypeMismatchError
            If the value is present, not ``None`` and not a ``str``.
        """
        return self._validate(key, TEXT_ADAPTER, "str")

    def get_int(self, key: str) -> int | None:
        """Get a value as a signed 32-bit integer.

        Raises
        ------
        StateTypeMismatchError
            If the value is present, not ``None`` and not an ``int`` in
            32-bit range. ``bool`` values are rejected.
        """
        return self._validate(key, INT32_ADAPTER, "int32")

    def get_long(self, key: str) -> int | None:
        """Get a value as a signed 64-bit integer.

        Raises
        ------
        StateTypeMismatchError
            If the value is present, not ``None`` and not an ``int`` in
            64-bit range. ``bool`` values are rejected.
        """
        return self._validate(key, INT64_ADAPTER, "int64")

    def get_as(self, key: str, type_: Any) -> Any:
        """Get a value strictly validated as *type_*.

        *type_* is anything pydantic can build a ``TypeAdapter`` for. The
        stored object itself is returned, never a converted copy. Missing
        keys and ``None`` values yield ``None``.

        Raises
        ------
        StateTypeMismatchError
            If the value is present, not ``None`` and does not validate.
        pydantic.PydanticSchemaGenerationError
            If pydantic cannot build a schema for *type_*.
        """
        return self._validate(key, adapter_for(type_), describe_type(type_))

    def _validate(self, key: str, adapter: TypeAdapter[Any], expected: str) -> Any:
        value = self._entries.get(key)
        if value is None:
            return None
        try:
            adapter.validate_python(value, strict=True)
        except ValidationError as exc:
            actual = type(value).__name__
            raise StateTypeMismatchError(
                f"State value for {key!r} is {actual}, not {expected}",
                key=key,
                expected=expected,
                actual=actual,
            ) from exc
        return value

    def to_map(self) -> dict[str, Any]:
        """Return this state's data as a new dict.

        Changes to the returned dict do not reflect back into this state.
        """
        return dict(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def dump(self) -> str:
        """Render the full state as ``{key = |value|,...}``."""
        return dump_mapping(
            self._entries,
            encoding=self._config.bytes_encoding,
            errors=self._config.bytes_errors,
            sort_keys=self._config.dump_sort_keys,
        )

    def log_dump(self, logger: logging.Logger | None = None, level: int = logging.DEBUG) -> None:
        """Emit the dump to *logger* if *level* is enabled."""
        target = logger or _logger
        if target.isEnabledFor(level):
            target.log(level, "State: %s", self.dump())

    def __str__(self) -> str:
        return self.dump()

    def __repr__(self) -> str:
        return f"State({self.dump()})"
