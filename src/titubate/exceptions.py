"""Custom exception hierarchy for titubate."""

from __future__ import annotations


class TitubateError(Exception):
    """Base exception for all titubate errors."""


class TitubateConfigError(TitubateError):
    """Invalid or missing configuration."""


class StateTypeMismatchError(TitubateError, TypeError):
    """A typed accessor found a value of an incompatible type.

    Raised by :meth:`titubate.state.State.get_string`,
    :meth:`~titubate.state.State.get_int`, :meth:`~titubate.state.State.get_long`
    and :meth:`~titubate.state.State.get_as` when the key is present and
    holds a non-``None`` value that does not validate as the requested type.
    A missing key is never an error for these accessors.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str = "",
        expected: str = "",
        actual: str = "",
    ) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(message)
