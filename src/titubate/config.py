"""State configuration for titubate."""

from __future__ import annotations

import codecs
import dataclasses
import os
from typing import Any

from titubate.exceptions import TitubateConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class StateConfig:
    """Rendering options for a :class:`~titubate.state.State`.

    Parameters
    ----------
    bytes_encoding : str
        Codec used when a stored byte sequence is rendered by ``dump``.
        Defaults to UTF-8.
    bytes_errors : str
        Codec error handler for byte rendering. Defaults to ``"replace"``,
        so malformed input never makes ``dump`` fail.
    dump_sort_keys : bool
        Render entries sorted by key instead of in mapping order.
    """

    bytes_encoding: str = "utf-8"
    bytes_errors: str = "replace"
    dump_sort_keys: bool = False

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.bytes_encoding)
        except LookupError as exc:
            raise TitubateConfigError(f"Unknown bytes_encoding: {self.bytes_encoding!r}") from exc
        try:
            codecs.lookup_error(self.bytes_errors)
        except LookupError as exc:
            raise TitubateConfigError(f"Unknown bytes_errors handler: {self.bytes_errors!r}") from exc

    @classmethod
    def from_env(cls, **overrides: Any) -> StateConfig:
        """Create configuration from environment variables.

        Reads ``TITUBATE_BYTES_ENCODING``, ``TITUBATE_BYTES_ERRORS`` and
        ``TITUBATE_DUMP_SORT_KEYS``. Explicit keyword arguments override
        environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        StateConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "TITUBATE_BYTES_ENCODING": "bytes_encoding",
            "TITUBATE_BYTES_ERRORS": "bytes_errors",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val.strip()

        if "dump_sort_keys" not in overrides:
            config_kwargs["dump_sort_keys"] = _env_bool(env.get("TITUBATE_DUMP_SORT_KEYS"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
