"""titubate - state bag for randomized test runs."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("titubate")
except PackageNotFoundError:
    __version__ = "0+local"
from titubate.config import StateConfig
from titubate.exceptions import (
    StateTypeMismatchError,
    TitubateConfigError,
    TitubateError,
)
from titubate.state import State, dump_mapping, render_value

__all__ = [
    "__version__",
    "State",
    "StateConfig",
    "StateTypeMismatchError",
    "TitubateConfigError",
    "TitubateError",
    "dump_mapping",
    "render_value",
]
