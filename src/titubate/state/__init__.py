"""State layer.

A :class:`State` carries values between the steps of a test run. The dump
helpers render any string-keyed mapping in the same diagnostic format.
"""

from titubate.state.dump import dump_mapping, render_value
from titubate.state.store import State

__all__ = [
    "State",
    "dump_mapping",
    "render_value",
]
