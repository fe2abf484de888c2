# linediff/core/errors.py
"""Errors raised by the caller-side layers around the diff engine.

The engine itself is total and never raises; these cover size budgets and
scripts that do not belong to the sequence they are replayed against.
"""


class InputTooLargeError(ValueError):
    """An input exceeds a configured size budget."""

    def __init__(self, what: str, size: int, limit: int, unit: str = "lines"):
        self.what = what
        self.size = size
        self.limit = limit
        super().__init__(f"{what} has {size} {unit}, limit is {limit} {unit}")


class ScriptMismatchError(ValueError):
    """An edit script does not consume the given original sequence."""
