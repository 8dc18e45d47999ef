"""
Errors raised by the status board core.

The core never substitutes defaults for these; they propagate to the
HTTP layer, which decides how to render them.
"""
from typing import Iterable


class StatusBoardError(Exception):
    """Base class for every error the status board raises."""


class ConfigurationError(StatusBoardError):
    def __init__(self, missing_keys: Iterable[str]):
        self.missing_keys = list(missing_keys)
        super().__init__(
            "A configuration key is missing: " + ", ".join(self.missing_keys)
        )


class DatabaseConnectionError(StatusBoardError):
    """The monitoring database could not be reached or a query failed."""


class UnknownStatusCodeError(StatusBoardError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown service state code: {value!r}")
