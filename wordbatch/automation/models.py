"""Error types for the automation layer."""

from __future__ import annotations


class AutomationError(Exception):
    """Wraps automation-library exceptions with the operation that failed."""

    def __init__(self, operation: str, cause: Exception | str) -> None:
        self.operation = operation
        super().__init__(f"{operation} failed: {cause}")
        if isinstance(cause, Exception):
            self.__cause__ = cause


class ApplicationUnavailableError(AutomationError):
    """The word-processing application could not be started."""

    def __init__(self, cause: Exception | str) -> None:
        super().__init__("start", cause)
