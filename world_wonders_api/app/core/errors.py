"""
Error types raised by the wonder service and dataset store.

``WonderError`` and its subclasses describe client mistakes: filters
that leave nothing, unknown names, contradictory year limits or
malformed parameters.  The HTTP layer turns every one of them into a
``400 Bad Request`` with a ``{"message": ...}`` body.

``DatasetError`` is different: it means the bundled dataset could not
be loaded or failed validation.  It is raised during startup and is
never handled; the application must not serve an invalid dataset.
"""

from typing import Optional


class WonderError(Exception):
    """Base class for client-facing query errors."""

    message = "Invalid request"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NoWondersLeft(WonderError):
    """No wonder survived the requested filters."""

    message = "No wonder matching the given filters was found"

    def __init__(self) -> None:
        super().__init__()


class NoMatchingName(WonderError):
    """No wonder matches the requested name slug."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No wonder found matching the name '{name}'")


class ConflictingLimitParams(WonderError):
    """The lower build year limit is greater than the upper one."""

    def __init__(self, lower: int, upper: int) -> None:
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"The provided lower limit of {lower} is greater than the provided upper limit of {upper}"
        )


class InvalidRequest(WonderError):
    """Request parameters could not be parsed or validated."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid request: {detail}")


class DatasetError(RuntimeError):
    """The bundled wonder dataset is missing, malformed or inconsistent."""
