"""Custom exceptions for media query operations.

Malformed queries never raise; these cover misuse of the API only.
"""


class MediaQueryError(Exception):
    """Base class for media query errors."""


class ManagerDestroyedError(MediaQueryError):
    """A MediaQueryManager was used after destroy()."""

    def __init__(self, condition: str) -> None:
        self.condition = condition
        super().__init__(
            f"Cannot match {condition!r}: the media query manager was destroyed"
        )
