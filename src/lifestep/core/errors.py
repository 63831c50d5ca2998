"""Errors raised while turning a grid file into a Grid."""

from typing import Optional


class GridError(Exception):
    """Base class for user-facing grid errors."""


class NotFoundError(GridError):
    """The input path is missing, not a regular file, or unreadable."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = path
        self.reason = reason
        message = f"'{path}' is not a valid filename!"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class FormatError(GridError):
    """The input file does not describe a valid grid.

    Attributes:
        source: Name of the file (or other source) being parsed
        line: 1-indexed line number of the problem, if it has one
        char: The illegal character, for alphabet violations
        detail: Human readable description of the problem
    """

    def __init__(
        self,
        source: str,
        detail: str,
        line: Optional[int] = None,
        char: Optional[str] = None,
    ) -> None:
        self.source = source
        self.detail = detail
        self.line = line
        self.char = char
        super().__init__(f"'{source}' is not formatted correctly! {detail}")
