"""Exceptions raised while analyzing @font-face unicode ranges."""

from __future__ import annotations


class FontRangesError(Exception):
    """Base class for every error raised by fontranges."""


class InvalidRangeError(FontRangesError, ValueError):
    """A unicode-range token is malformed or its start is after its end."""

    def __init__(self, token: str, reason: str = "") -> None:
        self.token = token
        message = f"Invalid unicode-range: {token!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnexpectedFontFamilyValueError(FontRangesError, ValueError):
    """A font-family value is not exactly one string literal."""


class UnexpectedUnicodeRangeValueError(FontRangesError, ValueError):
    """A unicode-range value could not be read as a value list."""


class ParseError(FontRangesError):
    """The input could not be parsed as a stylesheet."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class FetchError(FontRangesError, RuntimeError):
    """A CSS source could not be read or downloaded."""


class ConfigError(FontRangesError, ValueError):
    """The configuration file is missing, unparseable, or holds an invalid value."""
