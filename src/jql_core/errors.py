"""Error types raised by filter evaluation."""

from __future__ import annotations


class FilterError(Exception):
    """Base class for every failure surfaced by ``evaluate``."""

    message = "Filter error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class KeyNotFound(FilterError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"The specified key '{key}' was not found in the JSON data")


class IndexOutOfBounds(FilterError):
    message = "Index out of bounds"


class ParseError(FilterError):
    """An index or slice bound that is not a non-negative integer."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"You need an integer, got '{text}'")


class MissingBrackets(FilterError):
    message = "Missing brackets"


class ListNotFound(FilterError):
    message = "List not found"


class DictionaryNotFound(FilterError):
    message = "Dictionary not found"


class InvalidNeedle(FilterError):
    """A stage whose syntax is not recognised."""

    def __init__(self, needle: str) -> None:
        self.needle = needle
        super().__init__(f"Invalid needle: {needle}")


class InvalidInput(FilterError):
    message = "Invalid input for this function"
