"""Delimiter-based string joining"""
from typing import Iterable


class StringJoiner:
    """Joins strings with a delimiter placed strictly between elements.

    Args:
        delimiter: Separator inserted between consecutive strings (may be empty)
    """

    def __init__(self, delimiter: str):
        self._delimiter = delimiter

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def join(self, strings: Iterable[str]) -> str:
        """Join strings into one, never leading or trailing the delimiter.

        Args:
            strings: Ordered strings to join (not modified)

        Returns:
            "" for no strings, the string itself for one, otherwise
            s0 + delimiter + s1 + ... + delimiter + sN-1
        """
        strings = list(strings)
        if not strings:
            return ""

        first_string, remaining_strings = strings[0], strings[1:]
        return first_string + self._concatenate_with_delimiter(remaining_strings)

    def _concatenate_with_delimiter(self, strings):
        return "".join(self._delimiter + string for string in strings)
