"""Protocol definitions for dependency injection.

This module defines Protocol-based abstractions for the console and other
external dependencies used by the exercises. Protocols use structural typing
(duck typing with type hints), so any class implementing these methods
satisfies the Protocol without explicit inheritance.

Tests supply in-memory fakes or ``Mock(spec=...)`` doubles instead of real
console streams.
"""

from typing import Protocol, Dict, Any, Optional, Union
from pathlib import Path


class OutputSink(Protocol):
    """Destination for human-readable text, one line at a time."""

    def write_line(self, line: str) -> None:
        """Write a single line of text."""
        ...


class InputSource(Protocol):
    """Origin of human-readable text, one line at a time.

    ``read_line`` returns the next line without its line terminator, or
    ``None`` at end of input. A source that cannot produce a line raises
    ``InputReadError``.
    """

    def read_line(self) -> Optional[str]:
        """Read the next line."""
        ...


class Logger(Protocol):
    """Abstraction for logging operations.

    Replaces direct print() statements for diagnostics so tests can assert
    on what was reported.
    """

    def info(self, message: str) -> None:
        """Log informational message."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str) -> None:
        """Log error message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...


class TimeProvider(Protocol):
    """Abstraction for time operations.

    Enables deterministic testing of the welcome banner.
    """

    def current_time(self) -> float:
        """Get current time in seconds since epoch."""
        ...


class FileSystemService(Protocol):
    """Abstraction for the few filesystem operations config loading needs."""

    def exists(self, path: Union[str, Path]) -> bool:
        """Check if path exists."""
        ...

    def read_file(self, path: Union[str, Path]) -> str:
        """Read entire file as string."""
        ...


class ConfigLoader(Protocol):
    """Abstraction for configuration file loading.

    Wraps YAML loading to enable testing with mock configurations
    without requiring actual config files.
    """

    def load_yaml(self, path: str) -> Dict[str, Any]:
        """Load YAML file and return parsed dictionary."""
        ...
