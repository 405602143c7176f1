"""Production implementations of dependency injection protocols.

This module provides real implementations that wrap the console streams,
the clock, the filesystem and the YAML parser. These are used by the
command-line entry point.

For testing, use mocks or test doubles instead of these implementations.
"""

import sys
import time
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, TextIO, Union

from tddintro.core.exceptions import InputReadError


class StreamOutputSink:
    """Output sink writing lines to a text stream (stdout by default).

    The stream is owned by the caller and is never closed here.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved on every call so a redirected sys.stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, line: str) -> None:
        """Write line followed by a newline and flush."""
        stream = self.stream
        stream.write(f"{line}\n")
        stream.flush()


class StreamInputSource:
    """Input source reading lines from a text stream (stdin by default).

    The stream is owned by the caller and is never closed here.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdin

    def read_line(self) -> Optional[str]:
        """Read the next line, or None at end of input.

        Raises:
            InputReadError: If the underlying stream fails
        """
        try:
            line = self.stream.readline()
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise InputReadError(f"Could not read from input: {e}") from e

        if line == "":
            return None
        if line.endswith("\r\n"):
            return line[:-2]
        if line.endswith("\n"):
            return line[:-1]
        return line


class ConsoleLogger:
    """Production logger that prints to console (stdout/stderr)."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def info(self, message: str) -> None:
        """Print info message to stdout."""
        print(message)

    def warning(self, message: str) -> None:
        """Print warning message to stdout."""
        print(f"Warning: {message}")

    def error(self, message: str) -> None:
        """Print error message to stderr."""
        print(f"Error: {message}", file=sys.stderr)

    def debug(self, message: str) -> None:
        """Print debug message to stdout when verbose."""
        if self.verbose:
            print(f"Debug: {message}")


class SystemTimeProvider:
    """Production time provider using real time module."""

    def current_time(self) -> float:
        """Get current time in seconds since epoch."""
        return time.time()


class RealFileSystemService:
    """Production filesystem service using real pathlib operations."""

    def exists(self, path: Union[str, Path]) -> bool:
        """Check if path exists."""
        return Path(path).exists()

    def read_file(self, path: Union[str, Path]) -> str:
        """Read entire file as string."""
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()


class YamlConfigLoader:
    """Production config loader using real YAML parser."""

    def __init__(self, filesystem: 'RealFileSystemService'):
        """Initialize with filesystem service for reading files."""
        self.fs = filesystem

    def load_yaml(self, path: str) -> Dict[str, Any]:
        """Load YAML file and return parsed dictionary."""
        content = self.fs.read_file(path)
        return yaml.safe_load(content)
