"""Core dependency injection infrastructure for tddintro.

This module provides Protocol-based abstractions for every external
dependency of the exercises (console output, console input, logging, time,
filesystem, YAML config), together with their production implementations.

Design:
- Protocol-based abstractions (typing.Protocol) for structural typing
- Production implementations for real-world use
- Easy mocking for unit tests
"""

from tddintro.core.protocols import (
    OutputSink,
    InputSource,
    Logger,
    TimeProvider,
    FileSystemService,
    ConfigLoader,
)

from tddintro.core.implementations import (
    StreamOutputSink,
    StreamInputSource,
    ConsoleLogger,
    SystemTimeProvider,
    RealFileSystemService,
    YamlConfigLoader,
)

from tddintro.core.exceptions import (
    TddIntroError,
    InputReadError,
    ConfigError,
)

__all__ = [
    # Protocols
    "OutputSink",
    "InputSource",
    "Logger",
    "TimeProvider",
    "FileSystemService",
    "ConfigLoader",
    # Implementations
    "StreamOutputSink",
    "StreamInputSource",
    "ConsoleLogger",
    "SystemTimeProvider",
    "RealFileSystemService",
    "YamlConfigLoader",
    # Exceptions
    "TddIntroError",
    "InputReadError",
    "ConfigError",
]
