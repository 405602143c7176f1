"""Settings loading from an optional YAML file"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from tddintro.core.protocols import FileSystemService, ConfigLoader
from tddintro.core.implementations import RealFileSystemService, YamlConfigLoader
from tddintro.core.exceptions import ConfigError
from tddintro.library import DEFAULT_TIME_FORMAT

DEFAULT_BOOKS = [
    "Head First Java",
    "Test Driven Development by Example",
    "The Agile Samurai",
]
DEFAULT_DELIMITER = ", "


@dataclass
class Settings:
    """Values wired into the exercises by the command-line entry point."""
    books: List[str] = field(default_factory=lambda: list(DEFAULT_BOOKS))
    time_format: str = DEFAULT_TIME_FORMAT
    delimiter: str = DEFAULT_DELIMITER


def load_settings(
    path: Optional[str] = None,
    filesystem: Optional[FileSystemService] = None,
    config_loader: Optional[ConfigLoader] = None
) -> Settings:
    """Load settings, falling back to defaults for anything not given.

    Expected layout (all keys optional):

        library:
          books: [...]
          time_format: "%H:%M"
        joiner:
          delimiter: ", "

    Args:
        path: YAML settings file, or None for pure defaults
        filesystem: Filesystem abstraction (real filesystem if omitted)
        config_loader: YAML loader abstraction (PyYAML if omitted)

    Returns:
        Populated Settings

    Raises:
        ConfigError: If the file is missing, unparsable or has wrong types
    """
    settings = Settings()
    if path is None:
        return settings

    fs = filesystem if filesystem is not None else RealFileSystemService()
    loader = config_loader if config_loader is not None else YamlConfigLoader(fs)

    if not fs.exists(path):
        raise ConfigError(f"Config file not found: {path}")

    try:
        data = loader.load_yaml(path)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read {path}: {e}") from e

    # Empty document
    if data is None:
        return settings
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")

    library = _section(data, 'library', path)
    joiner = _section(data, 'joiner', path)

    if 'books' in library:
        books = library['books']
        if not isinstance(books, list) or not all(isinstance(b, str) for b in books):
            raise ConfigError(f"{path}: library.books must be a list of strings")
        settings.books = list(books)

    if 'time_format' in library:
        settings.time_format = _string(library['time_format'], 'library.time_format', path)

    if 'delimiter' in joiner:
        settings.delimiter = _string(joiner['delimiter'], 'joiner.delimiter', path)

    return settings


def _section(data: Dict[str, Any], name: str, path: str) -> Dict[str, Any]:
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: '{name}' must be a mapping")
    return section


def _string(value: Any, key: str, path: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{path}: {key} must be a string")
    return value
