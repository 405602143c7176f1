"""Unit tests for settings loading."""

import pytest
import yaml
from unittest.mock import Mock

from tddintro.utils.config import load_settings, Settings, DEFAULT_BOOKS, DEFAULT_DELIMITER
from tddintro.core.protocols import FileSystemService, ConfigLoader
from tddintro.core.exceptions import ConfigError


class TestLoadSettings:
    """Test load_settings() with injected filesystem and loader."""

    def setup_method(self):
        self.fs = Mock(spec=FileSystemService)
        self.loader = Mock(spec=ConfigLoader)
        self.fs.exists.return_value = True

    def load(self, data):
        self.loader.load_yaml.return_value = data
        return load_settings("settings.yaml", filesystem=self.fs, config_loader=self.loader)

    def test_no_path_returns_defaults(self):
        settings = load_settings()

        assert settings == Settings()
        assert settings.books == DEFAULT_BOOKS
        assert settings.delimiter == DEFAULT_DELIMITER
        assert settings.time_format == "%H:%M"

    def test_default_books_are_a_fresh_list(self):
        settings = load_settings()
        settings.books.append("Extra")

        assert "Extra" not in DEFAULT_BOOKS

    def test_overrides_from_file(self):
        settings = self.load({
            'library': {'books': ['Dune'], 'time_format': '%I:%M %p'},
            'joiner': {'delimiter': '-'},
        })

        assert settings.books == ['Dune']
        assert settings.time_format == '%I:%M %p'
        assert settings.delimiter == '-'

    def test_empty_book_list_is_allowed(self):
        assert self.load({'library': {'books': []}}).books == []

    def test_partial_file_keeps_remaining_defaults(self):
        settings = self.load({'joiner': {'delimiter': ''}})

        assert settings.delimiter == ''
        assert settings.books == DEFAULT_BOOKS

    def test_empty_document_returns_defaults(self):
        assert self.load(None) == Settings()

    def test_missing_file_raises(self):
        self.fs.exists.return_value = False

        with pytest.raises(ConfigError, match="Config file not found"):
            load_settings("missing.yaml", filesystem=self.fs, config_loader=self.loader)
        self.loader.load_yaml.assert_not_called()

    def test_invalid_yaml_raises_config_error(self):
        self.loader.load_yaml.side_effect = yaml.YAMLError("bad indent")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings("settings.yaml", filesystem=self.fs, config_loader=self.loader)

    @pytest.mark.parametrize("error", [
        IsADirectoryError(21, "Is a directory"),
        PermissionError(13, "Permission denied"),
        UnicodeDecodeError('utf-8', b'\xff', 0, 1, 'invalid start byte'),
    ])
    def test_unreadable_file_raises_config_error(self, error):
        self.loader.load_yaml.side_effect = error

        with pytest.raises(ConfigError, match="Could not read settings.yaml") as exc_info:
            load_settings("settings.yaml", filesystem=self.fs, config_loader=self.loader)

        assert exc_info.value.__cause__ is error

    @pytest.mark.parametrize("data", [
        ["not", "a", "mapping"],
        {'library': 'books'},
        {'library': {'books': 'Dune'}},
        {'library': {'books': ['Dune', 3]}},
        {'library': {'time_format': 12}},
        {'joiner': {'delimiter': None}},
    ])
    def test_malformed_settings_raise_config_error(self, data):
        with pytest.raises(ConfigError):
            self.load(data)
