"""
Exceptions raised by the tddintro core and its console shell.
"""


class TddIntroError(Exception):
    """Base class for all tddintro errors."""
    pass


class InputReadError(TddIntroError):
    """
    Raised by an input source that cannot produce a line.

    Library operations recover from this locally: the failure is logged
    and the catalog is left unchanged.
    """
    pass


class ConfigError(TddIntroError):
    """
    Raised when a settings file is missing or malformed.

    Examples:
        - Path given with --config does not exist
        - Document is not a mapping
        - library.books is not a list of strings
    """
    pass
