from __future__ import annotations


class TextualyserError(RuntimeError):
    """Base class for every error raised by the analysis core."""


class ConfigurationError(TextualyserError, ValueError):
    """Raised when an option set or configuration value is invalid."""


class FileError(TextualyserError):
    """Raised when the source or log file cannot be located, read or written."""


class ParseError(FileError):
    """Raised when the source file exists but its contents cannot be decoded."""


class InvalidInputError(TextualyserError, ValueError):
    """Raised when a matcher pattern contains symbols outside its alphabet."""
