class ParserError(Exception):
    """Base exception for parser configuration failures."""


class PatternCompileError(ParserError, ValueError):
    """Raised when a classification pattern cannot be compiled or used."""


class ConfigError(ParserError):
    """Raised when the configuration file is missing or malformed."""
