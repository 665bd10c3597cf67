from best_effort_parser.core.exceptions import ConfigError, ParserError, PatternCompileError

__all__ = [
    "ConfigError",
    "ParserError",
    "PatternCompileError",
]
