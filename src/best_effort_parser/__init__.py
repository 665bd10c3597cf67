"""
best_effort_parser

Best-effort extraction of personal names and calendar dates from loosely
structured free text.

    >>> NameParser.basic().parse("Gates, Bill III").suffix
    'III'
    >>> DateParser.basic().parse("January - March 2010")
    [ParsedDate(year=2010, month=1, day=None), ParsedDate(year=2010, month=3, day=None)]
"""

from best_effort_parser.core.exceptions import ConfigError, ParserError, PatternCompileError
from best_effort_parser.dates.models import DatePart, DetectedDate, ParsedDate
from best_effort_parser.dates.parser import DateParser
from best_effort_parser.names.parsed_name import ParsedName
from best_effort_parser.names.parser import NameParser
from best_effort_parser.patterns import CompactDateFormat

__version__ = "0.1.0"

__all__ = [
    "CompactDateFormat",
    "ConfigError",
    "DateParser",
    "DatePart",
    "DetectedDate",
    "NameParser",
    "ParsedDate",
    "ParsedName",
    "ParserError",
    "PatternCompileError",
]
