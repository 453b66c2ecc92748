"""
tabparse: strict, configurable-dialect parsing of delimited text.

>>> from tabparse import parse
>>> parse(b'name,city\\nPaul,"Montreal, QC"\\n')
[['name', 'city'], ['Paul', 'Montreal, QC']]
"""

from .errors import (
    FieldDecodeError,
    QuoteError,
    TabularParseError,
    UnexpectedQuoteError,
    UnexpectedTrailingDataError,
    UnmatchedQuoteError,
    WrongFieldCountError,
)
from .models import ParserConfig
from .parser import TabularParser, iter_records, parse

__version__ = "0.1.0"

__all__ = [
    "FieldDecodeError",
    "ParserConfig",
    "QuoteError",
    "TabularParseError",
    "TabularParser",
    "UnexpectedQuoteError",
    "UnexpectedTrailingDataError",
    "UnmatchedQuoteError",
    "WrongFieldCountError",
    "iter_records",
    "parse",
    "__version__",
]
