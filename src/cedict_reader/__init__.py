"""CC-CEDICT record parser with V1/V2 pinyin decoding."""

from .errors import CedictParseError, SkippedLineError
from .models import Entry, FormatVersion, PinyinWord, Syllable, SyllableKind, Tone
from .parser import LineParser, ParseResult, new_parser, parse_line

__all__ = [
    "CedictParseError",
    "SkippedLineError",
    "Entry",
    "FormatVersion",
    "PinyinWord",
    "Syllable",
    "SyllableKind",
    "Tone",
    "LineParser",
    "ParseResult",
    "new_parser",
    "parse_line",
]
