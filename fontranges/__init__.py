"""Count the Unicode codepoints covered by @font-face unicode-range rules."""

from .errors import (
    ConfigError,
    FetchError,
    FontRangesError,
    InvalidRangeError,
    ParseError,
    UnexpectedFontFamilyValueError,
    UnexpectedUnicodeRangeValueError,
)
from .fetch import analyze_google_font
from .fontface import FamilyStats, FontFaceRecord, analyze, extract_font_face
from .ranges import count_range_code_points, range_bounds

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "FamilyStats",
    "FetchError",
    "FontFaceRecord",
    "FontRangesError",
    "InvalidRangeError",
    "ParseError",
    "UnexpectedFontFamilyValueError",
    "UnexpectedUnicodeRangeValueError",
    "analyze",
    "analyze_google_font",
    "count_range_code_points",
    "extract_font_face",
    "range_bounds",
]
