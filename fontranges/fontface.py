"""@font-face extraction and per-family unicode-range aggregation."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from .css import parse_stylesheet
from .errors import UnexpectedFontFamilyValueError, UnexpectedUnicodeRangeValueError
from .nodes import SKIP, Atrule, Declaration, Node, String, StyleSheet, UnicodeRange, Value, walk
from .ranges import count_range_code_points

log = logging.getLogger(__name__)

#: font-family -> codepoint count of each of its @font-face rules, in document order
FamilyStats = dict[str, list[int]]


@dataclass
class FontFaceRecord:
    font_family: str | None = None
    unicode_ranges: list[str] = field(default_factory=list)


def extract_font_face(rule: Atrule) -> FontFaceRecord:
    """Collect the font-family and unicode-range tokens of one @font-face rule.

    When font-family is declared more than once, the last declaration wins.
    Nested at-rules are not inspected.
    """
    record = FontFaceRecord()

    def visit(node: Node):
        if node is not rule and isinstance(node, Atrule):
            return SKIP
        if not isinstance(node, Declaration):
            return None

        if node.property == "font-family":
            value = node.value
            if (
                not isinstance(value, Value)
                or len(value.children) != 1
                or not isinstance(value.children[0], String)
            ):
                raise UnexpectedFontFamilyValueError(
                    f"Unexpected value for `font-family`: {_describe(value)}"
                )
            record.font_family = value.children[0].value
        elif node.property == "unicode-range":
            value = node.value
            if not isinstance(value, Value):
                raise UnexpectedUnicodeRangeValueError(
                    f"Unexpected value for `unicode-range`: {value.value!r}"
                )
            record.unicode_ranges.extend(
                child.value for child in value.children if isinstance(child, UnicodeRange)
            )
        return SKIP

    walk(rule, visit)
    return record


def _describe(value) -> str:
    if isinstance(value, Value):
        kinds = ", ".join(type(child).__name__ for child in value.children)
        return f"[{kinds}]"
    return repr(value.value)


def iter_font_faces(sheet: StyleSheet) -> Iterator[FontFaceRecord]:
    """Yield a record for every @font-face rule in document order."""
    rules: list[Atrule] = []

    def visit(node: Node):
        if isinstance(node, Atrule) and node.name == "font-face":
            rules.append(node)
            return SKIP
        return None

    walk(sheet, visit)
    for rule in rules:
        yield extract_font_face(rule)


def analyze_stylesheet(sheet: StyleSheet) -> FamilyStats:
    """Sum unicode-range codepoints per @font-face rule, grouped by font-family.

    Rules without a font-family are dropped without counting their ranges.
    Overlapping ranges are not deduplicated.
    """
    stats: FamilyStats = {}
    for record in iter_font_faces(sheet):
        if record.font_family is None:
            log.debug(
                "Dropping @font-face without font-family (%d ranges)",
                len(record.unicode_ranges),
            )
            continue
        total = sum(count_range_code_points(r) for r in record.unicode_ranges)
        log.debug(
            "@font-face %r: %d ranges, %d codepoints",
            record.font_family, len(record.unicode_ranges), total,
        )
        stats.setdefault(record.font_family, []).append(total)
    return stats


def analyze(css: str) -> FamilyStats:
    """Parse CSS and count the unicode-range codepoints of each @font-face.

    Returns {font-family: [count per rule, ...]}. Any malformed font-family,
    unicode-range value or range token aborts the whole analysis.
    """
    stats = analyze_stylesheet(parse_stylesheet(css))
    log.info("Analyzed %d font families", len(stats))
    return stats
