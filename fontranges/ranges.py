"""Unicode-range token parsing: 'U+0600-06FF', 'U+4??', 'U+4E00'."""

from __future__ import annotations

import re

from .errors import InvalidRangeError

# Checked in this order. The forms are disjoint: only a bounded range has a
# hyphen and only a wildcard has '?'.
_BOUNDED_RE = re.compile(r"u\+([0-9a-f]+)-([0-9a-f]+)", re.IGNORECASE)
_WILDCARD_RE = re.compile(r"u\+([0-9a-f]*)(\?+)", re.IGNORECASE)
_SINGLE_RE = re.compile(r"u\+([0-9a-f]+)", re.IGNORECASE)


def range_bounds(token: str) -> tuple[int, int]:
    """Return the inclusive (first, last) codepoints a unicode-range token covers.

    Wildcards expand to the full block: 'U+4??' -> (0x400, 0x4FF).
    Raises InvalidRangeError for anything that is not one of the three
    unicode-range forms, or for a bounded range whose start is after its end.
    """
    m = _BOUNDED_RE.fullmatch(token)
    if m:
        start = int(m.group(1), 16)
        end = int(m.group(2), 16)
        if start > end:
            raise InvalidRangeError(token, f"start U+{start:04X} is after end U+{end:04X}")
        return start, end

    m = _WILDCARD_RE.fullmatch(token)
    if m:
        digits, wildcards = m.group(1), m.group(2)
        start = int(digits + "0" * len(wildcards), 16)
        end = int(digits + "F" * len(wildcards), 16)
        return start, end

    m = _SINGLE_RE.fullmatch(token)
    if m:
        cp = int(m.group(1), 16)
        return cp, cp

    raise InvalidRangeError(token)


def count_range_code_points(token: str) -> int:
    """Count the codepoints covered by one unicode-range token.

    A wildcard token covers 16 ** (number of '?') codepoints however many
    digits precede the wildcards.
    """
    start, end = range_bounds(token)
    return end - start + 1
