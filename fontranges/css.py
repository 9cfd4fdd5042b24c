"""tinycss2 adapter: CSS text -> typed syntax tree (see nodes.py)."""

from __future__ import annotations

import logging
import re

import tinycss2

from .errors import ParseError
from .nodes import (
    Atrule,
    Declaration,
    Identifier,
    Node,
    Operator,
    Raw,
    Rule,
    String,
    StyleSheet,
    UnicodeRange,
    Value,
)

log = logging.getLogger(__name__)

# Everything that reads as part of one unicode-range token, valid or not, so
# the counter sees 'U+0200-0100' or 'U+12G4' whole and can reject it.
_UNICODE_RANGE_RE = re.compile(r"[uU]\+[0-9A-Za-z?]*(?:-[0-9A-Za-z?]*)*")

_SKIPPED_TOKENS = ("whitespace", "comment")


class _Source:
    """Maps tinycss2 (line, column) positions back to offsets in the CSS text."""

    def __init__(self, css: str) -> None:
        # Same preprocessing tinycss2 applies before tokenizing
        self.text = (
            css.replace("\0", "\uFFFD")
            .replace("\r\n", "\n").replace("\r", "\n").replace("\f", "\n")
        )
        self._line_starts = [0]
        for i, ch in enumerate(self.text):
            if ch == "\n":
                self._line_starts.append(i + 1)

    def offset(self, token) -> int:
        return self._line_starts[token.source_line - 1] + token.source_column - 1

    def unicode_range_at(self, token) -> str | None:
        """Raw unicode-range text starting at token, or None if it is not one."""
        m = _UNICODE_RANGE_RE.match(self.text, self.offset(token))
        return m.group() if m else None

    def end(self, token) -> int:
        """Offset just past the text of token."""
        if token.type == "unicode-range":
            # serializes as numbers, not as written
            raw = self.unicode_range_at(token)
            if raw is not None:
                return self.offset(token) + len(raw)
        return self.offset(token) + len(tinycss2.serialize([token]))


def parse_stylesheet(css: str) -> StyleSheet:
    """Parse CSS text into a StyleSheet tree.

    Raises ParseError if the input is not text. Anything tinycss2 could not
    read as a rule, at the top level or inside a block, is kept as a Raw node.
    """
    if not isinstance(css, str):
        raise ParseError(f"Expected CSS text, got {type(css).__name__}")

    source = _Source(css)
    sheet = StyleSheet()
    for rule in tinycss2.parse_stylesheet(css, skip_comments=True, skip_whitespace=True):
        if rule.type == "error":
            log.debug("Ignoring invalid CSS at line %d: %s", rule.source_line, rule.message)
            sheet.children.append(Raw(rule.message))
            continue
        sheet.children.append(_convert_rule(rule, source))
    log.debug("Parsed stylesheet: %d top-level rules", len(sheet.children))
    return sheet


def _convert_rule(rule, source: _Source) -> Node:
    if rule.type == "at-rule":
        block = None
        if rule.content is not None:
            block = _convert_block(rule.content, source)
        return Atrule(
            name=rule.at_keyword,
            prelude=tinycss2.serialize(rule.prelude).strip(),
            block=block,
        )
    if rule.type == "qualified-rule":
        return Rule(
            prelude=tinycss2.serialize(rule.prelude).strip(),
            block=_convert_block(rule.content, source),
        )
    return Raw(tinycss2.serialize([rule]))


def _convert_block(content, source: _Source) -> list[Node]:
    block: list[Node] = []
    items = tinycss2.parse_blocks_contents(content, skip_comments=True, skip_whitespace=True)
    for item in items:
        if item.type == "declaration":
            block.append(Declaration(
                property=item.name,
                value=_convert_value(item.value, source),
                important=item.important,
            ))
        elif item.type == "error":
            log.debug("Ignoring invalid block content at line %d: %s", item.source_line, item.message)
            block.append(Raw(item.message))
        else:
            block.append(_convert_rule(item, source))
    return block


def _convert_value(tokens, source: _Source) -> Value | Raw:
    if any(token.type == "error" for token in tokens):
        return Raw(tinycss2.serialize(tokens).strip())

    tokens = [token for token in tokens if token.type not in _SKIPPED_TOKENS]
    value = Value()
    i = 0
    while i < len(tokens):
        token = tokens[i]
        raw = source.unicode_range_at(token)
        if raw is None:
            value.children.append(_convert_component(token))
            i += 1
            continue
        # Everything up to the next comma is one range item, however tinycss2
        # split it (ident, number, dimension...). Leftover text stays in the
        # raw token so the counter rejects it.
        start = source.offset(token)
        end = start + len(raw)
        i += 1
        while i < len(tokens) and not _is_comma(tokens[i]):
            end = max(end, source.end(tokens[i]))
            i += 1
        value.children.append(UnicodeRange(source.text[start:end]))
    return value


def _is_comma(token) -> bool:
    return token.type == "literal" and token.value == ","


def _convert_component(token) -> Node:
    if token.type == "string":
        return String(token.value)
    if token.type == "ident":
        return Identifier(token.value)
    if token.type == "literal":
        return Operator(token.value)
    return Raw(tinycss2.serialize([token]))
