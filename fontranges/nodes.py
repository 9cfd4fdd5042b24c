"""Typed CSS syntax tree and a pre-order walker with subtree skipping."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Union


@dataclass
class StyleSheet:
    children: list[Node] = field(default_factory=list)


@dataclass
class Atrule:
    """An at-rule. ``block`` is None for statements such as ``@import``."""
    name: str
    prelude: str = ""
    block: list[Node] | None = None


@dataclass
class Rule:
    """A qualified rule (selector + block)."""
    prelude: str
    block: list[Node] = field(default_factory=list)


@dataclass
class Declaration:
    property: str
    value: Value | Raw
    important: bool = False


@dataclass
class Value:
    children: list[Node] = field(default_factory=list)


@dataclass
class String:
    value: str


@dataclass
class UnicodeRange:
    value: str  # raw token text, e.g. 'U+0000-00FF'


@dataclass
class Identifier:
    name: str


@dataclass
class Operator:
    value: str


@dataclass
class Raw:
    value: str


Node = Union[
    StyleSheet, Atrule, Rule, Declaration, Value,
    String, UnicodeRange, Identifier, Operator, Raw,
]

#: Returned from a walk callback to skip the children of the current node.
SKIP = object()

Visitor = Callable[[Node], object]


def children(node: Node) -> Iterator[Node]:
    """Yield the direct children of a node in document order."""
    if isinstance(node, (StyleSheet, Value)):
        yield from node.children
    elif isinstance(node, (Atrule, Rule)):
        if node.block:
            yield from node.block
    elif isinstance(node, Declaration):
        yield node.value


def walk(node: Node, visit: Visitor) -> None:
    """Call ``visit`` on ``node`` and its descendants, depth first.

    If ``visit`` returns SKIP the node's descendants are not visited.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        if visit(current) is SKIP:
            continue
        stack.extend(reversed(list(children(current))))
