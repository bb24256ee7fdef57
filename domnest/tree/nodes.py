"""
Syntax Nodes — Read-only tree with parent links.

A SyntaxNode wraps one host AST node. Child nodes are kept per field in
source order; everything else is a scalar attribute. Nodes are built
once by an adapter and never modified by the checker.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Union

NodeField = Union["SyntaxNode", list["SyntaxNode"]]


@dataclass(eq=False)
class SyntaxNode:
    """A host syntax node with a parent link."""

    type: str
    attrs: dict[str, Any] = field(default_factory=dict)
    fields: dict[str, NodeField] = field(default_factory=dict)
    parent: Optional[SyntaxNode] = field(default=None, repr=False)
    line: Optional[int] = None
    column: Optional[int] = None

    def get(self, name: str) -> Any:
        """Return a child field or scalar attribute, None if absent."""
        if name in self.fields:
            return self.fields[name]
        return self.attrs.get(name)

    def node(self, name: str) -> Optional[SyntaxNode]:
        """Return a single-node field, None if absent or a list."""
        value = self.fields.get(name)
        return value if isinstance(value, SyntaxNode) else None

    def nodes(self, name: str) -> list[SyntaxNode]:
        """Return a list field, empty if absent or a single node."""
        value = self.fields.get(name)
        return value if isinstance(value, list) else []

    def children(self) -> list[SyntaxNode]:
        """All direct child nodes in field order."""
        result: list[SyntaxNode] = []
        for value in self.fields.values():
            if isinstance(value, list):
                result.extend(value)
            else:
                result.append(value)
        return result

    def walk(self) -> Iterator[SyntaxNode]:
        """Pre-order traversal without recursion."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))

    def ancestors(self) -> Iterator[SyntaxNode]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    @property
    def location(self) -> str:
        if self.line is None:
            return "?"
        if self.column is None:
            return str(self.line)
        return f"{self.line}:{self.column}"
