"""
Contracts — Type definitions and interfaces for checker components.
"""

from typing import Callable, Optional, Protocol

from domnest.tree.enums import NodeKind
from domnest.tree.nodes import SyntaxNode


class SyntaxHost(Protocol):
    """Host-specific node classification injected into the checker."""

    def node_kind(self, node: SyntaxNode) -> NodeKind:
        """Classify a node into one of the closed NodeKind members."""
        ...

    def element_tag(self, node: SyntaxNode) -> Optional[str]:
        """Literal tag name of an ELEMENT node, None if not static."""
        ...


# Called once per invalid pairing: (parent_tag, child_tag, node)
InvalidNestingCallback = Callable[[str, str, SyntaxNode], None]
