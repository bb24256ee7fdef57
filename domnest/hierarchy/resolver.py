"""
Logical-Parent Resolver

Finds the nearest real element enclosing a node. Conditionals,
callbacks, blocks and ``.map`` calls sit between an element and its
children in the syntax tree but render nothing themselves, so the walk
passes through them.
"""

from typing import Optional

from domnest.core.contracts import SyntaxHost
from domnest.tree.enums import NodeKind
from domnest.tree.nodes import SyntaxNode

# Kinds the walk passes through
TRANSPARENT_KINDS = frozenset({NodeKind.WRAPPER, NodeKind.MAPPING_CALL})


def resolve_logical_parent(node: SyntaxNode, host: SyntaxHost) -> Optional[str]:
    """
    Return the tag name of the logical parent element of ``node``.

    Returns None when the nearest non-transparent ancestor is not an
    element, is an element with a dynamic tag, or when the walk runs
    off the top of the tree. One parent link per step, no backtracking.
    """
    current = node.parent

    while current is not None:
        kind = host.node_kind(current)

        if kind in TRANSPARENT_KINDS:
            current = current.parent
        elif kind is NodeKind.ELEMENT:
            return host.element_tag(current)
        elif kind is NodeKind.OTHER:
            return None
        else:
            raise AssertionError(f"unhandled node kind: {kind!r}")

    return None
