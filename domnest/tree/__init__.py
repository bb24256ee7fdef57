"""
Tree — Read-only syntax trees handed to the hierarchy checker.

Trees come from an external parser as ESTree JSON; this package links
them up and classifies their nodes.
"""

from domnest.tree.enums import WRAPPER_TYPES, NodeKind
from domnest.tree.estree import from_estree
from domnest.tree.host import EstreeHost
from domnest.tree.nodes import SyntaxNode
from domnest.tree.serialization import load_tree, loads_tree

__all__ = [
    "EstreeHost",
    "NodeKind",
    "SyntaxNode",
    "WRAPPER_TYPES",
    "from_estree",
    "load_tree",
    "loads_tree",
]
