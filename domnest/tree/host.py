"""
ESTree Host — Node classification for JSX and createElement trees.

Answers the two host-specific questions the hierarchy checker cannot
answer on its own: what kind of node is this, and which literal tag
name (if any) does it create.
"""

from dataclasses import dataclass
from typing import Optional

from domnest.tree.enums import STRING_LITERAL_TYPES, WRAPPER_TYPES, NodeKind
from domnest.tree.nodes import SyntaxNode


@dataclass(frozen=True)
class EstreeHost:
    """
    Default host for ESTree trees.

    A call is a creation expression when its callee is
    ``<pragma>.<name>`` or a bare ``<name>`` for one of the configured
    creation function names. A call is a mapping call when its callee is
    a non-computed member access to one of ``map_methods``.
    """

    pragma: str = "React"
    create_element: tuple[str, ...] = ("createElement",)
    map_methods: tuple[str, ...] = ("map",)

    def node_kind(self, node: SyntaxNode) -> NodeKind:
        if node.type == "JSXElement":
            return NodeKind.ELEMENT
        if node.type in WRAPPER_TYPES:
            return NodeKind.WRAPPER
        if node.type == "CallExpression":
            if self.is_create_element(node):
                return NodeKind.ELEMENT
            if self.is_mapping_call(node):
                return NodeKind.MAPPING_CALL
        return NodeKind.OTHER

    def element_tag(self, node: SyntaxNode) -> Optional[str]:
        """
        Literal tag name created by an element node.

        None for dynamic tags (variables, member expressions, namespaced
        names, non-string literals) and for malformed nodes.
        """
        if node.type == "JSXElement":
            opening = node.node("openingElement")
            name = opening.node("name") if opening else None
            if name is None or name.type != "JSXIdentifier":
                return None
            return _string(name.get("name"))

        if node.type == "CallExpression" and self.is_create_element(node):
            args = node.nodes("arguments")
            # createElement() must not crash the checker
            if not args or args[0].type not in STRING_LITERAL_TYPES:
                return None
            return _string(args[0].get("value"))

        return None

    def is_create_element(self, node: SyntaxNode) -> bool:
        callee = node.node("callee")
        if callee is None:
            return False
        if callee.type == "Identifier":
            return callee.get("name") in self.create_element
        if callee.type == "MemberExpression" and not callee.get("computed"):
            obj = callee.node("object")
            prop = callee.node("property")
            return (
                obj is not None
                and prop is not None
                and obj.type == "Identifier"
                and obj.get("name") == self.pragma
                and prop.type == "Identifier"
                and prop.get("name") in self.create_element
            )
        return False

    def is_mapping_call(self, node: SyntaxNode) -> bool:
        callee = node.node("callee")
        if callee is None or callee.type != "MemberExpression" or callee.get("computed"):
            return False
        prop = callee.node("property")
        return (
            prop is not None
            and prop.type == "Identifier"
            and prop.get("name") in self.map_methods
        )


def _string(value: object) -> Optional[str]:
    return value if isinstance(value, str) and value else None
