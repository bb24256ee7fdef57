"""
Tree Enums — Node kinds and the fixed wrapper vocabulary.
"""

from enum import Enum


class NodeKind(str, Enum):
    """
    Closed set of node kinds the hierarchy checker distinguishes.

    Every host node maps to exactly one kind; the resolver handles each
    member explicitly.
    """

    # JSX element or a createElement call
    ELEMENT = "element"
    # Collection transform (``items.map(...)``) whose results replace
    # the call site
    MAPPING_CALL = "mapping_call"
    # Grouping/control construct that renders nothing itself
    WRAPPER = "wrapper"
    # Anything else; stops the parent walk
    OTHER = "other"


# ESTree node types that never constitute an element boundary
WRAPPER_TYPES = frozenset({
    "LogicalExpression",
    "ConditionalExpression",
    "ReturnStatement",
    "BlockStatement",
    "FunctionExpression",
    "JSXExpressionContainer",
    "ArrowFunctionExpression",
})

# Literal node types carrying a tag name in createElement("tag", ...)
STRING_LITERAL_TYPES = frozenset({"Literal", "StringLiteral"})
