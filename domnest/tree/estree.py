"""
ESTree Adapter — Build SyntaxNode trees from ESTree JSON.

Accepts the JSON emitted by espree/acorn-jsx and by @babel/parser
(including Babel's ``File`` wrapper). Any mapping with a string
``type`` is a node; lists containing nodes are node lists; everything
else is kept as a scalar attribute. The input is never modified.
"""

from typing import Any, Optional

from domnest.tree.nodes import SyntaxNode

# Keys holding position data rather than syntax
_POSITION_KEYS = frozenset({"loc", "range", "start", "end"})


def is_estree_node(value: Any) -> bool:
    return isinstance(value, dict) and isinstance(value.get("type"), str)


def from_estree(data: dict) -> SyntaxNode:
    """
    Convert an ESTree dictionary into a linked SyntaxNode tree.

    Conversion is iterative, so arbitrarily deep trees are fine.

    Raises:
        ValueError: If the top-level value is not an ESTree node
    """
    if not is_estree_node(data):
        raise ValueError("not an ESTree node: missing string 'type'")

    root = _shallow(data, None)
    pending = [(data, root)]

    while pending:
        raw, node = pending.pop()
        for key, value in raw.items():
            if key == "type" or key in _POSITION_KEYS:
                continue
            if is_estree_node(value):
                child = _shallow(value, node)
                node.fields[key] = child
                pending.append((value, child))
            elif isinstance(value, list) and any(is_estree_node(v) for v in value):
                children = []
                for item in value:
                    # Array holes and stray scalars carry no structure
                    if not is_estree_node(item):
                        continue
                    child = _shallow(item, node)
                    children.append(child)
                    pending.append((item, child))
                node.fields[key] = children
            else:
                node.attrs[key] = value

    return root


def _shallow(raw: dict, parent: Optional[SyntaxNode]) -> SyntaxNode:
    line, column = _position(raw)
    return SyntaxNode(type=raw["type"], parent=parent, line=line, column=column)


def _position(raw: dict) -> tuple[Optional[int], Optional[int]]:
    """Start line (1-based) and column (0-based) from ``loc``, if present."""
    loc = raw.get("loc")
    if not isinstance(loc, dict):
        return None, None
    start = loc.get("start")
    if not isinstance(start, dict):
        return None, None
    line = start.get("line")
    column = start.get("column")
    return (
        line if isinstance(line, int) else None,
        column if isinstance(column, int) else None,
    )
