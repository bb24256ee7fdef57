"""
Shared fixtures: an ESTree builder and checking helpers.

Trees are written as plain ESTree dicts, the same shape espree or
@babel/parser would emit, then converted with from_estree.
"""

from typing import Any, Optional

import pytest

from domnest.core.logging import configure_logging
from domnest.hierarchy.checker import collect_violations
from domnest.tree.estree import from_estree
from domnest.tree.host import EstreeHost
from domnest.tree.nodes import SyntaxNode


class Es:
    """Minimal ESTree node constructors."""

    @staticmethod
    def at(node: dict, line: int, column: int = 0) -> dict:
        node["loc"] = {
            "start": {"line": line, "column": column},
            "end": {"line": line, "column": column + 1},
        }
        return node

    @staticmethod
    def ident(name: str) -> dict:
        return {"type": "Identifier", "name": name}

    @staticmethod
    def lit(value: Any) -> dict:
        return {"type": "Literal", "value": value}

    @staticmethod
    def text(value: str) -> dict:
        return {"type": "JSXText", "value": value, "raw": value}

    @classmethod
    def jsx(cls, tag: str, *children: Any) -> dict:
        """<tag>children</tag>; dotted tags become member expressions."""
        if "." in tag:
            obj, prop = tag.split(".", 1)
            name = {
                "type": "JSXMemberExpression",
                "object": {"type": "JSXIdentifier", "name": obj},
                "property": {"type": "JSXIdentifier", "name": prop},
            }
        else:
            name = {"type": "JSXIdentifier", "name": tag}

        kids = [cls.text(c) if isinstance(c, str) else c for c in children]
        return {
            "type": "JSXElement",
            "openingElement": {
                "type": "JSXOpeningElement",
                "name": name,
                "attributes": [],
                "selfClosing": not kids,
            },
            "closingElement": (
                {"type": "JSXClosingElement", "name": dict(name)} if kids else None
            ),
            "children": kids,
        }

    @classmethod
    def jsx_attr(cls, tag: str, attr: str, value: dict) -> dict:
        """<tag attr={value} />"""
        element = cls.jsx(tag)
        element["openingElement"]["attributes"].append({
            "type": "JSXAttribute",
            "name": {"type": "JSXIdentifier", "name": attr},
            "value": cls.expr(value),
        })
        return element

    @staticmethod
    def fragment(*children: dict) -> dict:
        return {
            "type": "JSXFragment",
            "openingFragment": {"type": "JSXOpeningFragment"},
            "closingFragment": {"type": "JSXClosingFragment"},
            "children": list(children),
        }

    @staticmethod
    def expr(expression: dict) -> dict:
        return {"type": "JSXExpressionContainer", "expression": expression}

    @staticmethod
    def logical(left: dict, right: dict, operator: str = "&&") -> dict:
        return {"type": "LogicalExpression", "operator": operator, "left": left, "right": right}

    @staticmethod
    def cond(test: dict, consequent: dict, alternate: dict) -> dict:
        return {
            "type": "ConditionalExpression",
            "test": test,
            "consequent": consequent,
            "alternate": alternate,
        }

    @staticmethod
    def ret(argument: dict) -> dict:
        return {"type": "ReturnStatement", "argument": argument}

    @staticmethod
    def block(*statements: dict) -> dict:
        return {"type": "BlockStatement", "body": list(statements)}

    @classmethod
    def arrow(cls, body: dict, *params: str) -> dict:
        return {
            "type": "ArrowFunctionExpression",
            "params": [cls.ident(p) for p in params],
            "body": body,
            "expression": body["type"] != "BlockStatement",
        }

    @classmethod
    def function(cls, body: dict, *params: str) -> dict:
        return {
            "type": "FunctionExpression",
            "id": None,
            "params": [cls.ident(p) for p in params],
            "body": body,
        }

    @staticmethod
    def member(obj: dict, prop: str, computed: bool = False) -> dict:
        return {
            "type": "MemberExpression",
            "object": obj,
            "property": {"type": "Identifier", "name": prop},
            "computed": computed,
        }

    @staticmethod
    def call(callee: dict, *arguments: dict) -> dict:
        return {"type": "CallExpression", "callee": callee, "arguments": list(arguments)}

    @classmethod
    def map_call(cls, collection: str, callback: dict, method: str = "map") -> dict:
        """collection.map(callback)"""
        return cls.call(cls.member(cls.ident(collection), method), callback)

    @classmethod
    def create(cls, tag: Any, *children: dict, pragma: Optional[str] = "React") -> dict:
        """React.createElement(tag, {}, ...children); a dict tag is passed as-is."""
        callee = cls.member(cls.ident(pragma), "createElement") if pragma else cls.ident("createElement")
        tag_node = tag if isinstance(tag, dict) else cls.lit(tag)
        props = {"type": "ObjectExpression", "properties": []}
        return cls.call(callee, tag_node, props, *children)

    @staticmethod
    def program(*expressions: dict) -> dict:
        return {
            "type": "Program",
            "sourceType": "module",
            "body": [{"type": "ExpressionStatement", "expression": e} for e in expressions],
        }


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Keep test output free of check_complete lines."""
    configure_logging(level="silent", force=True)


@pytest.fixture
def es():
    return Es


@pytest.fixture
def build():
    """Convert an ESTree expression (wrapped in a Program) to a SyntaxNode tree."""
    def _build(*expressions: dict) -> SyntaxNode:
        return from_estree(Es.program(*expressions))
    return _build


@pytest.fixture
def host():
    return EstreeHost()


@pytest.fixture
def find(host):
    """Find the first element node with the given literal tag."""
    def _find(root: SyntaxNode, tag: str) -> SyntaxNode:
        for node in root.walk():
            if node.type in ("JSXElement", "CallExpression") and host.element_tag(node) == tag:
                return node
        raise LookupError(f"no <{tag}> in tree")
    return _find


@pytest.fixture
def pairs(build):
    """Check expressions and return [(parent_tag, child_tag), ...]."""
    def _pairs(*expressions: dict, **kwargs) -> list[tuple[str, str]]:
        root = build(*expressions)
        return [(v.parent_tag, v.child_tag) for v in collect_violations(root, **kwargs)]
    return _pairs
