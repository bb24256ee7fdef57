#!/usr/bin/env python3
"""
Nesting Check Example

Demonstrates the two layers of domnest:
- Querying the content model for single parent/child pairs
- Checking a whole ESTree tree with the engine

The tree below is what espree emits (locations trimmed) for:

    <table>
      {rows.map((row) => <td>{row}</td>)}
    </table>

Usage:
    python examples/nesting_example.py
"""

from domnest.core.context import CheckRequest
from domnest.core.engine import Engine
from domnest.core.logging import configure_logging
from domnest.model.engine import is_valid_nesting
from domnest.report.format import format_text
from domnest.tree import from_estree


def td(line, column):
    return {
        "type": "JSXElement",
        "loc": {"start": {"line": line, "column": column}},
        "openingElement": {
            "type": "JSXOpeningElement",
            "name": {"type": "JSXIdentifier", "name": "td"},
            "attributes": [],
            "selfClosing": False,
        },
        "closingElement": {
            "type": "JSXClosingElement",
            "name": {"type": "JSXIdentifier", "name": "td"},
        },
        "children": [{
            "type": "JSXExpressionContainer",
            "expression": {"type": "Identifier", "name": "row"},
        }],
    }


TREE = {
    "type": "Program",
    "sourceType": "module",
    "body": [{
        "type": "ExpressionStatement",
        "expression": {
            "type": "JSXElement",
            "loc": {"start": {"line": 1, "column": 0}},
            "openingElement": {
                "type": "JSXOpeningElement",
                "name": {"type": "JSXIdentifier", "name": "table"},
                "attributes": [],
                "selfClosing": False,
            },
            "closingElement": {
                "type": "JSXClosingElement",
                "name": {"type": "JSXIdentifier", "name": "table"},
            },
            "children": [{
                "type": "JSXExpressionContainer",
                "expression": {
                    "type": "CallExpression",
                    "callee": {
                        "type": "MemberExpression",
                        "object": {"type": "Identifier", "name": "rows"},
                        "property": {"type": "Identifier", "name": "map"},
                        "computed": False,
                    },
                    "arguments": [{
                        "type": "ArrowFunctionExpression",
                        "params": [{"type": "Identifier", "name": "row"}],
                        "body": td(2, 21),
                        "expression": True,
                    }],
                },
            }],
        },
    }],
}


def main():
    configure_logging(level="silent")

    print("=" * 70)
    print("PAIR QUERIES")
    print("=" * 70)
    for parent, child in [("tr", "td"), ("table", "td"), ("table", "MyRow"), ("br", "span")]:
        verdict = is_valid_nesting(parent, child)
        print(f"  <{parent}> > <{child}>: {verdict.value}")

    print()
    print("=" * 70)
    print("TREE CHECK")
    print("=" * 70)
    engine = Engine()
    result = engine.check(CheckRequest(tree=from_estree(TREE)))
    print(f"  elements checked: {result.elements_checked}")
    print(f"  status: {result.status.value}")
    print()
    print(format_text([result]))


if __name__ == "__main__":
    main()
