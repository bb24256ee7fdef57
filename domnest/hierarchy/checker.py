"""
Hierarchy Checker

Walks a syntax tree and reports every element whose logical parent
cannot legally contain it.

Only INVALID pairs are reported. Unknown tags, dynamic tags and
unresolvable parents are skipped, never flagged.
"""

from dataclasses import dataclass
from typing import Optional

from domnest.core.contracts import InvalidNestingCallback, SyntaxHost
from domnest.hierarchy.resolver import resolve_logical_parent
from domnest.model.engine import ContentModel, get_content_model
from domnest.model.models import Nesting
from domnest.tree.enums import NodeKind
from domnest.tree.host import EstreeHost
from domnest.tree.nodes import SyntaxNode


@dataclass(frozen=True)
class Violation:
    """One invalid (parent, child) pairing."""
    node: SyntaxNode
    parent_tag: str
    child_tag: str

    @property
    def message(self) -> str:
        return error_message(self.parent_tag, self.child_tag)


def error_message(parent_tag: str, child_tag: str) -> str:
    return (
        f"Invalid DOM elements hierarchy: <{child_tag}> "
        f"is not a valid child of <{parent_tag}>."
    )


_default_host = EstreeHost()


def check_tree(
    root: SyntaxNode,
    on_invalid: InvalidNestingCallback,
    *,
    model: Optional[ContentModel] = None,
    host: Optional[SyntaxHost] = None,
) -> int:
    """
    Check every element in ``root`` against the content model.

    Args:
        root: Tree to check (not modified)
        on_invalid: Called as (parent_tag, child_tag, node) per violation
        model: Content model (default: bundled html ruleset)
        host: Node classifier (default: ESTree with React pragma)

    Returns:
        Number of elements with a static tag name that were examined
    """
    model = model or get_content_model()
    host = host or _default_host
    checked = 0

    for node in root.walk():
        if host.node_kind(node) is not NodeKind.ELEMENT:
            continue

        child_tag = host.element_tag(node)
        if child_tag is None:
            continue
        checked += 1

        parent_tag = resolve_logical_parent(node, host)
        if parent_tag is None:
            continue

        if model.is_valid_nesting(parent_tag, child_tag) is Nesting.INVALID:
            on_invalid(parent_tag, child_tag, node)

    return checked


def collect_violations(
    root: SyntaxNode,
    *,
    model: Optional[ContentModel] = None,
    host: Optional[SyntaxHost] = None,
) -> list[Violation]:
    """Check a tree and return its violations in document order."""
    violations: list[Violation] = []

    def record(parent_tag: str, child_tag: str, node: SyntaxNode) -> None:
        violations.append(Violation(node=node, parent_tag=parent_tag, child_tag=child_tag))

    check_tree(root, record, model=model, host=host)
    return violations
