"""
Hierarchy Module

Element nesting checks over syntax trees:
- resolve_logical_parent: nearest enclosing element, skipping wrappers
- check_tree / collect_violations: report invalid nestings
"""

from domnest.hierarchy.checker import (
    Violation,
    check_tree,
    collect_violations,
    error_message,
)
from domnest.hierarchy.resolver import TRANSPARENT_KINDS, resolve_logical_parent

__all__ = [
    "TRANSPARENT_KINDS",
    "Violation",
    "check_tree",
    "collect_violations",
    "error_message",
    "resolve_logical_parent",
]
