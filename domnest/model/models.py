"""
Content Model — Data structures for element nesting rules.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional


class Context(str, Enum):
    """
    Structural category a tag establishes for its children.

    A child is tested against its parent's context, so these are also
    the values that may appear in a rule's ``parents`` set.
    """
    HTML = "html"
    HEAD = "head"
    TEXT = "text"
    VOID = "void"
    FLOW = "flow"
    PHRASING = "phrasing"

    # Tables
    TABLE = "table"
    COLGROUP = "colgroup"
    TABLE_SECTION = "table-section"
    TR = "tr"

    # Media / embedded
    PICTURE = "picture"
    VIDEO = "video"
    AUDIO = "audio"
    OBJECT = "object"

    # Forms / lists
    SELECT = "select"
    OPTGROUP = "optgroup"
    MENU = "menu"
    LIST = "list"
    DL = "dl"
    HGROUP = "hgroup"

    @classmethod
    def values(cls) -> frozenset[str]:
        """All context values as plain strings."""
        return frozenset(c.value for c in cls)


class Nesting(str, Enum):
    """
    Outcome of testing a (parent, child) pair.

    UNKNOWN is not VALID: it means the pair cannot be judged statically
    (custom component, tag outside the table). Callers decide what to do
    with it; the hierarchy checker never reports it.
    """
    VALID = "valid"
    INVALID = "invalid"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TagRule:
    """A single content-model entry for one tag name."""
    name: str
    context: Context
    # Contexts and/or literal tag names this tag may appear under.
    # Empty means root-only.
    parents: frozenset[str] = field(default_factory=frozenset)
    # Tag names forbidden as direct parent even if ``parents`` matches
    exclude: frozenset[str] = field(default_factory=frozenset)
    interactive: bool = False
    no_interactive: bool = False
    # Stored for completeness; no propagation semantics attached
    transparent: bool = False

    def allows_parent(self, parent: "TagRule") -> bool:
        """Check the category or literal-name allowance against a parent rule."""
        return parent.context.value in self.parents or parent.name in self.parents


@dataclass(frozen=True)
class Ruleset:
    """
    A complete, immutable content-model table.

    ``rules`` is a read-only mapping of tag name -> TagRule, built once by
    the loader and never modified afterwards.
    """
    name: str
    rules: Mapping[str, TagRule]
    version: str = "1.0"
    description: str = ""
    source: Optional[str] = None

    def get(self, tag: str) -> Optional[TagRule]:
        return self.rules.get(tag)

    def tags(self) -> list[str]:
        """Registered tag names, sorted."""
        return sorted(self.rules)

    def get_rules_by_context(self, context: Context) -> list[TagRule]:
        """All rules establishing the given context."""
        return [r for r in self.rules.values() if r.context == context]

    def __len__(self) -> int:
        return len(self.rules)

    def __contains__(self, tag: object) -> bool:
        return tag in self.rules
