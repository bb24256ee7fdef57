"""
Content Model Engine — Deterministic nesting evaluation.

Answers one question: may <child> appear directly inside <parent>?
The answer is VALID, INVALID or UNKNOWN; unknown tags (custom
components, anything not in the table) are never judged.
"""

from pathlib import Path
from typing import Optional

from domnest.model.loader import get_ruleset, load_ruleset_from_path
from domnest.model.models import Context, Nesting, Ruleset, TagRule


class ContentModel:
    """
    Read-only view over a ruleset with the nesting predicate.

    Instances hold no mutable state and may be shared freely between
    threads and checker runs.
    """

    def __init__(self, ruleset: Ruleset) -> None:
        self._ruleset = ruleset

    @property
    def ruleset(self) -> Ruleset:
        return self._ruleset

    @property
    def name(self) -> str:
        return self._ruleset.name

    def classify(self, tag: Optional[str]) -> Optional[TagRule]:
        """Look up a tag's rule; None for unknown or missing tags."""
        if not tag:
            return None
        return self._ruleset.get(tag)

    def is_valid_nesting(self, parent_tag: Optional[str], child_tag: Optional[str]) -> Nesting:
        """
        Evaluate a (parent, child) pair.

        The checks run in a fixed order: a void parent rejects every
        child, interactive and exclude bans override any allowance, and
        only then are the child's allowed parents consulted.
        """
        parent = self.classify(parent_tag)
        if parent is None:
            return Nesting.UNKNOWN

        if parent.context == Context.VOID:
            return Nesting.INVALID

        child = self.classify(child_tag)
        if child is None:
            return Nesting.UNKNOWN

        if parent.no_interactive and child.interactive:
            return Nesting.INVALID

        if parent.name in child.exclude:
            return Nesting.INVALID

        return Nesting.VALID if child.allows_parent(parent) else Nesting.INVALID


# Cache of content models by ruleset name
_models: dict[str, ContentModel] = {}


def get_content_model(name: str = "html", use_cache: bool = True) -> ContentModel:
    """Get the content model for a bundled ruleset."""
    if use_cache and name in _models:
        return _models[name]

    model = ContentModel(get_ruleset(name, use_cache=use_cache))
    _models[name] = model
    return model


def load_content_model(path: Path) -> ContentModel:
    """Build a content model from a custom ruleset file (not cached)."""
    return ContentModel(load_ruleset_from_path(path))


def clear_model_cache() -> None:
    """Clear cached content models (rulesets stay cached in the loader)."""
    _models.clear()


def is_valid_nesting(parent_tag: str, child_tag: str, ruleset: str = "html") -> Nesting:
    """
    Convenience predicate against a bundled ruleset.

    Example:
        >>> is_valid_nesting("table", "tr")
        <Nesting.VALID: 'valid'>
        >>> is_valid_nesting("table", "td")
        <Nesting.INVALID: 'invalid'>
    """
    return get_content_model(ruleset).is_valid_nesting(parent_tag, child_tag)
