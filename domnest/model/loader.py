"""
Ruleset Loader — Load and build content-model tables from YAML files.

A ruleset file declares tags in two ways:
1. ``elements``: one entry per tag with its own context/parents
2. ``groups``: a shared context/parents applied to a list of tags

Modifier lists (``self_exclude``, ``interactive``, ``no_interactive``,
``transparent``) are applied after registration. Every tag is registered
exactly once; a duplicate aborts the build.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Optional

import yaml

from domnest.core.logging import LogChannel, get_logger
from domnest.model.models import Context, Ruleset, TagRule

# Default ruleset directory
RULESETS_DIR = Path(__file__).parent / "rulesets"

log = get_logger(LogChannel.MODEL)


def load_ruleset(name: str = "html") -> Ruleset:
    """
    Load a bundled ruleset by name.

    Args:
        name: Ruleset name (without .yaml extension)

    Returns:
        Parsed Ruleset

    Raises:
        FileNotFoundError: If ruleset file doesn't exist
        ValueError: If ruleset is invalid
    """
    path = RULESETS_DIR / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Ruleset not found: {path}")
    return load_ruleset_from_path(path)


def load_ruleset_from_path(path: Path) -> Ruleset:
    """Load a ruleset from an arbitrary path."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Ruleset not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    ruleset = parse_ruleset(data or {}, source=str(path))
    log.verbose(
        "ruleset_loaded",
        ruleset=ruleset.name,
        tags=len(ruleset),
        source=str(path),
    )
    return ruleset


def parse_ruleset(data: dict, source: Optional[str] = None) -> Ruleset:
    """
    Build a Ruleset from its dictionary form.

    Raises:
        ValueError: On duplicate tags, unknown contexts, modifiers naming
            unregistered tags, or parents/excludes that reference neither
            a context nor a registered tag.
    """
    if not isinstance(data, dict):
        raise ValueError(f"ruleset must be a mapping, got {type(data).__name__}")

    drafts: dict[str, dict[str, Any]] = {}

    for tag, entry in (data.get("elements") or {}).items():
        _register(drafts, [tag], entry)

    for group in data.get("groups") or []:
        _register(drafts, group.get("tags", []), group)

    for tag in _modifier_targets(drafts, data, "self_exclude"):
        drafts[tag]["exclude"].add(tag)
    for tag in _modifier_targets(drafts, data, "interactive"):
        drafts[tag]["interactive"] = True
    for tag in _modifier_targets(drafts, data, "no_interactive"):
        drafts[tag]["no_interactive"] = True
    for tag in _modifier_targets(drafts, data, "transparent"):
        drafts[tag]["transparent"] = True

    _check_references(drafts)

    rules = {
        tag: TagRule(
            name=tag,
            context=draft["context"],
            parents=frozenset(draft["parents"]),
            exclude=frozenset(draft["exclude"]),
            interactive=draft["interactive"],
            no_interactive=draft["no_interactive"],
            transparent=draft["transparent"],
        )
        for tag, draft in drafts.items()
    }

    return Ruleset(
        name=data.get("name", "unnamed"),
        version=str(data.get("version", "1.0")),
        description=data.get("description", ""),
        rules=MappingProxyType(rules),
        source=source,
    )


def _register(drafts: dict[str, dict[str, Any]], tags: Iterable[str], entry: dict) -> None:
    """Register tags sharing one context/parents declaration."""
    context = _parse_context(entry.get("context"))
    parents = entry.get("parents") or []
    # A bare string is a single parent, not a sequence of letters
    if isinstance(parents, str):
        parents = [parents]
    exclude = entry.get("exclude") or []

    for tag in tags:
        if tag in drafts:
            raise ValueError(f"duplicate key: {tag}")
        drafts[tag] = {
            "context": context,
            "parents": set(parents),
            "exclude": set(exclude),
            "interactive": bool(entry.get("interactive", False)),
            "no_interactive": bool(entry.get("no_interactive", False)),
            "transparent": bool(entry.get("transparent", False)),
        }


def _parse_context(value: Any) -> Context:
    try:
        return Context(value)
    except ValueError:
        raise ValueError(f"unknown context: {value!r}") from None


def _modifier_targets(drafts: dict, data: dict, key: str) -> list[str]:
    targets = data.get(key) or []
    for tag in targets:
        if tag not in drafts:
            raise ValueError(f"{key} names unregistered tag: {tag}")
    return targets


def _check_references(drafts: dict[str, dict[str, Any]]) -> None:
    """Every parent entry must be a context or a tag; every exclude a tag."""
    contexts = Context.values()
    for tag, draft in drafts.items():
        for parent in draft["parents"]:
            if parent not in contexts and parent not in drafts:
                raise ValueError(f"<{tag}> lists unknown parent: {parent}")
        for excluded in draft["exclude"]:
            if excluded not in drafts:
                raise ValueError(f"<{tag}> excludes unknown tag: {excluded}")


def list_rulesets() -> list[str]:
    """List bundled ruleset names."""
    return sorted(p.stem for p in RULESETS_DIR.glob("*.yaml"))


# Cache for loaded rulesets
_cache: dict[str, Ruleset] = {}


def get_ruleset(name: str = "html", use_cache: bool = True) -> Ruleset:
    """Get a bundled ruleset, using cache by default."""
    if use_cache and name in _cache:
        return _cache[name]

    ruleset = load_ruleset(name)
    _cache[name] = ruleset
    return ruleset


def clear_cache() -> None:
    """Clear the ruleset cache."""
    _cache.clear()
