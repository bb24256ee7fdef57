"""
Unit tests for ruleset loading and table construction.
"""

import dataclasses

import pytest

from domnest.model.loader import (
    clear_cache,
    get_ruleset,
    list_rulesets,
    load_ruleset,
    load_ruleset_from_path,
    parse_ruleset,
)
from domnest.model.models import Context


class TestBundledRulesets:
    """Tests for the rulesets shipped with the package."""

    def test_html_ruleset_loads(self):
        ruleset = load_ruleset("html")

        assert ruleset.name == "html"
        assert len(ruleset) > 100
        for tag in ["html", "table", "tr", "td", "div", "span", "a", "button", "h1", "br"]:
            assert tag in ruleset

    def test_group_registrations_applied(self):
        ruleset = load_ruleset("html")

        assert ruleset.get("strong").context == Context.PHRASING
        assert ruleset.get("strong").parents == frozenset({"phrasing", "flow"})
        assert ruleset.get("h3").parents == frozenset({"flow", "hgroup", "legend"})
        assert ruleset.get("wbr").context == Context.VOID

    def test_modifiers_applied(self):
        ruleset = load_ruleset("html")

        assert ruleset.get("a").exclude == frozenset({"a"})
        assert ruleset.get("a").interactive
        assert ruleset.get("a").no_interactive
        assert ruleset.get("a").transparent
        assert ruleset.get("input").interactive
        assert not ruleset.get("input").no_interactive
        assert not ruleset.get("span").interactive

    def test_html_is_root_only(self):
        assert load_ruleset("html").get("html").parents == frozenset()

    def test_table_ruleset(self):
        ruleset = load_ruleset("table")

        assert len(ruleset) == len(load_ruleset("html"))
        assert ruleset.get("td").parents == frozenset({"tr"})
        assert ruleset.get("div").context == Context.FLOW
        assert ruleset.get("div").parents == frozenset({"flow"})
        assert "Foo" not in ruleset

    def test_list_rulesets(self):
        names = list_rulesets()
        assert "html" in names
        assert "table" in names

    def test_missing_ruleset(self):
        with pytest.raises(FileNotFoundError):
            load_ruleset("does_not_exist")


class TestRegistration:
    """Table construction rejects inconsistent declarations."""

    def test_duplicate_element_and_group(self):
        data = {
            "elements": {"td": {"context": "flow", "parents": ["tr"]}},
            "groups": [{"context": "flow", "parents": ["flow"], "tags": ["td"]}],
        }
        with pytest.raises(ValueError, match="duplicate key: td"):
            parse_ruleset(data)

    def test_duplicate_within_group(self):
        data = {"groups": [{"context": "flow", "parents": [], "tags": ["div", "div"]}]}
        with pytest.raises(ValueError, match="duplicate key: div"):
            parse_ruleset(data)

    def test_unknown_context(self):
        data = {"elements": {"x-tag": {"context": "blocky", "parents": []}}}
        with pytest.raises(ValueError, match="unknown context"):
            parse_ruleset(data)

    def test_unknown_parent_reference(self):
        data = {"elements": {"li": {"context": "flow", "parents": ["lists"]}}}
        with pytest.raises(ValueError, match="unknown parent: lists"):
            parse_ruleset(data)

    def test_unknown_exclude_reference(self):
        data = {"elements": {"div": {"context": "flow", "parents": ["flow"], "exclude": ["nav"]}}}
        with pytest.raises(ValueError, match="excludes unknown tag: nav"):
            parse_ruleset(data)

    def test_modifier_on_unregistered_tag(self):
        data = {
            "elements": {"div": {"context": "flow", "parents": ["flow"]}},
            "interactive": ["button"],
        }
        with pytest.raises(ValueError, match="interactive names unregistered tag: button"):
            parse_ruleset(data)

    def test_literal_tag_parent_accepted(self):
        data = {
            "elements": {
                "dl": {"context": "dl", "parents": []},
                "div": {"context": "flow", "parents": ["flow", "dl"]},
                "dt": {"context": "flow", "parents": ["dl", "div"]},
            },
        }
        ruleset = parse_ruleset(data)
        assert ruleset.get("dt").parents == frozenset({"dl", "div"})

    def test_bare_string_parent(self):
        data = {"elements": {"datalist": {"context": "phrasing", "parents": "phrasing"}}}
        assert parse_ruleset(data).get("datalist").parents == frozenset({"phrasing"})

    def test_empty_ruleset(self):
        ruleset = parse_ruleset({})
        assert len(ruleset) == 0
        assert ruleset.name == "unnamed"


class TestImmutability:
    """Loaded tables cannot be changed."""

    def test_rule_is_frozen(self):
        rule = load_ruleset("html").get("td")
        with pytest.raises(dataclasses.FrozenInstanceError):
            rule.context = Context.TABLE

    def test_table_is_read_only(self):
        ruleset = load_ruleset("html")
        with pytest.raises(TypeError):
            ruleset.rules["td"] = ruleset.get("th")

    def test_parents_are_frozen(self):
        assert isinstance(load_ruleset("html").get("tr").parents, frozenset)


class TestLoadingFromDisk:
    """Tests for custom ruleset files and the cache."""

    def test_load_from_path(self, tmp_path):
        path = tmp_path / "tiny.yaml"
        path.write_text(
            "name: tiny\n"
            "elements:\n"
            "  list: {context: list, parents: []}\n"
            "  item: {context: flow, parents: [list]}\n"
        )

        ruleset = load_ruleset_from_path(path)

        assert ruleset.name == "tiny"
        assert ruleset.source == str(path)
        assert ruleset.tags() == ["item", "list"]

    def test_load_from_missing_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_ruleset_from_path(tmp_path / "nope.yaml")

    def test_cache_returns_same_table(self):
        clear_cache()
        first = get_ruleset("html")
        assert get_ruleset("html") is first

        clear_cache()
        assert get_ruleset("html") is not first
