"""
Unit tests for tool path construction.

Covers:
- Path for every tool
- Query string filters: presence, order, numeric formatting
- Argument validation errors
- Unknown tool names
"""

import pytest

from dnd5e_mcp.tools.errors import LocalConstructionError, UnknownToolError
from dnd5e_mcp.tools.routes import build_path


class TestResourcePaths:
    """Tools that address resources directly."""

    def test_list_endpoints(self):
        assert build_path("list_endpoints", {}) == "/"

    def test_list_endpoints_accepts_missing_arguments(self):
        """Hosts may omit the arguments object entirely."""
        assert build_path("list_endpoints", None) == "/"

    def test_list_resources(self):
        assert build_path("list_resources", {"endpoint": "spells"}) == "/spells"

    def test_get_resource(self):
        path = build_path("get_resource", {"endpoint": "monsters", "index": "ancient-red-dragon"})
        assert path == "/monsters/ancient-red-dragon"

    def test_category_outside_registry_is_forwarded(self):
        """The registry is advisory; the remote API decides what exists."""
        assert build_path("list_resources", {"endpoint": "homebrew"}) == "/homebrew"

    def test_path_segments_are_encoded(self):
        """Reserved characters cannot escape their path segment."""
        path = build_path("get_resource", {"endpoint": "spells", "index": "../classes?x=1"})
        assert path == "/spells/..%2Fclasses%3Fx%3D1"

    def test_extra_arguments_ignored(self):
        path = build_path("list_resources", {"endpoint": "spells", "verbose": True})
        assert path == "/spells"


class TestSearchSpells:
    """search_spells query string construction."""

    def test_no_filters_has_no_query_string(self):
        assert build_path("search_spells", {}) == "/spells"

    def test_level_before_school(self):
        path = build_path("search_spells", {"school": "evocation", "level": 3})
        assert path == "/spells?level=3&school=evocation"

    def test_all_filters_in_order(self):
        path = build_path("search_spells", {"class": "wizard", "school": "evocation", "level": 3})
        assert path == "/spells?level=3&school=evocation&class=wizard"

    def test_cantrip_level_zero_is_sent(self):
        """Level 0 is a real filter, not an absent one."""
        assert build_path("search_spells", {"level": 0}) == "/spells?level=0"

    def test_whole_float_level_sent_as_integer(self):
        assert build_path("search_spells", {"level": 3.0}) == "/spells?level=3"

    def test_empty_string_filter_omitted(self):
        assert build_path("search_spells", {"school": "", "class": "bard"}) == "/spells?class=bard"

    def test_level_out_of_range(self):
        with pytest.raises(LocalConstructionError, match="level"):
            build_path("search_spells", {"level": 10})

    def test_fractional_level_rejected(self):
        with pytest.raises(LocalConstructionError):
            build_path("search_spells", {"level": 2.5})


class TestSearchMonsters:
    """search_monsters query string construction."""

    def test_no_filters(self):
        assert build_path("search_monsters", {}) == "/monsters"

    def test_challenge_rating_before_type(self):
        path = build_path("search_monsters", {"type": "dragon", "challenge_rating": 17})
        assert path == "/monsters?challenge_rating=17&type=dragon"

    def test_fractional_challenge_rating(self):
        path = build_path("search_monsters", {"challenge_rating": 0.25})
        assert path == "/monsters?challenge_rating=0.25"

    def test_whole_float_challenge_rating(self):
        path = build_path("search_monsters", {"challenge_rating": 2.0})
        assert path == "/monsters?challenge_rating=2"

    def test_query_values_are_encoded(self):
        path = build_path("search_monsters", {"type": "swarm of tiny beasts"})
        assert path == "/monsters?type=swarm+of+tiny+beasts"

    def test_non_numeric_challenge_rating_rejected(self):
        with pytest.raises(LocalConstructionError, match="challenge_rating"):
            build_path("search_monsters", {"challenge_rating": "deadly"})


class TestClassPaths:
    """get_class_levels and get_class_spells."""

    def test_class_levels(self):
        assert build_path("get_class_levels", {"class_index": "wizard"}) == "/classes/wizard/levels"

    def test_class_levels_with_level(self):
        path = build_path("get_class_levels", {"class_index": "wizard", "level": 5})
        assert path == "/classes/wizard/levels/5"

    def test_class_level_out_of_range(self):
        with pytest.raises(LocalConstructionError):
            build_path("get_class_levels", {"class_index": "wizard", "level": 21})

    def test_class_level_zero_rejected(self):
        with pytest.raises(LocalConstructionError):
            build_path("get_class_levels", {"class_index": "wizard", "level": 0})

    def test_class_spells(self):
        assert build_path("get_class_spells", {"class_index": "cleric"}) == "/classes/cleric/spells"


class TestArgumentErrors:
    """Malformed calls surface as LocalConstructionError."""

    def test_missing_required_argument(self):
        with pytest.raises(LocalConstructionError) as exc_info:
            build_path("get_resource", {"endpoint": "spells"})
        assert str(exc_info.value).startswith("Invalid arguments for get_resource:")
        assert "index" in str(exc_info.value)

    def test_empty_required_argument(self):
        with pytest.raises(LocalConstructionError, match="class_index"):
            build_path("get_class_spells", {"class_index": ""})

    def test_numeric_index_coerced_to_string(self):
        assert build_path("get_resource", {"endpoint": "rules", "index": 1}) == "/rules/1"

    def test_non_mapping_arguments(self):
        with pytest.raises(LocalConstructionError, match="arguments"):
            build_path("list_resources", ["spells"])


class TestUnknownTool:
    def test_unknown_tool(self):
        with pytest.raises(UnknownToolError) as exc_info:
            build_path("nonexistent_tool", {})
        assert str(exc_info.value) == "Unknown tool: nonexistent_tool"


class TestNumericFilters:
    """Numeric filters accept real numbers only and go out as plain decimals."""

    @pytest.mark.parametrize(
        "tool,arguments",
        [
            ("search_spells", {"level": True}),
            ("search_monsters", {"challenge_rating": False}),
            ("get_class_levels", {"class_index": "wizard", "level": True}),
        ],
    )
    def test_booleans_rejected(self, tool, arguments):
        with pytest.raises(LocalConstructionError, match="booleans are not accepted"):
            build_path(tool, arguments)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_challenge_rating_rejected(self, value):
        with pytest.raises(LocalConstructionError, match="challenge_rating"):
            build_path("search_monsters", {"challenge_rating": value})

    def test_small_challenge_rating_not_in_exponent_form(self):
        path = build_path("search_monsters", {"challenge_rating": 1e-7})
        assert path == "/monsters?challenge_rating=0.0000001"

    def test_large_whole_challenge_rating(self):
        path = build_path("search_monsters", {"challenge_rating": 1e20})
        assert path == "/monsters?challenge_rating=100000000000000000000"
