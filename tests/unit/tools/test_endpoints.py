"""
Unit tests for the endpoint registry.
"""

from dnd5e_mcp.tools.endpoints import ENDPOINTS, list_categories


class TestListCategories:
    """The category vocabulary is fixed, ordered and duplicate-free."""

    def test_not_empty(self):
        assert len(list_categories()) > 0

    def test_no_duplicates(self):
        categories = list_categories()
        assert len(set(categories)) == len(categories)

    def test_contains_core_categories(self):
        """Spells, monsters and classes back the dedicated search tools."""
        categories = list_categories()
        for name in ("spells", "monsters", "classes"):
            assert name in categories

    def test_order_is_stable(self):
        """Repeated calls return the same ordered sequence."""
        assert list_categories() == list_categories() == ENDPOINTS
        assert list_categories()[0] == "ability-scores"
        assert list_categories()[-1] == "weapon-properties"

    def test_immutable(self):
        """The registry is a tuple, so callers cannot mutate it."""
        assert isinstance(list_categories(), tuple)
