"""
Endpoint registry.

The closed vocabulary of resource categories served by the D&D 5e API.
It feeds the ``enum`` of the tool input schemas; the remote service stays
the authority on which categories actually exist.
"""

ENDPOINTS: tuple[str, ...] = (
    "ability-scores",
    "alignments",
    "backgrounds",
    "classes",
    "conditions",
    "damage-types",
    "equipment-categories",
    "equipment",
    "feats",
    "features",
    "languages",
    "magic-items",
    "magic-schools",
    "monsters",
    "proficiencies",
    "races",
    "rule-sections",
    "rules",
    "skills",
    "spells",
    "subclasses",
    "subraces",
    "traits",
    "weapon-properties",
)


def list_categories() -> tuple[str, ...]:
    """Return the known endpoint categories in declaration order."""
    return ENDPOINTS
