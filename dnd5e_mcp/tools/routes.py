"""
Path construction for each tool.

Every tool maps to a Route: the argument model it validates against and a
pure function turning the validated arguments into a path relative to the
API base URL. Query filters are only appended when present, in a fixed
order per tool.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable
from urllib.parse import quote, urlencode

from pydantic import ValidationError

from dnd5e_mcp.tools.arguments import (
    GetClassLevelsArgs,
    GetClassSpellsArgs,
    GetResourceArgs,
    ListEndpointsArgs,
    ListResourcesArgs,
    SearchMonstersArgs,
    SearchSpellsArgs,
    ToolArguments,
)
from dnd5e_mcp.tools.errors import LocalConstructionError, UnknownToolError


@dataclass(frozen=True)
class Route:
    """Argument model plus path builder for a single tool."""

    arguments: type[ToolArguments]
    build: Callable[[Any], str]


def _segment(value: Any) -> str:
    """Percent-encode a single path segment."""
    return quote(str(value), safe="")


def _number(value: int | float) -> str:
    """Decimal text for a numeric filter: 2.0 -> "2", 1e-07 -> "0.0000001"."""
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    return str(value)


def _with_query(path: str, params: list[tuple[str, str]]) -> str:
    query = urlencode(params)
    return f"{path}?{query}" if query else path


def _list_endpoints(args: ListEndpointsArgs) -> str:
    return "/"


def _list_resources(args: ListResourcesArgs) -> str:
    return f"/{_segment(args.endpoint)}"


def _get_resource(args: GetResourceArgs) -> str:
    return f"/{_segment(args.endpoint)}/{_segment(args.index)}"


def _search_spells(args: SearchSpellsArgs) -> str:
    params = []
    if args.level is not None:
        params.append(("level", _number(args.level)))
    if args.school:
        params.append(("school", args.school))
    if args.class_:
        params.append(("class", args.class_))
    return _with_query("/spells", params)


def _search_monsters(args: SearchMonstersArgs) -> str:
    params = []
    if args.challenge_rating is not None:
        params.append(("challenge_rating", _number(args.challenge_rating)))
    if args.type:
        params.append(("type", args.type))
    return _with_query("/monsters", params)


def _get_class_levels(args: GetClassLevelsArgs) -> str:
    path = f"/classes/{_segment(args.class_index)}/levels"
    if args.level is not None:
        path = f"{path}/{args.level}"
    return path


def _get_class_spells(args: GetClassSpellsArgs) -> str:
    return f"/classes/{_segment(args.class_index)}/spells"


ROUTES: dict[str, Route] = {
    "list_endpoints": Route(ListEndpointsArgs, _list_endpoints),
    "list_resources": Route(ListResourcesArgs, _list_resources),
    "get_resource": Route(GetResourceArgs, _get_resource),
    "search_spells": Route(SearchSpellsArgs, _search_spells),
    "search_monsters": Route(SearchMonstersArgs, _search_monsters),
    "get_class_levels": Route(GetClassLevelsArgs, _get_class_levels),
    "get_class_spells": Route(GetClassSpellsArgs, _get_class_spells),
}


def _describe(error: ValidationError) -> str:
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "arguments"
        parts.append(f"{location}: {detail['msg']}")
    return "; ".join(parts)


def build_path(tool_name: str, arguments: Any) -> str:
    """
    Resolve a tool call to the API path it requests.

    Args:
        tool_name: Name of the tool being invoked
        arguments: Raw argument mapping from the host (may be None)

    Returns:
        Path relative to the API base URL, including any query string

    Raises:
        UnknownToolError: If no route is registered for tool_name
        LocalConstructionError: If the arguments fail validation
    """
    route = ROUTES.get(tool_name)
    if route is None:
        raise UnknownToolError(tool_name)

    try:
        parsed = route.arguments.model_validate(arguments if arguments is not None else {})
    except ValidationError as e:
        raise LocalConstructionError(tool_name, _describe(e)) from e

    return route.build(parsed)
