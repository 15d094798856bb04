"""
Typed argument models, one per tool.

Hosts deliver arguments as a loose JSON object. Each tool validates that
object once against its model so path construction only ever sees
well-typed values.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, field_validator


class ToolArguments(BaseModel):
    """Base for tool argument models. Unknown keys are ignored."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        frozen=True,
        coerce_numbers_to_str=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def reject_booleans(cls, value: Any) -> Any:
        # JSON true/false would otherwise pass as 1/0
        if isinstance(value, bool):
            raise ValueError("booleans are not accepted")
        return value


class ListEndpointsArgs(ToolArguments):
    pass


class ListResourcesArgs(ToolArguments):
    endpoint: str = Field(min_length=1, description="Endpoint category, e.g. 'spells'")


class GetResourceArgs(ToolArguments):
    endpoint: str = Field(min_length=1, description="Endpoint category, e.g. 'spells'")
    index: str = Field(min_length=1, description="Resource index, e.g. 'fireball'")


class SearchSpellsArgs(ToolArguments):
    level: int | None = Field(None, ge=0, le=9, description="Spell level (0-9)")
    school: str | None = Field(None, description="Magic school, e.g. 'evocation'")
    # "class" is a keyword, so the field is exposed under its alias
    class_: str | None = Field(None, alias="class", description="Class, e.g. 'wizard'")


class SearchMonstersArgs(ToolArguments):
    # int first so whole numbers keep their integer form in the query string
    challenge_rating: int | FiniteFloat | None = Field(None, description="Challenge rating")
    type: str | None = Field(None, description="Monster type, e.g. 'dragon'")


class GetClassLevelsArgs(ToolArguments):
    class_index: str = Field(min_length=1, description="Class index, e.g. 'wizard'")
    level: int | None = Field(None, ge=1, le=20, description="Class level (1-20)")


class GetClassSpellsArgs(ToolArguments):
    class_index: str = Field(min_length=1, description="Class index, e.g. 'wizard'")
