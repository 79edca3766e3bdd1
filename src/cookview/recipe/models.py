"""
Recipe data model.

A Recipe holds registries of the components it uses (ingredients, cookware,
timers) and its steps. Each step is an ordered run of chunks; a chunk is
either literal text or a reference to one of the registered components:

    {"tag": "text", "data": "Slice the "}
    {"tag": "ingredient", "data": {"name": "potatoes", "qty": "3", "qtyVal": 3.0, "unit": ""}}

These models map to the JSON served by the recipe server. They are frozen:
a Recipe is built once from a payload and replaced, never edited.
"""

import math
from collections.abc import Iterator
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .quantity import NO_QTY_NAME, normalize_quantity, try_parse_qty


class ChunkTag(str, Enum):
    """Kind of content held by a Chunk."""

    TEXT = "text"
    INGREDIENT = "ingredient"
    COOKWARE = "cookware"
    TIMER = "timer"


# =============================================================================
# Components
# =============================================================================


class Component(BaseModel):
    """
    An ingredient, cookware item or timer.

    qty is the display text of the quantity and is never empty; qty_val is
    its numeric value, or None when the quantity is not a number.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    qty: str = Field(default=NO_QTY_NAME, min_length=1)
    qty_val: float | None = Field(default=None, alias="qtyVal")
    unit: str = ""

    @model_validator(mode="before")
    @classmethod
    def normalize_qty_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        data = dict(data)
        qty = data.get("qty")

        if isinstance(qty, str) and qty.strip():
            derived = try_parse_qty(qty)
        elif qty is None or isinstance(qty, (str, int, float)):
            quantity = normalize_quantity(qty)
            data["qty"] = quantity.qty
            derived = quantity.qty_val
        else:
            return data

        if data["qty"] == NO_QTY_NAME:
            # No quantity given, so no numeric value either
            data.pop("qtyVal", None)
            data["qty_val"] = None
        elif "qtyVal" not in data and "qty_val" not in data:
            data["qty_val"] = derived
        if data.get("unit") is None:
            data["unit"] = ""
        return data

    @field_validator("qty_val")
    @classmethod
    def finite_qty_val(cls, value: float | None) -> float | None:
        if value is not None and not math.isfinite(value):
            return None
        return value

    @classmethod
    def from_amount(
        cls,
        name: str,
        amount: str | int | float | None = None,
        unit: str | None = None,
    ) -> "Component":
        """Build a component from a raw amount and unit."""
        quantity = normalize_quantity(amount, unit)
        return cls(name=name, qty=quantity.qty, qty_val=quantity.qty_val, unit=quantity.unit)


class Metadata(BaseModel):
    """Recipe-level tag/body pair, e.g. a note block."""

    model_config = ConfigDict(frozen=True)

    tag: str
    body: str = ""


# =============================================================================
# Chunks
# =============================================================================


class TextChunk(BaseModel):
    """Literal text inside a step."""

    model_config = ConfigDict(frozen=True)

    tag: Literal["text"] = "text"
    data: str

    @property
    def kind(self) -> ChunkTag:
        return ChunkTag.TEXT


class ComponentChunk(BaseModel):
    """Base for chunks that reference a registered component."""

    model_config = ConfigDict(frozen=True)

    tag: ChunkTag
    data: Component

    @property
    def kind(self) -> ChunkTag:
        return ChunkTag(self.tag)


class IngredientChunk(ComponentChunk):
    tag: Literal["ingredient"] = "ingredient"


class CookwareChunk(ComponentChunk):
    tag: Literal["cookware"] = "cookware"


class TimerChunk(ComponentChunk):
    tag: Literal["timer"] = "timer"


Chunk = Annotated[
    TextChunk | IngredientChunk | CookwareChunk | TimerChunk,
    Field(discriminator="tag"),
]

# One paragraph of a recipe, rendered in order
Step = tuple[Chunk, ...]


# =============================================================================
# Recipe
# =============================================================================


class Recipe(BaseModel):
    """
    A parsed recipe.

    The ingredient, cookware and timer lists are the registries for the
    components referenced inline by step chunks. Every chunk reference must
    name a component present in the registry for its kind.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    metadata: Metadata | None = None
    ingredients: tuple[Component, ...] = ()
    cookware: tuple[Component, ...] = ()
    timers: tuple[Component, ...] = ()
    steps: tuple[Step, ...] = ()

    @model_validator(mode="after")
    def check_registries(self) -> "Recipe":
        for tag in (ChunkTag.INGREDIENT, ChunkTag.COOKWARE):
            for component in self.registry(tag):
                if not component.name:
                    raise ValueError(f"{tag.value} registry contains a component without a name")

        names = {tag: {c.name for c in self.registry(tag)} for tag in _REGISTRY_FIELDS}
        for step_number, chunk in self.references():
            if chunk.data.name not in names[chunk.kind]:
                raise ValueError(
                    f"step {step_number} references {chunk.kind.value} "
                    f"'{chunk.data.name}' missing from {_REGISTRY_FIELDS[chunk.kind]}"
                )
        return self

    def registry(self, tag: ChunkTag) -> tuple[Component, ...]:
        """Return the component registry for a chunk kind."""
        if tag not in _REGISTRY_FIELDS:
            raise ValueError(f"{tag.value} chunks have no registry")
        return getattr(self, _REGISTRY_FIELDS[tag])

    def references(self) -> Iterator[tuple[int, ComponentChunk]]:
        """Yield (step number, chunk) for every component reference, in order."""
        for step_number, step in enumerate(self.steps, start=1):
            for chunk in step:
                if isinstance(chunk, ComponentChunk):
                    yield step_number, chunk


_REGISTRY_FIELDS: dict[ChunkTag, str] = {
    ChunkTag.INGREDIENT: "ingredients",
    ChunkTag.COOKWARE: "cookware",
    ChunkTag.TIMER: "timers",
}
