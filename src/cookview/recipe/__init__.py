"""Recipe model, quantity normalization and wire codec."""

from .codec import decode_recipe, encode_recipe, recipe_to_json
from .formatters import chunk_text, format_quantity, format_recipe, render_step
from .models import (
    Chunk,
    ChunkTag,
    Component,
    ComponentChunk,
    CookwareChunk,
    IngredientChunk,
    Metadata,
    Recipe,
    Step,
    TextChunk,
    TimerChunk,
)
from .naming import filepath_to_name, strip_recipe_name
from .quantity import NO_QTY_NAME, Quantity, normalize_quantity, try_parse_qty

__all__ = [
    "Chunk",
    "ChunkTag",
    "Component",
    "ComponentChunk",
    "CookwareChunk",
    "IngredientChunk",
    "Metadata",
    "Recipe",
    "Step",
    "TextChunk",
    "TimerChunk",
    "NO_QTY_NAME",
    "Quantity",
    "normalize_quantity",
    "try_parse_qty",
    "filepath_to_name",
    "strip_recipe_name",
    "decode_recipe",
    "encode_recipe",
    "recipe_to_json",
    "chunk_text",
    "format_quantity",
    "format_recipe",
    "render_step",
]
