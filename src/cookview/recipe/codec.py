"""
Wire format for recipes.

decode_recipe is the boundary between server payloads and the model: a
payload either becomes a complete Recipe or raises InvalidPayloadError.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from cookview.errors import InvalidPayloadError

from .models import Recipe
from .naming import strip_recipe_name

logger = logging.getLogger(__name__)

_LIST_FIELDS = ("ingredients", "cookware", "timers", "steps")


def _coerce_metadata(metadata: Any) -> Any:
    """
    Reduce the metadata field to a single object or None.

    The server may send an object, null, an empty mapping, or a list
    holding at most one object.
    """
    if metadata is None:
        return None

    if isinstance(metadata, list):
        if len(metadata) > 1:
            raise InvalidPayloadError(
                f"Recipe payload has {len(metadata)} metadata blocks, expected at most one"
            )
        return metadata[0] if metadata else None

    if isinstance(metadata, Mapping) and not metadata:
        return None

    return metadata


def decode_recipe(payload: Mapping[str, Any] | str | bytes, name: str | None = None) -> Recipe:
    """
    Decode a recipe payload.

    Args:
        payload: Decoded JSON object, or raw JSON text/bytes
        name: Storage name of the recipe (e.g. "breakfast/eggs_benedict").
            When given, the title is derived from it instead of the payload.

    Returns:
        The decoded Recipe

    Raises:
        InvalidPayloadError: If the payload is not a well-formed recipe
    """
    if isinstance(payload, (str, bytes, bytearray)):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as e:
            logger.warning(f"Rejected recipe payload: invalid JSON ({e})")
            raise InvalidPayloadError(f"Recipe payload is not valid JSON: {e}") from e

    if not isinstance(payload, Mapping):
        raise InvalidPayloadError(
            f"Recipe payload must be a JSON object, got {type(payload).__name__}"
        )

    data = dict(payload)
    data["metadata"] = _coerce_metadata(data.get("metadata"))

    # nil slices are encoded as null by the server
    for field in _LIST_FIELDS:
        if data.get(field) is None:
            data[field] = []

    if name is not None:
        data["name"] = strip_recipe_name(name)

    try:
        return Recipe.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Rejected recipe payload: {e.error_count()} validation error(s)")
        raise InvalidPayloadError(
            "Recipe payload failed validation",
            errors=e.errors(include_url=False, include_context=False),
        ) from e


def encode_recipe(recipe: Recipe) -> dict[str, Any]:
    """Encode a recipe to its JSON-compatible wire form."""
    return recipe.model_dump(mode="json", by_alias=True)


def recipe_to_json(recipe: Recipe, indent: int | None = None) -> str:
    """Encode a recipe to JSON text."""
    return recipe.model_dump_json(by_alias=True, indent=indent)
