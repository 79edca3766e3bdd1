"""
Display formatting for recipes.

Plain-text renderings used by the CLI and by any view that needs a string
rather than structured chunks.
"""

from .models import Chunk, Component, Recipe, Step, TextChunk


def format_quantity(component: Component) -> str:
    """
    Format a component's quantity for display.

    Examples:
        qty="2", unit="cups" -> "2 cups"
        qty="some", unit="" -> "some"
        qty="1/2", unit="tsp" -> "1/2 tsp"
    """
    if component.unit:
        return f"{component.qty} {component.unit}"
    return component.qty


def chunk_text(chunk: Chunk) -> str:
    """Text shown for a chunk inside a step."""
    if isinstance(chunk, TextChunk):
        return chunk.data
    # Anonymous timers ("~{7%mins}") read as their duration
    return chunk.data.name or format_quantity(chunk.data)


def render_step(step: Step) -> str:
    return "".join(chunk_text(chunk) for chunk in step)


def _format_registry(title: str, components: tuple[Component, ...]) -> list[str]:
    lines = [f"{title}:"]
    for component in components:
        label = component.name or "(unnamed)"
        lines.append(f"  - {label}: {format_quantity(component)}")
    return lines


def format_recipe(recipe: Recipe) -> list[str]:
    """
    Format a whole recipe as plain-text lines.

    Sections without entries are left out.
    """
    lines = [f"=== {recipe.name or 'Untitled recipe'} ==="]

    if recipe.metadata is not None:
        lines.append(f"{recipe.metadata.tag}: {recipe.metadata.body}")

    for title, components in (
        ("Ingredients", recipe.ingredients),
        ("Cookware", recipe.cookware),
        ("Timers", recipe.timers),
    ):
        if components:
            lines.append("")
            lines.extend(_format_registry(title, components))

    if recipe.steps:
        lines.append("")
        lines.append("Steps:")
        for number, step in enumerate(recipe.steps, start=1):
            lines.append(f"  {number}. {render_step(step).strip()}")

    return lines
