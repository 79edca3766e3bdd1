"""
cookview - CLI Entry Point.

Usage:
    cookview list              List recipes on the server
    cookview show NAME         Show a recipe from the server
    cookview read FILE         Show a recipe from a local JSON payload
    cookview health            Show configuration
    cookview --help            Show help
"""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from cookview.client import RecipeClient
from cookview.config import get_settings
from cookview.errors import CookviewError
from cookview.recipe import (
    Component,
    Recipe,
    decode_recipe,
    filepath_to_name,
    format_quantity,
    format_recipe,
    render_step,
    strip_recipe_name,
)

app = typer.Typer(
    name="cookview",
    help="cookview - Browse recipes served by a cooklang recipe server.",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests and debug output"),
) -> None:
    """Configure logging before any command runs."""
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )


def _client() -> RecipeClient:
    settings = get_settings()
    return RecipeClient(settings.api_url, timeout=settings.request_timeout)


def _registry_table(title: str, components: tuple[Component, ...]) -> Table:
    table = Table(title=title, show_header=False, box=None, title_justify="left")
    table.add_column("name", style="bold")
    table.add_column("quantity", style="cyan")
    for component in components:
        table.add_row(escape(component.name) or "[dim](unnamed)[/dim]", escape(format_quantity(component)))
    return table


def _print_recipe(recipe: Recipe, plain: bool = False) -> None:
    if plain:
        for line in format_recipe(recipe):
            console.print(line, markup=False, highlight=False)
        return

    tag = escape(recipe.metadata.tag) if recipe.metadata else ""
    body = escape(recipe.metadata.body) if recipe.metadata else ""
    console.print(
        Panel.fit(
            f"[bold green]{escape(recipe.name or 'Untitled recipe')}[/bold green]"
            + (f"\n[dim]{tag}: {body}[/dim]" if recipe.metadata else ""),
            border_style="green",
        )
    )

    for title, components in (
        ("Ingredients", recipe.ingredients),
        ("Cookware", recipe.cookware),
        ("Timers", recipe.timers),
    ):
        if components:
            console.print(_registry_table(title, components))
            console.print()

    if recipe.steps:
        console.print("[bold]Steps[/bold]")
        for number, step in enumerate(recipe.steps, start=1):
            console.print(f"  [bold blue]{number}.[/bold blue] {escape(render_step(step).strip())}", highlight=False)


@app.command("list")
def list_recipes() -> None:
    """List every recipe on the server."""
    try:
        with _client() as client:
            names = client.list_recipe_names()
    except CookviewError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(code=1)

    if not names:
        console.print("[dim]No recipes found.[/dim]")
        return

    for name in sorted(names):
        console.print(f"{escape(strip_recipe_name(name))}  [dim]{escape(name)}[/dim]", highlight=False)


@app.command()
def show(
    name: str = typer.Argument(..., help="Recipe storage name, e.g. breakfast/eggs_benedict"),
    raw: bool = typer.Option(False, "--raw", "-r", help="Print the unparsed .cook source"),
    plain: bool = typer.Option(False, "--plain", "-p", help="Plain text output"),
) -> None:
    """Fetch a recipe from the server and print it."""
    try:
        with _client() as client:
            if raw:
                console.print(client.get_recipe_source(name), markup=False, highlight=False)
                return
            recipe = client.get_recipe(name)
    except CookviewError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(code=1)

    _print_recipe(recipe, plain=plain)


@app.command()
def read(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON recipe payload"),
    plain: bool = typer.Option(False, "--plain", "-p", help="Plain text output"),
) -> None:
    """Print a recipe from a local JSON payload."""
    try:
        recipe = decode_recipe(path.read_bytes())
    except CookviewError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(code=1)

    if not recipe.name:
        recipe = recipe.model_copy(update={"name": filepath_to_name(path)})
    logger.debug(f"Read recipe '{recipe.name}' from {path}")

    _print_recipe(recipe, plain=plain)


@app.command()
def health() -> None:
    """Show configuration."""
    settings = get_settings()

    console.print("\n[bold]cookview configuration[/bold]\n")
    console.print(f"   Environment: {settings.cookview_env}")
    console.print(f"   Log level: {settings.log_level}")
    console.print(f"   API root: {settings.api_root}")
    console.print(f"   API URL: {settings.api_url}")
    console.print(f"   Timeout: {settings.request_timeout}s")


if __name__ == "__main__":
    app()
