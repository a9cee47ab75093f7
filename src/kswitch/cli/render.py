"""Rendering of command results.

Results meant for scripts (current selection, favorites) go to stdout
without markup or highlighting; status lines go to stderr.
"""

from __future__ import annotations

from collections.abc import Sequence

from kswitch.cli.console import console, escape, output
from kswitch.core.models import Favorite, Selection


def format_favorite(favorite: Favorite) -> str:
    """Render one favorite as ``"name: context/namespace"``."""
    return f"{favorite.name}: {favorite.context}/{favorite.namespace}"


def print_current(selection: Selection | None) -> None:
    context = selection.context if selection else ""
    namespace = selection.namespace if selection else ""
    output.print(f"Current context: {context}", markup=False, highlight=False)
    output.print(f"Current namespace: {namespace}", markup=False, highlight=False)


def print_favorites(favorites: Sequence[Favorite]) -> None:
    for favorite in favorites:
        output.print(format_favorite(favorite), markup=False, highlight=False)


def print_stored(name: str, selection: Selection) -> None:
    console.print(
        f"[green]Stored favorite[/green] {escape(name)} → {escape(selection)}",
        highlight=False,
    )


def print_switched(selection: Selection | None) -> None:
    """Report the new selection; ``None`` means nothing was stored to switch to."""
    if selection is None:
        console.print("[dim]Nothing to switch to.[/dim]")
        return
    console.print(
        f"[green]Switched to[/green] [bold]{escape(selection.context)}[/bold]"
        f" / {escape(selection.namespace or '-')}",
        highlight=False,
    )


def print_cancelled() -> None:
    console.print("[yellow]Cancelled.[/yellow]")
