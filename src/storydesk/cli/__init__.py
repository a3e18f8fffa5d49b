"""
storydesk CLI Package.

This package contains the CLI components:

- layout.py: Layout resolution commands
- workspace.py: Persisted workspace and composition commands
- common.py: Shared utilities
"""

from __future__ import annotations

import typer
from rich.table import Table

from storydesk._version import get_version
from storydesk.cli.common import configure_logging, console
from storydesk.cli.layout import layout_app
from storydesk.cli.workspace import workspace_app
from storydesk.ui.layout_engine.registry import PANEL_REGISTRY
from storydesk.ui.layout_engine.templates import LAYOUT_ORDER, LAYOUT_TEMPLATES

__version__ = get_version()

app = typer.Typer(
    help="storydesk - workspace layout resolution for the writing studio.",
    no_args_is_help=True,
)
app.add_typer(layout_app, name="layout")
app.add_typer(workspace_app, name="workspace")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"storydesk {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False, "--version", callback=version_callback, is_eager=True, help="Show version"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """storydesk CLI main callback for global options."""
    if verbose:
        configure_logging("DEBUG", verbose=True)


@app.command("templates")
def templates() -> None:
    """List layout templates and their slots."""
    table = Table(title="Layout templates")
    for column in ("Layout", "Label", "Slot", "Accepts", "Prefers", "Narrow"):
        table.add_column(column)
    for layout in LAYOUT_ORDER:
        template = LAYOUT_TEMPLATES[layout]
        for index, slot in enumerate(template.slots):
            table.add_row(
                layout.value if index == 0 else "",
                template.label if index == 0 else "",
                str(index),
                ", ".join(size.value for size in slot.accepts_sizes),
                slot.preferred_role.value,
                "yes" if slot.is_narrow else "",
            )
    console.print(table)


@app.command("panels")
def panels() -> None:
    """List registered panel types."""
    table = Table(title="Panel registry")
    for column in ("Type", "Label", "Role", "Size", "Domains"):
        table.add_column(column)
    for entry in PANEL_REGISTRY.values():
        table.add_row(
            entry.type,
            entry.label,
            entry.default_role.value,
            entry.size_class.value,
            ", ".join(entry.domains),
        )
    console.print(table)


def main(argv: list[str] | None = None) -> None:
    app(args=argv)


__all__ = [
    "__version__",
    "app",
    "main",
    "layout_app",
    "workspace_app",
    "version_callback",
]
