"""
Workspace CLI commands.

Commands:
- workspace compose: Apply a composition directive to the persisted workspace
- workspace show: Print the persisted workspace and its layout plan
- workspace reset: Delete the persisted workspace
- workspace manifests: Print the panel catalog given to agents
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.table import Table

from storydesk.cli.common import console, resolve_manifest
from storydesk.ui.layout_engine import build_layout_plan
from storydesk.workspace import (
    CompositionDispatcher,
    clear_workspace_state,
    load_workspace_state,
    save_workspace_state,
)
from storydesk.workspace.tools import compose_workspace_handler, get_panel_manifests

workspace_app = typer.Typer(
    help="Inspect and compose the persisted workspace.",
    no_args_is_help=True,
)


@workspace_app.command("compose")
def workspace_compose(
    directive: str = typer.Argument(None, help="Directive as JSON"),
    file: Path = typer.Option(None, "--file", help="Read the directive from a JSON file"),
    manifest: str = typer.Option("storydesk.toml", "--manifest", "-m"),
) -> None:
    """Apply a show/hide/replace/clear directive.

    Examples:
        storydesk workspace compose '{"action": "show", "panels": [{"type": "scene-editor"}]}'
        storydesk workspace compose --file directive.json
    """
    if file is not None:
        raw = file.read_text(encoding="utf-8")
    elif directive is not None:
        raw = directive
    else:
        typer.echo("Error: provide a directive or --file", err=True)
        raise typer.Exit(code=1)

    try:
        args = json.loads(raw)
    except json.JSONDecodeError as e:
        typer.echo(f"Error: directive is not valid JSON: {e}", err=True)
        raise typer.Exit(code=1) from e
    if not isinstance(args, dict):
        typer.echo("Error: directive must be a JSON object", err=True)
        raise typer.Exit(code=1)

    root, studio = resolve_manifest(manifest)
    state_dir = studio.workspace.state_dir
    dispatcher = CompositionDispatcher.from_manifest(
        load_workspace_state(root, state_dir),
        studio,
        on_change=lambda state: save_workspace_state(root, state, state_dir),
    )

    response = compose_workspace_handler(dispatcher, args)
    typer.echo(response)
    if "error" in json.loads(response):
        raise typer.Exit(code=1)


@workspace_app.command("show")
def workspace_show(
    manifest: str = typer.Option("storydesk.toml", "--manifest", "-m"),
    format: str = typer.Option("table", "--format", "-f", help="Output format: table or json"),
) -> None:
    """Print the persisted workspace."""
    root, studio = resolve_manifest(manifest)
    state = load_workspace_state(root, studio.workspace.state_dir)
    plan = build_layout_plan(state.panels, state.layout, resolve=False)

    if format == "json":
        data = {"state": state.to_dict(), "plan": plan.model_dump(mode="json")}
        typer.echo(json.dumps(data, indent=2))
        return

    console.print(f"Layout: [bold cyan]{state.layout.value}[/bold cyan]")
    visible = {slot.panel_id: slot.slot for slot in plan.slots}
    table = Table()
    for column in ("Panel", "Type", "Role", "Slot"):
        table.add_column(column)
    for panel in state.panels:
        slot = visible.get(panel.id)
        table.add_row(
            panel.id,
            panel.type,
            panel.role.value,
            str(slot) if slot is not None else "hidden",
        )
    console.print(table)


@workspace_app.command("reset")
def workspace_reset(
    manifest: str = typer.Option("storydesk.toml", "--manifest", "-m"),
) -> None:
    """Delete the persisted workspace."""
    root, studio = resolve_manifest(manifest)
    if clear_workspace_state(root, studio.workspace.state_dir):
        typer.echo("Workspace reset")
    else:
        typer.echo("No persisted workspace")


@workspace_app.command("manifests")
def workspace_manifests() -> None:
    """Print the panel catalog given to composing agents."""
    typer.echo(get_panel_manifests())
