"""Shared CLI helpers to reduce boilerplate across CLI command modules."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from storydesk.core.errors import ConfigError
from storydesk.core.ir import LayoutId, PanelInstance, PanelRole
from storydesk.core.manifest import StudioManifest, load_manifest
from storydesk.ui.layout_engine.registry import get_panel_entry
from storydesk.ui.layout_engine.templates import is_layout_id

console = Console()


def configure_logging(level: str, verbose: bool = False) -> None:
    """Configure root logging for a CLI invocation."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def resolve_manifest(manifest: str) -> tuple[Path, StudioManifest]:
    """Resolve a manifest path to the project root and its parsed manifest.

    A missing storydesk.toml is not an error: the project root is the
    manifest's directory and defaults apply. Exits with code 1 if the
    manifest exists but is invalid.
    """
    manifest_path = Path(manifest).resolve()
    root = manifest_path.parent
    if not manifest_path.exists():
        studio = StudioManifest()
    else:
        try:
            studio = load_manifest(manifest_path)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1) from e
    configure_logging(studio.logging.level)
    return root, studio


def parse_panel_args(specs: list[str]) -> list[PanelInstance]:
    """Build panels from ``TYPE`` or ``TYPE:ROLE`` arguments.

    Panels get slot indices in argument order. Exits with code 1 on an
    unknown panel type or role.
    """
    panels = []
    for slot_index, spec in enumerate(specs):
        panel_type, _, role_value = spec.partition(":")
        entry = get_panel_entry(panel_type)
        if entry is None:
            typer.echo(f"Error: unknown panel type '{panel_type}'", err=True)
            raise typer.Exit(code=1)
        try:
            role = PanelRole(role_value) if role_value else entry.default_role
        except ValueError as e:
            typer.echo(f"Error: unknown role '{role_value}'", err=True)
            raise typer.Exit(code=1) from e
        panels.append(
            PanelInstance(
                id=f"{panel_type}-{slot_index}",
                type=panel_type,
                role=role,
                slot_index=slot_index,
            )
        )
    return panels


def parse_layout_option(value: str | None) -> LayoutId | None:
    """Validate a --layout/--current option. Exits with code 1 on an unknown id."""
    if value is None:
        return None
    if not is_layout_id(value):
        typer.echo(f"Error: unknown layout '{value}'", err=True)
        raise typer.Exit(code=1)
    return LayoutId(value)
