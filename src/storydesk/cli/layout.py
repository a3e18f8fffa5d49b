"""
Layout CLI commands.

Commands:
- layout resolve: Pick the layout for a panel set
- layout fitness: Score every layout for a panel set
- layout plan: Full slot-by-slot plan for a panel set
"""

from __future__ import annotations

import json

import typer
from rich.table import Table

from storydesk.cli.common import console, parse_layout_option, parse_panel_args
from storydesk.ui.layout_engine import (
    DEFAULT_MIN_FITNESS,
    build_layout_plan,
    explain_layout_fitness,
    explain_layout_resolution,
)
from storydesk.ui.layout_engine.templates import LAYOUT_ORDER

layout_app = typer.Typer(
    help="Resolve and inspect workspace layouts.",
    no_args_is_help=True,
)

PANELS_ARGUMENT = typer.Argument(..., help="Panel types, optionally TYPE:ROLE")


@layout_app.command("resolve")
def layout_resolve(
    panels: list[str] = PANELS_ARGUMENT,
    current: str = typer.Option(None, "--current", "-c", help="Layout currently shown"),
    min_fitness: float = typer.Option(
        DEFAULT_MIN_FITNESS, "--min-fitness", help="Fitness the current layout must keep"
    ),
    format: str = typer.Option("table", "--format", "-f", help="Output format: table or json"),
) -> None:
    """Resolve the layout for a panel set.

    Examples:
        storydesk layout resolve scene-editor scene-list
        storydesk layout resolve scene-editor character-cards --current split-2
    """
    panel_set = parse_panel_args(panels)
    explanation = explain_layout_resolution(
        panel_set, parse_layout_option(current), min_fitness
    )

    if format == "json":
        data = {
            "layout": explanation.selected.value,
            "reason": explanation.reason,
            "current_kept": explanation.current_kept,
            "scores": {s.layout.value: s.score for s in explanation.all_scores},
        }
        typer.echo(json.dumps(data, indent=2))
        return

    console.print(f"[bold cyan]{explanation.selected.value}[/bold cyan]  {explanation.reason}")
    table = Table(title="Layout fitness")
    table.add_column("Layout")
    table.add_column("Fitness", justify="right")
    for score in explanation.all_scores:
        marker = " *" if score.layout == explanation.selected else ""
        table.add_row(f"{score.layout.value}{marker}", f"{score.score:.2f}")
    console.print(table)


@layout_app.command("fitness")
def layout_fitness(
    panels: list[str] = PANELS_ARGUMENT,
    format: str = typer.Option("table", "--format", "-f", help="Output format: table or json"),
) -> None:
    """Break down every layout's fitness for a panel set."""
    panel_set = parse_panel_args(panels)
    breakdowns = [explain_layout_fitness(layout, panel_set) for layout in LAYOUT_ORDER]

    if format == "json":
        data = {
            b.layout.value: {
                "prior": b.prior,
                "utilization": b.utilization,
                "count": b.count_term,
                "assignment": b.assignment_score,
                "total": b.total,
                "assigned": b.assigned,
            }
            for b in breakdowns
        }
        typer.echo(json.dumps(data, indent=2))
        return

    table = Table(title=f"Fitness for {len(panel_set)} panel(s)")
    for column in ("Layout", "Prior", "Unused", "Count", "Assignment", "Total"):
        table.add_column(column, justify="left" if column == "Layout" else "right")
    for b in breakdowns:
        table.add_row(
            b.layout.value,
            f"{b.prior:.0f}",
            f"{b.utilization:.0f}",
            f"{b.count_term:.0f}",
            f"{b.assignment_score:.2f}",
            f"{b.total:.2f}",
        )
    console.print(table)


@layout_app.command("plan")
def layout_plan(
    panels: list[str] = PANELS_ARGUMENT,
    layout: str = typer.Option(None, "--layout", "-l", help="Preferred layout"),
    min_fitness: float = typer.Option(
        DEFAULT_MIN_FITNESS, "--min-fitness", help="Fitness the preferred layout must keep"
    ),
    format: str = typer.Option("table", "--format", "-f", help="Output format: table or json"),
) -> None:
    """Show which panel lands in which slot."""
    plan = build_layout_plan(parse_panel_args(panels), parse_layout_option(layout), min_fitness)

    if format == "json":
        typer.echo(plan.model_dump_json(indent=2))
        return

    console.print(f"[bold cyan]{plan.layout.value}[/bold cyan]  fitness {plan.fitness:.2f}")
    table = Table()
    for column in ("Slot", "Row", "Column", "Panel", "Size fits", "Role match"):
        table.add_column(column)
    for slot in plan.slots:
        table.add_row(
            str(slot.slot),
            slot.grid_row,
            slot.grid_column,
            slot.panel_type,
            "yes" if slot.size_fits else "no",
            "yes" if slot.role_matches else "no",
        )
    console.print(table)
    if plan.hidden_panels:
        console.print(f"Hidden: {', '.join(plan.hidden_panels)}")
    for warning in plan.warnings:
        console.print(f"[yellow]⚠ {warning}[/yellow]")
