"""
Layout plan assembly.

Main orchestrator that combines layout resolution, slot allocation and
warning generation to produce the complete plan a renderer consumes.
"""

from typing import Any

from storydesk.core.ir import LayoutId, LayoutPlan, PanelInstance, SlotAssignment
from storydesk.ui.layout_engine.allocate import assign_panels_to_slots
from storydesk.ui.layout_engine.fitness import compute_layout_fitness
from storydesk.ui.layout_engine.registry import get_panel_entry
from storydesk.ui.layout_engine.resolve import DEFAULT_MIN_FITNESS, resolve_preferred_layout
from storydesk.ui.layout_engine.templates import TemplateDefinition, get_layout_template


def build_layout_plan(
    panels: list[PanelInstance],
    layout: LayoutId | str | None = None,
    min_fitness: float = DEFAULT_MIN_FITNESS,
    *,
    resolve: bool = True,
) -> LayoutPlan:
    """
    Build a complete layout plan for a panel set.

    This is the main entry point for renderers. It orchestrates:
    1. Layout resolution (sticky to ``layout`` if given, skipped with resolve=False)
    2. Panel-to-slot allocation
    3. Warning generation (overflow, size mismatch, unregistered types)

    Args:
        panels: Workspace panels
        layout: Current or requested layout; None resolves afresh
        min_fitness: Fitness ``layout`` must reach to be kept
        resolve: If False, render ``layout`` as given (e.g. the layout a
            workspace already shows) without re-resolving it

    Returns:
        Complete LayoutPlan ready for rendering

    Examples:
        >>> from storydesk.core.ir import PanelRole
        >>> panel = PanelInstance(id="p1", type="scene-editor", role=PanelRole.PRIMARY)
        >>> plan = build_layout_plan([panel])
        >>> plan.layout.value
        'single'
        >>> [s.panel_id for s in plan.slots]
        ['p1']
    """
    if resolve or layout is None:
        resolved = resolve_preferred_layout(panels, layout, min_fitness)
    else:
        resolved = LayoutId(layout)
    template = get_layout_template(resolved)

    assigned = assign_panels_to_slots(panels, resolved)
    slots = _build_slot_assignments(assigned, template)

    assigned_ids = {p.id for p in assigned}
    hidden = [p.id for p in panels if p.id not in assigned_ids]

    return LayoutPlan(
        layout=resolved,
        slots=slots,
        hidden_panels=hidden,
        fitness=compute_layout_fitness(resolved, panels),
        warnings=_generate_warnings(panels, slots, hidden, template),
        metadata=_build_metadata(panels, template, requested=layout),
    )


def _build_slot_assignments(
    assigned: list[PanelInstance], template: TemplateDefinition
) -> list[SlotAssignment]:
    result = []
    for index, (panel, slot) in enumerate(zip(assigned, template.slots, strict=False)):
        entry = get_panel_entry(panel.type)
        result.append(
            SlotAssignment(
                slot=index,
                grid_row=slot.grid_row,
                grid_column=slot.grid_column,
                panel_id=panel.id,
                panel_type=panel.type,
                size_fits=entry is not None and slot.accepts(entry.size_class),
                role_matches=panel.role == slot.preferred_role,
            )
        )
    return result


def _generate_warnings(
    panels: list[PanelInstance],
    slots: list[SlotAssignment],
    hidden: list[str],
    template: TemplateDefinition,
) -> list[str]:
    """
    Generate warnings about layout issues.

    Warnings include:
    - Unregistered panel types
    - Panels hidden because the template is full
    - Panels placed in a slot that does not accept their size class
    """
    warnings = []

    unregistered = [p.type for p in panels if get_panel_entry(p.type) is None]
    if unregistered:
        warnings.append(f"Unregistered panel type(s) excluded: {', '.join(unregistered)}")

    overflow = len(hidden) - len(unregistered)
    if overflow > 0:
        warnings.append(
            f"{overflow} panel(s) exceed the {template.slot_count} slot(s) of "
            f"{template.label} and are hidden"
        )

    for slot in slots:
        if not slot.size_fits:
            warnings.append(
                f"Panel '{slot.panel_type}' placed in slot {slot.slot} "
                f"which does not accept its size class"
            )

    return warnings


def _build_metadata(
    panels: list[PanelInstance], template: TemplateDefinition, requested: LayoutId | str | None
) -> dict[str, Any]:
    """Build metadata for debugging and logging."""
    return {
        "panel_count": len(panels),
        "slot_count": template.slot_count,
        "layout_label": template.label,
        "grid_template_rows": template.grid_template_rows,
        "grid_template_columns": template.grid_template_columns,
        "requested_layout": LayoutId(requested).value if requested is not None else None,
    }


__all__ = ["build_layout_plan"]
