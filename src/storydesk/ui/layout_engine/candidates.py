"""
Candidate selection.

Bounds the panel set handed to slot assignment. When a template has
fewer slots than there are panels, each panel is ranked by how well it
could fill its best slot, how important its role is, and how long it
has been in the workspace; only the top ``slot_count`` survive.
"""

from storydesk.core.errors import LayoutError
from storydesk.core.ir import ROLE_PRIORITY, PanelInstance, PanelSizeClass
from storydesk.ui.layout_engine.registry import PanelRegistryEntry, get_panel_entry
from storydesk.ui.layout_engine.templates import SlotDefinition, TemplateDefinition

SIZE_MATCH_SCORE = 15
SIZE_MISMATCH_SCORE = -25
RANK_ROLE_MATCH_SCORE = 6
RANK_NARROW_COMPACT_SCORE = 4
STABILITY_BASE = 8.0
STABILITY_DECAY = 0.75


def require_entry(panel: PanelInstance) -> PanelRegistryEntry:
    """Look up a panel's registry entry, failing loudly for unregistered types."""
    entry = get_panel_entry(panel.type)
    if entry is None:
        raise LayoutError(f"Panel '{panel.id}' has unregistered type '{panel.type}'")
    return entry


def size_score(size_class: PanelSizeClass, slot: SlotDefinition) -> int:
    return SIZE_MATCH_SCORE if slot.accepts(size_class) else SIZE_MISMATCH_SCORE


def rank_panel_for_slot(panel: PanelInstance, slot: SlotDefinition) -> int:
    """Score how well a panel would fill one slot (ranking weights)."""
    entry = require_entry(panel)
    score = size_score(entry.size_class, slot)
    if panel.role == slot.preferred_role:
        score += RANK_ROLE_MATCH_SCORE
    if entry.size_class == PanelSizeClass.COMPACT and slot.is_narrow:
        score += RANK_NARROW_COMPACT_SCORE
    return score


def role_priority_boost(panel: PanelInstance) -> int:
    """Primary panels get the largest boost, sidebars the smallest."""
    return len(ROLE_PRIORITY) - ROLE_PRIORITY.index(panel.role)


def stability_boost(panel: PanelInstance) -> float:
    """Older panels (lower slot_index) are favoured to keep the workspace stable."""
    return max(0.0, STABILITY_BASE - panel.slot_index * STABILITY_DECAY)


def score_candidate(panel: PanelInstance, template: TemplateDefinition) -> float:
    """Total rank score of a panel for a template."""
    best_slot_score = max(rank_panel_for_slot(panel, slot) for slot in template.slots)
    return best_slot_score + role_priority_boost(panel) + stability_boost(panel)


def pick_candidates_for_template(
    panels: list[PanelInstance], template: TemplateDefinition
) -> list[PanelInstance]:
    """
    Select the panels that will compete for a template's slots.

    Args:
        panels: Registered panels in workspace order
        template: Target template

    Returns:
        The input (copied, order preserved) when everything fits; otherwise
        the ``slot_count`` highest-ranked panels, equal scores keeping
        their original relative order.

    Examples:
        >>> from storydesk.core.ir import PanelRole
        >>> from storydesk.ui.layout_engine.templates import SINGLE
        >>> panels = [
        ...     PanelInstance(id="a", type="scene-list", role=PanelRole.SIDEBAR, slot_index=0),
        ...     PanelInstance(id="b", type="scene-editor", role=PanelRole.PRIMARY, slot_index=1),
        ... ]
        >>> [p.id for p in pick_candidates_for_template(panels, SINGLE)]
        ['b']
    """
    slot_count = template.slot_count
    if len(panels) <= slot_count:
        return list(panels)

    # sorted() is stable, including with reverse=True
    ranked = sorted(panels, key=lambda p: score_candidate(p, template), reverse=True)
    return ranked[:slot_count]


def sort_panels_by_role(panels: list[PanelInstance]) -> list[PanelInstance]:
    """Order panels by role priority (primary first), stable within a role."""
    return sorted(panels, key=lambda p: ROLE_PRIORITY.index(p.role))


__all__ = [
    "pick_candidates_for_template",
    "rank_panel_for_slot",
    "role_priority_boost",
    "score_candidate",
    "sort_panels_by_role",
    "stability_boost",
]
