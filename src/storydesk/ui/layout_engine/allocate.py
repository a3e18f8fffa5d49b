"""
Panel-to-slot allocation.

Assigns panels to a template's slots by scoring every ordering of the
candidate set and keeping the best. This is the core of the layout
planning process. Exhaustive search is only affordable because
candidate selection never hands over more panels than the template has
slots, and templates are capped at MAX_TEMPLATE_SLOTS.
"""

import logging
from collections.abc import Iterator, Sequence

from storydesk.core.errors import LayoutError
from storydesk.core.ir import LayoutId, PanelInstance, PanelSizeClass
from storydesk.ui.layout_engine.candidates import (
    pick_candidates_for_template,
    require_entry,
    size_score,
)
from storydesk.ui.layout_engine.registry import get_panel_entry
from storydesk.ui.layout_engine.templates import (
    MAX_TEMPLATE_SLOTS,
    SlotDefinition,
    get_layout_template,
)

logger = logging.getLogger(__name__)

ROLE_MATCH_SCORE = 5
NARROW_COMPACT_SCORE = 3
RECENCY_BASE = 6.0
RECENCY_DECAY = 0.5


def iter_permutations(items: Sequence[PanelInstance]) -> Iterator[list[PanelInstance]]:
    """
    Yield every ordering of ``items``.

    Order is deterministic: for each index i, every permutation that
    starts with items[i] is produced before those starting with items[i + 1].
    """
    if len(items) <= 1:
        yield list(items)
        return
    for i, head in enumerate(items):
        rest = [*items[:i], *items[i + 1 :]]
        for tail in iter_permutations(rest):
            yield [head, *tail]


def score_panel_in_slot(panel: PanelInstance, slot: SlotDefinition) -> float:
    """Score one panel at one slot position (assignment weights)."""
    entry = require_entry(panel)
    score: float = size_score(entry.size_class, slot)
    if panel.role == slot.preferred_role:
        score += ROLE_MATCH_SCORE
    if entry.size_class == PanelSizeClass.COMPACT and slot.is_narrow:
        score += NARROW_COMPACT_SCORE
    score += max(0.0, RECENCY_BASE - panel.slot_index * RECENCY_DECAY)
    return score


def score_assignment(perm: Sequence[PanelInstance], slots: Sequence[SlotDefinition]) -> float:
    """
    Total score of placing ``perm[i]`` into ``slots[i]`` for every i.

    Args:
        perm: Panels in slot order (no longer than ``slots``)
        slots: Template slots

    Returns:
        Sum of per-position scores
    """
    return sum(score_panel_in_slot(panel, slot) for panel, slot in zip(perm, slots, strict=False))


def assign_panels_to_slots(
    panels: list[PanelInstance], layout: LayoutId | str
) -> list[PanelInstance]:
    """
    Allocate panels to a layout's slots.

    Algorithm:
    1. Drop panels whose type is not registered
    2. Select at most ``slot_count`` candidates
    3. Score every permutation of the candidates against the slots
    4. Keep the first permutation reaching the highest score

    Args:
        panels: Workspace panels in insertion order
        layout: Target layout id

    Returns:
        Panels in slot order: element i is rendered in slot i. Panels not
        returned are hidden for this layout, not deleted.

    Raises:
        LayoutError: If candidate selection exceeds the slot count

    Examples:
        >>> from storydesk.core.ir import PanelRole
        >>> panels = [
        ...     PanelInstance(id="list", type="scene-list", role=PanelRole.SIDEBAR, slot_index=0),
        ...     PanelInstance(id="ed", type="scene-editor", role=PanelRole.PRIMARY, slot_index=1),
        ... ]
        >>> [p.id for p in assign_panels_to_slots(panels, "primary-sidebar")]
        ['ed', 'list']
    """
    template = get_layout_template(layout)

    registered = [p for p in panels if get_panel_entry(p.type) is not None]
    if len(registered) != len(panels):
        logger.debug(
            "Skipping %d unregistered panel(s) for %s",
            len(panels) - len(registered),
            template.layout.value,
        )
    if not registered:
        return []

    candidates = pick_candidates_for_template(registered, template)
    if len(candidates) > template.slot_count or len(candidates) > MAX_TEMPLATE_SLOTS:
        raise LayoutError(
            f"Candidate selection returned {len(candidates)} panels for "
            f"{template.slot_count} slots in '{template.layout.value}'"
        )

    if len(candidates) <= 1:
        return candidates

    best_perm = candidates
    best_score = float("-inf")
    for perm in iter_permutations(candidates):
        score = score_assignment(perm, template.slots)
        # strict > keeps the first permutation reaching the maximum
        if score > best_score:
            best_score = score
            best_perm = perm

    logger.debug(
        "Assigned %s to %s (score %.2f)",
        [p.type for p in best_perm],
        template.layout.value,
        best_score,
    )
    return best_perm


__all__ = [
    "assign_panels_to_slots",
    "iter_permutations",
    "score_assignment",
    "score_panel_in_slot",
]
