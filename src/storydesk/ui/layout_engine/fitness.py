"""
Layout fitness scoring.

Estimates how well a template suits a panel set. The score combines a
hand-tuned prior per layout and panel count, a penalty for unused
slots, a count-mismatch term and the best slot-assignment score.
Fitness is recomputed from scratch on every call.
"""

from dataclasses import dataclass

from storydesk.core.ir import LayoutId, PanelInstance
from storydesk.ui.layout_engine.allocate import assign_panels_to_slots, score_assignment
from storydesk.ui.layout_engine.templates import LAYOUT_ORDER, get_layout_template

# Designed intuition about which templates suit 1-4 panels.
LAYOUT_COUNT_PRIOR: dict[LayoutId, dict[int, float]] = {
    LayoutId.SINGLE: {1: 36, 2: -12, 3: -24, 4: -32},
    LayoutId.SPLIT_2: {1: -10, 2: 28, 3: -6, 4: -16},
    LayoutId.SPLIT_3: {1: -18, 2: 4, 3: 24, 4: -8},
    LayoutId.GRID_4: {1: -24, 2: -8, 3: 10, 4: 22},
    LayoutId.PRIMARY_SIDEBAR: {1: -8, 2: 16, 3: 2, 4: -12},
    LayoutId.TRIPTYCH: {1: -18, 2: 10, 3: 18, 4: -10},
    LayoutId.STUDIO: {1: -30, 2: -20, 3: 8, 4: 20},
}

UNUSED_SLOT_PENALTY = 6
EXACT_FIT_BONUS = 40
OVERFLOW_PENALTY = 25
UNDERFLOW_PENALTY = 15
EMPTY_WORKSPACE_PENALTY = -100.0


@dataclass
class FitnessBreakdown:
    """Component-wise fitness of one layout for one panel set."""

    layout: LayoutId
    panel_count: int
    slot_count: int
    prior: float
    utilization: float
    count_term: float
    assignment_score: float
    assigned: list[str]

    @property
    def total(self) -> float:
        return self.prior + self.utilization + self.count_term + self.assignment_score


def get_count_prior(layout: LayoutId, panel_count: int) -> float:
    """Prior for a layout at a panel count; counts clamp to 1..4."""
    clamped = min(4, max(1, panel_count))
    return LAYOUT_COUNT_PRIOR[layout].get(clamped, 0.0)


def get_slot_utilization_penalty(slot_count: int, panel_count: int) -> float:
    return -max(0, slot_count - panel_count) * UNUSED_SLOT_PENALTY


def get_count_mismatch_term(slot_count: int, panel_count: int) -> float:
    diff = panel_count - slot_count
    if diff == 0:
        return EXACT_FIT_BONUS
    if diff > 0:
        return -diff * OVERFLOW_PENALTY
    return -abs(diff) * UNDERFLOW_PENALTY


def explain_layout_fitness(
    layout: LayoutId | str, panels: list[PanelInstance]
) -> FitnessBreakdown:
    """
    Break down the fitness of a layout for a panel set.

    Args:
        layout: Layout to evaluate
        panels: Workspace panels

    Returns:
        FitnessBreakdown whose ``total`` equals compute_layout_fitness()
    """
    template = get_layout_template(layout)
    slot_count = template.slot_count
    panel_count = len(panels)

    if panel_count == 0:
        # Never recommend a multi-slot layout for an empty workspace
        empty_score = 0.0 if template.layout == LayoutId.SINGLE else EMPTY_WORKSPACE_PENALTY
        return FitnessBreakdown(
            layout=template.layout,
            panel_count=0,
            slot_count=slot_count,
            prior=empty_score,
            utilization=0.0,
            count_term=0.0,
            assignment_score=0.0,
            assigned=[],
        )

    assigned = assign_panels_to_slots(panels, template.layout)
    return FitnessBreakdown(
        layout=template.layout,
        panel_count=panel_count,
        slot_count=slot_count,
        prior=get_count_prior(template.layout, panel_count),
        utilization=get_slot_utilization_penalty(slot_count, panel_count),
        count_term=get_count_mismatch_term(slot_count, panel_count),
        assignment_score=score_assignment(assigned, template.slots),
        assigned=[p.id for p in assigned],
    )


def compute_layout_fitness(layout: LayoutId | str, panels: list[PanelInstance]) -> float:
    """
    Score how well a layout suits a panel set (higher is better).

    Examples:
        >>> compute_layout_fitness("single", [])
        0.0
        >>> compute_layout_fitness("grid-4", []) < 0
        True
    """
    return explain_layout_fitness(layout, panels).total


def get_layout_fitnesses(panels: list[PanelInstance]) -> dict[LayoutId, float]:
    """Fitness of every layout for a panel set, in catalog order."""
    return {layout: compute_layout_fitness(layout, panels) for layout in LAYOUT_ORDER}


__all__ = [
    "LAYOUT_COUNT_PRIOR",
    "FitnessBreakdown",
    "compute_layout_fitness",
    "explain_layout_fitness",
    "get_count_prior",
    "get_layout_fitnesses",
]
