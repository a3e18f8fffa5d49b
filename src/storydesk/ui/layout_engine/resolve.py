"""
Layout resolution.

Deterministic rules for choosing which template arranges a panel set:
- stateless: the best-fitness layout, ties broken by catalog order
- sticky: keep the current layout until its fitness drops below a
  threshold, so the grid does not re-flow on every minor panel change
"""

import logging
from dataclasses import dataclass

from storydesk.core.ir import LayoutId, PanelInstance
from storydesk.ui.layout_engine.fitness import compute_layout_fitness, get_layout_fitnesses
from storydesk.ui.layout_engine.templates import LAYOUT_ORDER

logger = logging.getLogger(__name__)

# Steady state: only re-flow when the current template is clearly unsuitable.
STEADY_MIN_FITNESS = 35.0
# Right after a full reset the current template is a weaker commitment.
RESET_MIN_FITNESS = 20.0
DEFAULT_MIN_FITNESS = 25.0


def resolve_layout(panels: list[PanelInstance]) -> LayoutId:
    """
    Select the layout with the highest fitness for a panel set.

    Args:
        panels: Workspace panels

    Returns:
        Best-fitness layout; the earliest in catalog order wins ties

    Examples:
        >>> resolve_layout([])
        <LayoutId.SINGLE: 'single'>
    """
    if not panels:
        return LayoutId.SINGLE

    fitnesses = get_layout_fitnesses(panels)
    best = LAYOUT_ORDER[0]
    for layout in LAYOUT_ORDER[1:]:
        # strict > keeps catalog order on ties
        if fitnesses[layout] > fitnesses[best]:
            best = layout
    logger.debug("Resolved %d panel(s) to %s (%.2f)", len(panels), best.value, fitnesses[best])
    return best


def resolve_preferred_layout(
    panels: list[PanelInstance],
    current: LayoutId | str | None = None,
    min_fitness: float = DEFAULT_MIN_FITNESS,
) -> LayoutId:
    """
    Keep ``current`` while it is good enough, otherwise resolve afresh.

    Args:
        panels: Workspace panels
        current: Layout currently shown (or requested); None resolves afresh
        min_fitness: Fitness the current layout must reach to be kept

    Returns:
        ``current`` if its fitness is at least ``min_fitness``, otherwise
        resolve_layout(panels)
    """
    if current is None:
        return resolve_layout(panels)

    current_layout = LayoutId(current)
    score = compute_layout_fitness(current_layout, panels)
    if score >= min_fitness:
        logger.debug("Keeping %s (%.2f >= %.2f)", current_layout.value, score, min_fitness)
        return current_layout
    logger.debug("Dropping %s (%.2f < %.2f)", current_layout.value, score, min_fitness)
    return resolve_layout(panels)


@dataclass
class LayoutScore:
    """Fitness of one layout candidate."""

    layout: LayoutId
    score: float


@dataclass
class ResolutionExplanation:
    """Detailed explanation of layout resolution."""

    selected: LayoutId
    reason: str
    all_scores: list[LayoutScore]
    current: LayoutId | None
    current_kept: bool
    min_fitness: float


def explain_layout_resolution(
    panels: list[PanelInstance],
    current: LayoutId | str | None = None,
    min_fitness: float = DEFAULT_MIN_FITNESS,
) -> ResolutionExplanation:
    """
    Explain why a layout was selected for a panel set.

    Returns every layout's fitness (best first), the selected layout and
    whether the current layout was kept by the sticky rule.
    """
    fitnesses = get_layout_fitnesses(panels)
    scores = [LayoutScore(layout, fitnesses[layout]) for layout in LAYOUT_ORDER]
    # stable sort keeps catalog order among equal scores
    scores.sort(key=lambda s: s.score, reverse=True)

    current_layout = LayoutId(current) if current is not None else None
    selected = resolve_preferred_layout(panels, current_layout, min_fitness)
    current_kept = current_layout is not None and selected == current_layout and (
        fitnesses[current_layout] >= min_fitness
    )

    if not panels:
        reason = "Empty workspace"
    elif current_kept:
        reason = (
            f"Current layout fitness {fitnesses[selected]:.2f} "
            f">= threshold {min_fitness:.2f}"
        )
    elif current_layout is not None:
        reason = (
            f"Current layout fitness {fitnesses[current_layout]:.2f} below threshold "
            f"{min_fitness:.2f}; best fitness {fitnesses[selected]:.2f}"
        )
    else:
        reason = f"Best fitness {fitnesses[selected]:.2f}"

    return ResolutionExplanation(
        selected=selected,
        reason=reason,
        all_scores=scores,
        current=current_layout,
        current_kept=current_kept,
        min_fitness=min_fitness,
    )


__all__ = [
    "STEADY_MIN_FITNESS",
    "RESET_MIN_FITNESS",
    "DEFAULT_MIN_FITNESS",
    "resolve_layout",
    "resolve_preferred_layout",
    "explain_layout_resolution",
    "LayoutScore",
    "ResolutionExplanation",
]
