"""
storydesk Workspace Layout Engine.

Deterministic layout resolution for workspace panels.

Key components:
- Template catalog (templates.py)
- Panel registry (registry.py)
- Candidate selection (candidates.py)
- Panel-to-slot allocation (allocate.py)
- Layout fitness (fitness.py)
- Layout resolution (resolve.py)
- Layout plan assembly (plan.py)
"""

from storydesk.ui.layout_engine.allocate import (
    assign_panels_to_slots,
    iter_permutations,
    score_assignment,
)
from storydesk.ui.layout_engine.candidates import (
    pick_candidates_for_template,
    sort_panels_by_role,
)
from storydesk.ui.layout_engine.fitness import (
    FitnessBreakdown,
    compute_layout_fitness,
    explain_layout_fitness,
    get_layout_fitnesses,
)
from storydesk.ui.layout_engine.plan import build_layout_plan
from storydesk.ui.layout_engine.registry import (
    PANEL_REGISTRY,
    PANEL_TYPES,
    PanelRegistryEntry,
    get_panel_entry,
    is_panel_type,
)
from storydesk.ui.layout_engine.resolve import (
    DEFAULT_MIN_FITNESS,
    RESET_MIN_FITNESS,
    STEADY_MIN_FITNESS,
    LayoutScore,
    ResolutionExplanation,
    explain_layout_resolution,
    resolve_layout,
    resolve_preferred_layout,
)
from storydesk.ui.layout_engine.templates import (
    LAYOUT_ORDER,
    LAYOUT_TEMPLATES,
    MAX_TEMPLATE_SLOTS,
    SlotDefinition,
    TemplateDefinition,
    get_layout_template,
    get_next_layout,
    is_layout_id,
)

__all__ = [
    # Core functions
    "build_layout_plan",
    "assign_panels_to_slots",
    "compute_layout_fitness",
    "resolve_layout",
    "resolve_preferred_layout",
    # Explanations
    "explain_layout_fitness",
    "explain_layout_resolution",
    "FitnessBreakdown",
    "LayoutScore",
    "ResolutionExplanation",
    "get_layout_fitnesses",
    # Building blocks
    "iter_permutations",
    "pick_candidates_for_template",
    "score_assignment",
    "sort_panels_by_role",
    # Thresholds
    "DEFAULT_MIN_FITNESS",
    "RESET_MIN_FITNESS",
    "STEADY_MIN_FITNESS",
    # Template catalog
    "LAYOUT_ORDER",
    "LAYOUT_TEMPLATES",
    "MAX_TEMPLATE_SLOTS",
    "SlotDefinition",
    "TemplateDefinition",
    "get_layout_template",
    "get_next_layout",
    "is_layout_id",
    # Panel registry
    "PANEL_REGISTRY",
    "PANEL_TYPES",
    "PanelRegistryEntry",
    "get_panel_entry",
    "is_panel_type",
]
