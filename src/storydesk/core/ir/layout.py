"""
Workspace layout types for the storydesk IR.

This module contains the closed vocabularies the layout engine works
with (roles, size classes, layout ids) and the layout plan produced
for a renderer.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class PanelRole(str, Enum):
    """
    Intended prominence of a panel in the workspace.

    Declaration order is priority order: primary panels win over
    sidebars when the workspace is overcrowded.
    """

    PRIMARY = "primary"  # Main focus of the task
    SECONDARY = "secondary"  # Supporting view
    TERTIARY = "tertiary"  # Minor view (toolbars, strips)
    SIDEBAR = "sidebar"  # Narrow navigation/context column


class PanelSizeClass(str, Enum):
    """Footprint category of a panel."""

    COMPACT = "compact"  # Fits a narrow column
    STANDARD = "standard"  # Needs a regular cell
    WIDE = "wide"  # Needs a main column


class LayoutId(str, Enum):
    """
    Named grid templates available to the workspace.

    Declaration order is the fixed catalog order used for tie-breaks.
    """

    SINGLE = "single"  # One full-size panel
    SPLIT_2 = "split-2"  # Two columns (3fr / 2fr)
    SPLIT_3 = "split-3"  # Left column + stacked right column
    GRID_4 = "grid-4"  # 2x2 grid
    PRIMARY_SIDEBAR = "primary-sidebar"  # Main column + 280px sidebar
    TRIPTYCH = "triptych"  # Sidebar + center + sidebar
    STUDIO = "studio"  # Top bar, two rails, center, bottom strip


ROLE_PRIORITY: tuple[PanelRole, ...] = tuple(PanelRole)


class SlotAssignment(BaseModel):
    """
    A single slot of a resolved layout and the panel placed in it.

    Attributes:
        slot: Position of the slot in the template's slot list
        grid_row: CSS grid-row placement
        grid_column: CSS grid-column placement
        panel_id: Identifier of the assigned panel
        panel_type: Registry type of the assigned panel
        size_fits: Whether the slot accepts the panel's size class
        role_matches: Whether the panel's role is the slot's preferred role
    """

    model_config = {"frozen": True}

    slot: int = Field(ge=0)
    grid_row: str
    grid_column: str
    panel_id: str
    panel_type: str
    size_fits: bool = True
    role_matches: bool = False


class LayoutPlan(BaseModel):
    """
    Deterministic output of the layout engine for one panel set.

    Attributes:
        layout: Resolved layout template
        slots: Slot-by-slot assignment (one entry per placed panel)
        hidden_panels: Panel IDs excluded from the assignment
        fitness: Fitness of the resolved layout for the panel set
        warnings: Layout warnings (overflow, size mismatch, unknown types)
        metadata: Additional metadata for debugging/logging
    """

    model_config = {"frozen": True}

    layout: LayoutId
    slots: list[SlotAssignment] = Field(default_factory=list)
    hidden_panels: list[str] = Field(default_factory=list)
    fitness: float = 0.0
    warnings: list[str] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
