"""
storydesk Intermediate Representation (IR) types.

This package contains the data types shared by the layout engine and
the workspace composition layer. Types are organized into submodules
and re-exported here.
"""

# Layout vocabulary and plans
from .layout import (
    ROLE_PRIORITY,
    LayoutId,
    LayoutPlan,
    PanelRole,
    PanelSizeClass,
    SlotAssignment,
)

# Panels and composition directives
from .workspace import (
    CompositionDirective,
    DirectiveAction,
    DispatchResult,
    NormalizedDirective,
    NormalizedPanel,
    PanelDirective,
    PanelInstance,
)

__all__ = [
    # Layout
    "ROLE_PRIORITY",
    "LayoutId",
    "LayoutPlan",
    "PanelRole",
    "PanelSizeClass",
    "SlotAssignment",
    # Workspace
    "CompositionDirective",
    "DirectiveAction",
    "DispatchResult",
    "NormalizedDirective",
    "NormalizedPanel",
    "PanelDirective",
    "PanelInstance",
]
