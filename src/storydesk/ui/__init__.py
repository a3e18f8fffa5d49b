"""
storydesk UI module.

This module provides the workspace layout engine: template catalog,
panel registry and layout resolution.
"""

from storydesk.ui.layout_engine import (
    build_layout_plan,
    resolve_layout,
    resolve_preferred_layout,
)

__all__ = [
    "build_layout_plan",
    "resolve_layout",
    "resolve_preferred_layout",
]
