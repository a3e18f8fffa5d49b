"""
storydesk - panel layout resolution for an AI-assisted writing studio.

Decides which grid template arranges a set of workspace panels, which
panel fills which slot, and how agent-issued composition directives are
applied to the workspace.
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import (
    ConfigError,
    DirectiveError,
    LayoutError,
    PersistenceError,
    StorydeskError,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "StorydeskError",
    "ConfigError",
    "DirectiveError",
    "LayoutError",
    "PersistenceError",
]
