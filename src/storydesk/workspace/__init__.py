"""
Workspace composition.

Explicit workspace state, the composition directive dispatcher that
mutates it, JSON persistence, and the agent tool handlers built on top.
"""

from storydesk.workspace.dispatcher import (
    DEDUP_WINDOW_MS,
    MAX_DIRECTIVE_PANELS,
    CompositionDispatcher,
    directive_fingerprint,
    normalize_directive,
)
from storydesk.workspace.persistence import (
    clear_workspace_state,
    load_workspace_state,
    save_workspace_state,
)
from storydesk.workspace.state import WorkspaceState

__all__ = [
    "DEDUP_WINDOW_MS",
    "MAX_DIRECTIVE_PANELS",
    "CompositionDispatcher",
    "WorkspaceState",
    "clear_workspace_state",
    "directive_fingerprint",
    "load_workspace_state",
    "normalize_directive",
    "save_workspace_state",
]
