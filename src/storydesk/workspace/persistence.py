"""
Workspace persistence layer.

Handles reading and writing the workspace panel/layout state to the
.storydesk/workspace/ directory. State is stored verbatim as JSON under
a fixed namespace and schema version; there is no migration logic.

Persistence failures are never fatal: the in-memory state stays correct
and only durability across reloads is lost.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from storydesk.core.errors import PersistenceError
from storydesk.workspace.state import WorkspaceState

logger = logging.getLogger(__name__)

WORKSPACE_DIR = ".storydesk/workspace"
WORKSPACE_FILE = "workspace.json"
STATE_NAMESPACE = "storydesk.workspace"
SCHEMA_VERSION = 1


def get_workspace_file(project_root: Path, state_dir: str = WORKSPACE_DIR) -> Path:
    """Get the workspace.json file path.

    Args:
        project_root: Root directory of the storydesk project.
        state_dir: State directory relative to the project root.

    Returns:
        Path to the workspace.json file.
    """
    return project_root / state_dir / WORKSPACE_FILE


def load_workspace_state(project_root: Path, state_dir: str = WORKSPACE_DIR) -> WorkspaceState:
    """Load the persisted workspace state.

    Args:
        project_root: Root directory of the storydesk project.
        state_dir: State directory relative to the project root.

    Returns:
        The stored state, or an empty state if the file is missing,
        unreadable, or written under another namespace or version.
    """
    state_file = get_workspace_file(project_root, state_dir)
    if not state_file.exists():
        return WorkspaceState()

    try:
        data = json.loads(state_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to load workspace state from {state_file}: {e}")
        return WorkspaceState()

    if not isinstance(data, dict):
        logger.warning(f"Ignoring workspace state in {state_file}: not a JSON object")
        return WorkspaceState()

    if data.get("namespace") != STATE_NAMESPACE or data.get("version") != SCHEMA_VERSION:
        logger.warning(
            f"Ignoring workspace state in {state_file}: "
            f"namespace={data.get('namespace')!r} version={data.get('version')!r}"
        )
        return WorkspaceState()

    try:
        return WorkspaceState.from_dict(data.get("state", {}))
    except (ValidationError, ValueError, TypeError) as e:
        logger.warning(f"Failed to restore workspace state from {state_file}: {e}")
        return WorkspaceState()


def save_workspace_state(
    project_root: Path, state: WorkspaceState, state_dir: str = WORKSPACE_DIR
) -> Path | None:
    """Save the workspace state.

    Args:
        project_root: Root directory of the storydesk project.
        state: Workspace state to persist.
        state_dir: State directory relative to the project root.

    Returns:
        Path to the saved file, or None if saving failed (logged).
    """
    try:
        return _write_state(get_workspace_file(project_root, state_dir), state)
    except PersistenceError as e:
        logger.warning(str(e))
        return None


def _write_state(state_file: Path, state: WorkspaceState) -> Path:
    try:
        document: dict[str, Any] = {
            "namespace": STATE_NAMESPACE,
            "version": SCHEMA_VERSION,
            "state": state.to_dict(),
        }
        content = json.dumps(document, indent=2)
    except (TypeError, ValueError) as e:
        raise PersistenceError(f"Workspace state is not serializable: {e}") from e

    try:
        state_file.parent.mkdir(parents=True, exist_ok=True)
        state_file.write_text(content, encoding="utf-8")
    except OSError as e:
        raise PersistenceError(f"Failed to write workspace state to {state_file}: {e}") from e
    return state_file


def clear_workspace_state(project_root: Path, state_dir: str = WORKSPACE_DIR) -> bool:
    """Delete the persisted workspace state.

    Returns:
        True if a file was deleted.
    """
    state_file = get_workspace_file(project_root, state_dir)
    if not state_file.exists():
        return False
    state_file.unlink()
    return True


__all__ = [
    "SCHEMA_VERSION",
    "STATE_NAMESPACE",
    "clear_workspace_state",
    "get_workspace_file",
    "load_workspace_state",
    "save_workspace_state",
]
