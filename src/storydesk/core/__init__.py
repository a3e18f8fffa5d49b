"""Core storydesk functionality: IR, errors, project manifest."""

from . import ir
from .errors import (
    ConfigError,
    DirectiveError,
    ErrorContext,
    LayoutError,
    PersistenceError,
    StorydeskError,
)
from .manifest import (
    MANIFEST_FILE,
    LayoutConfig,
    StudioManifest,
    WorkspaceConfig,
    load_manifest,
    load_project_manifest,
)

__all__ = [
    "ir",
    "StorydeskError",
    "ConfigError",
    "DirectiveError",
    "ErrorContext",
    "LayoutError",
    "PersistenceError",
    "MANIFEST_FILE",
    "LayoutConfig",
    "StudioManifest",
    "WorkspaceConfig",
    "load_manifest",
    "load_project_manifest",
]
