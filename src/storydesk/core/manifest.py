"""
Project manifest loading.

Reads storydesk.toml and turns its [layout] table into typed settings.
A missing manifest yields the defaults.
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigError, ErrorContext

MANIFEST_FILE = "storydesk.toml"

# =============================================================================
# Layout Configuration
# =============================================================================


@dataclass
class LayoutConfig:
    """
    Layout resolution tuning.

    Examples in storydesk.toml:

        [layout]
        steady_min_fitness = 35   # keep current layout while fitness >= this
        reset_min_fitness = 20    # threshold right after a replace
        dedup_window_ms = 1400    # identical directives inside this window are dropped
    """

    steady_min_fitness: float = 35.0
    reset_min_fitness: float = 20.0
    dedup_window_ms: float = 1400.0


# =============================================================================
# Workspace Configuration
# =============================================================================


@dataclass
class WorkspaceConfig:
    """Where the workspace state is persisted, relative to the project root."""

    state_dir: str = ".storydesk/workspace"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"  # DEBUG | INFO | WARNING | ERROR


@dataclass
class StudioManifest:
    """
    Project manifest loaded from storydesk.toml.

    Every section is optional; a project without a manifest behaves as if
    an empty one were present.
    """

    name: str = "storydesk"
    version: str = "0.0.0"
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    workspace: WorkspaceConfig = field(default_factory=WorkspaceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_manifest(path: Path) -> StudioManifest:
    """
    Load a storydesk.toml manifest.

    Args:
        path: Path to the manifest file

    Returns:
        Parsed manifest with defaults for missing keys

    Raises:
        ConfigError: If the file is not valid TOML or a value is invalid
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML: {e}", ErrorContext(path)) from e

    project = data.get("project", {})
    layout_data = data.get("layout", {})
    workspace_data = data.get("workspace", {})
    logging_data = data.get("logging", {})

    layout_config = LayoutConfig(
        steady_min_fitness=_number(path, layout_data, "layout", "steady_min_fitness", 35.0),
        reset_min_fitness=_number(path, layout_data, "layout", "reset_min_fitness", 20.0),
        dedup_window_ms=_number(path, layout_data, "layout", "dedup_window_ms", 1400.0),
    )
    if layout_config.dedup_window_ms < 0:
        raise ConfigError(
            f"dedup_window_ms must be >= 0, got: {layout_config.dedup_window_ms}",
            ErrorContext(path, "layout.dedup_window_ms"),
        )

    level = str(logging_data.get("level", "WARNING")).upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(
            f"logging level must be one of {'/'.join(_LOG_LEVELS)}, got: {level}",
            ErrorContext(path, "logging.level"),
        )

    return StudioManifest(
        name=project.get("name", "storydesk"),
        version=project.get("version", "0.0.0"),
        layout=layout_config,
        workspace=WorkspaceConfig(
            state_dir=workspace_data.get("state_dir", ".storydesk/workspace"),
        ),
        logging=LoggingConfig(level=level),
    )


def load_project_manifest(project_root: Path) -> StudioManifest:
    """Load storydesk.toml from a project root, or defaults if it is absent."""
    manifest_path = project_root / MANIFEST_FILE
    if not manifest_path.exists():
        return StudioManifest()
    return load_manifest(manifest_path)


def _number(path: Path, section: dict[str, Any], name: str, key: str, default: float) -> float:
    value = section.get(key, default)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ConfigError(
            f"{key} must be a number, got: {value!r}",
            ErrorContext(path, f"{name}.{key}"),
        )
    return float(value)
