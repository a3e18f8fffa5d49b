"""
Workspace panel and composition directive types for the storydesk IR.

Panels are the units the layout engine arranges; composition directives
are the instructions an external agent issues to rearrange them.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .layout import LayoutId, PanelRole


class DirectiveAction(str, Enum):
    """Actions a composition directive can request."""

    SHOW = "show"  # Merge-or-append panels
    HIDE = "hide"  # Remove panels by type
    REPLACE = "replace"  # Substitute the whole panel set
    CLEAR = "clear"  # Remove every panel


class PanelInstance(BaseModel):
    """
    A panel present in the workspace.

    Attributes:
        id: Unique panel identifier within the workspace
        type: Panel registry type (e.g. "scene-editor")
        role: Intended prominence
        props: Opaque per-panel configuration
        slot_index: Creation order counter; never reused, lower is older
    """

    model_config = {"frozen": True}

    id: str
    type: str
    role: PanelRole
    props: dict[str, Any] = Field(default_factory=dict)
    slot_index: int = Field(default=0, ge=0)


class PanelDirective(BaseModel):
    """
    One raw panel entry of a composition directive.

    Values are kept as received; validation against the registry and the
    role vocabulary happens during normalization so that bad entries can
    be dropped instead of failing the whole directive.
    """

    model_config = {"frozen": True}

    type: str
    role: str | None = None
    props: dict[str, Any] | None = None

    @field_validator("role", mode="before")
    @classmethod
    def ignore_non_string_role(cls, v: Any) -> Any:
        """Non-string roles are treated as absent."""
        return v if isinstance(v, str) else None

    @field_validator("props", mode="before")
    @classmethod
    def ignore_non_mapping_props(cls, v: Any) -> Any:
        """Non-object props are treated as absent."""
        return v if isinstance(v, dict) else None


class CompositionDirective(BaseModel):
    """
    Externally issued instruction to rearrange the workspace.

    Attributes:
        action: Requested action ("show", "hide", "replace", "clear")
        layout: Optional layout id to prefer
        panels: Panel entries the action applies to
        reasoning: Free-text explanation, diagnostic only
    """

    model_config = {"frozen": True}

    action: str
    layout: str | None = None
    panels: list[PanelDirective] = Field(default_factory=list)
    reasoning: str | None = None

    @field_validator("panels", mode="before")
    @classmethod
    def parse_encoded_panels(cls, v: Any) -> Any:
        """
        Accept panels sent as a JSON-encoded string.

        Entries without a string ``type`` are dropped rather than failing
        the whole directive.
        """
        if v is None:
            return []
        if isinstance(v, str):
            try:
                v = json.loads(v)
            except json.JSONDecodeError:
                return []
        if not isinstance(v, list):
            return []
        return [
            entry
            for entry in v
            if isinstance(entry, PanelDirective)
            or (isinstance(entry, dict) and isinstance(entry.get("type"), str))
        ]


class NormalizedPanel(BaseModel):
    """A directive panel entry that passed validation."""

    model_config = {"frozen": True}

    type: str
    role: PanelRole | None = None
    props: dict[str, Any] | None = None


class NormalizedDirective(BaseModel):
    """
    A composition directive after validation against the catalogs.

    Attributes:
        action: Recognised action
        layout: Valid layout id, or None for auto-resolution
        panels: Deduplicated entries with known types and valid roles only
        dropped_types: Panel types that were not in the registry
        reasoning: Carried through for diagnostics
    """

    model_config = {"frozen": True}

    action: DirectiveAction
    layout: LayoutId | None = None
    panels: list[NormalizedPanel] = Field(default_factory=list)
    dropped_types: list[str] = Field(default_factory=list)
    reasoning: str | None = None


class DispatchResult(BaseModel):
    """
    Outcome of dispatching one composition directive.

    Attributes:
        handled: The directive was recognised and processed
        mutated: Workspace state changed as a result
        duplicate: Suppressed as a repeat inside the dedup window
        action: Action that was dispatched
        layout: Layout after dispatch
        panel_count: Number of panels after dispatch
        fingerprint: Fingerprint of the normalized directive
        dropped_types: Unknown panel types ignored by normalization
        reasoning: Directive reasoning, echoed for diagnostics
    """

    model_config = {"frozen": True}

    handled: bool = True
    mutated: bool = False
    duplicate: bool = False
    action: DirectiveAction
    layout: LayoutId
    panel_count: int = 0
    fingerprint: str = ""
    dropped_types: list[str] = Field(default_factory=list)
    reasoning: str | None = None
