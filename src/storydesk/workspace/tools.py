"""Workspace composition tool handlers.

JSON-in / JSON-out handlers backing the agent tools that arrange the
workspace.

Tools:
- ``get_panel_manifests``: panel, layout and composition-policy catalog for agent context
- ``compose_workspace``: apply a show/hide/replace/clear directive, optionally pinning a layout
- ``update_workspace``: legacy variant of ``compose_workspace`` without layout
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from functools import wraps
from typing import Any

from storydesk.core.ir import PanelRole
from storydesk.ui.layout_engine.registry import PANEL_REGISTRY
from storydesk.ui.layout_engine.templates import LAYOUT_ORDER, LAYOUT_TEMPLATES, is_layout_id
from storydesk.workspace.dispatcher import MAX_DIRECTIVE_PANELS, CompositionDispatcher

logger = logging.getLogger(__name__)

_DOMAIN_ORDER = ("scene", "character", "story", "image", "utility", "sound")

COMPOSITION_POLICY = f"""## COMPOSITION POLICY
- Keep workspace focused: prefer 1-3 panels unless user asks for a broad multi-view.
- Always include at most one primary panel in each composition.
- Sidebar role is for compact navigation/context panels only.
- Prefer action=show/hide for incremental updates; use replace when user clearly changes task context.
- Omit layout by default and let runtime auto-resolve; set layout only when specific structure is required.
- At most {MAX_DIRECTIVE_PANELS} panels per directive."""

ROLE_DESCRIPTIONS = {
    PanelRole.PRIMARY: "main focus",
    PanelRole.SECONDARY: "supporting",
    PanelRole.TERTIARY: "minor",
    PanelRole.SIDEBAR: "narrow navigation",
}


def handler_error_json(
    fn: Callable[..., str],
) -> Callable[..., str]:
    """Decorator that wraps handler exceptions into JSON error responses.

    Catches Exception, logs it, and returns ``{"error": "<message>"}``.
    """

    @wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> str:
        try:
            return fn(*args, **kwargs)
        except Exception as e:
            logger.debug("Handler %s failed: %s", fn.__name__, e, exc_info=True)
            return json.dumps({"error": str(e)}, indent=2)

    return wrapper


def get_panel_manifests() -> str:
    """Render the panel/layout catalog as compact text for agent context."""
    lines = ["WORKSPACE PANELS (use compose_workspace to arrange these):"]

    grouped: dict[str, list[str]] = {}
    for entry in PANEL_REGISTRY.values():
        if not entry.domains:
            group = "agent" if entry.type == "advisor" else "system"
        else:
            group = min(entry.domains, key=_domain_rank)
        grouped.setdefault(group, []).append(
            f"- **{entry.type}** [{entry.default_role.value}/{entry.size_class.value}]: "
            f"{entry.description}"
        )

    for group in (*_DOMAIN_ORDER, "agent"):
        if group in grouped:
            lines.append("")
            lines.append(f"## {group.upper()}")
            lines.extend(grouped[group])

    lines.append("")
    lines.append("## LAYOUTS")
    lines.append("Available: " + ", ".join(layout.value for layout in LAYOUT_ORDER))
    for layout in LAYOUT_ORDER:
        lines.append(f"- {layout.value}: {LAYOUT_TEMPLATES[layout].description}")

    lines.append("")
    lines.append(COMPOSITION_POLICY)
    lines.append("")
    lines.append("## ROLES")
    lines.append(", ".join(f"{role.value} ({desc})" for role, desc in ROLE_DESCRIPTIONS.items()))
    return "\n".join(lines)


def _domain_rank(domain: str) -> int:
    return _DOMAIN_ORDER.index(domain) if domain in _DOMAIN_ORDER else len(_DOMAIN_ORDER)


@handler_error_json
def get_panel_manifests_handler(args: dict[str, Any] | None = None) -> str:
    """Return the panel manifest catalog."""
    return json.dumps({"manifests": get_panel_manifests()}, indent=2)


@handler_error_json
def compose_workspace_handler(dispatcher: CompositionDispatcher, args: dict[str, Any]) -> str:
    """Apply a composition directive and report what happened.

    ``args`` is the directive wire shape: ``action``, optional ``layout``,
    ``panels`` (list or JSON-encoded list) and ``reasoning``.
    """
    result = dispatcher.dispatch(args)
    return json.dumps(
        {
            "applied": result.handled,
            "action": result.action.value,
            "layout": result.layout.value if is_layout_id(args.get("layout")) else "auto",
            "resolvedLayout": result.layout.value,
            "panelCount": result.panel_count,
            "mutated": result.mutated,
            "duplicate": result.duplicate,
            "dropped": result.dropped_types,
            "reasoning": result.reasoning or "No reasoning provided",
        },
        indent=2,
    )


@handler_error_json
def update_workspace_handler(dispatcher: CompositionDispatcher, args: dict[str, Any]) -> str:
    """Legacy composition tool: same as compose_workspace but never pins a layout."""
    directive = {key: args[key] for key in ("action", "panels") if key in args}
    result = dispatcher.dispatch(directive)
    return json.dumps(
        {
            "applied": result.handled,
            "action": result.action.value,
            "panelCount": result.panel_count,
        },
        indent=2,
    )


__all__ = [
    "compose_workspace_handler",
    "get_panel_manifests",
    "get_panel_manifests_handler",
    "handler_error_json",
    "update_workspace_handler",
]
