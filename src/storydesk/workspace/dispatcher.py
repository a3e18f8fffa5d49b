"""
Composition directive dispatch.

Applies externally issued "rearrange the workspace" instructions to a
WorkspaceState. Directives are validated against the panel registry and
layout catalog, deduplicated by type, fingerprinted, and applied at most
once per dedup window.

Directives arrive from an agent's event stream interleaved with user
actions on the same event loop. Each dispatch runs synchronously to
completion, so there is no locking. Distinct directives are applied in
arrival order (last write wins); a stale ``show`` arriving after a
``clear`` is applied, since in-flight instructions cannot be cancelled.
"""

from __future__ import annotations

import hashlib
import json
import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from storydesk.core.errors import DirectiveError
from storydesk.core.ir import (
    CompositionDirective,
    DirectiveAction,
    DispatchResult,
    LayoutId,
    NormalizedDirective,
    NormalizedPanel,
    PanelInstance,
    PanelRole,
)
from storydesk.ui.layout_engine.allocate import assign_panels_to_slots
from storydesk.ui.layout_engine.registry import PANEL_REGISTRY, is_panel_type
from storydesk.ui.layout_engine.resolve import (
    RESET_MIN_FITNESS,
    STEADY_MIN_FITNESS,
    resolve_layout,
    resolve_preferred_layout,
)
from storydesk.ui.layout_engine.templates import is_layout_id

if TYPE_CHECKING:
    from storydesk.core.manifest import StudioManifest
    from storydesk.workspace.state import WorkspaceState

logger = logging.getLogger(__name__)

DEDUP_WINDOW_MS = 1400.0
# Hard limit of panels per directive accepted from agents
MAX_DIRECTIVE_PANELS = 5

_ROLE_VALUES = frozenset(role.value for role in PanelRole)


def normalize_directive(directive: CompositionDirective | dict[str, Any]) -> NormalizedDirective:
    """
    Validate a directive against the registry and catalogs.

    Unknown panel types are dropped (and reported), invalid roles and
    layouts are ignored, and entries are deduplicated by type with the
    later entry winning. The result depends only on the input. A directive
    naming more than MAX_DIRECTIVE_PANELS distinct registered panel types
    is rejected as a whole, never truncated.

    Args:
        directive: Directive model or its wire dict

    Returns:
        NormalizedDirective

    Raises:
        DirectiveError: If the directive is malformed, its action is unknown
            or it names too many panels

    Examples:
        >>> n = normalize_directive({
        ...     "action": "show",
        ...     "layout": "mosaic",
        ...     "panels": [{"type": "scene-editor"}, {"type": "nope"}],
        ... })
        >>> n.layout is None, [p.type for p in n.panels], n.dropped_types
        (True, ['scene-editor'], ['nope'])
    """
    if not isinstance(directive, CompositionDirective):
        try:
            directive = CompositionDirective.model_validate(directive)
        except ValidationError as e:
            raise DirectiveError(f"Malformed composition directive: {e}") from e

    try:
        action = DirectiveAction(directive.action)
    except ValueError as e:
        raise DirectiveError(f"Unknown directive action: {directive.action!r}") from e

    layout = LayoutId(directive.layout) if is_layout_id(directive.layout) else None

    dropped: list[str] = []
    by_type: dict[str, NormalizedPanel] = {}
    for entry in directive.panels:
        if not is_panel_type(entry.type):
            dropped.append(entry.type)
            continue
        role = PanelRole(entry.role) if entry.role in _ROLE_VALUES else None
        # Later entry wins and takes the later position
        by_type.pop(entry.type, None)
        by_type[entry.type] = NormalizedPanel(type=entry.type, role=role, props=entry.props)

    if len(by_type) > MAX_DIRECTIVE_PANELS:
        raise DirectiveError(
            f"Directive names {len(by_type)} panels; at most {MAX_DIRECTIVE_PANELS} are allowed"
        )

    return NormalizedDirective(
        action=action,
        layout=layout,
        panels=list(by_type.values()),
        dropped_types=dropped,
        reasoning=directive.reasoning,
    )


def directive_fingerprint(directive: NormalizedDirective) -> str:
    """
    Deterministic fingerprint of a normalized directive.

    Covers action, layout and panel descriptors (sorted by type, so entry
    order does not matter). Reasoning is not part of the fingerprint.
    """
    payload = {
        "action": directive.action.value,
        "layout": directive.layout.value if directive.layout else None,
        "panels": sorted(
            (
                {
                    "type": p.type,
                    "role": p.role.value if p.role else None,
                    "props": p.props,
                }
                for p in directive.panels
            ),
            key=lambda d: d["type"],
        ),
    }
    json_str = json.dumps(payload, sort_keys=True, default=str)
    return hashlib.sha256(json_str.encode()).hexdigest()


class CompositionDispatcher:
    """
    Applies composition directives to a workspace state.

    Args:
        state: Workspace state to mutate
        clock: Monotonic time source in seconds
        dedup_window_ms: Identical directives inside this window are dropped
        steady_min_fitness: Sticky-layout threshold after show/hide
        reset_min_fitness: Sticky-layout threshold after replace
        on_change: Called with the state after every mutation
    """

    def __init__(
        self,
        state: WorkspaceState,
        *,
        clock: Callable[[], float] = time.monotonic,
        dedup_window_ms: float = DEDUP_WINDOW_MS,
        steady_min_fitness: float = STEADY_MIN_FITNESS,
        reset_min_fitness: float = RESET_MIN_FITNESS,
        on_change: Callable[[WorkspaceState], None] | None = None,
    ):
        self.state = state
        self._clock = clock
        self.dedup_window_ms = dedup_window_ms
        self.steady_min_fitness = steady_min_fitness
        self.reset_min_fitness = reset_min_fitness
        self._on_change = on_change
        self._applied_at: dict[str, float] = {}

    @classmethod
    def from_manifest(
        cls, state: WorkspaceState, manifest: StudioManifest, **kwargs: Any
    ) -> CompositionDispatcher:
        """Create a dispatcher tuned by a project's [layout] settings."""
        return cls(
            state,
            dedup_window_ms=manifest.layout.dedup_window_ms,
            steady_min_fitness=manifest.layout.steady_min_fitness,
            reset_min_fitness=manifest.layout.reset_min_fitness,
            **kwargs,
        )

    def dispatch(self, directive: CompositionDirective | dict[str, Any]) -> DispatchResult:
        """
        Apply a composition directive.

        Args:
            directive: Directive model or its wire dict

        Returns:
            DispatchResult; ``handled`` is True for every recognised
            directive, including no-ops and suppressed duplicates

        Raises:
            DirectiveError: If the directive is malformed, its action is unknown
                or it names too many panels
        """
        normalized = normalize_directive(directive)
        if normalized.dropped_types:
            logger.warning(
                "Ignoring unregistered panel type(s): %s", ", ".join(normalized.dropped_types)
            )

        fingerprint = directive_fingerprint(normalized)
        now = self._clock()
        self._forget_expired(now)

        if fingerprint in self._applied_at:
            logger.info(
                "Suppressing duplicate %s directive (%s)",
                normalized.action.value,
                fingerprint[:12],
            )
            return self._result(normalized, fingerprint, mutated=False, duplicate=True)

        self._applied_at[fingerprint] = now

        handlers = {
            DirectiveAction.SHOW: self._apply_show,
            DirectiveAction.HIDE: self._apply_hide,
            DirectiveAction.REPLACE: self._apply_replace,
            DirectiveAction.CLEAR: self._apply_clear,
        }
        mutated = handlers[normalized.action](normalized)

        if mutated:
            logger.info(
                "Applied %s: %d panel(s) in %s",
                normalized.action.value,
                len(self.state.panels),
                self.state.layout.value,
            )
            if self._on_change is not None:
                self._on_change(self.state)
        else:
            logger.debug("%s directive left the workspace unchanged", normalized.action.value)

        return self._result(normalized, fingerprint, mutated=mutated, duplicate=False)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _apply_show(self, directive: NormalizedDirective) -> bool:
        state = self.state
        visible_ids = {p.id for p in state.visible_panels()}
        panels = list(state.panels)
        already_shown = True

        # Normalized entries have unique types, so each lookup sees the original state
        for entry in directive.panels:
            existing = state.find_panel(entry.type)
            if existing is None:
                role = entry.role or PANEL_REGISTRY[entry.type].default_role
                panels.append(state.create_panel(entry.type, role, entry.props))
                already_shown = False
                continue

            merged = existing.model_copy(
                update={
                    "role": entry.role or existing.role,
                    "props": {**existing.props, **(entry.props or {})},
                }
            )
            if merged != existing:
                panels[panels.index(existing)] = merged
                already_shown = False
            elif existing.id not in visible_ids:
                already_shown = False

        if already_shown and directive.layout in (None, state.layout):
            return False

        layout = resolve_preferred_layout(
            panels, directive.layout or state.layout, self.steady_min_fitness
        )
        if directive.layout is None and not self._all_visible(panels, layout, directive):
            # The sticky layout would keep a requested panel hidden
            layout = resolve_layout(panels)

        return self._commit(panels, layout)

    def _apply_hide(self, directive: NormalizedDirective) -> bool:
        state = self.state
        hidden_types = {p.type for p in directive.panels}
        remaining = [p for p in state.panels if p.type not in hidden_types]
        if len(remaining) == len(state.panels):
            return False

        layout = resolve_preferred_layout(
            remaining, directive.layout or state.layout, self.steady_min_fitness
        )
        return self._commit(remaining, layout)

    def _apply_replace(self, directive: NormalizedDirective) -> bool:
        if not directive.panels:
            return self._apply_clear(directive)

        state = self.state
        requested = [
            (
                entry.type,
                entry.role or PANEL_REGISTRY[entry.type].default_role,
                dict(entry.props or {}),
            )
            for entry in directive.panels
        ]
        current = [(p.type, p.role, p.props) for p in state.panels]
        preferred = directive.layout or state.layout

        if requested == current:
            layout = resolve_preferred_layout(state.panels, preferred, self.reset_min_fitness)
            if layout == state.layout:
                return False
            return self._commit(list(state.panels), layout)

        candidates = [state.create_panel(t, role, props) for t, role, props in requested]
        layout = resolve_preferred_layout(candidates, preferred, self.reset_min_fitness)
        return self._commit(candidates, layout)

    def _apply_clear(self, directive: NormalizedDirective) -> bool:
        if not self.state.panels:
            return False
        return self._commit([], LayoutId.SINGLE)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _commit(self, panels: list[PanelInstance], layout: LayoutId) -> bool:
        state = self.state
        if panels == state.panels and layout == state.layout:
            return False
        state.panels = panels
        state.layout = layout
        return True

    @staticmethod
    def _all_visible(
        panels: list[PanelInstance], layout: LayoutId, directive: NormalizedDirective
    ) -> bool:
        shown_types = {p.type for p in assign_panels_to_slots(panels, layout)}
        return all(entry.type in shown_types for entry in directive.panels)

    def _forget_expired(self, now: float) -> None:
        window = self.dedup_window_ms / 1000.0
        self._applied_at = {
            fp: applied for fp, applied in self._applied_at.items() if now - applied < window
        }

    def _result(
        self,
        directive: NormalizedDirective,
        fingerprint: str,
        *,
        mutated: bool,
        duplicate: bool,
    ) -> DispatchResult:
        return DispatchResult(
            handled=True,
            mutated=mutated,
            duplicate=duplicate,
            action=directive.action,
            layout=self.state.layout,
            panel_count=len(self.state.panels),
            fingerprint=fingerprint,
            dropped_types=directive.dropped_types,
            reasoning=directive.reasoning,
        )


__all__ = [
    "DEDUP_WINDOW_MS",
    "MAX_DIRECTIVE_PANELS",
    "CompositionDispatcher",
    "directive_fingerprint",
    "normalize_directive",
]
