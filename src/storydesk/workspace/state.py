"""
Workspace state.

Holds the active panel set and layout of one workspace. The state is an
explicit object handed to the composition dispatcher; layout functions
never read it directly.

Tracks:
- Panels in insertion order (including panels hidden by overflow)
- The current layout id
- The next slot_index to hand out (monotonic, never reused)
"""

from dataclasses import dataclass, field
from typing import Any

from storydesk.core.ir import LayoutId, PanelInstance, PanelRole
from storydesk.ui.layout_engine.allocate import assign_panels_to_slots


@dataclass
class WorkspaceState:
    """
    Mutable panel/layout state of a workspace.

    Attributes:
        panels: Panels in insertion order
        layout: Current layout template
        next_slot_index: Counter for new panels' slot_index
    """

    panels: list[PanelInstance] = field(default_factory=list)
    layout: LayoutId = LayoutId.SINGLE
    next_slot_index: int = 0

    def create_panel(
        self, panel_type: str, role: PanelRole, props: dict[str, Any] | None = None
    ) -> PanelInstance:
        """Create a panel with a fresh slot_index. The panel is not added to the state."""
        slot_index = self.next_slot_index
        self.next_slot_index += 1
        return PanelInstance(
            id=f"panel-{slot_index}-{panel_type}",
            type=panel_type,
            role=role,
            props=dict(props or {}),
            slot_index=slot_index,
        )

    def find_panel(self, panel_type: str) -> PanelInstance | None:
        """Return the first panel of a type, if any."""
        return next((p for p in self.panels if p.type == panel_type), None)

    def visible_panels(self) -> list[PanelInstance]:
        """Panels rendered by the current layout, in slot order."""
        return assign_panels_to_slots(self.panels, self.layout)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "panels": [p.model_dump(mode="json") for p in self.panels],
            "layout": self.layout.value,
            "next_slot_index": self.next_slot_index,
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "WorkspaceState":
        """Create WorkspaceState from dict."""
        panels = [PanelInstance.model_validate(p) for p in data.get("panels", [])]
        # Never hand out a slot_index already in use
        floor = max((p.slot_index + 1 for p in panels), default=0)
        return WorkspaceState(
            panels=panels,
            layout=LayoutId(data.get("layout", LayoutId.SINGLE.value)),
            next_slot_index=max(int(data.get("next_slot_index", 0)), floor),
        )


__all__ = ["WorkspaceState"]
