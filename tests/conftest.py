"""Shared pytest fixtures for storydesk tests."""

from collections.abc import Callable

import pytest

from storydesk.core.ir import PanelInstance, PanelRole
from storydesk.ui.layout_engine.registry import get_panel_entry


class FakeClock:
    """Monotonic clock the tests advance by hand."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: float) -> None:
        self.now += ms / 1000.0


def build_panel(
    panel_type: str,
    role: PanelRole | None = None,
    slot_index: int = 0,
    panel_id: str | None = None,
) -> PanelInstance:
    """Build a panel, taking the role from the registry when not given."""
    if role is None:
        entry = get_panel_entry(panel_type)
        role = entry.default_role if entry else PanelRole.SECONDARY
    return PanelInstance(
        id=panel_id or f"{panel_type}-{slot_index}",
        type=panel_type,
        role=role,
        slot_index=slot_index,
    )


@pytest.fixture
def make_panel() -> Callable[..., PanelInstance]:
    """Return the panel factory."""
    return build_panel


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def editor_and_list() -> list[PanelInstance]:
    """A wide primary editor and a compact sidebar list."""
    return [build_panel("scene-editor", slot_index=0), build_panel("scene-list", slot_index=1)]
