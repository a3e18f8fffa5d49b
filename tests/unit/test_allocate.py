"""Tests for panel-to-slot allocation."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from storydesk.core.errors import LayoutError
from storydesk.core.ir import LayoutId, PanelInstance
from storydesk.ui.layout_engine import (
    LAYOUT_ORDER,
    PANEL_REGISTRY,
    PANEL_TYPES,
    assign_panels_to_slots,
    get_layout_template,
    iter_permutations,
    score_assignment,
)
from storydesk.ui.layout_engine.allocate import score_panel_in_slot


def _panels(types: list[str]) -> list[PanelInstance]:
    return [
        PanelInstance(
            id=f"p{i}",
            type=panel_type,
            role=PANEL_REGISTRY[panel_type].default_role,
            slot_index=i,
        )
        for i, panel_type in enumerate(types)
    ]


class TestPermutations:
    """Tests for permutation enumeration."""

    def test_enumeration_order(self, make_panel):
        a, b, c = (make_panel("scene-list", panel_id=x) for x in "abc")
        orders = [[p.id for p in perm] for perm in iter_permutations([a, b, c])]
        assert orders == [
            ["a", "b", "c"],
            ["a", "c", "b"],
            ["b", "a", "c"],
            ["b", "c", "a"],
            ["c", "a", "b"],
            ["c", "b", "a"],
        ]

    def test_empty_input_yields_one_empty_ordering(self):
        assert list(iter_permutations([])) == [[]]


class TestSlotScoring:
    """Tests for per-position assignment scores."""

    def test_primary_wide_in_primary_slot(self, make_panel):
        slot = get_layout_template("single").slots[0]
        # size 15 + role 5 + recency 6
        assert score_panel_in_slot(make_panel("scene-editor"), slot) == 26

    def test_recency_floors_at_zero(self, make_panel):
        slot = get_layout_template("single").slots[0]
        assert score_panel_in_slot(make_panel("scene-editor", slot_index=30), slot) == 20


class TestAssignPanelsToSlots:
    """Tests for the brute-force optimizer."""

    def test_triptych_centers_wide_editor(self, make_panel):
        panels = [
            make_panel("scene-editor", slot_index=0),
            make_panel("character-cards", slot_index=1),
            make_panel("scene-list", slot_index=2),
        ]
        assigned = assign_panels_to_slots(panels, LayoutId.TRIPTYCH)

        assert [p.type for p in assigned] == ["character-cards", "scene-editor", "scene-list"]

        slots = get_layout_template(LayoutId.TRIPTYCH).slots
        best = score_assignment(assigned, slots)
        for perm in iter_permutations(panels):
            wide_in_compact = any(
                p.type == "scene-editor" and not slot.accepts(PANEL_REGISTRY[p.type].size_class)
                for p, slot in zip(perm, slots)
            )
            if wide_in_compact:
                assert score_assignment(perm, slots) <= best - 40

    def test_primary_sidebar(self, make_panel):
        panels = [make_panel("scene-list", slot_index=0), make_panel("scene-editor", slot_index=1)]
        assigned = assign_panels_to_slots(panels, "primary-sidebar")
        assert [p.type for p in assigned] == ["scene-editor", "scene-list"]

    def test_overflow_hides_lowest_ranked(self, make_panel):
        panels = [make_panel("scene-editor", slot_index=0), make_panel("scene-list", slot_index=1)]
        assigned = assign_panels_to_slots(panels, "single")
        assert [p.type for p in assigned] == ["scene-editor"]

    def test_unregistered_types_are_skipped(self, make_panel):
        panels = [make_panel("holodeck"), make_panel("scene-editor", slot_index=1)]
        assigned = assign_panels_to_slots(panels, "split-2")
        assert [p.type for p in assigned] == ["scene-editor"]

    def test_only_unregistered_types(self, make_panel):
        assert assign_panels_to_slots([make_panel("holodeck")], "single") == []

    def test_empty(self):
        assert assign_panels_to_slots([], "studio") == []

    def test_candidate_overflow_is_asserted(self, make_panel, monkeypatch):
        from storydesk.ui.layout_engine import allocate

        monkeypatch.setattr(allocate, "pick_candidates_for_template", lambda panels, t: panels)
        panels = [make_panel("scene-editor"), make_panel("scene-list", slot_index=1)]
        with pytest.raises(LayoutError, match="Candidate selection"):
            assign_panels_to_slots(panels, "single")


class TestAssignmentProperties:
    """Property-based invariants of slot assignment."""

    @given(
        st.lists(st.sampled_from(PANEL_TYPES), max_size=7, unique=True),
        st.sampled_from(LAYOUT_ORDER),
    )
    @settings(max_examples=60, deadline=None)
    def test_result_is_bounded_subset(self, types, layout):
        panels = _panels(types)
        assigned = assign_panels_to_slots(panels, layout)

        assert len(assigned) <= min(len(panels), get_layout_template(layout).slot_count)
        ids = [p.id for p in assigned]
        assert len(ids) == len(set(ids))
        assert set(ids) <= {p.id for p in panels}

    @given(
        st.lists(st.sampled_from(PANEL_TYPES), max_size=6, unique=True),
        st.sampled_from(LAYOUT_ORDER),
    )
    @settings(max_examples=40, deadline=None)
    def test_deterministic(self, types, layout):
        panels = _panels(types)
        assert assign_panels_to_slots(panels, layout) == assign_panels_to_slots(panels, layout)

    @given(st.lists(st.sampled_from(PANEL_TYPES), min_size=1, max_size=5, unique=True))
    @settings(max_examples=40, deadline=None)
    def test_no_permutation_beats_result(self, types):
        panels = _panels(types)
        template = get_layout_template(LayoutId.STUDIO)
        best = score_assignment(assign_panels_to_slots(panels, LayoutId.STUDIO), template.slots)
        for perm in iter_permutations(panels):
            assert score_assignment(perm, template.slots) <= best
