"""Tests for candidate selection."""

import pytest

from storydesk.core.errors import LayoutError
from storydesk.core.ir import PanelRole
from storydesk.ui.layout_engine import get_layout_template, pick_candidates_for_template
from storydesk.ui.layout_engine.candidates import (
    rank_panel_for_slot,
    require_entry,
    role_priority_boost,
    score_candidate,
    sort_panels_by_role,
    stability_boost,
)


class TestCandidateScores:
    """Tests for the individual ranking terms."""

    def test_role_priority_boost(self, make_panel):
        boosts = [
            role_priority_boost(make_panel("scene-editor", role=role))
            for role in PanelRole
        ]
        assert boosts == [4, 3, 2, 1]

    def test_stability_boost_decays_to_zero(self, make_panel):
        assert stability_boost(make_panel("scene-list", slot_index=0)) == 8.0
        assert stability_boost(make_panel("scene-list", slot_index=4)) == 5.0
        assert stability_boost(make_panel("scene-list", slot_index=20)) == 0.0

    def test_rank_compact_sidebar_in_narrow_slot(self, make_panel):
        sidebar_slot = get_layout_template("primary-sidebar").slots[1]
        # size match 15 + role match 6 + compact-in-narrow 4
        assert rank_panel_for_slot(make_panel("scene-list"), sidebar_slot) == 25

    def test_rank_wide_panel_in_compact_slot(self, make_panel):
        sidebar_slot = get_layout_template("primary-sidebar").slots[1]
        assert rank_panel_for_slot(make_panel("scene-editor"), sidebar_slot) == -25

    def test_score_uses_best_slot(self, make_panel):
        template = get_layout_template("single")
        panel = make_panel("scene-editor", slot_index=1)
        # 15 + 6 (best slot) + 4 (primary) + 7.25 (stability)
        assert score_candidate(panel, template) == pytest.approx(32.25)

    def test_unregistered_type_raises(self, make_panel):
        with pytest.raises(LayoutError, match="holodeck"):
            require_entry(make_panel("holodeck"))


class TestPickCandidates:
    """Tests for bounding the panel set to a template's slots."""

    def test_everything_fits_preserves_order(self, make_panel):
        panels = [make_panel("scene-list", slot_index=0), make_panel("scene-editor", slot_index=1)]
        picked = pick_candidates_for_template(panels, get_layout_template("split-2"))
        assert picked == panels
        assert picked is not panels

    def test_five_panels_into_grid_4(self, make_panel):
        panels = [
            make_panel("scene-editor", slot_index=0),
            make_panel("character-cards", slot_index=1),
            make_panel("audio-toolbar", slot_index=2),
            make_panel("scene-list", slot_index=3),
            make_panel("story-map", slot_index=4),
        ]
        picked = pick_candidates_for_template(panels, get_layout_template("grid-4"))

        assert len(picked) == 4
        assert "scene-list" not in {p.type for p in picked}

    def test_single_keeps_primary(self, make_panel):
        panels = [make_panel("scene-list", slot_index=0), make_panel("scene-editor", slot_index=1)]
        picked = pick_candidates_for_template(panels, get_layout_template("single"))
        assert [p.type for p in picked] == ["scene-editor"]

    def test_equal_scores_keep_insertion_order(self, make_panel):
        panels = [
            make_panel("scene-editor", slot_index=0, panel_id="first"),
            make_panel("scene-editor", slot_index=0, panel_id="second"),
        ]
        picked = pick_candidates_for_template(panels, get_layout_template("single"))
        assert [p.id for p in picked] == ["first"]

    def test_sort_panels_by_role(self, make_panel):
        panels = [
            make_panel("scene-list", slot_index=0),
            make_panel("story-map", slot_index=1),
            make_panel("scene-editor", slot_index=2),
        ]
        assert [p.type for p in sort_panels_by_role(panels)] == [
            "scene-editor",
            "story-map",
            "scene-list",
        ]
