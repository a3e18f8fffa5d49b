"""Tests for layout fitness scoring."""

import pytest

from storydesk.core.ir import LayoutId
from storydesk.ui.layout_engine import (
    LAYOUT_ORDER,
    compute_layout_fitness,
    explain_layout_fitness,
    get_layout_fitnesses,
)
from storydesk.ui.layout_engine.fitness import (
    get_count_mismatch_term,
    get_count_prior,
    get_slot_utilization_penalty,
)


class TestFitnessTerms:
    """Tests for the individual fitness terms."""

    def test_prior_clamps_panel_count(self):
        assert get_count_prior(LayoutId.SINGLE, 0) == 36
        assert get_count_prior(LayoutId.SINGLE, 9) == -32
        assert get_count_prior(LayoutId.STUDIO, 4) == 20

    def test_unused_slot_penalty(self):
        assert get_slot_utilization_penalty(5, 2) == -18
        assert get_slot_utilization_penalty(2, 5) == 0

    def test_count_mismatch(self):
        assert get_count_mismatch_term(3, 3) == 40
        assert get_count_mismatch_term(1, 3) == -50
        assert get_count_mismatch_term(4, 1) == -45


class TestComputeLayoutFitness:
    """Tests for whole-layout fitness."""

    def test_empty_workspace(self):
        assert compute_layout_fitness(LayoutId.SINGLE, []) == 0.0
        for layout in LAYOUT_ORDER[1:]:
            assert compute_layout_fitness(layout, []) <= -100

    def test_single_editor(self, make_panel):
        # prior 36 + exact fit 40 + assignment 26
        assert compute_layout_fitness("single", [make_panel("scene-editor")]) == 102

    def test_breakdown_matches_total(self, editor_and_list):
        breakdown = explain_layout_fitness(LayoutId.PRIMARY_SIDEBAR, editor_and_list)
        assert breakdown.prior == 16
        assert breakdown.utilization == 0
        assert breakdown.count_term == 40
        assert breakdown.assignment_score == pytest.approx(54.5)
        assert breakdown.assigned == ["scene-editor-0", "scene-list-1"]
        assert breakdown.total == compute_layout_fitness("primary-sidebar", editor_and_list)

    def test_overcrowded_single_is_unfit(self, editor_and_list):
        assert compute_layout_fitness("single", editor_and_list) == pytest.approx(-11)

    def test_fitnesses_cover_catalog(self, editor_and_list):
        fitnesses = get_layout_fitnesses(editor_and_list)
        assert list(fitnesses) == list(LAYOUT_ORDER)
        assert fitnesses[LayoutId.SPLIT_2] == pytest.approx(114.5)

    def test_recomputed_from_scratch(self, editor_and_list):
        first = compute_layout_fitness("split-3", editor_and_list)
        assert compute_layout_fitness("split-3", editor_and_list) == first
