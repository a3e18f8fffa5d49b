"""Tests for layout resolution."""

from storydesk.core.ir import LayoutId
from storydesk.ui.layout_engine import (
    LAYOUT_ORDER,
    explain_layout_resolution,
    get_layout_fitnesses,
    resolve_layout,
    resolve_preferred_layout,
)


class TestResolveLayout:
    """Tests for stateless resolution."""

    def test_empty_resolves_single(self):
        assert resolve_layout([]) == LayoutId.SINGLE

    def test_single_panel(self, make_panel):
        assert resolve_layout([make_panel("scene-editor")]) == LayoutId.SINGLE

    def test_editor_and_list(self, editor_and_list):
        assert resolve_layout(editor_and_list) == LayoutId.SPLIT_2

    def test_result_has_maximal_fitness(self, make_panel):
        panels = [
            make_panel("scene-editor", slot_index=0),
            make_panel("character-cards", slot_index=1),
            make_panel("scene-list", slot_index=2),
        ]
        fitnesses = get_layout_fitnesses(panels)
        selected = resolve_layout(panels)
        best = max(fitnesses.values())
        assert fitnesses[selected] == best
        # earliest layout in catalog order among the maxima
        assert selected == next(layout for layout in LAYOUT_ORDER if fitnesses[layout] == best)


class TestResolvePreferredLayout:
    """Tests for sticky resolution."""

    def test_no_current_resolves_afresh(self, editor_and_list):
        assert resolve_preferred_layout(editor_and_list, None) == LayoutId.SPLIT_2

    def test_keeps_current_above_threshold(self, editor_and_list):
        kept = resolve_preferred_layout(editor_and_list, LayoutId.PRIMARY_SIDEBAR, 35)
        assert kept == LayoutId.PRIMARY_SIDEBAR

    def test_drops_current_below_threshold(self, editor_and_list):
        assert resolve_preferred_layout(editor_and_list, "single", 35) == LayoutId.SPLIT_2

    def test_threshold_is_inclusive(self, editor_and_list):
        fitness = get_layout_fitnesses(editor_and_list)[LayoutId.SPLIT_3]
        kept = resolve_preferred_layout(editor_and_list, LayoutId.SPLIT_3, fitness)
        assert kept == LayoutId.SPLIT_3


class TestExplainLayoutResolution:
    """Tests for resolution explanations."""

    def test_scores_sorted_best_first(self, editor_and_list):
        explanation = explain_layout_resolution(editor_and_list)
        scores = [s.score for s in explanation.all_scores]
        assert scores == sorted(scores, reverse=True)
        assert explanation.selected == LayoutId.SPLIT_2
        assert explanation.all_scores[0].layout == LayoutId.SPLIT_2
        assert not explanation.current_kept

    def test_current_kept(self, editor_and_list):
        explanation = explain_layout_resolution(editor_and_list, "primary-sidebar", 35)
        assert explanation.current_kept
        assert explanation.selected == LayoutId.PRIMARY_SIDEBAR
        assert "threshold" in explanation.reason

    def test_empty_workspace(self):
        explanation = explain_layout_resolution([])
        assert explanation.selected == LayoutId.SINGLE
        assert explanation.reason == "Empty workspace"
