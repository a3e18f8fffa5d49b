"""Tests for the workspace composition tool handlers."""

import json

import pytest

from storydesk.workspace import CompositionDispatcher, WorkspaceState
from storydesk.workspace.tools import (
    compose_workspace_handler,
    get_panel_manifests,
    get_panel_manifests_handler,
    handler_error_json,
    update_workspace_handler,
)


@pytest.fixture
def dispatcher(clock) -> CompositionDispatcher:
    return CompositionDispatcher(WorkspaceState(), clock=clock)


class TestPanelManifests:
    """Tests for the agent-facing catalog."""

    def test_groups_and_sections(self):
        text = get_panel_manifests()

        for heading in ("## SCENE", "## CHARACTER", "## STORY", "## SOUND", "## AGENT"):
            assert heading in text
        assert "## LAYOUTS" in text
        assert "## COMPOSITION POLICY" in text
        assert "At most 5 panels per directive" in text
        assert "- **scene-editor** [primary/wide]:" in text
        assert "primary-sidebar: Wide primary + 280px sidebar" in text

    def test_welcome_placeholder_not_offered(self):
        assert "empty-welcome" not in get_panel_manifests()

    def test_handler(self):
        data = json.loads(get_panel_manifests_handler({}))
        assert data["manifests"] == get_panel_manifests()


class TestComposeWorkspace:
    """Tests for the compose_workspace tool."""

    def test_auto_layout(self, dispatcher):
        response = json.loads(
            compose_workspace_handler(
                dispatcher, {"action": "show", "panels": [{"type": "scene-editor"}]}
            )
        )

        assert response["applied"] is True
        assert response["mutated"] is True
        assert response["layout"] == "auto"
        assert response["resolvedLayout"] == "single"
        assert response["panelCount"] == 1
        assert response["reasoning"] == "No reasoning provided"

    def test_pinned_layout_and_dropped_types(self, dispatcher):
        response = json.loads(
            compose_workspace_handler(
                dispatcher,
                {
                    "action": "show",
                    "layout": "primary-sidebar",
                    "panels": '[{"type": "scene-editor"}, {"type": "scene-list"}, {"type": "x"}]',
                    "reasoning": "Outline next to the draft",
                },
            )
        )

        assert response["layout"] == "primary-sidebar"
        assert response["resolvedLayout"] == "primary-sidebar"
        assert response["dropped"] == ["x"]
        assert response["reasoning"] == "Outline next to the draft"

    def test_duplicate_reported(self, dispatcher):
        args = {"action": "show", "panels": [{"type": "scene-editor"}]}
        compose_workspace_handler(dispatcher, args)
        response = json.loads(compose_workspace_handler(dispatcher, args))
        assert response["duplicate"] is True
        assert response["applied"] is True

    def test_unknown_action_returns_error(self, dispatcher):
        response = json.loads(compose_workspace_handler(dispatcher, {"action": "explode"}))
        assert "explode" in response["error"]

    def test_too_many_panels_returns_error(self, dispatcher):
        types = ["scene-editor", "scene-list", "story-map", "advisor", "narration", "art-style"]
        response = json.loads(
            compose_workspace_handler(
                dispatcher, {"action": "replace", "panels": [{"type": t} for t in types]}
            )
        )

        assert "at most 5" in response["error"]
        assert dispatcher.state.panels == []


class TestUpdateWorkspace:
    """Tests for the legacy update_workspace tool."""

    def test_layout_is_ignored(self, dispatcher):
        response = json.loads(
            update_workspace_handler(
                dispatcher,
                {
                    "action": "show",
                    "layout": "studio",
                    "panels": [{"type": "scene-editor"}],
                },
            )
        )

        assert response == {"applied": True, "action": "show", "panelCount": 1}
        assert dispatcher.state.layout.value == "single"


class TestHandlerErrorJson:
    """Tests for the error-wrapping decorator."""

    def test_wraps_exceptions(self):
        @handler_error_json
        def broken() -> str:
            raise ValueError("boom")

        assert json.loads(broken()) == {"error": "boom"}

    def test_passes_results_through(self):
        @handler_error_json
        def ok() -> str:
            return "{}"

        assert ok() == "{}"
