"""Tests for storydesk.toml loading."""

import pytest

from storydesk.core.errors import ConfigError
from storydesk.core.manifest import (
    MANIFEST_FILE,
    StudioManifest,
    load_manifest,
    load_project_manifest,
)


@pytest.fixture
def write_manifest(tmp_path):
    def _write(content: str):
        path = tmp_path / MANIFEST_FILE
        path.write_text(content)
        return path

    return _write


class TestLoadManifest:
    """Tests for manifest parsing."""

    def test_full_manifest(self, write_manifest):
        path = write_manifest(
            """
[project]
name = "harbor-lights"
version = "0.3.0"

[layout]
steady_min_fitness = 40
reset_min_fitness = 15.5
dedup_window_ms = 2000

[workspace]
state_dir = ".state"

[logging]
level = "debug"
"""
        )
        manifest = load_manifest(path)

        assert manifest.name == "harbor-lights"
        assert manifest.version == "0.3.0"
        assert manifest.layout.steady_min_fitness == 40.0
        assert manifest.layout.reset_min_fitness == 15.5
        assert manifest.layout.dedup_window_ms == 2000.0
        assert manifest.workspace.state_dir == ".state"
        assert manifest.logging.level == "DEBUG"

    def test_empty_manifest_uses_defaults(self, write_manifest):
        assert load_manifest(write_manifest("")) == StudioManifest()

    def test_invalid_toml(self, write_manifest):
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_manifest(write_manifest("[layout\n"))

    def test_non_numeric_threshold(self, write_manifest):
        path = write_manifest('[layout]\nsteady_min_fitness = "high"\n')
        with pytest.raises(ConfigError, match=r"\[layout.steady_min_fitness\]"):
            load_manifest(path)

    def test_boolean_is_not_a_number(self, write_manifest):
        with pytest.raises(ConfigError):
            load_manifest(write_manifest("[layout]\ndedup_window_ms = true\n"))

    def test_negative_dedup_window(self, write_manifest):
        with pytest.raises(ConfigError, match="dedup_window_ms"):
            load_manifest(write_manifest("[layout]\ndedup_window_ms = -1\n"))

    def test_unknown_log_level(self, write_manifest):
        with pytest.raises(ConfigError, match="logging level"):
            load_manifest(write_manifest('[logging]\nlevel = "LOUD"\n'))

    def test_project_without_manifest(self, tmp_path):
        assert load_project_manifest(tmp_path) == StudioManifest()
