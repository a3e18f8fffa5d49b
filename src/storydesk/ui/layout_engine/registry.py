"""
Panel registry.

Closed catalog mapping each panel type to its default role, size class
and the short description agents use when composing the workspace.
The layout engine reads size classes from here; panel types that are
absent are never assigned to a slot.
"""

from dataclasses import dataclass

from storydesk.core.ir import PanelRole, PanelSizeClass


@dataclass(frozen=True)
class PanelRegistryEntry:
    """Registry metadata for one panel type."""

    type: str
    label: str
    default_role: PanelRole
    size_class: PanelSizeClass
    domains: tuple[str, ...]
    min_width: int | None = None
    description: str = ""


_ENTRIES: tuple[PanelRegistryEntry, ...] = (
    # Scene
    PanelRegistryEntry(
        type="scene-editor",
        label="Scene Editor",
        default_role=PanelRole.PRIMARY,
        size_class=PanelSizeClass.WIDE,
        domains=("scene",),
        min_width=400,
        description="Block-based editor for composing scenes with screenplay formatting",
    ),
    PanelRegistryEntry(
        type="scene-metadata",
        label="Scene Details",
        default_role=PanelRole.SIDEBAR,
        size_class=PanelSizeClass.COMPACT,
        domains=("scene",),
        min_width=240,
        description="Displays and edits scene metadata (name, location, mood)",
    ),
    PanelRegistryEntry(
        type="dialogue-view",
        label="Dialogue",
        default_role=PanelRole.SECONDARY,
        size_class=PanelSizeClass.STANDARD,
        domains=("scene",),
        min_width=300,
        description="Focused dialogue view with character avatars",
    ),
    # Character
    PanelRegistryEntry(
        type="character-cards",
        label="Characters",
        default_role=PanelRole.SECONDARY,
        size_class=PanelSizeClass.COMPACT,
        domains=("character",),
        min_width=280,
        description="Grid of all project characters with avatars",
    ),
    PanelRegistryEntry(
        type="character-detail",
        label="Character Detail",
        default_role=PanelRole.PRIMARY,
        size_class=PanelSizeClass.WIDE,
        domains=("character",),
        min_width=400,
        description="Full character profile editor (backstory, traits, appearance)",
    ),
    # Story
    PanelRegistryEntry(
        type="story-map",
        label="Story Map",
        default_role=PanelRole.SECONDARY,
        size_class=PanelSizeClass.STANDARD,
        domains=("story",),
        min_width=300,
        description="Visual overview of story structure (acts/scenes)",
    ),
    PanelRegistryEntry(
        type="beats-manager",
        label="Beats",
        default_role=PanelRole.PRIMARY,
        size_class=PanelSizeClass.WIDE,
        domains=("story",),
        min_width=400,
        description="Full beat management with creation, editing, ordering",
    ),
    PanelRegistryEntry(
        type="story-evaluator",
        label="Evaluator",
        default_role=PanelRole.SECONDARY,
        size_class=PanelSizeClass.STANDARD,
        domains=("story",),
        min_width=350,
        description="Story quality analysis (pacing, themes, arcs)",
    ),
    PanelRegistryEntry(
        type="story-graph",
        label="Story Graph",
        default_role=PanelRole.PRIMARY,
        size_class=PanelSizeClass.WIDE,
        domains=("story",),
        min_width=400,
        description="Interactive node graph of story elements",
    ),
    PanelRegistryEntry(
        type="script-editor",
        label="Script",
        default_role=PanelRole.PRIMARY,
        size_class=PanelSizeClass.WIDE,
        domains=("scene", "story"),
        min_width=400,
        description="Rich text screenplay editor",
    ),
    PanelRegistryEntry(
        type="theme-manager",
        label="Themes",
        default_role=PanelRole.SECONDARY,
        size_class=PanelSizeClass.COMPACT,
        domains=("story",),
        min_width=280,
        description="Manage story themes and motifs",
    ),
    # Art & image
    PanelRegistryEntry(
        type="art-style",
        label="Art Style",
        default_role=PanelRole.SECONDARY,
        size_class=PanelSizeClass.STANDARD,
        domains=("image",),
        min_width=300,
        description="Art style reference panel",
    ),
    PanelRegistryEntry(
        type="image-canvas",
        label="Image Canvas",
        default_role=PanelRole.SECONDARY,
        size_class=PanelSizeClass.STANDARD,
        domains=("image",),
        min_width=300,
        description="Image viewing and comparison canvas",
    ),
    PanelRegistryEntry(
        type="image-generator",
        label="Image Generator",
        default_role=PanelRole.PRIMARY,
        size_class=PanelSizeClass.WIDE,
        domains=("image",),
        min_width=400,
        description="AI image generation interface",
    ),
    # Voice
    PanelRegistryEntry(
        type="voice-manager",
        label="Voices",
        default_role=PanelRole.PRIMARY,
        size_class=PanelSizeClass.STANDARD,
        domains=("utility",),
        min_width=300,
        description="Voice profile management",
    ),
    PanelRegistryEntry(
        type="voice-casting",
        label="Voice Casting",
        default_role=PanelRole.SECONDARY,
        size_class=PanelSizeClass.STANDARD,
        domains=("utility",),
        min_width=350,
        description="Match characters to voice profiles",
    ),
    PanelRegistryEntry(
        type="script-dialog",
        label="Script & Dialog",
        default_role=PanelRole.PRIMARY,
        size_class=PanelSizeClass.WIDE,
        domains=("utility", "scene"),
        min_width=450,
        description="Script with voice direction annotations",
    ),
    PanelRegistryEntry(
        type="narration",
        label="Narration",
        default_role=PanelRole.PRIMARY,
        size_class=PanelSizeClass.WIDE,
        domains=("utility",),
        min_width=500,
        description="Narration editor and player",
    ),
    PanelRegistryEntry(
        type="voice-performance",
        label="Voice Performance",
        default_role=PanelRole.SIDEBAR,
        size_class=PanelSizeClass.COMPACT,
        domains=("utility",),
        min_width=260,
        description="Voice delivery parameter controls",
    ),
    # Composite
    PanelRegistryEntry(
        type="scene-list",
        label="Scene List",
        default_role=PanelRole.SIDEBAR,
        size_class=PanelSizeClass.COMPACT,
        domains=("scene",),
        min_width=220,
        description="Sidebar list of all scenes with selection and reordering",
    ),
    PanelRegistryEntry(
        type="writing-desk",
        label="Writing Desk",
        default_role=PanelRole.PRIMARY,
        size_class=PanelSizeClass.WIDE,
        domains=("scene", "story"),
        min_width=500,
        description="Multi-tab writing workspace (content, blocks, image)",
    ),
    PanelRegistryEntry(
        type="character-creator",
        label="Character Creator",
        default_role=PanelRole.PRIMARY,
        size_class=PanelSizeClass.WIDE,
        domains=("character",),
        min_width=560,
        description="Visual character design tool with category-based options",
    ),
    # Studio
    PanelRegistryEntry(
        type="beats-sidebar",
        label="Beats",
        default_role=PanelRole.SIDEBAR,
        size_class=PanelSizeClass.COMPACT,
        domains=("story", "scene"),
        min_width=200,
        description="Compact beat list for quick navigation",
    ),
    PanelRegistryEntry(
        type="cast-sidebar",
        label="Cast",
        default_role=PanelRole.SIDEBAR,
        size_class=PanelSizeClass.COMPACT,
        domains=("character", "scene"),
        min_width=200,
        description="Compact character list for the current scene",
    ),
    PanelRegistryEntry(
        type="scene-gallery",
        label="Scene Gallery",
        default_role=PanelRole.SECONDARY,
        size_class=PanelSizeClass.COMPACT,
        domains=("scene",),
        min_width=400,
        description="Visual gallery of scene images",
    ),
    PanelRegistryEntry(
        type="audio-toolbar",
        label="Audio",
        default_role=PanelRole.TERTIARY,
        size_class=PanelSizeClass.COMPACT,
        domains=("sound",),
        min_width=400,
        description="Audio control toolbar",
    ),
    # Agent
    PanelRegistryEntry(
        type="advisor",
        label="Advisor",
        default_role=PanelRole.SIDEBAR,
        size_class=PanelSizeClass.COMPACT,
        domains=(),
        min_width=280,
        description="AI advisor chat with proactive suggestions and workspace observation",
    ),
    # System
    PanelRegistryEntry(
        type="empty-welcome",
        label="Welcome",
        default_role=PanelRole.PRIMARY,
        size_class=PanelSizeClass.WIDE,
        domains=(),
        description="Welcome placeholder for an empty workspace",
    ),
)

PANEL_REGISTRY: dict[str, PanelRegistryEntry] = {entry.type: entry for entry in _ENTRIES}

PANEL_TYPES: tuple[str, ...] = tuple(PANEL_REGISTRY)


def get_panel_entry(panel_type: str) -> PanelRegistryEntry | None:
    """Get registry entry for a panel type, or None if it is not registered."""
    return PANEL_REGISTRY.get(panel_type)


def is_panel_type(value: object) -> bool:
    """Check whether a raw value names a registered panel type."""
    return isinstance(value, str) and value in PANEL_REGISTRY


__all__ = [
    "PanelRegistryEntry",
    "PANEL_REGISTRY",
    "PANEL_TYPES",
    "get_panel_entry",
    "is_panel_type",
]
