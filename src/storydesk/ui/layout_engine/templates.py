"""
Template definitions for the layout engine.

Each template is a fixed grid geometry with an ordered list of slots.
Slots declare which panel size classes they accept, which role they
prefer, and whether they are narrow columns. Templates are static
blueprints; every other stage of the engine looks them up by id.
"""

from dataclasses import dataclass

from storydesk.core.errors import LayoutError
from storydesk.core.ir import LayoutId, PanelRole, PanelSizeClass

# Assignment enumerates slot permutations, so the slot count is capped.
MAX_TEMPLATE_SLOTS = 5

ALL_SIZES: tuple[PanelSizeClass, ...] = tuple(PanelSizeClass)
COMPACT_ONLY: tuple[PanelSizeClass, ...] = (PanelSizeClass.COMPACT,)


@dataclass(frozen=True)
class SlotDefinition:
    """Definition of a slot within a template."""

    grid_row: str
    grid_column: str
    accepts_sizes: tuple[PanelSizeClass, ...]
    preferred_role: PanelRole
    is_narrow: bool = False

    def accepts(self, size_class: PanelSizeClass) -> bool:
        return size_class in self.accepts_sizes


@dataclass(frozen=True)
class TemplateDefinition:
    """
    Complete definition of a layout template.

    Attributes:
        layout: Layout id enum value
        label: Human-readable name
        grid_template_rows: CSS grid-template-rows value
        grid_template_columns: CSS grid-template-columns value
        slots: Ordered slots, assignment position i fills slots[i]
        description: What this template is for
    """

    layout: LayoutId
    label: str
    grid_template_rows: str
    grid_template_columns: str
    slots: tuple[SlotDefinition, ...]
    description: str = ""

    def __post_init__(self) -> None:
        if not 1 <= len(self.slots) <= MAX_TEMPLATE_SLOTS:
            raise LayoutError(
                f"Template '{self.layout.value}' declares {len(self.slots)} slots; "
                f"templates must have between 1 and {MAX_TEMPLATE_SLOTS}"
            )

    @property
    def slot_count(self) -> int:
        return len(self.slots)


def _slot(
    grid_row: str,
    grid_column: str,
    accepts_sizes: tuple[PanelSizeClass, ...],
    preferred_role: PanelRole,
    is_narrow: bool = False,
) -> SlotDefinition:
    return SlotDefinition(grid_row, grid_column, accepts_sizes, preferred_role, is_narrow)


# =============================================================================
# Template Definitions
# =============================================================================

SINGLE = TemplateDefinition(
    layout=LayoutId.SINGLE,
    label="Single",
    grid_template_rows="1fr",
    grid_template_columns="1fr",
    slots=(_slot("1", "1", ALL_SIZES, PanelRole.PRIMARY),),
    description="One full-size panel",
)

SPLIT_2 = TemplateDefinition(
    layout=LayoutId.SPLIT_2,
    label="Split",
    grid_template_rows="1fr",
    grid_template_columns="3fr 2fr",
    slots=(
        _slot("1", "1", ALL_SIZES, PanelRole.PRIMARY),
        _slot("1", "2", ALL_SIZES, PanelRole.SECONDARY),
    ),
    description="Two panels side by side (3fr / 2fr)",
)

SPLIT_3 = TemplateDefinition(
    layout=LayoutId.SPLIT_3,
    label="Triple",
    grid_template_rows="1fr 1fr",
    grid_template_columns="3fr 2fr",
    slots=(
        _slot("1 / -1", "1", ALL_SIZES, PanelRole.PRIMARY),
        _slot("1", "2", ALL_SIZES, PanelRole.SECONDARY),
        _slot("2", "2", ALL_SIZES, PanelRole.TERTIARY),
    ),
    description="Left column (3fr) + right column stacked (2fr)",
)

GRID_4 = TemplateDefinition(
    layout=LayoutId.GRID_4,
    label="Grid",
    grid_template_rows="1fr 1fr",
    grid_template_columns="1fr 1fr",
    slots=(
        _slot("1", "1", ALL_SIZES, PanelRole.PRIMARY),
        _slot("1", "2", ALL_SIZES, PanelRole.SECONDARY),
        _slot("2", "1", ALL_SIZES, PanelRole.TERTIARY),
        _slot("2", "2", ALL_SIZES, PanelRole.SIDEBAR),
    ),
    description="2x2 grid",
)

PRIMARY_SIDEBAR = TemplateDefinition(
    layout=LayoutId.PRIMARY_SIDEBAR,
    label="Sidebar",
    grid_template_rows="1fr",
    grid_template_columns="1fr 280px",
    slots=(
        _slot("1", "1", ALL_SIZES, PanelRole.PRIMARY),
        _slot("1", "2", COMPACT_ONLY, PanelRole.SIDEBAR, is_narrow=True),
    ),
    description="Wide primary + 280px sidebar",
)

TRIPTYCH = TemplateDefinition(
    layout=LayoutId.TRIPTYCH,
    label="Triptych",
    grid_template_rows="1fr",
    grid_template_columns="250px 1fr 280px",
    slots=(
        _slot("1", "1", COMPACT_ONLY, PanelRole.SIDEBAR, is_narrow=True),
        _slot("1", "2", ALL_SIZES, PanelRole.PRIMARY),
        _slot("1", "3", COMPACT_ONLY, PanelRole.SIDEBAR, is_narrow=True),
    ),
    description="250px sidebar + center + 280px sidebar",
)

STUDIO = TemplateDefinition(
    layout=LayoutId.STUDIO,
    label="Studio",
    grid_template_rows="42px 1fr 160px",
    grid_template_columns="240px 1fr 260px",
    slots=(
        _slot("1", "1 / -1", COMPACT_ONLY, PanelRole.TERTIARY, is_narrow=True),
        _slot("2", "1", COMPACT_ONLY, PanelRole.SIDEBAR, is_narrow=True),
        _slot("2", "2", ALL_SIZES, PanelRole.PRIMARY),
        _slot("2", "3", COMPACT_ONLY, PanelRole.SIDEBAR, is_narrow=True),
        _slot(
            "3",
            "1 / -1",
            (PanelSizeClass.COMPACT, PanelSizeClass.STANDARD),
            PanelRole.SECONDARY,
        ),
    ),
    description="Top bar + left sidebar + center + right sidebar + bottom gallery",
)

# Lookup table for all templates, in catalog order
LAYOUT_TEMPLATES: dict[LayoutId, TemplateDefinition] = {
    LayoutId.SINGLE: SINGLE,
    LayoutId.SPLIT_2: SPLIT_2,
    LayoutId.SPLIT_3: SPLIT_3,
    LayoutId.GRID_4: GRID_4,
    LayoutId.PRIMARY_SIDEBAR: PRIMARY_SIDEBAR,
    LayoutId.TRIPTYCH: TRIPTYCH,
    LayoutId.STUDIO: STUDIO,
}

LAYOUT_ORDER: tuple[LayoutId, ...] = tuple(LayoutId)

_LAYOUT_VALUES = frozenset(layout.value for layout in LayoutId)


def get_layout_template(layout: LayoutId | str) -> TemplateDefinition:
    """Get template definition by layout id (enum or string value)."""
    return LAYOUT_TEMPLATES[LayoutId(layout)]


def is_layout_id(value: object) -> bool:
    """Check whether a raw value names one of the catalog layouts."""
    return isinstance(value, str) and value in _LAYOUT_VALUES


def get_next_layout(current: LayoutId | str) -> LayoutId:
    """Return the layout after ``current`` in catalog order, wrapping around."""
    idx = LAYOUT_ORDER.index(LayoutId(current))
    return LAYOUT_ORDER[(idx + 1) % len(LAYOUT_ORDER)]


__all__ = [
    "MAX_TEMPLATE_SLOTS",
    "SlotDefinition",
    "TemplateDefinition",
    "LAYOUT_TEMPLATES",
    "LAYOUT_ORDER",
    "get_layout_template",
    "get_next_layout",
    "is_layout_id",
    "SINGLE",
    "SPLIT_2",
    "SPLIT_3",
    "GRID_4",
    "PRIMARY_SIDEBAR",
    "TRIPTYCH",
    "STUDIO",
]
