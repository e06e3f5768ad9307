"""Editor settings and geometric thresholds."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field


MIN_WALL_LENGTH = 0.05          # Drafts at or below this are discarded (meters)
ATTACH_DISTANCE = 0.5           # Max distance from a wall for door/window placement
PICK_DISTANCE = 0.15            # Hit radius for select/erase
DEFAULT_OPENING_LENGTH = 0.9    # Meters


class EditorSettings(BaseModel):
    """User-adjustable plan and display settings."""
    model_config = ConfigDict(validate_assignment=True, allow_inf_nan=False)

    grid_size: float = Field(default=0.5, gt=0)    # Meters
    scale: float = Field(default=100.0, gt=0)      # Pixels per meter
    snap: bool = True                              # Snap pointer to grid
    show_grid: bool = True                         # Draw grid in exports
    viewport_width: float = Field(default=1200.0, gt=0)   # Pixels
    viewport_height: float = Field(default=700.0, gt=0)   # Pixels


class SettingsUpdate(BaseModel):
    """Partial settings change; unset fields keep their value."""
    model_config = ConfigDict(allow_inf_nan=False)

    grid_size: float | None = Field(default=None, gt=0)
    scale: float | None = Field(default=None, gt=0)
    snap: bool | None = None
    show_grid: bool | None = None
    viewport_width: float | None = Field(default=None, gt=0)
    viewport_height: float | None = Field(default=None, gt=0)

    def apply_to(self, settings: EditorSettings) -> EditorSettings:
        return settings.model_copy(update=self.model_dump(exclude_none=True))


class SvgStyle(BaseModel):
    """Colours and stroke widths used by the SVG export."""
    background: str = "#fff"
    grid_stroke: str = "#eee"
    grid_width: float = 1
    min_grid_spacing: float = 4     # Pixels; finer grids are not drawn
    max_grid_lines: int = 2000      # Per axis
    wall_stroke: str = "#333"
    wall_width: float = 6
    selected_stroke: str = "#ff6600"
    draft_stroke: str = "#0066ff"
    draft_width: float = 4
    draft_dash: str = "6 4"
    opening_stroke: str = "#00aaff"
    opening_width: float = 4
    label_size: int = 12
    label_offset: float = 10        # Pixels above the opening anchor
