"""Read-only view model handed to the render layer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VesselDisplayRecord(BaseModel):
    """One row of the vessel side list."""

    model_config = ConfigDict(frozen=True)

    vessel_id: int
    name: str | None = None
    vessel_type_label: str | None = None
    speed_knots: float = 0.0
    speed_label: str = "0.00 kts"
    voltage: str = "0.00"
    heading_degrees: float = 0.0
    icon_rotation: float = 0.0
    """Icon rotation in degrees (heading plus the icon's resting offset)."""
    is_selected: bool = False
    has_position: bool = False
    """Whether the row offers a select action."""
    action_url: str = ""
    """Location the row's select/deselect action navigates to."""


class ViewModel(BaseModel):
    """Snapshot of everything the map view renders."""

    model_config = ConfigDict(frozen=True)

    vessel_display_records: list[VesselDisplayRecord] = Field(default_factory=list)
    selected_id: int | None = None
