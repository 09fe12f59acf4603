"""Pydantic models for media context snapshots.

Platform layers that cross a serialization boundary (JSON bridges, test
fixtures) hand over the snapshot as a plain mapping. MediaContextModel
validates that mapping and converts it into the frozen MediaContext
dataclass used by the evaluator.

Both the platform's camelCase keys ("widthDp", "isDarkMode") and the
snake_case field names are accepted.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from mediaquery.types.context import MediaContext
from mediaquery.types.enums import DeviceType, Orientation

OrientationLiteral = Literal["portrait", "landscape"]
DeviceTypeLiteral = Literal[
    "default", "phone", "tablet", "tv", "car", "wearable", "2in1"
]


class MediaContextModel(BaseModel):
    """Pydantic model for a MediaContext snapshot."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    width_dp: float = Field(ge=0, alias="widthDp")
    height_dp: float = Field(ge=0, alias="heightDp")
    density_dpi: float = Field(gt=0, alias="densityDpi")
    orientation: OrientationLiteral = "portrait"
    is_dark_mode: bool = Field(default=False, alias="isDarkMode")
    device_type: DeviceTypeLiteral = Field(default="default", alias="deviceType")
    is_round_screen: bool = Field(default=False, alias="isRoundScreen")
    device_width_dp: float | None = Field(default=None, ge=0, alias="deviceWidthDp")
    device_height_dp: float | None = Field(
        default=None, ge=0, alias="deviceHeightDp"
    )

    def to_context(self) -> MediaContext:
        """Convert to the MediaContext dataclass."""
        return MediaContext(
            width_dp=self.width_dp,
            height_dp=self.height_dp,
            density_dpi=self.density_dpi,
            orientation=Orientation(self.orientation),
            is_dark_mode=self.is_dark_mode,
            device_type=DeviceType(self.device_type),
            is_round_screen=self.is_round_screen,
            device_width_dp=self.device_width_dp,
            device_height_dp=self.device_height_dp,
        )


def media_context_from_dict(data: Mapping[str, Any]) -> MediaContext:
    """Validate a snapshot mapping and build a MediaContext.

    Args:
        data: Snapshot values keyed by camelCase or snake_case names.

    Returns:
        The validated MediaContext.

    Raises:
        pydantic.ValidationError: If the mapping is malformed.
    """
    return MediaContextModel.model_validate(dict(data)).to_context()
