"""Media context snapshot evaluated by conditions."""

from __future__ import annotations

from dataclasses import dataclass

from mediaquery.types.enums import DeviceType, Orientation

# Android baseline: 160 dpi corresponds to a density of 1.0
BASELINE_DPI = 160.0


@dataclass(frozen=True)
class MediaContext:
    """Current device/environment state.

    A value snapshot produced by the platform layer. Callers build a fresh
    instance whenever the real environment changes.

    Attributes:
        width_dp: Current window width in dp.
        height_dp: Current window height in dp.
        density_dpi: Screen density in dpi. Must be positive.
        orientation: Current orientation.
        is_dark_mode: Whether dark mode is enabled.
        device_type: Current device type.
        is_round_screen: Whether the screen is round (wearables).
        device_width_dp: Device width in dp. Defaults to width_dp.
        device_height_dp: Device height in dp. Defaults to height_dp.
    """

    width_dp: float
    height_dp: float
    density_dpi: float
    orientation: Orientation
    is_dark_mode: bool
    device_type: DeviceType
    is_round_screen: bool = False
    device_width_dp: float | None = None
    device_height_dp: float | None = None

    def __post_init__(self) -> None:
        """Validate density and fill in device dimensions."""
        if self.density_dpi <= 0:
            raise ValueError(
                f"density_dpi must be positive, got {self.density_dpi}"
            )
        if self.device_width_dp is None:
            object.__setattr__(self, "device_width_dp", self.width_dp)
        if self.device_height_dp is None:
            object.__setattr__(self, "device_height_dp", self.height_dp)

    @property
    def density(self) -> float:
        """Density as a multiplier (e.g. 2.0 for 320 dpi)."""
        return self.density_dpi / BASELINE_DPI
