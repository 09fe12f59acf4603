"""Length and resolution values used by numeric media features.

Query values such as "600vp", "840px" or "2dppx" are parsed into value/unit
pairs and normalized to a common base unit before comparison:

- lengths are compared in dp (vp, dp and pt are treated as equivalent,
  px is divided by the screen density);
- resolutions are compared in dpi (dpcm x 2.54, dppx x 160).

Parsing never raises: unparseable text returns None.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from mediaquery.types.context import BASELINE_DPI
from mediaquery.types.enums import LengthUnit, ResolutionUnit

CM_PER_INCH = 2.54

DEFAULT_LENGTH_TOLERANCE = 0.01
DEFAULT_RESOLUTION_TOLERANCE = 1.0

_LENGTH_RE = re.compile(r"^(\d+(?:\.\d+)?)(vp|px|dp|pt)?$", re.IGNORECASE)
_RESOLUTION_RE = re.compile(r"^(\d+(?:\.\d+)?)(dpi|dpcm|dppx)?$", re.IGNORECASE)


@dataclass(frozen=True)
class LengthValue:
    """A length with its unit, e.g. LengthValue(600, LengthUnit.VP)."""

    value: float
    unit: LengthUnit

    def to_dp(self, density: float) -> float:
        """Convert to density-independent pixels.

        Args:
            density: Device density (pixels per dp). Must be positive.

        Returns:
            Value in dp.

        Raises:
            ValueError: If density is not positive.
        """
        if self.unit is LengthUnit.PX:
            if density <= 0:
                raise ValueError(f"density must be positive, got {density}")
            return self.value / density
        # vp and dp are equivalent; pt is treated as dp across platforms
        return self.value

    def to_points(self, scale: float) -> float:
        """Convert to points (iOS).

        Args:
            scale: Device scale factor (1x, 2x, 3x). Must be positive.

        Returns:
            Value in points.
        """
        if self.unit is LengthUnit.PX:
            if scale <= 0:
                raise ValueError(f"scale must be positive, got {scale}")
            return self.value / scale
        return self.value


@dataclass(frozen=True)
class ResolutionValue:
    """A resolution with its unit, e.g. ResolutionValue(2, ResolutionUnit.DPPX)."""

    value: float
    unit: ResolutionUnit

    def to_dpi(self) -> float:
        """Convert to dots per inch."""
        if self.unit is ResolutionUnit.DPCM:
            return self.value * CM_PER_INCH
        if self.unit is ResolutionUnit.DPPX:
            return self.value * BASELINE_DPI
        return self.value


def parse_length_value(text: str) -> LengthValue | None:
    """Parse a length such as "600vp", "840px" or "720".

    Args:
        text: Raw value text. Surrounding whitespace is ignored.

    Returns:
        LengthValue, or None if the text is not a number with an optional
        vp/px/dp/pt suffix.
    """
    match = _LENGTH_RE.match(text.strip())
    if match is None:
        return None
    return LengthValue(
        value=float(match.group(1)),
        unit=LengthUnit.from_string(match.group(2)),
    )


def parse_resolution_value(text: str) -> ResolutionValue | None:
    """Parse a resolution such as "2dppx", "160dpi" or "63dpcm".

    Returns:
        ResolutionValue, or None if the text does not match.
    """
    match = _RESOLUTION_RE.match(text.strip())
    if match is None:
        return None
    return ResolutionValue(
        value=float(match.group(1)),
        unit=ResolutionUnit.from_string(match.group(2)),
    )


def float_equals(
    a: float, b: float, tolerance: float = DEFAULT_LENGTH_TOLERANCE
) -> bool:
    """Compare two floats with an absolute tolerance."""
    return abs(a - b) < tolerance
