"""Core enums for media query types.

This module contains the fundamental enums shared by the context snapshot,
the unit model and the evaluator. These have no dependencies on other
media query types.
"""

from __future__ import annotations

from enum import Enum


class Orientation(Enum):
    """Screen orientation."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"

    @classmethod
    def from_string(cls, value: str) -> Orientation:
        """Look up an orientation by its query value, defaulting to portrait."""
        for member in cls:
            if member.value == value:
                return member
        return cls.PORTRAIT


class DeviceType(Enum):
    """Device class reported by the platform layer."""

    DEFAULT = "default"
    PHONE = "phone"
    TABLET = "tablet"
    TV = "tv"
    CAR = "car"
    WEARABLE = "wearable"
    TWO_IN_ONE = "2in1"

    @classmethod
    def from_string(cls, value: str) -> DeviceType:
        """Look up a device type by its query value, defaulting to DEFAULT."""
        for member in cls:
            if member.value == value:
                return member
        return cls.DEFAULT


class LengthUnit(Enum):
    """Units accepted for width/height values."""

    VP = "vp"  # virtual pixel (HarmonyOS)
    DP = "dp"  # density-independent pixel (Android)
    PX = "px"  # physical pixel
    PT = "pt"  # point (iOS)

    @classmethod
    def from_string(cls, unit: str | None) -> LengthUnit:
        """Parse a unit suffix (case-insensitive).

        Missing or unrecognized suffixes fall back to DP.
        """
        if not unit:
            return cls.DP
        try:
            return cls(unit.lower())
        except ValueError:
            return cls.DP


class ResolutionUnit(Enum):
    """Units accepted for resolution values."""

    DPI = "dpi"  # dots per inch
    DPCM = "dpcm"  # dots per centimeter
    DPPX = "dppx"  # dots per pixel

    @classmethod
    def from_string(cls, unit: str | None) -> ResolutionUnit:
        """Parse a unit suffix (case-insensitive).

        Missing or unrecognized suffixes fall back to DPPX.
        """
        if not unit:
            return cls.DPPX
        try:
            return cls(unit.lower())
        except ValueError:
            return cls.DPPX
