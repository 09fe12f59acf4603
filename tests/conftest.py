"""Shared test fixtures for the media query engine."""

from collections.abc import Callable
from typing import Any

import pytest

from mediaquery.types import DeviceType, MediaContext, Orientation


def make_context(**overrides: Any) -> MediaContext:
    """Build a MediaContext with tablet-in-portrait defaults.

    Args:
        **overrides: Field values replacing the defaults.

    Returns:
        A MediaContext instance.
    """
    values: dict[str, Any] = {
        "width_dp": 700.0,
        "height_dp": 1000.0,
        "density_dpi": 320.0,
        "orientation": Orientation.PORTRAIT,
        "is_dark_mode": True,
        "device_type": DeviceType.TABLET,
        "is_round_screen": False,
    }
    values.update(overrides)
    return MediaContext(**values)


@pytest.fixture
def tablet_context() -> MediaContext:
    """700x1000dp portrait tablet at 320dpi with dark mode on."""
    return make_context()


@pytest.fixture
def context_factory() -> Callable[..., MediaContext]:
    """Return the make_context factory for tests that vary fields."""
    return make_context
