"""Tests for validating media context snapshots with pydantic."""

import pytest
from pydantic import ValidationError

from mediaquery.pydantic_models import MediaContextModel, media_context_from_dict
from mediaquery.types import DeviceType, MediaContext, Orientation


class TestMediaContextFromDict:
    def test_camel_case_keys(self):
        ctx = media_context_from_dict(
            {
                "widthDp": 700,
                "heightDp": 1000,
                "densityDpi": 320,
                "orientation": "portrait",
                "isDarkMode": True,
                "deviceType": "tablet",
                "isRoundScreen": False,
            }
        )
        assert ctx == MediaContext(
            width_dp=700,
            height_dp=1000,
            density_dpi=320,
            orientation=Orientation.PORTRAIT,
            is_dark_mode=True,
            device_type=DeviceType.TABLET,
        )

    def test_snake_case_keys(self):
        ctx = media_context_from_dict(
            {
                "width_dp": 1000,
                "height_dp": 700,
                "density_dpi": 480,
                "orientation": "landscape",
                "device_type": "2in1",
                "device_width_dp": 1280,
            }
        )
        assert ctx.orientation is Orientation.LANDSCAPE
        assert ctx.device_type is DeviceType.TWO_IN_ONE
        assert ctx.device_width_dp == 1280
        assert ctx.device_height_dp == 700
        assert ctx.density == 3.0

    def test_defaults(self):
        ctx = media_context_from_dict(
            {"widthDp": 360, "heightDp": 780, "densityDpi": 480}
        )
        assert ctx.orientation is Orientation.PORTRAIT
        assert ctx.is_dark_mode is False
        assert ctx.device_type is DeviceType.DEFAULT
        assert ctx.is_round_screen is False

    def test_rejects_unknown_keys(self):
        with pytest.raises(ValidationError, match="extra"):
            media_context_from_dict(
                {"widthDp": 360, "heightDp": 780, "densityDpi": 480, "dpi": 480}
            )

    @pytest.mark.parametrize("density", [0, -160])
    def test_rejects_non_positive_density(self, density):
        with pytest.raises(ValidationError, match="densityDpi"):
            media_context_from_dict(
                {"widthDp": 360, "heightDp": 780, "densityDpi": density}
            )

    def test_rejects_negative_size(self):
        with pytest.raises(ValidationError, match="widthDp"):
            media_context_from_dict(
                {"widthDp": -1, "heightDp": 780, "densityDpi": 480}
            )

    def test_rejects_unknown_device_type(self):
        with pytest.raises(ValidationError, match="deviceType"):
            media_context_from_dict(
                {
                    "widthDp": 360,
                    "heightDp": 780,
                    "densityDpi": 480,
                    "deviceType": "fridge",
                }
            )

    def test_requires_size_and_density(self):
        with pytest.raises(ValidationError):
            media_context_from_dict({"widthDp": 360})


class TestMediaContextModel:
    def test_model_is_frozen(self):
        model = MediaContextModel(widthDp=360, heightDp=780, densityDpi=480)
        with pytest.raises(ValidationError):
            model.width_dp = 400
