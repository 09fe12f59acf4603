"""Condition evaluation for media queries.

This module evaluates parsed conditions against a MediaContext snapshot.
All functions are pure: the same condition and context always produce the
same result, and nothing is shared between calls.

Evaluation never raises for malformed queries. Unknown features,
unparseable values and unsupported operators evaluate to False; each such
miss is logged at DEBUG level.

Key Functions:
    evaluate: Evaluate a parsed Condition against a context
    evaluate_media_query: Parse and evaluate a query string in one step

Usage:
    from mediaquery.evaluator import evaluate_media_query

    matches = evaluate_media_query("(width >= 600vp)", context)
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable

from mediaquery.config.models import EvaluationConfig
from mediaquery.expressions.parser import parse_condition
from mediaquery.types.conditions import (
    AndCondition,
    Condition,
    FeatureCondition,
    NotCondition,
    OrCondition,
    chain_operands,
)
from mediaquery.types.context import MediaContext
from mediaquery.types.enums import DeviceType, Orientation
from mediaquery.units import float_equals, parse_length_value, parse_resolution_value

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = EvaluationConfig()

_ORDERING_OPS: dict[str, Callable[[float, float], bool]] = {
    ">=": operator.ge,
    "<=": operator.le,
    ">": operator.gt,
    "<": operator.lt,
}

# Numeric features: base name -> MediaContext attribute holding the dp value.
# Each also accepts min-/max- prefixed forms.
_LENGTH_FEATURES: dict[str, str] = {
    "width": "width_dp",
    "height": "height_dp",
    "device-width": "device_width_dp",
    "device-height": "device_height_dp",
}

_RESOLUTION_FEATURE = "resolution"


def evaluate(
    condition: Condition,
    context: MediaContext,
    config: EvaluationConfig | None = None,
) -> bool:
    """Evaluate a condition against a media context.

    Args:
        condition: Parsed condition tree.
        context: Current device/environment snapshot.
        config: Comparison tolerances. Defaults to EvaluationConfig().

    Returns:
        True if the condition matches, False otherwise.

    Raises:
        ValueError: If condition is not one of the Condition types.
    """
    cfg = config if config is not None else _DEFAULT_CONFIG

    if isinstance(condition, FeatureCondition):
        return _evaluate_feature(condition, context, cfg)

    # Flat chains are walked iteratively
    if isinstance(condition, AndCondition):
        return all(
            evaluate(operand, context, cfg) for operand in chain_operands(condition)
        )

    if isinstance(condition, OrCondition):
        return any(
            evaluate(operand, context, cfg) for operand in chain_operands(condition)
        )

    if isinstance(condition, NotCondition):
        return not evaluate(condition.inner, context, cfg)

    msg = f"Unknown condition type: {type(condition).__name__}"
    raise ValueError(msg)


def evaluate_media_query(
    text: str,
    context: MediaContext,
    config: EvaluationConfig | None = None,
) -> bool:
    """Parse and evaluate a media query condition.

    Args:
        text: Condition string, e.g. "(orientation: landscape)".
        context: Current device/environment snapshot.
        config: Comparison tolerances.

    Returns:
        True if the condition matches; False if it doesn't or if the text
        cannot be parsed.
    """
    condition = parse_condition(text)
    if condition is None:
        return False
    return evaluate(condition, context, config)


def _evaluate_feature(
    feature: FeatureCondition, context: MediaContext, config: EvaluationConfig
) -> bool:
    """Dispatch a single feature by name."""
    name = feature.name

    if name == "orientation":
        return Orientation.from_string(feature.value) == context.orientation

    if name == "dark-mode":
        return _parse_strict_bool(feature.value) == context.is_dark_mode

    if name == "round-screen":
        return _parse_strict_bool(feature.value) == context.is_round_screen

    if name == "device-type":
        return DeviceType.from_string(feature.value) == context.device_type

    base_name = _strip_range_prefix(name)

    attribute = _LENGTH_FEATURES.get(base_name)
    if attribute is not None:
        return _evaluate_length_feature(
            feature, getattr(context, attribute), context.density, config
        )

    if base_name == _RESOLUTION_FEATURE:
        return _evaluate_resolution_feature(feature, context.density_dpi, config)

    logger.debug(
        "Unknown media feature: %s",
        name,
        extra=_feature_fields(feature, "unknown_feature"),
    )
    return False


def _evaluate_length_feature(
    feature: FeatureCondition,
    actual_dp: float,
    density: float,
    config: EvaluationConfig,
) -> bool:
    """Compare a width/height feature in dp."""
    length = parse_length_value(feature.value)
    if length is None:
        logger.debug(
            "Invalid length value for %s: %r",
            feature.name,
            feature.value,
            extra=_feature_fields(feature, "invalid_length"),
        )
        return False

    expected_dp = length.to_dp(density)
    return _compare(feature, actual_dp, expected_dp, config.length_tolerance)


def _evaluate_resolution_feature(
    feature: FeatureCondition, actual_dpi: float, config: EvaluationConfig
) -> bool:
    """Compare a resolution feature in dpi."""
    resolution = parse_resolution_value(feature.value)
    if resolution is None:
        logger.debug(
            "Invalid resolution value for %s: %r",
            feature.name,
            feature.value,
            extra=_feature_fields(feature, "invalid_resolution"),
        )
        return False

    expected_dpi = resolution.to_dpi()
    return _compare(feature, actual_dpi, expected_dpi, config.resolution_tolerance)


def _compare(
    feature: FeatureCondition, actual: float, expected: float, tolerance: float
) -> bool:
    op = resolve_operator(feature)
    if op == "==":
        return float_equals(actual, expected, tolerance)

    op_func = _ORDERING_OPS.get(op)
    if op_func is None:
        logger.debug(
            "Unsupported operator for %s: %r",
            feature.name,
            op,
            extra=_feature_fields(feature, "unsupported_operator"),
        )
        return False
    return op_func(actual, expected)


def resolve_operator(feature: FeatureCondition) -> str:
    """Determine the effective comparison operator for a numeric feature.

    min- and max- prefixed features always compare with >= and <=
    respectively, whatever operator was written. Otherwise ':' means
    equality and any other operator is used as written.

    Examples:
        (min-width: 600vp) -> ">="
        (width: 600vp)     -> "=="
        (width < 600vp)    -> "<"
    """
    if feature.name.startswith("min-"):
        return ">="
    if feature.name.startswith("max-"):
        return "<="
    if feature.operator == ":":
        return "=="
    return feature.operator


def _strip_range_prefix(name: str) -> str:
    for prefix in ("min-", "max-"):
        if name.startswith(prefix):
            return name[len(prefix) :]
    return name


def _parse_strict_bool(value: str) -> bool:
    """Parse exactly "true" or "false"; anything else is False."""
    return value == "true"


def _feature_fields(feature: FeatureCondition, reason: str) -> dict[str, str]:
    """Structured log fields describing why a feature did not match."""
    return {
        "feature": feature.name,
        "operator": feature.operator,
        "value": feature.value,
        "reason": reason,
    }
