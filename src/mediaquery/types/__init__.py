"""Media query type definitions package.

Import from mediaquery.types to access any type.
"""

from mediaquery.types.conditions import (
    AndCondition,
    Condition,
    FeatureCondition,
    NotCondition,
    OrCondition,
    chain_operands,
)
from mediaquery.types.context import BASELINE_DPI, MediaContext
from mediaquery.types.enums import (
    DeviceType,
    LengthUnit,
    Orientation,
    ResolutionUnit,
)

__all__ = [
    # Conditions
    "AndCondition",
    "Condition",
    "FeatureCondition",
    "NotCondition",
    "OrCondition",
    "chain_operands",
    # Context
    "BASELINE_DPI",
    "MediaContext",
    # Enums
    "DeviceType",
    "LengthUnit",
    "Orientation",
    "ResolutionUnit",
]
