"""Media query condition engine.

Parses CSS-like conditions such as "(width >= 600vp) and (orientation:
landscape)" and evaluates them against a MediaContext snapshot.
"""

from mediaquery.evaluator import evaluate, evaluate_media_query
from mediaquery.exceptions import ManagerDestroyedError, MediaQueryError
from mediaquery.expressions import parse_condition, serialize_condition
from mediaquery.listeners import MediaQueryListener, MediaQueryManager
from mediaquery.types import (
    AndCondition,
    Condition,
    DeviceType,
    FeatureCondition,
    LengthUnit,
    MediaContext,
    NotCondition,
    OrCondition,
    Orientation,
    ResolutionUnit,
)
from mediaquery.units import (
    LengthValue,
    ResolutionValue,
    parse_length_value,
    parse_resolution_value,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Parsing and evaluation
    "evaluate",
    "evaluate_media_query",
    "parse_condition",
    "serialize_condition",
    # Listeners
    "MediaQueryListener",
    "MediaQueryManager",
    # Types
    "AndCondition",
    "Condition",
    "DeviceType",
    "FeatureCondition",
    "MediaContext",
    "NotCondition",
    "OrCondition",
    "Orientation",
    # Units
    "LengthUnit",
    "LengthValue",
    "ResolutionUnit",
    "ResolutionValue",
    "parse_length_value",
    "parse_resolution_value",
    # Errors
    "ManagerDestroyedError",
    "MediaQueryError",
]
