"""Configuration management for the media query engine.

Configuration is plain dataclasses with validation in __post_init__.
load_config() optionally layers MEDIAQUERY_* environment variables over
the defaults.
"""

from mediaquery.config.env import EnvReader
from mediaquery.config.loader import ENV_PREFIX, load_config
from mediaquery.config.models import (
    EvaluationConfig,
    LoggingConfig,
    MediaQueryConfig,
)

__all__ = [
    # Models
    "EvaluationConfig",
    "LoggingConfig",
    "MediaQueryConfig",
    # Loading
    "ENV_PREFIX",
    "EnvReader",
    "load_config",
]
