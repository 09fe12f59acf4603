"""Configuration loading from environment variables.

Only used when a caller explicitly asks for it; the engine itself works
with defaults and never touches the environment.

Environment variables:
- MEDIAQUERY_LENGTH_TOLERANCE: dp tolerance for width/height equality (0.01)
- MEDIAQUERY_RESOLUTION_TOLERANCE: dpi tolerance for resolution equality (1.0)
- MEDIAQUERY_LOG_LEVEL: debug, info, warning or error (info)
- MEDIAQUERY_LOG_FILE: path of a rotating log file (unset = stderr only)
- MEDIAQUERY_LOG_FORMAT: text or json (text)
- MEDIAQUERY_LOG_STDERR: also log to stderr when a file is set (false)
"""

from __future__ import annotations

import logging

from mediaquery.config.env import EnvReader
from mediaquery.config.models import EvaluationConfig, LoggingConfig, MediaQueryConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "MEDIAQUERY_"


def load_config(env: EnvReader | None = None) -> MediaQueryConfig:
    """Build a MediaQueryConfig from environment variables.

    Unset variables keep their defaults.

    Args:
        env: Reader to use. Defaults to a reader over os.environ.

    Returns:
        The resulting configuration.

    Raises:
        ValueError: If a variable holds a value the models reject
            (e.g. a negative tolerance or an unknown log level).
    """
    reader = env if env is not None else EnvReader()
    defaults = MediaQueryConfig()

    evaluation = EvaluationConfig(
        length_tolerance=reader.get_float(
            f"{ENV_PREFIX}LENGTH_TOLERANCE", defaults.evaluation.length_tolerance
        ),
        resolution_tolerance=reader.get_float(
            f"{ENV_PREFIX}RESOLUTION_TOLERANCE",
            defaults.evaluation.resolution_tolerance,
        ),
    )

    logging_config = LoggingConfig(
        level=reader.get_str(f"{ENV_PREFIX}LOG_LEVEL", defaults.logging.level),
        file=reader.get_path(f"{ENV_PREFIX}LOG_FILE", defaults.logging.file),
        format=reader.get_str(f"{ENV_PREFIX}LOG_FORMAT", defaults.logging.format),
        include_stderr=reader.get_bool(
            f"{ENV_PREFIX}LOG_STDERR", defaults.logging.include_stderr
        ),
    )

    logger.debug(
        "Loaded media query config: evaluation=%s, log level=%s",
        evaluation,
        logging_config.level,
    )
    return MediaQueryConfig(evaluation=evaluation, logging=logging_config)
