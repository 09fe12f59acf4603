"""Configuration models for the media query engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from mediaquery.units import DEFAULT_LENGTH_TOLERANCE, DEFAULT_RESOLUTION_TOLERANCE


@dataclass(frozen=True)
class EvaluationConfig:
    """Tolerances used for equality comparisons (':' features)."""

    # Maximum difference in dp for width/height equality
    length_tolerance: float = DEFAULT_LENGTH_TOLERANCE

    # Maximum difference in dpi for resolution equality
    resolution_tolerance: float = DEFAULT_RESOLUTION_TOLERANCE

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.length_tolerance <= 0:
            raise ValueError(
                f"length_tolerance must be positive, got {self.length_tolerance}"
            )
        if self.resolution_tolerance <= 0:
            raise ValueError(
                "resolution_tolerance must be positive, "
                f"got {self.resolution_tolerance}"
            )


@dataclass
class LoggingConfig:
    """Configuration for library logging."""

    # Log level: debug, info, warning, error
    level: str = "info"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.lower() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )


@dataclass
class MediaQueryConfig:
    """Top-level configuration."""

    evaluation: EvaluationConfig = field(default_factory=EvaluationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
