import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NumberTheoryConfig(BaseModel):
    """Settings for the number theory calculator.

    Attributes:
        strict_overflow (bool): Enforce the fixed-width result ranges of
            factorial, fibonacci and reverse_digits.
        log_level (str): Name of the logging level, e.g. "INFO".
        log_dir (str): Directory for rotating log files.
        log_to_file (bool): Whether setup_logging also writes to a file.
    """

    model_config = ConfigDict(frozen=True)

    strict_overflow: bool = Field(default=False, description="Raise on fixed-width overflow")
    log_level: str = Field(default="INFO", description="Logging level name")
    log_dir: str = Field(default="logs", min_length=1, description="Directory for log files")
    log_to_file: bool = Field(default=False, description="Write logs to a rotating file")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "NumberTheoryConfig":
        """Build a config from NUMBER_THEORY_* environment variables.

        Args:
            environ: Mapping to read from instead of os.environ.
        """
        env = os.environ if environ is None else environ
        return cls(
            strict_overflow=env.get("NUMBER_THEORY_STRICT_OVERFLOW", False),
            log_level=env.get("NUMBER_THEORY_LOG_LEVEL", "INFO"),
            log_dir=env.get("NUMBER_THEORY_LOG_DIR", "logs"),
            log_to_file=env.get("NUMBER_THEORY_LOG_TO_FILE", False),
        )
