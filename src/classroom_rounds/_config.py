# Area: Shared
"""
classroom_rounds._config — Runtime configuration
================================================

Loads deployment settings from a ``.env`` file (python-dotenv) and
the process environment. These are machine concerns (where the
database lives, how loud the logs are, how long the pauses last),
distinct from the classroom ``Settings`` that teachers edit and that
are persisted with the players.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv

logger = logging.getLogger("classroom_rounds.config")

QUIZ_FEEDBACK_SECONDS = 1.4
MATCH_REVEAL_SECONDS = 0.9

# Environment variable -> (field name, parser)
ENV_MAPPINGS = {
    "CLASSROOM_DB_PATH": ("db_path", str),
    "CLASSROOM_LOG_FILE": ("log_file", str),
    "CLASSROOM_LOG_LEVEL": ("log_level", str),
    "QUIZ_FEEDBACK_SECONDS": ("quiz_feedback_seconds", float),
    "MATCH_REVEAL_SECONDS": ("match_reveal_seconds", float),
}


@dataclass(frozen=True)
class RuntimeConfig:
    """Process-level configuration."""

    db_path: str = "classroom_rounds.db"
    log_file: str = "classroom_rounds.log"
    log_level: str = "INFO"
    quiz_feedback_seconds: float = QUIZ_FEEDBACK_SECONDS
    match_reveal_seconds: float = MATCH_REVEAL_SECONDS

    @property
    def logging_level(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


def load_runtime_config(
    env: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[str] = None,
) -> RuntimeConfig:
    """
    Build a RuntimeConfig from the environment.

    Args:
        env: Mapping to read instead of ``os.environ`` (the ``.env``
            file is not loaded when given)
        dotenv_path: Explicit ``.env`` path; defaults to searching
            from the working directory

    Raises:
        ValueError: If a numeric variable cannot be parsed
    """
    if env is None:
        load_dotenv(dotenv_path)
        env = os.environ

    values: Dict[str, Any] = {}
    for env_key, (field_name, parser) in ENV_MAPPINGS.items():
        if env_key not in env:
            continue
        raw = env[env_key]
        try:
            value = parser(raw)
        except ValueError:
            raise ValueError(f"Invalid value for {env_key}: {raw!r}") from None
        if parser is float and value < 0:
            raise ValueError(f"{env_key} must not be negative, got {raw!r}")
        values[field_name] = value

    config = RuntimeConfig(**values)
    logger.debug(f"Runtime config: {config}")
    return config
