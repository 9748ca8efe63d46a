"""Utility functions for the Nepal Pulse relay."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(log_dir: Optional[str] = None, level: int = logging.INFO) -> None:
    """Send logs to ``<log_dir>/nepal_pulse.log`` and stderr.

    Args:
        log_dir: Directory for the log file; defaults to ``PULSE_LOG_DIR`` or ``logs``.
        level: Root log level.
    """
    directory = Path(log_dir or os.getenv("PULSE_LOG_DIR", "logs"))
    directory.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(directory / "nepal_pulse.log", encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Get an environment variable, treating blank values as unset.

    Args:
        name: Environment variable name.
        default: Default value if variable is not set.

    Returns:
        The environment variable value or default.
    """
    env_value = os.getenv(name, "").strip()
    return env_value or default

