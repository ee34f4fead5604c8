"""Runtime settings loaded from the environment (and an optional .env file)."""

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .constants import (
    DEFAULT_FONT_SIZE,
    ENV_FONT_SIZE,
    ENV_FRAME_RATE,
    ENV_LINE_SPACING,
    ENV_LOG_LEVEL,
)


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    frame_rate: float | None = None  # None keeps the first layer's rate when merging
    font_size: int = DEFAULT_FONT_SIZE
    line_spacing: int = 0  # 0 means "use the font height"


def load_settings(dotenv: bool = True) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        dotenv: Load a ``.env`` file from the working directory first

    Raises:
        ValueError: If a variable holds an unusable value
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    log_level = os.getenv(ENV_LOG_LEVEL, "WARNING").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown log level in {ENV_LOG_LEVEL}: {log_level}")

    frame_rate = _read_number(ENV_FRAME_RATE, float, None)
    if frame_rate is not None and frame_rate <= 0:
        raise ValueError(f"{ENV_FRAME_RATE} must be positive, got {frame_rate}")

    font_size = _read_number(ENV_FONT_SIZE, int, DEFAULT_FONT_SIZE)
    if font_size <= 0:
        raise ValueError(f"{ENV_FONT_SIZE} must be positive, got {font_size}")

    line_spacing = _read_number(ENV_LINE_SPACING, int, 0)
    if line_spacing < 0:
        raise ValueError(f"{ENV_LINE_SPACING} cannot be negative, got {line_spacing}")

    return Settings(
        log_level=log_level,
        frame_rate=frame_rate,
        font_size=font_size,
        line_spacing=line_spacing,
    )


def _read_number(name: str, kind: type, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return kind(raw)
    except ValueError:
        raise ValueError(f"Invalid value for {name}: {raw!r}")
