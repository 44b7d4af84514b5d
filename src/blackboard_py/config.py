"""Configuration for blackboard-py."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from blackboard_py.core.types import BOARD_HEIGHT, BOARD_WIDTH

_TRUTHY = {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        msg = f"{name} must be an integer, got {value!r}"
        raise ValueError(msg) from None


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


@dataclass
class BoardConfig:
    """Settings for a drawing session.

    Environment variables:
        BLACKBOARD_WIDTH: Grid width in characters (default 80)
        BLACKBOARD_HEIGHT: Grid height in characters (default 25)
        BLACKBOARD_SHAPES_FILE: Record file loaded by the interactive menu
        BLACKBOARD_DEBUG: Enable debug logging
        BLACKBOARD_JSON_LOGS: Emit logs as JSON
    """

    width: int = field(default_factory=lambda: _env_int("BLACKBOARD_WIDTH", BOARD_WIDTH))
    height: int = field(default_factory=lambda: _env_int("BLACKBOARD_HEIGHT", BOARD_HEIGHT))
    shapes_file: str = field(default_factory=lambda: os.getenv("BLACKBOARD_SHAPES_FILE", "shapes.txt"))
    debug: bool = field(default_factory=lambda: _env_flag("BLACKBOARD_DEBUG"))
    json_logs: bool = field(default_factory=lambda: _env_flag("BLACKBOARD_JSON_LOGS"))

    def __post_init__(self) -> None:
        """Reject grid sizes that cannot hold a single cell."""
        if self.width <= 0 or self.height <= 0:
            msg = f"Board size must be positive, got {self.width}x{self.height}"
            raise ValueError(msg)
