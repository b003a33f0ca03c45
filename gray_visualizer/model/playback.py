"""
Playback Data Models

- PlaybackSettings: user-selected bit width and auto-play speed
- PlaybackState: PLAYING / PAUSED transport flag
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from gray_visualizer.config import BITS_DEFAULT, SPEED_DEFAULT


class PlaybackState(Enum):
    """Transport state for auto-play."""
    PAUSED = auto()
    PLAYING = auto()


@dataclass
class PlaybackSettings:
    """Visualizer configuration."""
    bits: int = BITS_DEFAULT          # Bit width (2-6 in the UI)
    speed_ms: int = SPEED_DEFAULT     # Auto-play interval
