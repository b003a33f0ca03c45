"""
Playback Engine — Gray code stepper

Holds the view state behind the Visualization tab:
- Sequence regenerated on bit width change
- Cyclic position (wraps to 0 after the last code)
- Play/pause flag and speed; the QTimer lives in PlaybackController
- Snapshot-based UI reads

No Qt imports: the engine is driven by explicit calls so it can be
tested without an event loop.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, List, Optional

from gray_visualizer.config import clamp_bits, clamp_speed
from gray_visualizer.model.gray_code import (
    binary_to_decimal, changed_bit, code_index, generate_sequence,
)
from gray_visualizer.model.playback import PlaybackSettings, PlaybackState
from gray_visualizer.utils.logger import logger


class PlaybackEngine:
    """
    Steps through a Gray code sequence.

    Every mutation bumps `version` and fires on_state_changed so the
    controller can redraw from get_ui_snapshot().
    """

    def __init__(self, settings: Optional[PlaybackSettings] = None):
        # Private copy: clamping must not write back into the caller's settings
        self.settings = replace(settings) if settings is not None else PlaybackSettings()
        self.settings.bits = clamp_bits(self.settings.bits)
        self.settings.speed_ms = clamp_speed(self.settings.speed_ms)

        self._sequence: List[str] = generate_sequence(self.settings.bits)
        self.position: int = 0
        self.state = PlaybackState.PAUSED

        # Version counter for UI snapshot diffing
        self.version: int = 0

        # Callback for redraws (set by PlaybackController)
        self.on_state_changed: Optional[Callable[[], None]] = None

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def bits(self) -> int:
        return self.settings.bits

    @property
    def speed_ms(self) -> int:
        return self.settings.speed_ms

    @property
    def sequence(self) -> List[str]:
        """Copy of the current sequence."""
        return list(self._sequence)

    @property
    def length(self) -> int:
        return len(self._sequence)

    @property
    def is_playing(self) -> bool:
        return self.state == PlaybackState.PLAYING

    @property
    def current_code(self) -> str:
        return self._sequence[self.position]

    @property
    def previous_code(self) -> Optional[str]:
        """Code before the current one; None at position 0 (no wrap-back)."""
        if self.position > 0:
            return self._sequence[self.position - 1]
        return None

    @property
    def changed_bit(self) -> Optional[int]:
        return changed_bit(self.previous_code, self.current_code)

    @property
    def decimal(self) -> int:
        return binary_to_decimal(self.current_code)

    @property
    def step_label(self) -> str:
        return f"Step {self.position + 1} of {self.length}"

    # =========================================================================
    # SETTINGS
    # =========================================================================

    def set_bits(self, bits: int):
        """Regenerate for a new width. Rewinds to 0 and stops playback."""
        clamped = clamp_bits(bits)
        if clamped != bits:
            logger.play(f"Bits {bits} clamped to {clamped}")
        self.settings.bits = clamped
        self._sequence = generate_sequence(clamped)
        self.position = 0
        self.state = PlaybackState.PAUSED
        logger.info(f"Bits set to {clamped} ({self.length} codes)", component="PLAY")
        self._changed()

    def set_speed(self, speed_ms: int):
        """Change the auto-play interval without touching position."""
        clamped = clamp_speed(speed_ms)
        if clamped != speed_ms:
            logger.play(f"Speed {speed_ms}ms snapped to {clamped}ms")
        self.settings.speed_ms = clamped
        self._changed()

    # =========================================================================
    # TRANSPORT
    # =========================================================================

    def play(self):
        if self.is_playing:
            return
        self.state = PlaybackState.PLAYING
        logger.play("Play", details=self.step_label)
        self._changed()

    def pause(self):
        if not self.is_playing:
            return
        self.state = PlaybackState.PAUSED
        logger.play("Pause", details=self.step_label)
        self._changed()

    def toggle_playback(self):
        if self.is_playing:
            self.pause()
        else:
            self.play()

    def reset(self):
        """Back to the first code, stopped."""
        self.position = 0
        self.state = PlaybackState.PAUSED
        logger.play("Reset")
        self._changed()

    # =========================================================================
    # STEPPING
    # =========================================================================

    def advance(self):
        """Timer tick: move one step forward, wrapping. No-op while paused."""
        if not self.is_playing:
            return
        self.position = (self.position + 1) % self.length
        self._changed()

    def step_forward(self):
        """Manual step forward, wrapping."""
        self.position = (self.position + 1) % self.length
        self._changed()

    def step_backward(self):
        """Manual step back, wrapping."""
        self.position = (self.position - 1) % self.length
        self._changed()

    def select(self, index: int):
        """Jump straight to a code (sequence grid click). Stops playback."""
        clamped = max(0, min(index, self.length - 1))
        if clamped != index:
            logger.play(f"Index {index} clamped to {clamped}")
        self.position = clamped
        self.state = PlaybackState.PAUSED
        self._changed()

    # =========================================================================
    # UI SNAPSHOT
    # =========================================================================

    def get_ui_snapshot(self) -> dict:
        """Everything the Visualization tab needs for one redraw."""
        return {
            'position': self.position,
            'length': self.length,
            'bits': self.bits,
            'speed_ms': self.speed_ms,
            'playing': self.is_playing,
            'current_code': self.current_code,
            'previous_code': self.previous_code,
            'changed_bit': self.changed_bit,
            'decimal': self.decimal,
            'index': code_index(self.current_code),
            'step_label': self.step_label,
            'version': self.version,
        }

    def _changed(self):
        self.version += 1
        if self.on_state_changed is not None:
            self.on_state_changed()
