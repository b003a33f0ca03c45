"""
PlaybackController - Connects the Visualization tab to the PlaybackEngine.

Owns the engine and the auto-advance QTimer. The panel only emits intent
signals; every redraw comes from engine.get_ui_snapshot().
"""
from __future__ import annotations

from PyQt5.QtCore import QTimer

from gray_visualizer.gui.playback_engine import PlaybackEngine
from gray_visualizer.model.playback import PlaybackSettings
from gray_visualizer.utils.logger import logger


class PlaybackController:
    """Handles transport, bit width, speed and sequence navigation."""

    def __init__(self, main_frame, settings: PlaybackSettings | None = None):
        self.main = main_frame
        self.panel = main_frame.visualization_panel

        self.engine = PlaybackEngine(settings)

        self.timer = QTimer()
        self.timer.timeout.connect(self.on_timer_tick)

        self._shown_bits = None

        self.panel.bits_changed.connect(self.on_bits_changed)
        self.panel.speed_changed.connect(self.on_speed_changed)
        self.panel.play_toggled.connect(self.on_play_toggled)
        self.panel.reset_requested.connect(self.on_reset)
        self.panel.code_selected.connect(self.on_code_selected)

        self.engine.on_state_changed = self.on_engine_changed
        self.on_engine_changed()

    # === Panel handlers ===

    def on_bits_changed(self, bits):
        self.engine.set_bits(bits)

    def on_speed_changed(self, speed_ms):
        self.engine.set_speed(speed_ms)
        logger.debug(f"Speed: {self.engine.speed_ms}ms", component="PLAY")

    def on_play_toggled(self):
        self.engine.toggle_playback()
        state = "Playing" if self.engine.is_playing else "Paused"
        logger.info(state, component="PLAY", details=self.engine.step_label)

    def on_reset(self):
        self.engine.reset()

    def on_code_selected(self, index):
        self.engine.select(index)
        logger.debug(f"Selected {self.engine.current_code}", component="UI",
                     details=self.engine.step_label)

    # === Keyboard shortcuts ===

    def step_forward(self):
        self.engine.step_forward()
        self._rearm_timer()

    def step_backward(self):
        self.engine.step_backward()
        self._rearm_timer()

    # === Timer ===

    def on_timer_tick(self):
        self.engine.advance()

    def _rearm_timer(self):
        """Give a manually reached code a full interval before the next tick."""
        if self.engine.is_playing:
            self.timer.start(self.engine.speed_ms)

    def _sync_timer(self):
        """Start, retime or stop the QTimer to match the engine."""
        if not self.engine.is_playing:
            if self.timer.isActive():
                self.timer.stop()
            return
        if not self.timer.isActive():
            self.timer.start(self.engine.speed_ms)
        elif self.timer.interval() != self.engine.speed_ms:
            # setInterval on a running timer restarts the countdown
            self.timer.setInterval(self.engine.speed_ms)

    # === Redraw ===

    def on_engine_changed(self):
        self._sync_timer()
        if self._shown_bits != self.engine.bits:
            self.panel.set_sequence(self.engine.sequence)
            self._shown_bits = self.engine.bits
        self.panel.refresh(self.engine.get_ui_snapshot())

    def shutdown(self):
        """Stop the timer (window close)."""
        self.timer.stop()
        self.engine.pause()
