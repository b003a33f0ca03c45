"""
Playback Engine Tests

Tests for:
- Defaults and constructor clamping
- Timer-driven advance with cyclic wrap
- Bit width changes (regenerate, rewind, stop)
- Speed clamping/snapping
- select / reset / manual stepping
- Snapshot contents and change notification
"""
import pytest
from unittest.mock import MagicMock

from gray_visualizer.config import BITS_MAX, BITS_MIN, SPEED_MAX, SPEED_MIN
from gray_visualizer.gui.playback_engine import PlaybackEngine
from gray_visualizer.model.playback import PlaybackSettings, PlaybackState


@pytest.fixture
def engine():
    return PlaybackEngine(PlaybackSettings(bits=3, speed_ms=1000))


# =============================================================================
# DEFAULTS
# =============================================================================

class TestDefaults:

    def test_default_settings(self):
        eng = PlaybackEngine()
        assert eng.bits == 3
        assert eng.speed_ms == 1000
        assert eng.length == 8

    def test_starts_paused_at_zero(self, engine):
        assert engine.position == 0
        assert engine.state == PlaybackState.PAUSED
        assert not engine.is_playing

    def test_first_position_has_no_predecessor(self, engine):
        assert engine.current_code == "000"
        assert engine.previous_code is None
        assert engine.changed_bit is None

    def test_constructor_clamps_settings(self):
        eng = PlaybackEngine(PlaybackSettings(bits=10, speed_ms=150))
        assert eng.bits == BITS_MAX
        assert eng.speed_ms == SPEED_MIN

    def test_constructor_leaves_caller_settings_alone(self):
        """Clamping happens on a private copy of the settings."""
        settings = PlaybackSettings(bits=10, speed_ms=150)
        eng = PlaybackEngine(settings)
        assert eng.settings is not settings
        assert settings.bits == 10
        assert settings.speed_ms == 150

    def test_set_bits_does_not_leak_into_caller_settings(self):
        settings = PlaybackSettings(bits=3, speed_ms=1000)
        eng = PlaybackEngine(settings)
        eng.set_bits(5)
        eng.set_speed(400)
        assert settings.bits == 3
        assert settings.speed_ms == 1000

    def test_sequence_property_is_a_copy(self, engine):
        seq = engine.sequence
        seq.clear()
        assert engine.length == 8


# =============================================================================
# AUTO-ADVANCE
# =============================================================================

class TestAdvance:

    def test_advance_is_noop_while_paused(self, engine):
        engine.advance()
        assert engine.position == 0

    def test_advance_moves_one_step(self, engine):
        engine.play()
        engine.advance()
        assert engine.position == 1
        assert engine.current_code == "001"
        assert engine.changed_bit == 2

    def test_advance_wraps_to_zero(self, engine):
        engine.play()
        for _ in range(8):
            engine.advance()
        assert engine.position == 0
        assert engine.is_playing

    def test_wrap_position_has_no_highlight(self, engine):
        engine.select(7)
        engine.play()
        engine.advance()
        assert engine.current_code == "000"
        assert engine.changed_bit is None

    def test_toggle_playback(self, engine):
        engine.toggle_playback()
        assert engine.is_playing
        engine.toggle_playback()
        assert not engine.is_playing


# =============================================================================
# BIT WIDTH
# =============================================================================

class TestSetBits:

    def test_regenerates_sequence(self, engine):
        engine.set_bits(4)
        assert engine.bits == 4
        assert engine.length == 16
        assert engine.current_code == "0000"

    def test_rewinds_and_stops(self, engine):
        engine.play()
        engine.advance()
        engine.advance()
        engine.set_bits(5)
        assert engine.position == 0
        assert not engine.is_playing

    @pytest.mark.parametrize("bits,expected", [(1, BITS_MIN), (0, BITS_MIN), (9, BITS_MAX)])
    def test_clamps_to_ui_range(self, engine, bits, expected):
        engine.set_bits(bits)
        assert engine.bits == expected
        assert engine.length == 2 ** expected


# =============================================================================
# SPEED
# =============================================================================

class TestSetSpeed:

    def test_sets_speed(self, engine):
        engine.set_speed(400)
        assert engine.speed_ms == 400

    @pytest.mark.parametrize("speed,expected", [
        (100, SPEED_MIN),
        (5000, SPEED_MAX),
        (450, 400),
        (550, 600),
    ])
    def test_clamps_and_snaps(self, engine, speed, expected):
        engine.set_speed(speed)
        assert engine.speed_ms == expected

    def test_keeps_position_and_play_state(self, engine):
        engine.play()
        engine.advance()
        engine.set_speed(200)
        assert engine.position == 1
        assert engine.is_playing


# =============================================================================
# NAVIGATION
# =============================================================================

class TestNavigation:

    def test_select_jumps_and_stops(self, engine):
        engine.play()
        engine.select(5)
        assert engine.position == 5
        assert not engine.is_playing
        assert engine.current_code == "111"
        assert engine.previous_code == "110"
        assert engine.changed_bit == 2

    def test_select_clamps(self, engine):
        engine.select(99)
        assert engine.position == 7
        engine.select(-4)
        assert engine.position == 0

    def test_reset(self, engine):
        engine.select(6)
        engine.play()
        engine.reset()
        assert engine.position == 0
        assert not engine.is_playing

    def test_step_backward_wraps(self, engine):
        engine.step_backward()
        assert engine.position == 7

    def test_step_forward_works_while_paused(self, engine):
        engine.step_forward()
        assert engine.position == 1
        assert not engine.is_playing


# =============================================================================
# SNAPSHOT / NOTIFICATION
# =============================================================================

class TestSnapshot:

    def test_snapshot_fields(self, engine):
        engine.select(7)
        snap = engine.get_ui_snapshot()
        assert snap['position'] == 7
        assert snap['length'] == 8
        assert snap['bits'] == 3
        assert snap['speed_ms'] == 1000
        assert snap['playing'] is False
        assert snap['current_code'] == "100"
        assert snap['previous_code'] == "101"
        assert snap['changed_bit'] == 2
        assert snap['decimal'] == 4
        assert snap['index'] == 7
        assert snap['step_label'] == "Step 8 of 8"

    def test_decimal_is_raw_value_of_code(self, engine):
        engine.select(6)
        assert engine.current_code == "101"
        assert engine.decimal == 5

    def test_version_increments(self, engine):
        before = engine.version
        engine.step_forward()
        engine.set_speed(400)
        assert engine.version == before + 2

    def test_callback_fires_on_mutation(self, engine):
        callback = MagicMock()
        engine.on_state_changed = callback
        engine.play()
        engine.advance()
        engine.pause()
        assert callback.call_count == 3

    def test_redundant_play_does_not_notify(self, engine):
        engine.play()
        callback = MagicMock()
        engine.on_state_changed = callback
        engine.play()
        callback.assert_not_called()
