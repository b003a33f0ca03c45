"""
GUI Controllers - keep MainFrame limited to layout.

PlaybackController: engine, auto-advance timer, Visualization tab wiring
"""

from .playback_controller import PlaybackController

__all__ = [
    'PlaybackController',
]
