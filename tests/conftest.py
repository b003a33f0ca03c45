"""Pytest configuration - consistent CWD and shared fixtures.

GUI tests run against the offscreen Qt platform so no display is needed.
"""
from __future__ import annotations

import os
from pathlib import Path
import pytest

ROOT = Path(__file__).resolve().parents[1]

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def pytest_sessionstart(session):
    os.chdir(ROOT)


@pytest.fixture
def project_root():
    """Return path to project root."""
    return ROOT


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication shared by every widget test."""
    from PyQt5.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def main_frame(qapp):
    """MainFrame with default settings, closed after the test."""
    from gray_visualizer.gui.main_frame import MainFrame
    from gray_visualizer.model.playback import PlaybackSettings

    frame = MainFrame(PlaybackSettings(bits=3, speed_ms=1000))
    frame.show()
    yield frame
    frame.close()
    frame.deleteLater()
