"""
Main Frame - Header, tab bar, and the three tab panels
"""

from PyQt5.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QApplication,
                             QAbstractSlider, QSlider,
                             QPushButton, QLabel, QFrame, QShortcut, QStackedLayout,
                             QScrollArea)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont, QKeySequence

from gray_visualizer.gui.visualization_panel import VisualizationPanel
from gray_visualizer.gui.algorithm_panel import AlgorithmPanel
from gray_visualizer.gui.applications_panel import ApplicationsPanel
from gray_visualizer.gui.controllers import PlaybackController
from gray_visualizer.gui.theme import (
    COLORS, FONT_FAMILY, FONT_SIZES, card_frame_style, tab_button_style, window_style,
)
from gray_visualizer.config import (
    SIZES, TABS, TAB_DEFAULT, TAB_INDEX, TAB_LABELS, WINDOW_SUBTITLE, WINDOW_TITLE,
)
from gray_visualizer.config import content
from gray_visualizer.utils.logger import logger


class MainFrame(QMainWindow):
    """Main application window."""

    STATUS_TIMEOUT = 4000  # ms

    def __init__(self, settings=None, initial_tab=TAB_DEFAULT):
        super().__init__()

        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(*SIZES['window_min'])
        self.resize(*SIZES['window_default'])

        self.active_tab = None
        self.tab_buttons = {}

        self.setup_ui()

        self.playback = PlaybackController(self, settings)

        self.setup_shortcuts()
        logger.signal_emitter.log_message.connect(self.on_log_message)

        self.set_tab(initial_tab)

    def setup_ui(self):
        """Create the main interface layout."""
        self.setStyleSheet(window_style())

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        self.setCentralWidget(scroll)

        central = QWidget()
        central.setObjectName("central")
        scroll.setWidget(central)

        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(SIZES['margin_panel'], SIZES['margin_panel'],
                                       SIZES['margin_panel'], SIZES['margin_panel'])
        main_layout.setSpacing(0)

        main_layout.addWidget(self.create_header())
        main_layout.addSpacing(SIZES['spacing_section'])
        main_layout.addLayout(self.create_tab_bar())

        card = QFrame()
        card.setObjectName("card")
        card.setStyleSheet(card_frame_style())
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(SIZES['margin_panel'], SIZES['margin_panel'],
                                       SIZES['margin_panel'], SIZES['margin_panel'])

        self.stack = QStackedLayout()
        self.visualization_panel = VisualizationPanel()
        self.algorithm_panel = AlgorithmPanel()
        self.applications_panel = ApplicationsPanel()
        self.panels = {
            'visualization': self.visualization_panel,
            'algorithm': self.algorithm_panel,
            'applications': self.applications_panel,
        }
        for tab in TABS:
            self.stack.addWidget(self.panels[tab])
        card_layout.addLayout(self.stack)
        main_layout.addWidget(card)

        main_layout.addSpacing(SIZES['spacing_section'])
        main_layout.addWidget(self.create_footer())
        main_layout.addStretch()

    def create_header(self):
        header = QWidget()
        header.setStyleSheet("background: transparent;")
        layout = QVBoxLayout(header)
        layout.setContentsMargins(0, 0, 0, 0)

        title = QLabel(WINDOW_TITLE)
        title.setAlignment(Qt.AlignCenter)
        title.setFont(QFont(FONT_FAMILY, FONT_SIZES['title'] + 6, QFont.Bold))
        title.setStyleSheet(f"color: {COLORS['header']};")
        layout.addWidget(title)

        subtitle = QLabel(WINDOW_SUBTITLE)
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setFont(QFont(FONT_FAMILY, FONT_SIZES['label']))
        subtitle.setStyleSheet(f"color: {COLORS['subtitle']};")
        layout.addWidget(subtitle)
        return header

    def create_tab_bar(self):
        bar = QHBoxLayout()
        bar.setSpacing(SIZES['spacing_normal'])
        for tab in TABS:
            btn = QPushButton(TAB_LABELS[tab])
            btn.setMinimumSize(*SIZES['button_tab'])
            btn.clicked.connect(lambda checked=False, t=tab: self.set_tab(t))
            bar.addWidget(btn)
            self.tab_buttons[tab] = btn
        bar.addStretch()
        return bar

    def create_footer(self):
        footer = QLabel("\n".join(content.FOOTER_LINES))
        footer.setAlignment(Qt.AlignCenter)
        footer.setFont(QFont(FONT_FAMILY, FONT_SIZES['small']))
        footer.setStyleSheet(f"color: {COLORS['subtitle']}; background: transparent;")
        return footer

    def setup_shortcuts(self):
        """Keyboard shortcuts (Visualization tab only for transport keys)."""
        self._shortcuts = []

        def bind(key, handler):
            shortcut = QShortcut(QKeySequence(key), self)
            shortcut.activated.connect(handler)
            self._shortcuts.append(shortcut)

        bind(Qt.Key_Space, self._visualization_only(self.playback.on_play_toggled))
        bind(Qt.Key_Right, self._visualization_only(
            self._arrow_key(self.playback.step_forward, QAbstractSlider.SliderSingleStepAdd)))
        bind(Qt.Key_Left, self._visualization_only(
            self._arrow_key(self.playback.step_backward, QAbstractSlider.SliderSingleStepSub)))
        bind(Qt.Key_R, self._visualization_only(self.playback.on_reset))
        for idx, tab in enumerate(TABS):
            bind(f"Ctrl+{idx + 1}", lambda t=tab: self.set_tab(t))

    def _arrow_key(self, handler, slider_action):
        """Arrow keys step the sequence unless a slider has focus."""
        def wrapped():
            focus_widget = QApplication.focusWidget()
            if isinstance(focus_widget, QSlider):
                focus_widget.triggerAction(slider_action)
            else:
                handler()
        return wrapped

    def _visualization_only(self, handler):
        def wrapped():
            if self.active_tab == 'visualization':
                handler()
        return wrapped

    def set_tab(self, tab):
        """Switch the visible tab panel."""
        if tab not in TAB_INDEX:
            logger.warning(f"Unknown tab '{tab}'", component="UI")
            return
        if tab == self.active_tab:
            return
        self.active_tab = tab
        self.stack.setCurrentIndex(TAB_INDEX[tab])
        for name, btn in self.tab_buttons.items():
            btn.setStyleSheet(tab_button_style(active=(name == tab)))
        logger.ui(f"Tab: {TAB_LABELS[tab]}")

    def on_log_message(self, message, level, timestamp):
        self.statusBar().showMessage(f"{timestamp}  {message}", self.STATUS_TIMEOUT)

    def closeEvent(self, event):
        self.playback.shutdown()
        logger.signal_emitter.log_message.disconnect(self.on_log_message)
        super().closeEvent(event)
