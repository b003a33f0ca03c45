"""
Algorithm Panel - The two construction methods and the key XOR property
"""

from PyQt5.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont

from .theme import COLORS, FONT_FAMILY, FONT_SIZES, MONO_FONT, code_block_style, get, note_style
from gray_visualizer.config import SIZES
from gray_visualizer.config import content


class AlgorithmPanel(QWidget):
    """Algorithm tab."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.code_blocks = []
        self.setup_ui()

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(SIZES['spacing_section'])

        title = QLabel(content.ALGORITHM_TITLE)
        title.setFont(QFont(FONT_FAMILY, FONT_SIZES['title'], QFont.Bold))
        title.setStyleSheet(f"color: {COLORS['text_dark']};")
        layout.addWidget(title)

        for method in content.ALGORITHM_METHODS:
            layout.addWidget(self.create_method_box(method))

        layout.addWidget(self.create_key_property())
        layout.addStretch()

    def create_method_box(self, method):
        box = QFrame()
        box.setStyleSheet(f"QFrame {{ background-color: {COLORS['panel']}; border-radius: 8px; }}")
        box_layout = QVBoxLayout(box)
        box_layout.setContentsMargins(SIZES['margin_panel'], SIZES['margin_normal'],
                                      SIZES['margin_panel'], SIZES['margin_normal'])

        heading = QLabel(method['title'])
        heading.setFont(QFont(FONT_FAMILY, FONT_SIZES['label'], QFont.Bold))
        heading.setStyleSheet(f"color: {COLORS['text_dark']}; background: transparent;")
        box_layout.addWidget(heading)

        code = QLabel(method['code'])
        code.setFont(QFont(MONO_FONT, FONT_SIZES['label']))
        code.setTextFormat(Qt.PlainText)
        code.setTextInteractionFlags(Qt.TextSelectableByMouse)
        code.setStyleSheet(code_block_style())
        box_layout.addWidget(code)
        self.code_blocks.append(code)
        return box

    def create_key_property(self):
        note = QFrame()
        note.setStyleSheet(note_style('info'))
        note_layout = QVBoxLayout(note)
        note_layout.setContentsMargins(SIZES['margin_panel'], SIZES['margin_normal'],
                                       SIZES['margin_panel'], SIZES['margin_normal'])

        heading = QLabel(f"<span style='color: {get('note_info_icon')}'>ⓘ</span> "
                         f"{content.KEY_PROPERTY_TITLE}")
        heading.setTextFormat(Qt.RichText)
        heading.setFont(QFont(FONT_FAMILY, FONT_SIZES['label'], QFont.Bold))
        heading.setStyleSheet(f"color: {COLORS['text_dark']};")
        note_layout.addWidget(heading)

        body = QLabel(content.KEY_PROPERTY_TEXT)
        body.setWordWrap(True)
        body.setFont(QFont(FONT_FAMILY, FONT_SIZES['label']))
        body.setStyleSheet(f"color: {COLORS['text']};")
        note_layout.addWidget(body)
        return note
