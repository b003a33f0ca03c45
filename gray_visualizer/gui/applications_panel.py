"""
Applications Panel - Where Gray code shows up in practice
"""

from PyQt5.QtWidgets import QFrame, QGridLayout, QLabel, QVBoxLayout, QWidget
from PyQt5.QtGui import QFont

from .theme import COLORS, FONT_FAMILY, FONT_SIZES, get, info_card_style, note_style
from gray_visualizer.config import SIZES
from gray_visualizer.config import content


class ApplicationsPanel(QWidget):
    """Applications tab: 2x2 cards plus the "why it matters" call-out."""

    CARD_COLUMNS = 2

    def __init__(self, parent=None):
        super().__init__(parent)
        self.cards = []
        self.setup_ui()

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(SIZES['spacing_section'])

        title = QLabel(content.APPLICATIONS_TITLE)
        title.setFont(QFont(FONT_FAMILY, FONT_SIZES['title'], QFont.Bold))
        title.setStyleSheet(f"color: {COLORS['text_dark']};")
        layout.addWidget(title)

        grid = QGridLayout()
        grid.setSpacing(SIZES['spacing_section'])
        for idx, app in enumerate(content.APPLICATIONS):
            card = self.create_card(app)
            row, col = divmod(idx, self.CARD_COLUMNS)
            grid.addWidget(card, row, col)
            self.cards.append(card)
        layout.addLayout(grid)

        layout.addWidget(self.create_why_it_matters())
        layout.addStretch()

    def create_card(self, app):
        card = QFrame()
        card.setStyleSheet(info_card_style(app['accent']))
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(SIZES['margin_panel'], SIZES['margin_normal'],
                                       SIZES['margin_panel'], SIZES['margin_normal'])

        heading = QLabel(app['title'])
        heading.setFont(QFont(FONT_FAMILY, FONT_SIZES['section'], QFont.Bold))
        heading.setStyleSheet(f"color: {get(app['accent'] + '_title')};")
        card_layout.addWidget(heading)

        body = QLabel(app['text'])
        body.setWordWrap(True)
        body.setFont(QFont(FONT_FAMILY, FONT_SIZES['label']))
        body.setStyleSheet(f"color: {COLORS['text']};")
        card_layout.addWidget(body)
        return card

    def create_why_it_matters(self):
        note = QFrame()
        note.setStyleSheet(note_style('warn'))
        note_layout = QVBoxLayout(note)
        note_layout.setContentsMargins(SIZES['margin_panel'], SIZES['margin_normal'],
                                       SIZES['margin_panel'], SIZES['margin_normal'])

        heading = QLabel(content.WHY_IT_MATTERS_TITLE)
        heading.setFont(QFont(FONT_FAMILY, FONT_SIZES['label'], QFont.Bold))
        heading.setStyleSheet(f"color: {COLORS['text_dark']};")
        note_layout.addWidget(heading)

        intro = QLabel(content.WHY_IT_MATTERS_INTRO)
        intro.setWordWrap(True)
        intro.setStyleSheet(f"color: {COLORS['text']};")
        note_layout.addWidget(intro)

        for point in content.WHY_IT_MATTERS_POINTS:
            bullet = QLabel(f"•  {point}")
            bullet.setStyleSheet(f"color: {COLORS['text']};")
            note_layout.addWidget(bullet)
        return note
