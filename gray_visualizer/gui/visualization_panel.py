"""
Visualization Panel - Controls, current code, and the complete sequence

Pure view: emits intent signals and redraws from engine snapshots.
PlaybackController owns the wiring.
"""

from PyQt5.QtWidgets import (
    QFrame, QGridLayout, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget,
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from .theme import COLORS, FONT_FAMILY, FONT_SIZES, button_style, state_panel_style
from .widgets import BitCell, LabeledSlider, SequenceCell
from gray_visualizer.config import (
    BITS_DEFAULT, BITS_MAX, BITS_MIN, SEQUENCE_COLUMNS, SIZES,
    SPEED_DEFAULT, SPEED_MAX, SPEED_MIN, SPEED_STEP,
)
from gray_visualizer.model.gray_code import binary_to_decimal


class VisualizationPanel(QWidget):
    """Visualization tab."""

    bits_changed = pyqtSignal(int)
    speed_changed = pyqtSignal(int)
    play_toggled = pyqtSignal()
    reset_requested = pyqtSignal()
    code_selected = pyqtSignal(int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.bit_cells = []
        self.sequence_cells = []
        self.setup_ui()

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(SIZES['spacing_section'])

        layout.addLayout(self.create_controls())
        layout.addWidget(self.create_state_panel())
        layout.addWidget(self.create_sequence_section())
        layout.addStretch()

    # =========================================================================
    # CONTROLS
    # =========================================================================

    def create_controls(self):
        controls = QVBoxLayout()
        controls.setSpacing(SIZES['spacing_normal'])

        self.bits_slider = LabeledSlider("Bits:", BITS_MIN, BITS_MAX, BITS_DEFAULT)
        self.bits_slider.value_changed.connect(self.bits_changed)
        controls.addWidget(self.bits_slider)

        self.speed_slider = LabeledSlider(
            "Speed:", SPEED_MIN, SPEED_MAX, SPEED_DEFAULT,
            step=SPEED_STEP, fmt=lambda v: f"{v}ms",
        )
        self.speed_slider.value_changed.connect(self.speed_changed)
        controls.addWidget(self.speed_slider)

        buttons = QHBoxLayout()
        buttons.setSpacing(SIZES['spacing_section'])
        buttons.addStretch()

        self.play_btn = QPushButton("▶ Play")
        self.play_btn.setMinimumSize(*SIZES['button_transport'])
        self.play_btn.setStyleSheet(button_style('primary'))
        self.play_btn.setToolTip("Play / pause (Space)")
        self.play_btn.clicked.connect(self.play_toggled)
        buttons.addWidget(self.play_btn)

        self.reset_btn = QPushButton("⟲ Reset")
        self.reset_btn.setMinimumSize(*SIZES['button_transport'])
        self.reset_btn.setStyleSheet(button_style('neutral'))
        self.reset_btn.setToolTip("Back to the first code (R)")
        self.reset_btn.clicked.connect(self.reset_requested)
        buttons.addWidget(self.reset_btn)

        buttons.addStretch()
        controls.addLayout(buttons)
        return controls

    # =========================================================================
    # CURRENT STATE
    # =========================================================================

    def create_state_panel(self):
        panel = QFrame()
        panel.setObjectName("statePanel")
        panel.setStyleSheet(state_panel_style())

        layout = QVBoxLayout(panel)
        layout.setContentsMargins(SIZES['margin_panel'], SIZES['margin_normal'],
                                  SIZES['margin_panel'], SIZES['margin_normal'])
        layout.setSpacing(SIZES['spacing_normal'])

        self.step_label = QLabel()
        self.step_label.setAlignment(Qt.AlignCenter)
        self.step_label.setFont(QFont(FONT_FAMILY, FONT_SIZES['label']))
        self.step_label.setStyleSheet(f"color: {COLORS['text_dim']}; background: transparent;")
        layout.addWidget(self.step_label)

        self.bits_row = QHBoxLayout()
        self.bits_row.setSpacing(SIZES['spacing_normal'])
        layout.addLayout(self.bits_row)

        self.decimal_label = QLabel()
        self.decimal_label.setAlignment(Qt.AlignCenter)
        self.decimal_label.setTextFormat(Qt.RichText)
        self.decimal_label.setFont(QFont(FONT_FAMILY, FONT_SIZES['section']))
        self.decimal_label.setStyleSheet(f"color: {COLORS['text']}; background: transparent;")
        layout.addWidget(self.decimal_label)

        self.changed_label = QLabel()
        self.changed_label.setAlignment(Qt.AlignCenter)
        self.changed_label.setFont(QFont(FONT_FAMILY, FONT_SIZES['small'], QFont.Bold))
        self.changed_label.setStyleSheet(
            f"color: {COLORS['bit_changed_note']}; background: transparent;"
        )
        layout.addWidget(self.changed_label)

        return panel

    def _rebuild_bit_cells(self, bits):
        while self.bits_row.count():
            item = self.bits_row.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()
        self.bit_cells = []

        self.bits_row.addStretch()
        for _ in range(bits):
            cell = BitCell()
            self.bit_cells.append(cell)
            self.bits_row.addWidget(cell, alignment=Qt.AlignVCenter)
        self.bits_row.addStretch()

    # =========================================================================
    # COMPLETE SEQUENCE
    # =========================================================================

    def create_sequence_section(self):
        section = QWidget()
        layout = QVBoxLayout(section)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(SIZES['spacing_normal'])

        title = QLabel("Complete Sequence:")
        title.setFont(QFont(FONT_FAMILY, FONT_SIZES['section'], QFont.Bold))
        title.setStyleSheet(f"color: {COLORS['text_dark']};")
        layout.addWidget(title)

        self.sequence_grid = QGridLayout()
        self.sequence_grid.setSpacing(SIZES['spacing_normal'])
        layout.addLayout(self.sequence_grid)
        return section

    def set_sequence(self, sequence):
        """Replace the grid and bit cells for a newly generated sequence."""
        for cell in self.sequence_cells:
            self.sequence_grid.removeWidget(cell)
            cell.deleteLater()
        self.sequence_cells = []

        for idx, code in enumerate(sequence):
            cell = SequenceCell(idx, code, binary_to_decimal(code))
            cell.clicked.connect(self.code_selected)
            row, col = divmod(idx, SEQUENCE_COLUMNS)
            self.sequence_grid.addWidget(cell, row, col)
            self.sequence_cells.append(cell)

        bits = len(sequence[0]) if sequence else 0
        self._rebuild_bit_cells(bits)

    # =========================================================================
    # REDRAW
    # =========================================================================

    def refresh(self, snapshot):
        """Redraw from an engine snapshot."""
        position = snapshot['position']
        code = snapshot['current_code']
        changed = snapshot['changed_bit']

        self.bits_slider.set_value(snapshot['bits'])
        self.speed_slider.set_value(snapshot['speed_ms'])
        self.play_btn.setText("⏸ Pause" if snapshot['playing'] else "▶ Play")

        self.step_label.setText(snapshot['step_label'])
        for idx, cell in enumerate(self.bit_cells):
            if idx < len(code):
                cell.set_bit(code[idx], changed=(idx == changed))

        self.decimal_label.setText(
            f"Decimal: <b style='color: {COLORS['accent_dark']}'>{snapshot['decimal']}</b>"
            f"  <span style='color: {COLORS['text_muted']}'>(index {snapshot['index']})</span>"
        )
        if changed is not None:
            self.changed_label.setText(f"⚡ Bit {changed} changed from previous step")
        else:
            self.changed_label.setText("")

        for idx, cell in enumerate(self.sequence_cells):
            if idx == position:
                cell.set_state('current')
            elif idx < position:
                cell.set_state('visited')
            else:
                cell.set_state('pending')
