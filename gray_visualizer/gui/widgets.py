"""
Reusable UI Widgets
Atomic components with no business logic - just behavior
"""

from PyQt5.QtWidgets import QFrame, QHBoxLayout, QLabel, QSlider, QVBoxLayout, QWidget
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from .theme import (
    COLORS, FONT_FAMILY, FONT_SIZES, MONO_FONT,
    bit_cell_style, sequence_cell_style, slider_style,
)
from gray_visualizer.config import SIZES


class BitCell(QLabel):
    """One bit of the current code. Grows and turns yellow when it just flipped."""

    def __init__(self, bit='0', parent=None):
        super().__init__(parent)
        self.setAlignment(Qt.AlignCenter)
        self.setFont(QFont(MONO_FONT, FONT_SIZES['display'], QFont.Bold))
        self._bit = bit
        self._changed = False
        self._apply()

    @property
    def bit(self):
        return self._bit

    @property
    def changed(self):
        return self._changed

    def set_bit(self, bit, changed=False):
        if bit == self._bit and changed == self._changed:
            return
        self._bit = bit
        self._changed = changed
        self._apply()

    def _apply(self):
        self.setText(self._bit)
        size = SIZES['bit_cell_changed'] if self._changed else SIZES['bit_cell']
        self.setFixedSize(*size)
        self.setStyleSheet(bit_cell_style(self._bit, self._changed))


class SequenceCell(QFrame):
    """
    Clickable entry in the Complete Sequence grid.
    Shows the code and its decimal read-out.
    """

    clicked = pyqtSignal(int)  # index

    def __init__(self, index, code, decimal, parent=None):
        super().__init__(parent)
        self.index = index
        self._state = None
        self.setCursor(Qt.PointingHandCursor)
        self.setMinimumWidth(SIZES['sequence_cell_min_width'])
        self.setFixedHeight(SIZES['sequence_cell_height'])

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 6, 12, 6)
        layout.setSpacing(0)

        self.code_label = QLabel(code)
        self.code_label.setFont(QFont(MONO_FONT, FONT_SIZES['section'], QFont.Bold))
        layout.addWidget(self.code_label)

        self.decimal_label = QLabel(f"Dec: {decimal}")
        self.decimal_label.setFont(QFont(FONT_FAMILY, FONT_SIZES['small']))
        layout.addWidget(self.decimal_label)

        self.set_state('pending')

    @property
    def state(self):
        return self._state

    def set_state(self, state):
        """current, visited or pending."""
        if state == self._state:
            return
        self._state = state
        self.setStyleSheet(sequence_cell_style(state))

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.clicked.emit(self.index)
        super().mousePressEvent(event)


class LabeledSlider(QWidget):
    """
    Horizontal slider with a caption on the left and a value read-out on the right.
    Read-out text comes from fmt(value).
    """

    value_changed = pyqtSignal(int)

    def __init__(self, caption, minimum, maximum, value, step=1, fmt=str, parent=None):
        super().__init__(parent)
        self._fmt = fmt

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(SIZES['spacing_section'])

        self.caption = QLabel(caption)
        self.caption.setFont(QFont(FONT_FAMILY, FONT_SIZES['label'], QFont.Bold))
        self.caption.setStyleSheet(f"color: {COLORS['text']};")
        layout.addWidget(self.caption)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(minimum, maximum)
        self.slider.setSingleStep(step)
        self.slider.setPageStep(step)
        self.slider.setTickInterval(step)
        self.slider.setValue(value)
        self.slider.setStyleSheet(slider_style())
        self.slider.valueChanged.connect(self._on_value_changed)
        layout.addWidget(self.slider, stretch=1)

        self.value_label = QLabel(fmt(value))
        self.value_label.setFixedWidth(SIZES['value_label_width'])
        self.value_label.setFont(QFont(FONT_FAMILY, FONT_SIZES['section'], QFont.Bold))
        self.value_label.setStyleSheet(f"color: {COLORS['accent_dark']};")
        layout.addWidget(self.value_label)

    def value(self):
        return self.slider.value()

    def set_value(self, value):
        """Set programmatically without emitting value_changed."""
        self.slider.blockSignals(True)
        self.slider.setValue(value)
        self.slider.blockSignals(False)
        self.value_label.setText(self._fmt(self.slider.value()))

    def _on_value_changed(self, value):
        # QSlider does not snap drags to singleStep
        step = self.slider.singleStep()
        if step > 1:
            snapped = self.slider.minimum() + round((value - self.slider.minimum()) / step) * step
            if snapped != value:
                self.slider.setValue(snapped)
                return
        self.value_label.setText(self._fmt(value))
        self.value_changed.emit(value)
