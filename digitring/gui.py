"""PySide6 front end for exploring digit rings."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import (
    QColor,
    QFont,
    QPaintEvent,
    QPainter,
    QPen,
    QRadialGradient,
)
from PySide6.QtWidgets import (
    QComboBox,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from . import arithmetic, codec
from .config import DEFAULT_SETTINGS, NumberSettings
from .errors import DigitRingError
from .linked_list import DigitRing

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RingSkin:
    """Palette that describes how a digit ring should be rendered."""

    name: str
    background_gradient: tuple[str, str]
    track_color: str
    node_color: str
    head_node_color: str
    digit_color: str
    head_digit_color: str
    link_color: str
    caption_color: str
    ui_accent_color: str
    ui_accent_text_color: str


NODE_RADIUS_RATIO = 0.09
TRACK_RADIUS_RATIO = 0.36

RING_SKIN_PRESETS = [
    RingSkin(
        name="Slate",
        background_gradient=("#111b2c", "#0f172a"),
        track_color="#334155",
        node_color="#e2e8f0",
        head_node_color="#38bdf8",
        digit_color="#0f172a",
        head_digit_color="#0f172a",
        link_color="#64748b",
        caption_color="#e2e8f0",
        ui_accent_color="#38bdf8",
        ui_accent_text_color="#0f172a",
    ),
    RingSkin(
        name="Paper",
        background_gradient=("#f8fafc", "#e2e8f0"),
        track_color="#cbd5f5",
        node_color="#ffffff",
        head_node_color="#facc15",
        digit_color="#1f2937",
        head_digit_color="#1f2937",
        link_color="#94a3b8",
        caption_color="#0f172a",
        ui_accent_color="#1f2937",
        ui_accent_text_color="#f8fafc",
    ),
]

RING_SKINS = {skin.name: skin for skin in RING_SKIN_PRESETS}
DEFAULT_RING_SKIN = RING_SKIN_PRESETS[0]


class DigitRingWidget(QWidget):
    """Widget that draws the nodes of a ring clockwise from its head."""

    def __init__(
        self,
        ring: Optional[DigitRing] = None,
        skin: Optional[RingSkin] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._ring = ring if ring is not None else DigitRing(DEFAULT_SETTINGS.base)
        self._skin = skin or DEFAULT_RING_SKIN
        self.setMinimumSize(320, 320)
        self.setAutoFillBackground(False)

    @property
    def ring(self) -> DigitRing:
        return self._ring

    def set_ring(self, ring: DigitRing) -> None:
        self._ring = ring
        self.update()

    def set_skin(self, skin: RingSkin) -> None:
        """Update the rendering palette."""
        if self._skin == skin:
            return
        self._skin = skin
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)

        self._draw_background(painter)

        size = min(self.width(), self.height())
        radius = size * TRACK_RADIUS_RATIO
        painter.translate(self.width() / 2.0, self.height() / 2.0)

        self._draw_track(painter, radius)
        self._draw_nodes(painter, radius, size * NODE_RADIUS_RATIO)
        self._draw_caption(painter, radius)

    def _draw_background(self, painter: QPainter) -> None:
        painter.save()
        gradient = QRadialGradient(
            QPointF(self.width() / 2.0, self.height() / 2.0), max(self.width(), self.height()) * 0.7
        )
        center, edge = self._skin.background_gradient
        gradient.setColorAt(0.0, QColor(center))
        gradient.setColorAt(1.0, QColor(edge))
        painter.fillRect(self.rect(), gradient)
        painter.restore()

    def _draw_track(self, painter: QPainter, radius: float) -> None:
        painter.save()
        pen = QPen(QColor(self._skin.track_color))
        pen.setWidthF(max(1.0, radius * 0.02))
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(QRectF(-radius, -radius, radius * 2, radius * 2))
        painter.restore()

    def _draw_nodes(self, painter: QPainter, radius: float, node_radius: float) -> None:
        count = len(self._ring)
        if count == 0:
            return
        # Shrink nodes so neighbours never overlap on long rings.
        node_radius = min(node_radius, math.pi * radius / count * 0.8)
        painter.save()
        font = painter.font()
        font.setFamily("Segoe UI")
        font.setPointSizeF(max(6.0, node_radius * 0.9))
        font.setWeight(QFont.Weight.DemiBold)
        painter.setFont(font)

        step = 360.0 / count
        for index, digit in enumerate(self._ring):
            is_head = index == 0
            center = self._point_on_circle(radius, index * step)
            rect = QRectF(center.x() - node_radius, center.y() - node_radius, node_radius * 2, node_radius * 2)
            painter.setPen(QPen(QColor(self._skin.link_color), max(1.0, node_radius * 0.08)))
            painter.setBrush(QColor(self._skin.head_node_color if is_head else self._skin.node_color))
            painter.drawEllipse(rect)
            painter.setPen(QPen(QColor(self._skin.head_digit_color if is_head else self._skin.digit_color)))
            painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, codec.DIGIT_CHARACTERS[digit])
        painter.restore()

    def _draw_caption(self, painter: QPainter, radius: float) -> None:
        painter.save()
        painter.setPen(QPen(QColor(self._skin.caption_color)))
        font = painter.font()
        font.setPointSizeF(max(8.0, radius * 0.12))
        painter.setFont(font)
        box = QRectF(-radius * 0.8, -radius * 0.3, radius * 1.6, radius * 0.6)
        caption = f"base {self._ring.base}\n{len(self._ring)} digits"
        painter.drawText(box, Qt.AlignmentFlag.AlignCenter, caption)
        painter.restore()

    @staticmethod
    def _point_on_circle(radius: float, angle_degrees: float) -> QPointF:
        radians = math.radians(angle_degrees - 90.0)
        x = radius * math.cos(radians)
        y = radius * math.sin(radians)
        return QPointF(x, y)


class DigitRingWindow(QMainWindow):
    """Main application window: two operands, their sum and its conversion."""

    def __init__(self, settings: NumberSettings = DEFAULT_SETTINGS, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Digit Ring Explorer")
        self._settings = settings
        self._caption = "value"
        self._active_skin = DEFAULT_RING_SKIN
        self._ring_widget = DigitRingWidget(DigitRing(settings.base), skin=self._active_skin)
        self._ring_widget.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(14)

        inputs = QGridLayout()
        inputs.setHorizontalSpacing(8)
        self._left_input = QLineEdit()
        self._left_input.setPlaceholderText("decimal number")
        self._right_input = QLineEdit()
        self._right_input.setPlaceholderText("decimal number")
        self._left_input.returnPressed.connect(self._handle_show_left)
        self._right_input.returnPressed.connect(self._handle_add)
        inputs.addWidget(QLabel("A"), 0, 0)
        inputs.addWidget(self._left_input, 0, 1)
        inputs.addWidget(QLabel("B"), 1, 0)
        inputs.addWidget(self._right_input, 1, 1)
        layout.addLayout(inputs)

        self._skin_selector = QComboBox()
        for skin in RING_SKIN_PRESETS:
            self._skin_selector.addItem(skin.name)
        self._skin_selector.setCurrentText(self._active_skin.name)
        self._skin_selector.currentTextChanged.connect(self._on_skin_selected)
        skin_layout = QHBoxLayout()
        skin_layout.addStretch(1)
        skin_layout.addWidget(QLabel("Skin"))
        skin_layout.addWidget(self._skin_selector)
        layout.addLayout(skin_layout)

        self._digits_display = QLabel("")
        self._digits_display.setAlignment(Qt.AlignmentFlag.AlignCenter)
        digits_font = self._digits_display.font()
        digits_font.setPointSize(18)
        digits_font.setFamily("Segoe UI")
        self._digits_display.setFont(digits_font)
        self._digits_display.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(self._digits_display)

        layout.addWidget(self._ring_widget, stretch=1)

        self._status = QLabel("")
        self._status.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._status)

        self._show_button = QPushButton("Show A")
        self._add_button = QPushButton("A + B")
        self._convert_button = QPushButton(f"To base {settings.conversion_base}")
        self._shift_left_button = QPushButton("Shift ◀")
        self._shift_right_button = QPushButton("Shift ▶")
        self._sort_ascending_button = QPushButton("Sort ↑")
        self._sort_descending_button = QPushButton("Sort ↓")

        self._show_button.clicked.connect(self._handle_show_left)
        self._add_button.clicked.connect(self._handle_add)
        self._convert_button.clicked.connect(self._handle_convert)
        self._shift_left_button.clicked.connect(self._handle_shift_left)
        self._shift_right_button.clicked.connect(self._handle_shift_right)
        self._sort_ascending_button.clicked.connect(self._handle_sort_ascending)
        self._sort_descending_button.clicked.connect(self._handle_sort_descending)

        value_layout = QHBoxLayout()
        value_layout.setSpacing(12)
        value_layout.addStretch(1)
        for button in (self._show_button, self._add_button, self._convert_button):
            button.setCursor(Qt.CursorShape.PointingHandCursor)
            button.setMinimumWidth(100)
            value_layout.addWidget(button)
        value_layout.addStretch(1)
        layout.addLayout(value_layout)

        order_layout = QHBoxLayout()
        order_layout.setSpacing(12)
        order_layout.addStretch(1)
        for button in (
            self._shift_left_button,
            self._shift_right_button,
            self._sort_ascending_button,
            self._sort_descending_button,
        ):
            button.setCursor(Qt.CursorShape.PointingHandCursor)
            button.setMinimumWidth(90)
            order_layout.addWidget(button)
        order_layout.addStretch(1)
        layout.addLayout(order_layout)

        self._apply_skin_to_ui()

        self.setCentralWidget(central)
        self.resize(640, 780)
        self._refresh()

    def _parse(self, field: QLineEdit) -> DigitRing:
        return codec.from_decimal(field.text(), self._settings.base)

    @property
    def status_text(self) -> str:
        return self._status.text()

    def _show(self, ring: DigitRing, caption: str) -> None:
        self._caption = caption
        self._ring_widget.set_ring(ring)
        self._refresh()

    def _report(self, error: DigitRingError) -> None:
        logger.warning("Rejected input: %s", error)
        self._status.setText(str(error))

    def _handle_show_left(self) -> None:
        try:
            ring = self._parse(self._left_input)
        except DigitRingError as error:
            self._report(error)
            return
        self._show(ring, "A")

    def _handle_add(self) -> None:
        try:
            left = self._parse(self._left_input)
            right = self._parse(self._right_input)
        except DigitRingError as error:
            self._report(error)
            return
        total = arithmetic.add(left, right)
        self._show(total, "A + B")

    def _handle_convert(self) -> None:
        ring = self._ring_widget.ring
        converted = arithmetic.change_scale(ring, self._settings)
        self._show(converted, f"base {converted.base} value")

    def _handle_shift_left(self) -> None:
        self._ring_widget.ring.shift_left()
        self._caption = "rotated"
        self._refresh()

    def _handle_shift_right(self) -> None:
        self._ring_widget.ring.shift_right()
        self._caption = "rotated"
        self._refresh()

    def _handle_sort_ascending(self) -> None:
        self._ring_widget.ring.sort_ascending()
        self._caption = "sorted"
        self._refresh()

    def _handle_sort_descending(self) -> None:
        self._ring_widget.ring.sort_descending()
        self._caption = "sorted"
        self._refresh()

    def _on_skin_selected(self, skin_name: str) -> None:
        skin = RING_SKINS.get(skin_name)
        if skin is None or skin == self._active_skin:
            return
        self._active_skin = skin
        self._ring_widget.set_skin(skin)
        self._apply_skin_to_ui()

    def _refresh(self) -> None:
        ring = self._ring_widget.ring
        self._digits_display.setText(codec.to_digit_string(ring) or "—")
        self._status.setText(f"{self._caption} = {codec.to_decimal(ring)}" if len(ring) else "")
        self._ring_widget.update()
        has_digits = len(ring) > 1
        for button in (
            self._shift_left_button,
            self._shift_right_button,
            self._sort_ascending_button,
            self._sort_descending_button,
        ):
            button.setEnabled(has_digits)

    def _apply_skin_to_ui(self) -> None:
        skin = self._active_skin
        button_style = (
            f"QPushButton {{background-color: {skin.ui_accent_color}; color: {skin.ui_accent_text_color}; "
            f"padding: 8px 14px; border-radius: 12px; font-weight: 600;}}\n"
            "QPushButton:disabled {background-color: rgba(100, 116, 139, 120); color: rgba(226, 232, 240, 160);}"
        )
        for button in (
            self._show_button,
            self._add_button,
            self._convert_button,
            self._shift_left_button,
            self._shift_right_button,
            self._sort_ascending_button,
            self._sort_descending_button,
        ):
            button.setStyleSheet(button_style)
        self._digits_display.setStyleSheet(
            f"color: {skin.caption_color}; background-color: {skin.background_gradient[1]}; "
            "padding: 10px; border-radius: 14px;"
        )
        self._status.setStyleSheet(f"color: {skin.ui_accent_color}; font-weight: 600;")
