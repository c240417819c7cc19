from __future__ import annotations

from typing import Tuple

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from smartconverter.model.session import ConversionResult

# System palette used by the category gradients.
COLOR_HEX = {
    "orange": "#FF9500",
    "red": "#FF3B30",
    "blue": "#007AFF",
    "cyan": "#32ADE6",
    "purple": "#AF52DE",
    "indigo": "#5856D6",
    "mint": "#00C7BE",
    "teal": "#30B0C7",
}

COPIED_COLOR = "#34C759"


def gradient_css(gradient: Tuple[str, str]) -> str:
    start, end = (COLOR_HEX.get(name, name) for name in gradient)
    return f"qlineargradient(x1:0, y1:0, x2:1, y2:1, stop:0 {start}, stop:1 {end})"


class ConversionCard(QPushButton):
    """One conversion: source value on the left, result on the right. Click to copy."""
    copy_requested = Signal(str)

    def __init__(self, result: ConversionResult, gradient: Tuple[str, str], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.key = result.key
        self.gradient = gradient
        self.setObjectName("ConversionCard")
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setMinimumHeight(84)
        self.setToolTip(result.label)

        row = QHBoxLayout(self)
        row.setContentsMargins(24, 16, 24, 16)

        # Value section
        left = QVBoxLayout()
        self.lbl_from_unit = QLabel(result.from_unit)
        self.lbl_input = QLabel()
        left.addWidget(self.lbl_from_unit)
        left.addWidget(self.lbl_input)
        row.addLayout(left, 1)

        self.lbl_arrow = QLabel("→")
        row.addWidget(self.lbl_arrow, 0, Qt.AlignmentFlag.AlignCenter)

        # Result section
        right = QVBoxLayout()
        self.lbl_to_unit = QLabel(result.to_unit)
        self.lbl_result = QLabel()
        for lbl in (self.lbl_to_unit, self.lbl_result):
            lbl.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
            right.addWidget(lbl)
        row.addLayout(right, 1)

        # Clicks on the labels go to the button
        for lbl in (self.lbl_from_unit, self.lbl_input, self.lbl_arrow, self.lbl_to_unit, self.lbl_result):
            lbl.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)

        self.clicked.connect(lambda: self.copy_requested.emit(self.key))
        self.update_result(result)

    def update_result(self, result: ConversionResult) -> None:
        self.lbl_input.setText(result.input_text)
        self.lbl_result.setText(result.result_text)
        self._apply_style(result.is_copied, result.has_input)

    def _apply_style(self, is_copied: bool, has_input: bool) -> None:
        border = COPIED_COLOR if is_copied else "rgba(255, 255, 255, 38)"
        self.setStyleSheet(f"""
            QPushButton#ConversionCard {{
                background: rgba(255, 255, 255, 18);
                border: 1px solid {border};
                border-left: 4px solid {gradient_css(self.gradient)};
                border-radius: 24px;
                text-align: left;
            }}
            QPushButton#ConversionCard:pressed {{ background: rgba(255, 255, 255, 40); }}
        """)
        self.lbl_from_unit.setStyleSheet("color: rgba(255, 255, 255, 102); font-size: 12px; font-weight: bold;")
        self.lbl_input.setStyleSheet("color: rgba(255, 255, 255, 204); font-size: 24px; font-weight: 300;")
        self.lbl_arrow.setStyleSheet("color: rgba(255, 255, 255, 51); font-size: 14px; font-weight: bold;")
        to_unit_color = COPIED_COLOR if is_copied else "rgba(255, 255, 255, 102)"
        self.lbl_to_unit.setStyleSheet(f"color: {to_unit_color}; font-size: 12px; font-weight: bold;")
        result_color = "white" if has_input else "rgba(255, 255, 255, 77)"
        self.lbl_result.setStyleSheet(f"color: {result_color}; font-size: 28px; font-weight: 500;")
