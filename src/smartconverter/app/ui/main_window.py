"""
Main Application Window
=======================
The single screen: the input field on top and one section of conversion cards
per catalog category below it.

Why is this file needed?
------------------------
1. Layout: It organizes the visual structure of the application.
2. Routing: It forwards text edits and card clicks to the Store and re-renders
   the cards whenever the Store reports new results.
"""
from __future__ import annotations

import logging
from typing import Dict, List

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QLineEdit, QMainWindow, QScrollArea, QVBoxLayout, QWidget
)

from smartconverter.app.state import Store
from smartconverter.app.ui.conversion_card import ConversionCard
from smartconverter.config import FOOTER_TEXT, HEADER_TITLE, INPUT_HINT, VISIBLE_APP_NAME
from smartconverter.model.session import CategoryResult

logger = logging.getLogger(__name__)

# Catalog icon names drawn as text glyphs
CATEGORY_GLYPHS = {
    "thermometer.medium": "🌡",
    "ruler": "📏",
    "scalemass": "⚖",
    "wind": "💨",
}

WINDOW_STYLE = """
    QMainWindow, QWidget#Central, QWidget#Cards { background: #0D0D1A; }
    QScrollArea { border: none; background: transparent; }
    QLabel { color: white; }
"""


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(430, 860)
        self.setStyleSheet(WINDOW_STYLE)

        # Global store
        self.store = store if store is not None else Store(parent=self)
        self.cards: Dict[str, ConversionCard] = {}
        self.category_icons: Dict[str, QLabel] = {}

        central = QWidget(self)
        central.setObjectName("Central")
        v = QVBoxLayout(central)
        v.setContentsMargins(0, 0, 0, 0)
        v.setSpacing(0)

        # ---- Hero input section ----
        v.addWidget(self._build_header(), 0)

        # ---- Cards ----
        scroller = QScrollArea(central)
        scroller.setWidgetResizable(True)
        scroller.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        scroller.setWidget(self._build_cards(self.store.results()))
        v.addWidget(scroller, 1)

        self.setCentralWidget(central)

        self.input.textChanged.connect(self.store.set_input)
        self.store.results_changed.connect(self._render)
        self.store.input_changed.connect(self._on_input_changed)

        logger.info(f"Built {len(self.cards)} conversion cards")

    def _build_header(self) -> QWidget:
        header = QWidget(self)
        lay = QVBoxLayout(header)
        lay.setContentsMargins(20, 20, 20, 40)
        lay.setSpacing(20)

        title = QLabel(HEADER_TITLE, header)
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("color: rgba(255, 255, 255, 153); font-size: 14px; font-weight: 900; letter-spacing: 4px;")
        lay.addWidget(title)

        self.input = QLineEdit(header)
        self.input.setPlaceholderText("0")
        self.input.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.input.setMinimumHeight(120)
        self.input.setStyleSheet(
            "QLineEdit { background: transparent; border: none; color: white; font-size: 86px; font-weight: 200; }"
        )
        lay.addWidget(self.input)

        self.hint = QLabel(INPUT_HINT, header)
        self.hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.hint.setStyleSheet("color: rgba(255, 255, 255, 102); font-size: 16px; font-weight: 500;")
        lay.addWidget(self.hint)
        return header

    def _build_cards(self, categories: List[CategoryResult]) -> QWidget:
        container = QWidget()
        container.setObjectName("Cards")
        lay = QVBoxLayout(container)
        lay.setContentsMargins(20, 0, 20, 0)
        lay.setSpacing(24)

        for category in categories:
            section = QFrame(container)
            section_lay = QVBoxLayout(section)
            section_lay.setContentsMargins(0, 0, 0, 0)
            section_lay.setSpacing(12)

            section_lay.addWidget(self._build_pill(category, section), 0, Qt.AlignmentFlag.AlignLeft)

            for result in category.results:
                card = ConversionCard(result, category.gradient, section)
                card.copy_requested.connect(self.store.copy)
                self.cards[result.key] = card
                section_lay.addWidget(card)

            lay.addWidget(section)

        footer = QLabel(FOOTER_TEXT, container)
        footer.setAlignment(Qt.AlignmentFlag.AlignCenter)
        footer.setStyleSheet("color: rgba(255, 255, 255, 51); font-size: 10px; padding: 40px 0 60px 0;")
        lay.addWidget(footer)
        lay.addStretch(1)
        return container

    def _build_pill(self, category: CategoryResult, parent: QWidget) -> QWidget:
        """Category badge: icon glyph followed by the upper-cased title."""
        pill = QFrame(parent)
        pill.setObjectName("CategoryPill")
        pill.setStyleSheet(
            "QFrame#CategoryPill { background: rgba(255, 255, 255, 25); border-radius: 12px; }"
            "QLabel { color: rgba(255, 255, 255, 204); font-size: 12px; font-weight: bold; }"
        )
        row = QHBoxLayout(pill)
        row.setContentsMargins(12, 6, 12, 6)
        row.setSpacing(6)

        icon = QLabel(CATEGORY_GLYPHS.get(category.icon_name, ""), pill)
        icon.setToolTip(category.icon_name)
        row.addWidget(icon)
        row.addWidget(QLabel(category.title.upper(), pill))

        self.category_icons[category.title] = icon
        return pill

    def _render(self, categories: List[CategoryResult]) -> None:
        """Push freshly derived results into the existing cards."""
        for category in categories:
            for result in category.results:
                self.cards[result.key].update_result(result)

    def _on_input_changed(self, text: str) -> None:
        self.hint.setVisible(not text)
        # Keep the field in sync when the store is driven from elsewhere
        if self.input.text() != text:
            self.input.setText(text)
