from __future__ import annotations

import logging
from typing import Callable, List, Optional

from PySide6.QtCore import QObject, QTimer, Signal
from PySide6.QtGui import QGuiApplication

from smartconverter.model.session import CategoryResult, ConversionSession, Scheduler, SessionState

logger = logging.getLogger(__name__)


def write_system_clipboard(text: str) -> None:
    QGuiApplication.clipboard().setText(text)


def single_shot(delay_ms: int, callback: Callable[[], None]) -> None:
    QTimer.singleShot(delay_ms, callback)


class Store(QObject):
    """Central state store with signals for the window to sync on."""
    input_changed = Signal(str)
    highlight_changed = Signal(object)
    results_changed = Signal(object)

    def __init__(
        self,
        clipboard: Optional[Callable[[str], None]] = None,
        schedule: Optional[Scheduler] = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.session = ConversionSession(
            clipboard=clipboard or write_system_clipboard,
            schedule=schedule or single_shot,
            feedback=self._on_feedback,
            on_change=self._on_state_changed,
        )

    @property
    def raw_input(self) -> str:
        return self.session.state.raw_input

    @property
    def highlighted_id(self) -> Optional[str]:
        return self.session.state.highlighted_id

    def results(self) -> List[CategoryResult]:
        return self.session.results()

    def set_input(self, text: str) -> None:
        self.session.set_input(text)

    def copy(self, conversion_id: str) -> None:
        self.session.copy(conversion_id)

    def _on_state_changed(self, old: SessionState, new: SessionState) -> None:
        if old.raw_input != new.raw_input:
            self.input_changed.emit(new.raw_input)
        if old.highlighted_id != new.highlighted_id:
            self.highlight_changed.emit(new.highlighted_id)
        self.results_changed.emit(self.results())

    def _on_feedback(self) -> None:
        # No haptics on desktop
        logger.debug("Copy feedback")
