import os

import pytest
from PySide6.QtCore import QLocale

# Widgets tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(autouse=True)
def en_us_locale():
    """Results are formatted with the default QLocale; pin it for stable strings."""
    previous = QLocale()
    QLocale.setDefault(QLocale("en_US"))
    yield
    QLocale.setDefault(previous)


class FakeScheduler:
    """Collects one-shot timers so tests decide when they fire."""

    def __init__(self):
        self.pending = []

    def __call__(self, delay_ms, callback):
        self.pending.append((delay_ms, callback))

    def fire(self, index):
        _, callback = self.pending[index]
        callback()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def clipboard():
    return []


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
