import os
import random

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import config


class SequenceSource:
    """Random source returning a fixed sequence of indices, modulo the range."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        value = self.values[(len(self.calls) - 1) % len(self.values)]
        return value % stop


@pytest.fixture
def seeded():
    return random.Random(1234)


@pytest.fixture
def sequence_source():
    return SequenceSource


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setattr(config, "SETTINGS_FILE", str(path))
    monkeypatch.setattr(config, "DEFAULT_LENGTH", 8)
    monkeypatch.setattr(config, "DEFAULT_INCLUDE_DIGITS", False)
    monkeypatch.setattr(config, "DEFAULT_INCLUDE_SYMBOLS", False)
    monkeypatch.setattr(config, "THEME", "dark")
    monkeypatch.setattr(config, "REMEMBER_LAST_CONFIG", True)
    return path


@pytest.fixture(scope="session")
def qapp():
    widgets = pytest.importorskip("PySide6.QtWidgets")
    app = widgets.QApplication.instance() or widgets.QApplication([])
    yield app
