# passgen_app/gui/clipboard.py
from enum import Enum
from PySide6.QtWidgets import QApplication


class CopyOutcome(Enum):
    COPIED = "copied"
    EMPTY = "empty"
    UNAVAILABLE = "unavailable"


class QtClipboard:
    """Copie du texte dans le presse-papiers système via Qt."""

    def copy_to_clipboard(self, text: str) -> CopyOutcome:
        if not text:
            return CopyOutcome.EMPTY
        app = QApplication.instance()
        if app is None:
            return CopyOutcome.UNAVAILABLE
        app.clipboard().setText(text)
        return CopyOutcome.COPIED
