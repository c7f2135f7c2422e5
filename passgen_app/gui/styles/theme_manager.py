# passgen_app/gui/styles/theme_manager.py
import os
from PySide6.QtWidgets import QApplication
import config

BASE_DIR = os.path.dirname(__file__)
THEMES = ('dark', 'light')


def _read_qss(name: str) -> str:
    path = os.path.join(BASE_DIR, name)
    if os.path.exists(path):
        with open(path, 'r') as f:
            return f.read()
    return ""


def load_stylesheet(theme: str) -> str:
    """base.qss suivi de la feuille du thème; un thème inconnu retombe sur 'dark'."""
    if theme not in THEMES:
        theme = 'dark'
    return _read_qss('base.qss') + _read_qss(f'{theme}_theme.qss')


def apply_theme(theme: str = None, app_or_widget=None) -> str:
    """Applique le thème (par défaut config.THEME) à l'application ou au widget donné."""
    qss = load_stylesheet(theme or config.THEME)
    if app_or_widget is None:
        app_or_widget = QApplication.instance()
    if app_or_widget:
        app_or_widget.setStyleSheet(qss)
    return qss
