# passgen_app/gui/generator_window.py
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QFrame, QVBoxLayout, QHBoxLayout, QLabel,
    QLineEdit, QPushButton, QSlider, QCheckBox, QMessageBox
)
from PySide6.QtCore import Qt, QTimer

from passgen_app.core.state import GeneratorState, GenerationConfig
from passgen_app.core.definitions import LOG_EVENT_PASSWORD_COPIED, LOG_EVENT_SETTINGS_SAVED
from passgen_app.core.event_log import log_event, log_error
from .clipboard import QtClipboard, CopyOutcome
from .styles import theme_manager
import config


class GeneratorWindow(QMainWindow):
    """
    Fenêtre principale du générateur.
    Chaque changement de réglage passe par GeneratorState, qui régénère le mot de passe;
    la fenêtre ne fait qu'afficher le résultat et le copier.
    """
    def __init__(self, state: GeneratorState = None, clipboard=None, parent=None):
        super().__init__(parent)
        self.state = state or GeneratorState(config.default_generation_config())
        self.clipboard = clipboard or QtClipboard()

        self.setWindowTitle("Password Generator")
        self.setMinimumWidth(420)
        theme_manager.apply_theme(config.THEME, self)

        self.setup_ui()
        self.state.subscribe(self.on_password_changed)
        self.show_config(self.state.config)
        self.on_password_changed(self.state.config, self.state.password)

    def setup_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        outer = QVBoxLayout(central_widget)
        outer.setContentsMargins(24, 24, 24, 24)

        card = QFrame()
        card.setObjectName("card")
        layout = QVBoxLayout(card)
        layout.setContentsMargins(16, 20, 16, 20)
        layout.setSpacing(12)

        title = QLabel("Password Generator")
        title.setObjectName("title")
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        # Password display + copy
        pass_layout = QHBoxLayout()
        self.password_input = QLineEdit()
        self.password_input.setObjectName("password-display")
        self.password_input.setReadOnly(True)
        self.password_input.setPlaceholderText("Your password")
        pass_layout.addWidget(self.password_input)

        self.copy_btn = QPushButton("Copy")
        self.copy_btn.setCursor(Qt.PointingHandCursor)
        self.copy_btn.clicked.connect(self.copy_password)
        pass_layout.addWidget(self.copy_btn)
        layout.addLayout(pass_layout)

        length_layout = QHBoxLayout()
        self.length_label = QLabel()
        self.length_slider = QSlider(Qt.Horizontal)
        self.length_slider.setRange(config.MIN_LENGTH, config.MAX_LENGTH)
        self.length_slider.setCursor(Qt.PointingHandCursor)
        length_layout.addWidget(self.length_label)
        length_layout.addStretch()
        length_layout.addWidget(self.length_slider)
        layout.addLayout(length_layout)

        self.digits_cb = QCheckBox("Numbers")
        self.digits_cb.setLayoutDirection(Qt.RightToLeft)
        layout.addWidget(self.digits_cb)

        self.symbols_cb = QCheckBox("Special Characters")
        self.symbols_cb.setLayoutDirection(Qt.RightToLeft)
        layout.addWidget(self.symbols_cb)

        self.length_slider.valueChanged.connect(self.on_length_changed)
        self.digits_cb.toggled.connect(self.on_digits_toggled)
        self.symbols_cb.toggled.connect(self.on_symbols_toggled)

        self.regenerate_btn = QPushButton("Regenerate")
        self.regenerate_btn.setCursor(Qt.PointingHandCursor)
        self.regenerate_btn.clicked.connect(self.regenerate_password)
        layout.addWidget(self.regenerate_btn)

        outer.addWidget(card)
        outer.addStretch()

    def show_config(self, generation: GenerationConfig):
        """Aligne les contrôles sur la configuration, sans déclencher de régénération."""
        for widget in (self.length_slider, self.digits_cb, self.symbols_cb):
            widget.blockSignals(True)
        self.length_slider.setValue(generation.length)
        self.digits_cb.setChecked(generation.include_digits)
        self.symbols_cb.setChecked(generation.include_symbols)
        for widget in (self.length_slider, self.digits_cb, self.symbols_cb):
            widget.blockSignals(False)
        self.length_label.setText(f"Length: {generation.length}")

    def on_length_changed(self, value: int):
        self.length_label.setText(f"Length: {value}")
        self.state.update(length=value)

    def on_digits_toggled(self, checked: bool):
        self.state.update(include_digits=checked)

    def on_symbols_toggled(self, checked: bool):
        self.state.update(include_symbols=checked)

    def regenerate_password(self):
        self.state.regenerate()

    def on_password_changed(self, generation: GenerationConfig, password: str):
        self.show_config(generation)
        self.password_input.setText(password)

    def copy_password(self):
        outcome = self.clipboard.copy_to_clipboard(self.state.password)
        if outcome is not CopyOutcome.COPIED:
            return outcome
        log_event(LOG_EVENT_PASSWORD_COPIED)
        self.password_input.selectAll()
        self.copy_btn.setText("Copied!")
        self.copy_btn.setEnabled(False)
        QTimer.singleShot(config.COPY_FEEDBACK_MS, self._reset_copy_button)
        return outcome

    def _reset_copy_button(self):
        self.copy_btn.setText("Copy")
        self.copy_btn.setEnabled(True)

    def save_current_config(self) -> bool:
        try:
            config.save_settings(self.state.config)
        except OSError as e:
            log_error(f"Impossible d'enregistrer les paramètres: {e}")
            QMessageBox.critical(self, "Erreur", f"Impossible d'enregistrer les paramètres: {e}")
            return False
        log_event(LOG_EVENT_SETTINGS_SAVED)
        return True

    def closeEvent(self, event):
        if config.REMEMBER_LAST_CONFIG:
            self.save_current_config()
        super().closeEvent(event)
