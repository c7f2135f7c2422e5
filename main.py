# main.py
import sys
import os
from PySide6.QtWidgets import QApplication
from passgen_app.core.event_log import setup_logging, log_event
from passgen_app.core.definitions import LOG_EVENT_APP_STARTED
from passgen_app.gui.styles import theme_manager
from passgen_app.gui.generator_window import GeneratorWindow
import config

def main():
    # Fix pour l'icône dans la barre des tâches Windows
    if os.name == 'nt':
        import ctypes
        ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID("passgen.app.1")

    os.makedirs(config.APP_DATA_DIR, exist_ok=True)
    setup_logging()
    config.load_settings()

    app = QApplication(sys.argv)
    # Apply saved theme at startup
    theme_manager.apply_theme(config.THEME, app)

    window = GeneratorWindow()
    window.show()
    log_event(LOG_EVENT_APP_STARTED)
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
