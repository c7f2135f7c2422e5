import os
import json

# --- Chemins de l'application ---
APP_DATA_DIR = os.getenv("PASSGEN_HOME", os.path.join(os.path.expanduser("~"), ".passgen"))
SETTINGS_FILE = os.path.join(APP_DATA_DIR, "settings.json")
LOG_FILE = os.path.join(APP_DATA_DIR, "passgen.log")

# --- Génération ---
MIN_LENGTH = 4
MAX_LENGTH = 20
DEFAULT_LENGTH = 8
DEFAULT_INCLUDE_DIGITS = False
DEFAULT_INCLUDE_SYMBOLS = False

# Only the generation settings are remembered, never the password itself
REMEMBER_LAST_CONFIG = True

# --- Apparence ---
THEME = 'dark'
COPY_FEEDBACK_MS = 2000


def default_generation_config():
    """Builds the GenerationConfig the window starts with."""
    from passgen_app.core.state import GenerationConfig
    return GenerationConfig(
        length=DEFAULT_LENGTH,
        include_digits=DEFAULT_INCLUDE_DIGITS,
        include_symbols=DEFAULT_INCLUDE_SYMBOLS,
    ).clamped()


def load_settings(path: str = None) -> bool:
    """Charge la configuration utilisateur depuis le fichier JSON si existant.

    Renvoie True si un fichier a été lu. Un fichier absent ou invalide laisse
    les valeurs par défaut en place.
    """
    global DEFAULT_LENGTH, DEFAULT_INCLUDE_DIGITS, DEFAULT_INCLUDE_SYMBOLS, THEME, REMEMBER_LAST_CONFIG
    from passgen_app.core.event_log import log_warning

    path = path or SETTINGS_FILE
    if not os.path.exists(path):
        return False
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log_warning(f"Settings file {path} ignored: {e}")
        return False
    if not isinstance(data, dict):
        log_warning(f"Settings file {path} ignored: expected a JSON object")
        return False

    from passgen_app.core.state import GenerationConfig, InvalidConfiguration
    generation = None
    try:
        if "generation" in data:
            generation = GenerationConfig.from_dict(data["generation"], default_generation_config()).clamped()
    except InvalidConfiguration as e:
        log_warning(f"Generation settings ignored: {e}")
    if generation is not None:
        DEFAULT_LENGTH = generation.length
        DEFAULT_INCLUDE_DIGITS = generation.include_digits
        DEFAULT_INCLUDE_SYMBOLS = generation.include_symbols

    theme = data.get("theme")
    if theme in ("dark", "light"):
        THEME = theme
    if isinstance(data.get("remember_last_config"), bool):
        REMEMBER_LAST_CONFIG = data["remember_last_config"]
    return True


def save_settings(generation=None, path: str = None):
    """Writes the current settings, and optionally the last generation config, to disk.

    Raises OSError when the file cannot be written; callers report it.
    """
    global DEFAULT_LENGTH, DEFAULT_INCLUDE_DIGITS, DEFAULT_INCLUDE_SYMBOLS

    if generation is not None:
        generation = generation.clamped()
        DEFAULT_LENGTH = generation.length
        DEFAULT_INCLUDE_DIGITS = generation.include_digits
        DEFAULT_INCLUDE_SYMBOLS = generation.include_symbols

    path = path or SETTINGS_FILE
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    data = {
        "generation": {
            "length": DEFAULT_LENGTH,
            "include_digits": DEFAULT_INCLUDE_DIGITS,
            "include_symbols": DEFAULT_INCLUDE_SYMBOLS,
        },
        "theme": THEME,
        "remember_last_config": REMEMBER_LAST_CONFIG,
    }
    with open(path, 'w') as f:
        json.dump(data, f, indent=4)
