# passgen_app/core/definitions.py
import string

# Alphabet segments, concatenated in this order
LETTERS = string.ascii_uppercase + string.ascii_lowercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()_+"

# Log Event Types
LOG_EVENT_APP_STARTED = "APP_STARTED"
LOG_EVENT_CONFIG_CHANGED = "CONFIG_CHANGED"
LOG_EVENT_PASSWORD_COPIED = "PASSWORD_COPIED"
LOG_EVENT_SETTINGS_SAVED = "SETTINGS_SAVED"
