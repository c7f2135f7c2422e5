# passgen_app/core/state.py
from dataclasses import dataclass, replace, asdict
from typing import Callable, Dict, Any, List

from passgen_app.core.generator import RandomSource, generate_from_config
from passgen_app.core.definitions import LOG_EVENT_CONFIG_CHANGED
from passgen_app.core.event_log import log_event
import config as app_config


class InvalidConfiguration(ValueError):
    """Raised when stored generation settings have the wrong type."""


@dataclass(frozen=True)
class GenerationConfig:
    length: int = 8
    include_digits: bool = False
    include_symbols: bool = False

    def replace(self, **changes) -> "GenerationConfig":
        return replace(self, **changes)

    def clamped(self) -> "GenerationConfig":
        length = min(max(self.length, app_config.MIN_LENGTH), app_config.MAX_LENGTH)
        if length == self.length:
            return self
        return replace(self, length=length)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], defaults: "GenerationConfig" = None) -> "GenerationConfig":
        """Missing keys are taken from `defaults` (the dataclass defaults when omitted)."""
        if not isinstance(data, dict):
            raise InvalidConfiguration("generation settings must be a JSON object")
        if defaults is None:
            defaults = cls()
        length = data.get("length", defaults.length)
        if isinstance(length, bool) or not isinstance(length, int):
            raise InvalidConfiguration(f"length must be an integer, got {length!r}")
        flags = {}
        for name in ("include_digits", "include_symbols"):
            value = data.get(name, getattr(defaults, name))
            if not isinstance(value, bool):
                raise InvalidConfiguration(f"{name} must be a boolean, got {value!r}")
            flags[name] = value
        return cls(length=length, **flags)


Listener = Callable[[GenerationConfig, str], None]


class GeneratorState:
    """
    Current configuration and password, owned by the application shell.

    Every effective configuration change produces exactly one new password.
    For an asynchronous source, `request()` hands out a revision and
    `apply_result()` drops anything older than the latest one.
    """
    def __init__(self, config: GenerationConfig = None, random_source: RandomSource = None):
        self._random_source = random_source
        self._config = (config or GenerationConfig()).clamped()
        self._revision = 0
        self._listeners: List[Listener] = []
        self._password = generate_from_config(self._config, self._random_source)

    @property
    def config(self) -> GenerationConfig:
        return self._config

    @property
    def password(self) -> str:
        return self._password

    @property
    def revision(self) -> int:
        return self._revision

    def subscribe(self, callback: Listener):
        self._listeners.append(callback)

    def update(self, **changes) -> bool:
        new_config = self._config.replace(**changes).clamped()
        if new_config == self._config:
            return False
        self._config = new_config
        log_event(LOG_EVENT_CONFIG_CHANGED, new_config.to_dict())
        self.regenerate()
        return True

    def regenerate(self) -> str:
        revision = self.request()
        self.apply_result(revision, generate_from_config(self._config, self._random_source))
        return self._password

    def request(self) -> int:
        self._revision += 1
        return self._revision

    def apply_result(self, revision: int, password: str) -> bool:
        if revision != self._revision:
            return False
        self._password = password
        for callback in list(self._listeners):
            callback(self._config, self._password)
        return True
