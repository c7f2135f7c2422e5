# passgen_app/core/generator.py
import secrets
from typing import Protocol

from passgen_app.core.definitions import LETTERS, DIGITS, SYMBOLS


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


_system_random = secrets.SystemRandom()


def build_alphabet(include_digits: bool = False, include_symbols: bool = False) -> str:
    alphabet = LETTERS
    if include_digits: alphabet += DIGITS
    if include_symbols: alphabet += SYMBOLS
    return alphabet


def generate(length: int, include_digits: bool = False, include_symbols: bool = False,
             random_source: RandomSource = None) -> str:
    """
    Génère un mot de passe de `length` caractères tirés uniformément dans l'alphabet actif.

    Aucun bornage ici: c'est à l'appelant de garder `length` dans l'intervalle.
    Une longueur nulle ou négative donne une chaîne vide.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"length must be an int, not {type(length).__name__}")
    if random_source is None:
        random_source = _system_random
    alphabet = build_alphabet(include_digits, include_symbols)
    return ''.join(alphabet[random_source.randrange(len(alphabet))] for _ in range(length))


def generate_from_config(config, random_source: RandomSource = None) -> str:
    return generate(config.length, config.include_digits, config.include_symbols, random_source)
