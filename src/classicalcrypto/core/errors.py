from __future__ import annotations

from enum import Enum
from typing import Any, Iterable


class ClassicalCryptoError(Exception):
    """Base class for every error raised by classicalcrypto."""


class InvalidInput(ClassicalCryptoError, ValueError):
    """
    Raw text contained characters outside the alphabet.

    `characters` lists each offending character once, in order of first appearance.
    """

    def __init__(self, characters: Iterable[str], text: str = "") -> None:
        self.characters: tuple[str, ...] = tuple(dict.fromkeys(characters))
        self.text = text
        shown = ", ".join(repr(ch) for ch in self.characters)
        super().__init__(f"Text contains characters outside the alphabet: {shown}")


class KeyErrorReason(str, Enum):
    OUT_OF_RANGE = "out_of_range"
    NOT_INVERTIBLE = "not_invertible"


class InvalidKey(ClassicalCryptoError, ValueError):
    def __init__(self, value: Any, reason: KeyErrorReason, detail: str = "") -> None:
        self.value = value
        self.reason = reason
        msg = f"Invalid key {value!r} ({reason.value})"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class AlphabetError(ClassicalCryptoError, RuntimeError):
    """
    An internal invariant of an alphabet table was violated.

    This is never caused by user input: it means a residue was built
    outside the library's constructors or an alphabet table is inconsistent.
    """
