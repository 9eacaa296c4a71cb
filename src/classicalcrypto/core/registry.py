from __future__ import annotations

import logging
from typing import Optional

from .cipher import SymbolPermutationCipher
from .keys import Key
from .results import Candidate
from .scoring import chi_squared_english
from .texts import Ciphertext, Plaintext

logger = logging.getLogger(__name__)

_CIPHERS: dict[str, SymbolPermutationCipher] = {}


def register_cipher(cipher: SymbolPermutationCipher) -> None:
    key = cipher.name.lower().strip()
    if not key:
        raise ValueError("Cipher must have a non-empty name.")
    _CIPHERS[key] = cipher
    logger.debug("registered cipher %s", key)


def list_ciphers() -> list[str]:
    return sorted(_CIPHERS.keys())


def get_cipher(name: str) -> SymbolPermutationCipher:
    key = name.lower().strip()
    if key not in _CIPHERS:
        raise ValueError(f"Unknown cipher '{name}'. Available: {', '.join(list_ciphers())}")
    return _CIPHERS[key]


def cipher_for_key(key: Key) -> SymbolPermutationCipher:
    for cipher in _CIPHERS.values():
        if isinstance(key, cipher.key_type):
            return cipher
    raise TypeError(f"No registered cipher accepts keys of type {type(key).__name__}.")


def encrypt(key: Key, plaintext: Plaintext) -> Ciphertext:
    """Encrypt with whichever registered cipher owns this key type."""
    return cipher_for_key(key).encrypt(key, plaintext)


def decrypt(key: Key, ciphertext: Ciphertext) -> Plaintext:
    """Decrypt with whichever registered cipher owns this key type."""
    return cipher_for_key(key).decrypt(key, ciphertext)


def brute_force(
    ciphertext: Ciphertext,
    *,
    include: Optional[set[str]] = None,
    top_n: int = 10,
) -> list[Candidate]:
    """
    Try every key of every enumerable cipher and rank the decryptions.

    Ranking uses the chi-squared distance between the candidate's letter
    counts and English letter frequencies (lower is better), so it needs
    a reasonable amount of text to pick the right key.

    If include is given, only those ciphers are tried; naming a cipher whose
    key space cannot be enumerated is an error. Otherwise such ciphers are
    skipped.
    """
    if top_n < 1:
        raise ValueError(f"top_n must be at least 1, got {top_n}.")

    if include is not None:
        names = sorted({n.lower().strip() for n in include})
        for name in names:
            cipher = get_cipher(name)
            if not cipher.exhaustive:
                raise ValueError(f"Cipher '{name}' has too many keys to brute force.")
    else:
        names = [n for n in list_ciphers() if _CIPHERS[n].exhaustive]

    results: list[Candidate] = []
    for name in names:
        cipher = _CIPHERS[name]
        tried = 0
        for key in cipher.keyspace():
            pt = cipher.decrypt(key, ciphertext)
            results.append(
                Candidate(
                    cipher_name=cipher.name,
                    key=key.export(),
                    plaintext=str(pt),
                    score=chi_squared_english(pt),
                )
            )
            tried += 1
        logger.info("%s: tried %d keys", name, tried)

    results.sort()
    return results[:top_n]
