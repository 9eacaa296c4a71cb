"""
Classical (historical) cryptosystems over the Latin alphabet.

A playground for learning, not for protecting anything: these ciphers were
broken centuries ago and the random keys come from a non-cryptographic RNG.

    >>> from classicalcrypto import Plaintext, get_cipher
    >>> shift = get_cipher("shift")
    >>> key = shift.make_key(3)
    >>> str(shift.encrypt(key, Plaintext.from_str("HELLO")))
    'KHOOR'
"""
from __future__ import annotations

from classicalcrypto.classical import register_all
from classicalcrypto.classical.monoalphabetic.affine import AffineCipher, AffineKey
from classicalcrypto.classical.monoalphabetic.shift import ShiftCipher, ShiftKey
from classicalcrypto.classical.monoalphabetic.substitution import SubstitutionCipher, SubstitutionKey
from classicalcrypto.core import (
    LATIN,
    MODULUS,
    Alphabet,
    AlphabetError,
    Candidate,
    ClassicalCryptoError,
    Ciphertext,
    InvalidInput,
    InvalidKey,
    Key,
    KeyErrorReason,
    Plaintext,
    SymbolPermutationCipher,
    brute_force,
    cipher_for_key,
    get_cipher,
    list_ciphers,
    register_cipher,
)
from classicalcrypto.core.registry import decrypt, encrypt

register_all()

__version__ = "0.1.0"

__all__ = [
    "LATIN",
    "MODULUS",
    "Alphabet",
    "AlphabetError",
    "Candidate",
    "ClassicalCryptoError",
    "Ciphertext",
    "InvalidInput",
    "InvalidKey",
    "Key",
    "KeyErrorReason",
    "Plaintext",
    "SymbolPermutationCipher",
    "ShiftCipher",
    "ShiftKey",
    "AffineCipher",
    "AffineKey",
    "SubstitutionCipher",
    "SubstitutionKey",
    "brute_force",
    "cipher_for_key",
    "decrypt",
    "encrypt",
    "get_cipher",
    "list_ciphers",
    "register_cipher",
]
