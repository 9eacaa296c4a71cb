from __future__ import annotations

from typing import Tuple

from classicalcrypto.core.alphabet import LATIN, MODULUS
from classicalcrypto.core.errors import InvalidKey, KeyErrorReason


def egcd(a: int, b: int) -> Tuple[int, int, int]:
    if a == 0:
        return (b, 0, 1)
    g, y, x = egcd(b % a, a)
    return (g, x - (b // a) * y, y)


def modinv(a: int, m: int = MODULUS) -> int:
    """Modular inverse of a under mod m; raises ValueError if none."""
    a %= m
    g, x, _ = egcd(a, m)
    if g != 1:
        raise ValueError(f"No modular inverse for a={a} mod {m}.")
    return x % m


def parse_int(key: str) -> int:
    """Parse a single integer key like "3"; raises InvalidKey on junk."""
    try:
        return int(key.strip())
    except ValueError:
        raise InvalidKey(key, KeyErrorReason.OUT_OF_RANGE, "expected an integer") from None


def parse_two_ints(key: str) -> tuple[int, int]:
    """
    Parse keys like: "5,8" or "5:8" or "5 8"
    Returns (a, b).
    """
    raw = key.strip().replace(":", ",").replace(" ", ",")
    parts = [p for p in raw.split(",") if p]
    if len(parts) != 2:
        raise InvalidKey(key, KeyErrorReason.OUT_OF_RANGE, "expected format 'a,b' (e.g., '5,8')")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise InvalidKey(key, KeyErrorReason.OUT_OF_RANGE, "both parts must be integers") from None


def parse_permutation(key: str) -> tuple[int, ...]:
    """
    Parse a 26-letter substitution alphabet, e.g. "QWERTYUIOPASDFGHJKLZXCVBNM".

    Letter i of the key is the ciphertext letter for plaintext letter i.
    Case is ignored; spaces are allowed between letters. Validation of the
    result (length, repeats) is left to the cipher's make_key().
    """
    letters = key.replace(" ", "").lower()
    bad = [ch for ch in letters if ch not in LATIN]
    if bad:
        raise InvalidKey(key, KeyErrorReason.OUT_OF_RANGE, f"non-letter characters {''.join(bad)!r}")
    return tuple(LATIN.symbol_to_residue(ch) for ch in letters)
