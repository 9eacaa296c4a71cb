from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from classicalcrypto.core.alphabet import MODULUS
from classicalcrypto.core.cipher import SymbolPermutationCipher
from classicalcrypto.core.errors import InvalidKey, KeyErrorReason
from classicalcrypto.core.keys import Key, check_residue, key_rng
from classicalcrypto.core.registry import register_cipher
from classicalcrypto.classical.common import modinv, parse_two_ints

# Multipliers coprime with 26: 1,3,5,7,9,11,15,17,19,21,23,25
UNITS = tuple(a for a in range(MODULUS) if math.gcd(a, MODULUS) == 1)


@dataclass(frozen=True)
class AffineKey(Key):
    a: int
    b: int
    # a^-1 mod 26, fixed once the key is validated
    a_inv: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        check_residue(self.a, label="a")
        check_residue(self.b, label="b")
        if math.gcd(self.a, MODULUS) != 1:
            raise InvalidKey(
                (self.a, self.b),
                KeyErrorReason.NOT_INVERTIBLE,
                f"a={self.a} is not coprime with {MODULUS} (use one of {', '.join(map(str, UNITS))})",
            )
        object.__setattr__(self, "a_inv", modinv(self.a, MODULUS))

    def export(self) -> str:
        return f"{self.a},{self.b}"


class AffineCipher(SymbolPermutationCipher[AffineKey]):
    """e(x) = a*x + b mod 26, d(y) = a^-1 * (y - b) mod 26."""

    name = "affine"
    key_type = AffineKey

    def make_key(self, value: Any) -> AffineKey:
        try:
            a, b = value
        except (TypeError, ValueError):
            raise InvalidKey(value, KeyErrorReason.OUT_OF_RANGE, "expected a pair (a, b)") from None
        return AffineKey(a, b)

    def random_key(self, rng: Optional[random.Random] = None) -> AffineKey:
        r = key_rng(rng)
        return AffineKey(r.choice(UNITS), r.randrange(MODULUS))

    def parse_key(self, text: str) -> AffineKey:
        return self.make_key(parse_two_ints(text))

    def keyspace(self) -> Iterator[AffineKey]:
        return (AffineKey(a, b) for a in UNITS for b in range(MODULUS))

    def encrypt_residue(self, key: AffineKey, p: int) -> int:
        return (key.a * p + key.b) % MODULUS

    def decrypt_residue(self, key: AffineKey, c: int) -> int:
        return (key.a_inv * (c - key.b)) % MODULUS


register_cipher(AffineCipher())
