"""
The Latin Shift Cipher (Caesar's cipher).

Plaintext space, ciphertext space and key space are all the integers
modulo 26. Encryption adds the key to every letter, decryption subtracts it.
A key of 0 is allowed, in which case encryption is the identity: humans
rarely pick it, but the cryptosystem does not forbid it.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from classicalcrypto.core.alphabet import MODULUS
from classicalcrypto.core.cipher import SymbolPermutationCipher
from classicalcrypto.core.keys import Key, check_residue, key_rng
from classicalcrypto.core.registry import register_cipher
from classicalcrypto.classical.common import parse_int


@dataclass(frozen=True)
class ShiftKey(Key):
    shift: int

    def __post_init__(self) -> None:
        check_residue(self.shift, label="shift")

    def export(self) -> str:
        return str(self.shift)


class ShiftCipher(SymbolPermutationCipher[ShiftKey]):
    name = "shift"
    key_type = ShiftKey

    def make_key(self, value: Any) -> ShiftKey:
        return ShiftKey(value)

    def random_key(self, rng: Optional[random.Random] = None) -> ShiftKey:
        # randrange is uniform; reducing a wider random int mod 26 would not be.
        return ShiftKey(key_rng(rng).randrange(MODULUS))

    def parse_key(self, text: str) -> ShiftKey:
        return self.make_key(parse_int(text))

    def keyspace(self) -> Iterator[ShiftKey]:
        return (ShiftKey(k) for k in range(MODULUS))

    def encrypt_residue(self, key: ShiftKey, p: int) -> int:
        return (p + key.shift) % MODULUS

    def decrypt_residue(self, key: ShiftKey, c: int) -> int:
        return (c - key.shift) % MODULUS


register_cipher(ShiftCipher())
