from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from classicalcrypto.core.alphabet import LATIN, MODULUS
from classicalcrypto.core.cipher import SymbolPermutationCipher
from classicalcrypto.core.errors import InvalidKey, KeyErrorReason
from classicalcrypto.core.keys import Key, check_residue, key_rng
from classicalcrypto.core.registry import register_cipher
from classicalcrypto.classical.common import parse_permutation


@dataclass(frozen=True)
class SubstitutionKey(Key):
    # mapping[p] is the ciphertext residue for plaintext residue p
    mapping: tuple[int, ...]
    inverse: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        value = self.mapping
        if isinstance(value, str) or not isinstance(value, Sequence):
            raise InvalidKey(value, KeyErrorReason.OUT_OF_RANGE, "expected a sequence of residues")
        if len(value) != MODULUS:
            raise InvalidKey(value, KeyErrorReason.OUT_OF_RANGE, f"expected {MODULUS} entries, got {len(value)}")
        mapping = tuple(check_residue(v, label="entry") for v in value)
        if len(set(mapping)) != MODULUS:
            repeated = sorted({LATIN.residue_to_symbol(c) for c in mapping if mapping.count(c) > 1})
            raise InvalidKey(
                value,
                KeyErrorReason.NOT_INVERTIBLE,
                f"not a permutation, repeats {''.join(repeated).upper()}",
            )

        inv = [0] * MODULUS
        for p, c in enumerate(mapping):
            inv[c] = p
        object.__setattr__(self, "mapping", mapping)
        object.__setattr__(self, "inverse", tuple(inv))

    def export(self) -> str:
        return LATIN.decode(self.mapping).upper()


class SubstitutionCipher(SymbolPermutationCipher[SubstitutionKey]):
    """
    Arbitrary permutation of the alphabet. 26! keys, so no brute force here;
    shift and affine keys are special cases of this one.
    """

    name = "substitution"
    key_type = SubstitutionKey
    exhaustive = False

    def make_key(self, value: Any) -> SubstitutionKey:
        if isinstance(value, str):
            value = parse_permutation(value)
        return SubstitutionKey(value)

    def random_key(self, rng: Optional[random.Random] = None) -> SubstitutionKey:
        perm = list(range(MODULUS))
        key_rng(rng).shuffle(perm)
        return SubstitutionKey(tuple(perm))

    def parse_key(self, text: str) -> SubstitutionKey:
        return self.make_key(parse_permutation(text))

    def encrypt_residue(self, key: SubstitutionKey, p: int) -> int:
        return key.mapping[p]

    def decrypt_residue(self, key: SubstitutionKey, c: int) -> int:
        return key.inverse[c]


register_cipher(SubstitutionCipher())
