from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Iterator, Optional, TypeVar

from .keys import Key
from .texts import Ciphertext, Plaintext

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Key)


class SymbolPermutationCipher(ABC, Generic[K]):
    """
    A keyed permutation of the alphabet, applied to each symbol independently.

    Subclasses define the permutation on single residues; encrypt() and
    decrypt() apply it positionally. For every key, decrypt_residue must
    invert encrypt_residue, which makes decrypt(k, encrypt(k, m)) == m.
    """

    name: ClassVar[str]
    key_type: ClassVar[type]
    # False when the key space is too large to enumerate.
    exhaustive: ClassVar[bool] = True

    @abstractmethod
    def make_key(self, value: Any) -> K:
        ...

    @abstractmethod
    def random_key(self, rng: Optional[random.Random] = None) -> K:
        ...

    @abstractmethod
    def parse_key(self, text: str) -> K:
        ...

    @abstractmethod
    def encrypt_residue(self, key: K, p: int) -> int:
        ...

    @abstractmethod
    def decrypt_residue(self, key: K, c: int) -> int:
        ...

    def keyspace(self) -> Iterator[K]:
        raise NotImplementedError(f"The {self.name} key space is too large to enumerate.")

    def _check_key(self, key: object) -> None:
        if not isinstance(key, self.key_type):
            raise TypeError(f"{self.name} cipher expects a {self.key_type.__name__}, got {type(key).__name__}.")

    def encrypt(self, key: K, plaintext: Plaintext) -> Ciphertext:
        self._check_key(key)
        if not isinstance(plaintext, Plaintext):
            raise TypeError(f"encrypt expects a Plaintext, got {type(plaintext).__name__}.")
        logger.debug("%s: encrypting %d symbols", self.name, len(plaintext))
        return Ciphertext.from_residues(self.encrypt_residue(key, p) for p in plaintext.residues)

    def decrypt(self, key: K, ciphertext: Ciphertext) -> Plaintext:
        self._check_key(key)
        if not isinstance(ciphertext, Ciphertext):
            raise TypeError(f"decrypt expects a Ciphertext, got {type(ciphertext).__name__}.")
        logger.debug("%s: decrypting %d symbols", self.name, len(ciphertext))
        return Plaintext.from_residues(self.decrypt_residue(key, c) for c in ciphertext.residues)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
