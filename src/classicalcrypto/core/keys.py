from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any, Optional

from .alphabet import MODULUS
from .errors import InvalidKey, KeyErrorReason

_DEFAULT_RNG = random.Random()


class Key(ABC):
    """
    Base class for cipher keys.

    Concrete keys are frozen dataclasses, validated by their cipher's
    make_key(); nothing in the library mutates a key after construction.
    """

    @abstractmethod
    def export(self) -> str:
        """
        Render the key in the textual form accepted by the cipher's parse_key().

        This is an insecure export: the key is returned in the clear, with
        no protection of any kind. Use caution with where it ends up.
        """


def key_rng(rng: Optional[random.Random] = None) -> random.Random:
    """
    Source of randomness for key generation.

    This is Python's Mersenne Twister, which is uniform but predictable and
    NOT suitable for real security use. Then again, neither are the ciphers.
    """
    return rng if rng is not None else _DEFAULT_RNG


def check_residue(value: Any, *, label: str = "key") -> int:
    """Validate that value is an int in [0, MODULUS); raise InvalidKey otherwise."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidKey(value, KeyErrorReason.OUT_OF_RANGE, f"{label} must be an integer")
    if not 0 <= value < MODULUS:
        raise InvalidKey(
            value,
            KeyErrorReason.OUT_OF_RANGE,
            f"{label} must be between 0 and {MODULUS - 1} inclusive",
        )
    return value
