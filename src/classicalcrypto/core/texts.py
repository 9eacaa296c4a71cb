from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, TypeVar

from .alphabet import LATIN
from .errors import AlphabetError

T = TypeVar("T", bound="_Text")


@dataclass(frozen=True)
class _Text:
    """
    Immutable sequence of LATIN residues.

    Plaintext and Ciphertext share this layout but are distinct types:
    dataclass equality requires the same class, so a Plaintext never equals
    a Ciphertext even when their residues match.
    """

    residues: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        values = tuple(self.residues)
        for r in values:
            if isinstance(r, bool) or not isinstance(r, int) or not 0 <= r < LATIN.size:
                raise AlphabetError(f"Residue {r!r} is outside the alphabet.")
        object.__setattr__(self, "residues", values)

    @classmethod
    def from_str(cls: type[T], raw: str) -> T:
        """Build from raw text; case-folds and raises InvalidInput on non-letters."""
        return cls(LATIN.encode(raw))

    @classmethod
    def from_residues(cls: type[T], residues: Iterable[int]) -> T:
        return cls(tuple(residues))

    def __iter__(self) -> Iterator[str]:
        return (LATIN.residue_to_symbol(r) for r in self.residues)

    def __len__(self) -> int:
        return len(self.residues)

    def __str__(self) -> str:
        return LATIN.decode(self.residues)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class Plaintext(_Text):
    """A message. Renders in lowercase."""


class Ciphertext(_Text):
    """
    An encrypted message. Renders in UPPERCASE, following Stinson's convention.

    Built by a cipher's encrypt, or from external text via from_str, in which
    case only alphabet membership is guaranteed.
    """

    def __str__(self) -> str:
        return LATIN.decode(self.residues).upper()
