from __future__ import annotations

from typing import Iterable

from .errors import AlphabetError, InvalidInput


class Alphabet:
    """
    Finite ordered symbol set with a fixed bijection onto the residues 0..M-1.

    Normalization policy (the only one): case-fold, then reject. Input is
    lowercased and every remaining character must belong to the alphabet,
    otherwise InvalidInput is raised naming the offending characters.
    Spaces and punctuation are rejected like anything else.
    """

    __slots__ = ("_symbols", "_residues")

    def __init__(self, symbols: str) -> None:
        if not symbols:
            raise AlphabetError("An alphabet needs at least one symbol.")
        if symbols != symbols.lower():
            raise AlphabetError("Alphabet symbols must already be case-folded.")

        residues = {ch: i for i, ch in enumerate(symbols)}
        if len(residues) != len(symbols):
            raise AlphabetError(f"Alphabet {symbols!r} repeats a symbol.")

        self._symbols = symbols
        self._residues = residues

    @property
    def symbols(self) -> str:
        return self._symbols

    @property
    def size(self) -> int:
        return len(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._residues

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        return f"Alphabet({self._symbols!r})"

    def symbol_to_residue(self, symbol: str) -> int:
        try:
            return self._residues[symbol]
        except KeyError:
            raise InvalidInput([symbol], symbol) from None

    def residue_to_symbol(self, residue: int) -> str:
        if not 0 <= residue < len(self._symbols):
            raise AlphabetError(
                f"Residue {residue} is outside 0..{len(self._symbols) - 1}; "
                "residues must come from the alphabet's own encoding."
            )
        return self._symbols[residue]

    def normalize(self, raw_text: str) -> tuple[str, ...]:
        folded = raw_text.lower()
        bad = [ch for ch in folded if ch not in self._residues]
        if bad:
            raise InvalidInput(bad, raw_text)
        return tuple(folded)

    def encode(self, raw_text: str) -> tuple[int, ...]:
        return tuple(self._residues[ch] for ch in self.normalize(raw_text))

    def decode(self, residues: Iterable[int]) -> str:
        return "".join(self.residue_to_symbol(r) for r in residues)


# The 26-letter Latin alphabet shared by every cipher in this package.
LATIN = Alphabet("abcdefghijklmnopqrstuvwxyz")
MODULUS = LATIN.size
