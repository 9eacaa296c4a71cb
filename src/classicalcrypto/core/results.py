from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, order=True)
class Candidate:
    # sort_index comes first so dataclass ordering uses it automatically
    sort_index: tuple[float, str, str] = field(init=False, repr=False)

    cipher_name: str
    key: str
    plaintext: str

    # chi-squared against English letter frequencies; lower is better
    score: float = 0.0

    def __post_init__(self) -> None:
        # Ties broken by cipher name, then key, so ordering is deterministic.
        object.__setattr__(self, "sort_index", (self.score, self.cipher_name, self.key))

    def to_dict(self) -> dict[str, Any]:
        return {
            "cipher_name": self.cipher_name,
            "key": self.key,
            "plaintext": self.plaintext,
            "score": self.score,
        }
