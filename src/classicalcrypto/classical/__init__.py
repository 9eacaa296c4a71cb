from __future__ import annotations

def register_all() -> None:
    from .monoalphabetic import shift, affine, substitution  # noqa: F401
