from __future__ import annotations

import logging
import os
import random
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "CLASSICALCRYPTO_"

LOG_FORMAT = "%(asctime)s  %(name)-32s  %(levelname)-7s  %(message)s"
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the demo CLI, read from the environment."""

    log_level: str = "WARNING"
    default_cipher: str = "shift"
    # When set, key generation is reproducible (still not secure).
    seed: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        level = env.get(ENV_PREFIX + "LOG_LEVEL", cls.log_level).strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"{ENV_PREFIX}LOG_LEVEL must be one of {', '.join(_LEVELS)}, got {level!r}.")

        cipher = env.get(ENV_PREFIX + "DEFAULT_CIPHER", cls.default_cipher).strip().lower()
        if not cipher:
            raise ValueError(f"{ENV_PREFIX}DEFAULT_CIPHER must not be empty.")

        seed: Optional[int] = None
        raw_seed = env.get(ENV_PREFIX + "SEED", "").strip()
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}SEED must be an integer, got {raw_seed!r}.") from None

        return cls(log_level=level, default_cipher=cipher, seed=seed)

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


def configure_logging(level: str) -> None:
    """Set up root logging once for the CLI; the library itself never adds handlers."""
    name = level.strip().upper()
    if name not in _LEVELS:
        raise ValueError(f"Unknown log level {level!r}. Use one of {', '.join(_LEVELS)}.")
    root = logging.getLogger()
    root.setLevel(getattr(logging, name))
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        root.addHandler(handler)
