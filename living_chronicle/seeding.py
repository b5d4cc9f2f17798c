"""Deterministic seed derivation for template selection.

Every choice among fixed phrasings goes through pick(options, seed) with a
seed from derive_seed(). Seeds depend only on event values and a salt naming
the choice being made, so a given event set always compiles to the same text
in any process (the builtin hash() is salted per process and is not used).
"""

from __future__ import annotations

import hashlib
import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def derive_seed(year: int, significance: float, salt: str) -> int:
    digest = hashlib.sha256(f"{salt}|{year}|{float(significance)!r}".encode()).digest()
    return int.from_bytes(digest[:8], "big")


def pick(options: Sequence[T], seed: int) -> T:
    if not options:
        raise ValueError("pick() needs at least one option")
    return options[random.Random(seed).randrange(len(options))]
