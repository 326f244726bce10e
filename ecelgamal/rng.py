"""
Random scalar sources.

Key generation and encryption never touch a global RNG; they take a
:class:`ScalarSource` and ask it for a scalar in ``[1, n-1]``.  The
default is the operating-system CSPRNG.  Tests inject a seeded or a
fixed-sequence source to get reproducible ciphertexts.
"""

from __future__ import annotations

import random
import secrets
import threading
from abc import ABC, abstractmethod
from typing import Iterable, List

from .errors import InvalidCurveParams


class ScalarSource(ABC):
    """Draws scalars uniformly from ``[1, n-1]``."""

    def random_scalar(self, n: int) -> int:
        if n <= 1:
            raise InvalidCurveParams(f"point order must exceed 1, got {n}")
        return self._draw(n)

    @abstractmethod
    def _draw(self, n: int) -> int:
        """Return a scalar in ``[1, n-1]``; *n* is already known to be > 1."""


class SystemScalarSource(ScalarSource):
    """CSPRNG-backed source (``secrets``); safe to share between threads."""

    def _draw(self, n: int) -> int:
        nbytes = (n.bit_length() + 7) // 8
        # rejection sampling keeps the distribution uniform
        while True:
            c = int.from_bytes(secrets.token_bytes(nbytes), "big")
            if 0 < c < n:
                return c


class SeededScalarSource(ScalarSource):
    """
    Deterministic source for reproducible runs.

    Not suitable for real keys.  Draws are serialised with a lock so a
    single instance can be shared across threads.
    """

    def __init__(self, seed: int) -> None:
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def _draw(self, n: int) -> int:
        with self._lock:
            return self._rng.randrange(1, n)


class FixedScalarSource(ScalarSource):
    """Replays a fixed sequence of scalars (known-answer tests)."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values: List[int] = list(values)
        self._pos = 0
        self._lock = threading.Lock()

    def _draw(self, n: int) -> int:
        with self._lock:
            if self._pos >= len(self._values):
                raise ValueError("fixed scalar sequence exhausted")
            v = self._values[self._pos]
            self._pos += 1
        if not 0 < v < n:
            raise ValueError(f"fixed scalar {v} outside [1, {n - 1}]")
        return v

    @property
    def remaining(self) -> int:
        return len(self._values) - self._pos


_DEFAULT = SystemScalarSource()


def default_source() -> ScalarSource:
    """Process-wide CSPRNG source."""
    return _DEFAULT
