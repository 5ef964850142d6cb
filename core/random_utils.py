# core/random_utils.py
from __future__ import annotations
import logging
import secrets
from typing import Callable, MutableSequence, Protocol, TypeVar

from core.errors import EntropySourceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class IndexSource(Protocol):
    def below(self, n: int) -> int:
        """Return a uniformly distributed int in [0, n)."""
        ...


class SecureIndexSource:
    """
    Uniform integers in [0, n) from the OS CSPRNG (secrets.randbelow by default).
    Holds no mutable state; safe to share between threads.
    """

    def __init__(self, randbelow: Callable[[int], int] = secrets.randbelow):
        self._randbelow = randbelow

    def below(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"upper bound must be positive, got {n}")
        try:
            return self._randbelow(n)
        except (OSError, NotImplementedError) as e:
            logger.error("Secure random source unavailable: %s", e)
            raise EntropySourceError(f"Secure random source unavailable: {e}") from e


def secure_choice(seq: str, source: IndexSource) -> str:
    if not seq:
        raise ValueError("cannot choose from an empty sequence")
    return seq[source.below(len(seq))]


def secure_shuffle(items: MutableSequence[T], source: IndexSource) -> None:
    """Fisher-Yates in place: for i = last..1 swap items[i] with items[j], j uniform in [0, i]."""
    for i in range(len(items) - 1, 0, -1):
        j = source.below(i + 1)
        items[i], items[j] = items[j], items[i]
