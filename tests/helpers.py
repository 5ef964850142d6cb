import random


class SeededIndexSource:
    """Deterministic stand-in for SecureIndexSource (tests only)."""

    def __init__(self, seed=0):
        self._rng = random.Random(seed)
        self.calls = 0

    def below(self, n):
        self.calls += 1
        return self._rng.randrange(n)


class ConstantIndexSource:
    """Always returns 0 (mode='first') or n-1 (mode='last')."""

    def __init__(self, mode="first"):
        self.mode = mode

    def below(self, n):
        return 0 if self.mode == "first" else n - 1


def failing_randbelow(after):
    """randbelow replacement that raises OSError once `after` draws have succeeded."""
    rng = random.Random(0)
    state = {"calls": 0}

    def randbelow(n):
        if state["calls"] >= after:
            raise OSError("entropy pool gone")
        state["calls"] += 1
        return rng.randrange(n)

    return randbelow
