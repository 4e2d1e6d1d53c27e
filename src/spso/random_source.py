"""Seedable uniform random stream shared by the solver."""

from __future__ import annotations

from typing import List, Optional

import numpy as np


class RandomSource:
    """
    Thin wrapper over a single ``np.random.Generator`` stream.

    All random draws made by one engine run go through one instance, so a fixed
    seed reproduces the run exactly. ``spawn`` derives independent child
    streams from the same seed (via ``SeedSequence.spawn``) for callers that
    want per-particle streams.
    """

    def __init__(self, seed: Optional[int] = None, sequence: Optional[np.random.SeedSequence] = None):
        self.seed = seed
        self._seq = sequence if sequence is not None else np.random.SeedSequence(seed)
        self.generator = np.random.default_rng(self._seq)

    def uniform(self, low, high, size=None):
        """Draw from [low, high); ``low``/``high`` may be arrays."""
        return self.generator.uniform(low, high, size=size)

    def rand_double(self, low: float, high: float) -> float:
        return float(self.generator.uniform(low, high))

    def choice(self, n: int, k: int) -> np.ndarray:
        """Return ``k`` distinct integers from ``range(n)``."""
        return self.generator.choice(n, size=k, replace=False)

    def spawn(self, n: int) -> List["RandomSource"]:
        return [RandomSource(self.seed, sequence=seq) for seq in self._seq.spawn(n)]

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed})"
