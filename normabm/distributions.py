"""Distributions from which agents draw their probability of nonconformity."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod


class NProbDistribution(ABC):
    """Source of nonconformity probabilities with a known mean."""

    def __init__(self, rng: random.Random, mean: float) -> None:
        self.rng = rng
        self.mean = mean

    @abstractmethod
    def generate(self) -> float:
        """Draw one nonconformity probability."""


class BernoulliDistribution(NProbDistribution):
    """Yields 1.0 with probability ``p`` and 0.0 otherwise."""

    def __init__(self, rng: random.Random, p: float) -> None:
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"Bernoulli parameter must lie in [0, 1], got {p}")
        super().__init__(rng, p)
        self.p = p

    def generate(self) -> float:
        return 1.0 if self.rng.random() < self.p else 0.0


class Uniform(NProbDistribution):
    """Uniform distribution on ``[0, a)``."""

    def __init__(self, rng: random.Random, a: float) -> None:
        super().__init__(rng, a / 2)
        self.a = a

    def generate(self) -> float:
        return self.a * self.rng.random()


class MovingUniform(NProbDistribution):
    """Uniform distribution on ``[a - eps, a + eps)``."""

    def __init__(self, rng: random.Random, a: float, eps: float) -> None:
        super().__init__(rng, a)
        self.a = a
        self.eps = eps

    def generate(self) -> float:
        low = self.a - self.eps
        return low + 2 * self.eps * self.rng.random()