"""Response functions that decide how an agent reacts to the concentration."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from normabm.agent import Agent


class ResponseFunction(ABC):
    """Updates an agent's opinion given the concentration of opinion +1."""

    @abstractmethod
    def run(self, agent: Agent, conc: float, rng: random.Random) -> None:
        """Apply the response to ``agent``."""


@dataclass(frozen=True)
class Power(ResponseFunction):
    """Conformity with switching probability ``x ** q`` towards the majority."""

    q: float

    def run(self, agent: Agent, conc: float, rng: random.Random) -> None:
        draw = rng.random()
        if agent.opinion == 1:
            if draw < (1 - conc) ** self.q:
                agent.opinion = -1
        elif draw < conc ** self.q:
            agent.opinion = 1


@dataclass(frozen=True)
class SymmetricPower(ResponseFunction):
    """Conformity with f(x) = (2x)^q/2 below one half and 1-(2(1-x))^q/2 above."""

    q: float

    def run(self, agent: Agent, conc: float, rng: random.Random) -> None:
        draw = rng.random()
        if agent.opinion == 1:
            if conc > 0.5:
                threshold = (2 * (1 - conc)) ** self.q / 2.0
            else:
                threshold = 1 - (2 * conc) ** self.q / 2.0
            if draw < threshold:
                agent.opinion = -1
        else:
            if conc < 0.5:
                threshold = (2 * conc) ** self.q / 2.0
            else:
                threshold = 1 - (2 * (1 - conc)) ** self.q / 2.0
            if draw < threshold:
                agent.opinion = 1


@dataclass(frozen=True)
class Logistic(ResponseFunction):
    """Adopts +1 with probability 2m / (1 + exp(-k (x - x0)))."""

    x0: float
    k: float
    m: float

    def probability(self, conc: float) -> float:
        """Probability of adopting opinion +1 at concentration ``conc``."""
        try:
            denominator = 1 + math.exp(-self.k * (conc - self.x0))
        except OverflowError:
            return 0.0
        return 2.0 * self.m / denominator

    def run(self, agent: Agent, conc: float, rng: random.Random) -> None:
        draw = rng.random()
        agent.opinion = 1 if draw < self.probability(conc) else -1


@dataclass(frozen=True)
class VoterIndependence(ResponseFunction):
    """Flips the agent's opinion with probability ``f``."""

    f: float

    def run(self, agent: Agent, conc: float, rng: random.Random) -> None:
        if rng.random() < self.f:
            agent.flip_opinion()


@dataclass(frozen=True)
class IndividualLearning(ResponseFunction):
    """Adopts +1 with probability ``f`` and -1 otherwise."""

    f: float

    def run(self, agent: Agent, conc: float, rng: random.Random) -> None:
        agent.opinion = 1 if rng.random() < self.f else -1