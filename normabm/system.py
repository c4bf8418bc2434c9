"""A well-mixed population of agents updated by random sequential dynamics."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterator
from os import PathLike
from typing import TextIO

from normabm.agent import Agent
from normabm.distributions import NProbDistribution
from normabm.responses import ResponseFunction


class SocialSystem:
    """A population of agents whose opinions evolve in Monte Carlo steps."""

    def __init__(
        self,
        size: int,
        init_opinion: int,
        is_annealed: bool,
        distribution: NProbDistribution,
        conformity: ResponseFunction,
        nonconformity: ResponseFunction,
        rng: random.Random,
    ) -> None:
        if size <= 0:
            raise ValueError(f"system size must be positive, got {size}")
        if init_opinion not in (1, -1):
            raise ValueError(f"initial opinion must be 1 or -1, got {init_opinion}")
        self.size = size
        self.rng = rng
        self.agents = [
            Agent(i, init_opinion, is_annealed, distribution, conformity, nonconformity)
            for i in range(size)
        ]
        self.one_group_size = size if init_opinion == 1 else 0

    @property
    def concentration(self) -> float:
        """Fraction of agents holding opinion +1."""
        return self.one_group_size / self.size

    def print_agents(self, out: TextIO | None = None) -> None:
        """Write a tab-separated table of every agent's state."""
        out = sys.stdout if out is None else out
        print("index\topinion\tn_prob", file=out)
        for agent in self.agents:
            print(f"{agent.index}\t{agent.opinion}\t{agent.n_prob:g}", file=out)

    def print_concentration(self, out: TextIO | None = None) -> None:
        """Write the current concentration of opinion +1."""
        out = sys.stdout if out is None else out
        print(f"one_group_size:\t{self.concentration:g}", file=out)

    def choose_agent(self) -> Agent:
        """Pick an agent uniformly at random."""
        return self.agents[self.rng.randrange(self.size)]

    def single_update(self) -> None:
        """Let one randomly chosen agent reconsider its opinion."""
        agent = self.choose_agent()
        before = agent.opinion
        agent.reconsider_opinion(self.concentration, self.rng)
        self.one_group_size += (agent.opinion - before) // 2

    def single_mcs(self) -> None:
        """Perform one Monte Carlo step: as many updates as there are agents."""
        for _ in range(self.size):
            self.single_update()

    def run(self, time_horizon: int) -> Iterator[float]:
        """Yield the initial concentration and the one after every Monte Carlo step."""
        yield self.concentration
        for _ in range(time_horizon):
            self.single_mcs()
            yield self.concentration

    def simulation(self, time_horizon: int, path: str | PathLike[str]) -> None:
        """Run the dynamics and write the concentration trajectory to ``path``."""
        with open(path, "w", encoding="utf-8") as data_file:
            for conc in self.run(time_horizon):
                data_file.write(f"{conc:g}\n")