"""An agent holding a binary opinion and a nonconformity probability."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from normabm.distributions import NProbDistribution
from normabm.responses import ResponseFunction


@dataclass
class Agent:
    """An agent that conforms or nonconforms when reconsidering its opinion.

    With probability ``n_prob`` it applies the nonconformity response, otherwise
    the conformity response. In annealed mode ``n_prob`` is redrawn after every
    reconsideration; in quenched mode it keeps its initial value.
    """

    index: int
    opinion: int
    is_annealed: bool
    distribution: NProbDistribution
    conformity: ResponseFunction
    nonconformity: ResponseFunction
    n_prob: float = field(init=False)

    def __post_init__(self) -> None:
        self.n_prob = self.distribution.generate()

    def redraw_n_prob(self) -> None:
        """Draw a new nonconformity probability from the distribution."""
        self.n_prob = self.distribution.generate()

    def flip_opinion(self) -> None:
        """Switch to the opposite opinion."""
        self.opinion = -self.opinion

    def reconsider_opinion(self, conc: float, rng: random.Random) -> None:
        """Update the opinion given the concentration of opinion +1."""
        if rng.random() < self.n_prob:
            self.nonconformity.run(self, conc, rng)
        else:
            self.conformity.run(self, conc, rng)
        if self.is_annealed:
            self.redraw_n_prob()