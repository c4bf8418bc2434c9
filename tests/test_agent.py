import random

from normabm.agent import Agent
from normabm.distributions import BernoulliDistribution, NProbDistribution
from normabm.responses import IndividualLearning, Power


class _CountingDistribution(NProbDistribution):
    def __init__(self, value):
        super().__init__(random.Random(0), value)
        self.value = value
        self.calls = 0

    def generate(self):
        self.calls += 1
        return self.value


def _agent(n_prob, annealed=False, opinion=-1):
    dist = _CountingDistribution(n_prob)
    agent = Agent(
        index=7,
        opinion=opinion,
        is_annealed=annealed,
        distribution=dist,
        conformity=IndividualLearning(0.0),
        nonconformity=IndividualLearning(1.0),
    )
    return agent, dist


def test_n_prob_drawn_at_construction():
    agent, dist = _agent(0.25)
    assert agent.n_prob == 0.25
    assert dist.calls == 1
    assert agent.index == 7


def test_flip_opinion_twice_restores():
    agent, _ = _agent(0.0, opinion=1)
    agent.flip_opinion()
    assert agent.opinion == -1
    agent.flip_opinion()
    assert agent.opinion == 1


def test_full_nonconformity_uses_nonconformity_response():
    agent, _ = _agent(1.0, opinion=-1)
    agent.reconsider_opinion(0.0, random.Random(1))
    assert agent.opinion == 1


def test_zero_nonconformity_uses_conformity_response():
    agent, _ = _agent(0.0, opinion=1)
    agent.reconsider_opinion(1.0, random.Random(1))
    assert agent.opinion == -1


def test_quenched_keeps_n_prob():
    agent, dist = _agent(0.5, annealed=False)
    rng = random.Random(2)
    for _ in range(10):
        agent.reconsider_opinion(0.5, rng)
    assert dist.calls == 1


def test_annealed_redraws_each_time():
    agent, dist = _agent(0.5, annealed=True)
    rng = random.Random(3)
    for _ in range(10):
        agent.reconsider_opinion(0.5, rng)
    assert dist.calls == 11


def test_redraw_n_prob_with_bernoulli():
    rng = random.Random(4)
    agent = Agent(0, 1, True, BernoulliDistribution(rng, 1.0), Power(1.0), Power(1.0))
    assert agent.n_prob == 1.0
    agent.redraw_n_prob()
    assert agent.n_prob == 1.0


def test_opinion_stays_binary():
    rng = random.Random(5)
    agent = Agent(
        0, 1, True, BernoulliDistribution(rng, 0.5), Power(2.0), IndividualLearning(0.5)
    )
    for step in range(200):
        agent.reconsider_opinion(step / 200, rng)
        assert agent.opinion in (1, -1)
        assert agent.n_prob in (0.0, 1.0)