import random

import pytest

from normabm.distributions import (
    BernoulliDistribution,
    MovingUniform,
    NProbDistribution,
    Uniform,
)


class _FixedRng:
    def __init__(self, values):
        self._values = list(values)

    def random(self):
        return self._values.pop(0)


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        NProbDistribution(random.Random(0), 0.5)


def test_bernoulli_mean_is_p():
    assert BernoulliDistribution(random.Random(1), 0.3).mean == 0.3


def test_bernoulli_extremes():
    rng = random.Random(2)
    never = BernoulliDistribution(rng, 0.0)
    always = BernoulliDistribution(rng, 1.0)
    assert {never.generate() for _ in range(100)} == {0.0}
    assert {always.generate() for _ in range(100)} == {1.0}


def test_bernoulli_values_are_zero_or_one():
    dist = BernoulliDistribution(random.Random(3), 0.5)
    values = {dist.generate() for _ in range(500)}
    assert values == {0.0, 1.0}


@pytest.mark.parametrize("p", [-0.1, 1.5])
def test_bernoulli_rejects_bad_p(p):
    with pytest.raises(ValueError):
        BernoulliDistribution(random.Random(0), p)


def test_bernoulli_threshold():
    dist = BernoulliDistribution(_FixedRng([0.29, 0.31]), 0.3)
    assert dist.generate() == 1.0
    assert dist.generate() == 0.0


def test_uniform_mean_is_half_support():
    assert Uniform(random.Random(0), 0.8).mean == pytest.approx(0.4)


def test_uniform_range():
    dist = Uniform(random.Random(4), 0.6)
    for _ in range(1000):
        assert 0.0 <= dist.generate() < 0.6


def test_uniform_lower_bound_from_zero_draw():
    assert Uniform(_FixedRng([0.0]), 0.6).generate() == 0.0


def test_moving_uniform_mean_is_centre():
    assert MovingUniform(random.Random(0), 0.3, 0.1).mean == 0.3


def test_moving_uniform_range():
    dist = MovingUniform(random.Random(5), 0.5, 0.2)
    for _ in range(1000):
        assert 0.3 - 1e-12 <= dist.generate() < 0.7


def test_moving_uniform_zero_width_is_constant():
    dist = MovingUniform(random.Random(6), 0.25, 0.0)
    assert {dist.generate() for _ in range(50)} == {0.25}


def test_same_seed_same_sequence():
    a = Uniform(random.Random(42), 1.0)
    b = Uniform(random.Random(42), 1.0)
    assert [a.generate() for _ in range(10)] == [b.generate() for _ in range(10)]