# normabm

An agent-based model of how a social norm forms in a population whose
members sometimes conform to the majority and sometimes do not.

Every agent holds one of two opinions, `+1` or `-1`. The system tracks the
concentration of agents holding `+1`. At each elementary update a randomly
chosen agent reconsiders its opinion:

* with its nonconformity probability `n_prob` it applies the
  **nonconformity** response function,
* otherwise it applies the **conformity** response function.

Both response functions look at the current concentration of `+1` opinions in
the whole system. One Monte Carlo step (MCS) consists of as many elementary
updates as there are agents (random sequential updating).

Each agent's nonconformity probability is drawn from a distribution. In
*quenched* mode it is drawn once when the agent is created; in *annealed* mode
it is drawn again after every update of that agent.

The package needs nothing beyond the Python standard library; randomness
comes from a `random.Random` instance passed in by the caller.

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Command line

The `normabm` command runs one simulation and writes the concentration of
`+1` opinions to a file, one value per line in `%g` format: the initial value
on the first line, then one line after every Monte Carlo step, so the file
holds `time_horizon + 1` lines.

It takes twelve positional arguments, in this order:

| #  | argument        | meaning                                                         |
|----|-----------------|-----------------------------------------------------------------|
| 1  | `file_name`     | output file for the concentration time series                   |
| 2  | `seed`          | seed of the random number generator                             |
| 3  | `system_size`   | number of agents (must be positive)                             |
| 4  | `time_horizon`  | number of Monte Carlo steps                                     |
| 5  | `is_annealed`   | integer; non-zero for annealed mode, `0` for quenched mode      |
| 6  | `is_symmetric`  | integer; non-zero for `SymmetricPower` conformity, `0` for `Power` |
| 7  | `init_opinions` | opinion every agent starts with, `1` or `-1`                    |
| 8  | `q`             | exponent of the conformity response function                    |
| 9  | `x0`            | midpoint of the logistic nonconformity response                 |
| 10 | `k`             | steepness of the logistic nonconformity response                |
| 11 | `m`             | scale of the logistic nonconformity response                    |
| 12 | `p`             | probability for the Bernoulli nonconformity distribution, in `[0, 1]` |

Example:

```
normabm concentration.txt 42 1000 500 0 1 1 4 0.5 10 0.5 0.2
```

The command always uses `BernoulliDistribution(p)` for nonconformity
probabilities, `Power(q)` or `SymmetricPower(q)` for conformity and
`Logistic(x0, k, m)` for nonconformity. An invalid system size, initial
opinion or `p` raises `ValueError`.

## Library

* `normabm.distributions` – sources of nonconformity probabilities, all
  derived from the abstract `NProbDistribution`, which holds the generator
  `rng` and the distribution's `mean`, and whose `generate()` draws one value:
  * `BernoulliDistribution(rng, p)` – yields `1.0` with probability `p`,
    else `0.0`; `p` outside `[0, 1]` raises `ValueError`;
  * `Uniform(rng, a)` – uniform on `[0, a)`, with mean `a / 2`;
  * `MovingUniform(rng, a, eps)` – uniform on `[a - eps, a + eps)`, with
    mean `a`.
* `normabm.responses` – response functions, all derived from the abstract
  `ResponseFunction`, each a frozen dataclass with a `run(agent, conc, rng)`
  method:
  * `Power(q)` – a `+1` agent switches with probability `(1 - conc) ** q`,
    a `-1` agent with probability `conc ** q`;
  * `SymmetricPower(q)` – a power response made symmetric around
    `conc = 0.5`: `f(x) = (2x)^q / 2` below one half and
    `1 - (2(1 - x))^q / 2` above;
  * `Logistic(x0, k, m)` – the agent takes `+1` with probability
    `2 m / (1 + exp(-k (conc - x0)))`, otherwise `-1`; `probability(conc)`
    returns that probability;
  * `VoterIndependence(f)` – the agent flips its opinion with probability `f`;
  * `IndividualLearning(f)` – the agent takes `+1` with probability `f`,
    otherwise `-1`.
* `normabm.agent` – `Agent(index, opinion, is_annealed, distribution,
  conformity, nonconformity)`, a dataclass whose `n_prob` is drawn from
  `distribution` on creation, with `reconsider_opinion(conc, rng)`,
  `flip_opinion()` and `redraw_n_prob()`.
* `normabm.system` – `SocialSystem(size, init_opinion, is_annealed,
  distribution, conformity, nonconformity, rng)`, the population, with:
  * `agents`, `one_group_size` and the `concentration` property;
  * `choose_agent()`, `single_update()` and `single_mcs()`;
  * `run(time_horizon)`, a generator of the initial concentration and the
    one after every Monte Carlo step;
  * `simulation(time_horizon, path)`, writing that series to a file;
  * `print_agents(out=None)` and `print_concentration(out=None)`, writing a
    tab-separated table of agents or the current concentration to `out`
    (standard output by default).
* `normabm.cli` – `parse_args(argv)`, `build_system(args)` and `main(argv)`,
  behind the `normabm` command.

Example:

```python
import random

from normabm.distributions import Uniform
from normabm.responses import Power, VoterIndependence
from normabm.system import SocialSystem

rng = random.Random(1)
system = SocialSystem(100, 1, True, Uniform(rng, 0.4), Power(3), VoterIndependence(0.5), rng)
series = list(system.run(50))  # 51 concentrations
```

## Limits

The package simulates a single well-mixed population and records only the
concentration series. It does not sweep parameters, average over runs, plot
or analyse results; the distributions `Uniform` and `MovingUniform` and the
responses `VoterIndependence` and `IndividualLearning` are available from
Python only, not from the command line.