"""Command-line entry point running one simulation and saving its trajectory."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from normabm.distributions import BernoulliDistribution
from normabm.responses import Logistic, Power, ResponseFunction, SymmetricPower
from normabm.system import SocialSystem


def _flag(text: str) -> bool:
    return bool(int(text))


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the positional simulation parameters."""
    parser = argparse.ArgumentParser(
        prog="normabm",
        description="Simulate norm formation with conformity and nonconformity.",
    )
    parser.add_argument("file_name", help="output file for the concentration trajectory")
    parser.add_argument("seed", type=int, help="random seed")
    parser.add_argument("system_size", type=int, help="number of agents")
    parser.add_argument("time_horizon", type=int, help="number of Monte Carlo steps")
    parser.add_argument("is_annealed", type=_flag, help="1 for annealed, 0 for quenched")
    parser.add_argument("is_symmetric", type=_flag, help="1 for symmetric power conformity")
    parser.add_argument("init_opinions", type=int, help="initial opinion of all agents")
    parser.add_argument("q", type=float, help="conformity exponent")
    parser.add_argument("x0", type=float, help="logistic midpoint")
    parser.add_argument("k", type=float, help="logistic steepness")
    parser.add_argument("m", type=float, help="logistic half-maximum")
    parser.add_argument("p", type=float, help="nonconformity probability")
    return parser.parse_args(argv)


def build_system(args: argparse.Namespace) -> SocialSystem:
    """Create a social system from parsed arguments."""
    rng = random.Random(args.seed)
    distribution = BernoulliDistribution(rng, args.p)
    conformity: ResponseFunction = (
        SymmetricPower(args.q) if args.is_symmetric else Power(args.q)
    )
    nonconformity = Logistic(args.x0, args.k, args.m)
    return SocialSystem(
        args.system_size,
        args.init_opinions,
        args.is_annealed,
        distribution,
        conformity,
        nonconformity,
        rng,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation described by ``argv`` and write its output file."""
    args = parse_args(argv)
    system = build_system(args)
    system.simulation(args.time_horizon, args.file_name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())