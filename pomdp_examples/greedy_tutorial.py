""" Sweep beliefs over a two-state problem and report what a policy picks """

from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser
from typing import List, Optional

import numpy as np

from pomdp_examples.core import DiscreteBelief, InvalidConfiguration
from pomdp_examples.domains import create_problem
from pomdp_examples.misc import ExamplesLogger, set_random_seed
from pomdp_examples.policies import (
    GreedyPolicy,
    Policy,
    create_policy,
    expected_reward,
)


def sweep_beliefs(policy: Policy, resolution: int) -> np.ndarray:
    """runs ``policy`` on beliefs from certainly the first to certainly the second state

    For each of the ``resolution`` evenly spaced ``p`` in [0, 1] the belief
    is ``[(p, s0), (1-p, s1)]`` over the first two states of the problem.

    Args:
         policy: (`Policy`):
         resolution: (`int`): number of beliefs, at least 2

    RETURNS (`np.ndarray`): rows of [p, index of chosen action, expected reward per action...]

    """

    if resolution < 2:
        raise ValueError(f"need a resolution of at least 2, not {resolution}")

    states = policy.problem.states
    if len(states) < 2:
        raise ValueError(f"sweeping beliefs needs 2 states, {policy.problem} has {len(states)}")

    if not policy.actions:
        raise InvalidConfiguration(f"{policy} has no actions to sweep over")

    rows = []
    for p in np.linspace(0, 1, resolution):
        belief = DiscreteBelief([(p, states[0]), (1 - p, states[1])])

        if isinstance(policy, GreedyPolicy):
            values = policy.action_values(belief)
            action_index = policy.best_action_index(values)
        else:
            action_index = policy.actions.index_of(policy(belief))
            values = [expected_reward(policy.problem, belief, a) for a in policy.actions]

        rows.append([p, action_index, *values])

    return np.array(rows)


def main(args: Optional[List[str]]) -> None:
    """sweeps beliefs with the policy and problem given by the configurations

    Args:
         args: (`Optional[List[str]]`): optional list of arguments

    RETURNS (`None`):

    """

    conf = parse_arguments(args)

    ExamplesLogger.set_level(ExamplesLogger.LogLevel.create(conf.verbose))
    logger = ExamplesLogger("greedy tutorial")

    if conf.random_seed:
        set_random_seed(conf.random_seed)

    problem = create_problem(conf.domain)
    policy = create_policy(conf.policy, problem)

    logger.log(ExamplesLogger.LogLevel.V1, f"Sweeping beliefs with {policy}")

    rows = sweep_beliefs(policy, conf.resolution)

    if logger.log_is_on(ExamplesLogger.LogLevel.V2):
        s0 = problem.state_to_string(problem.states[0])
        for row in rows:
            action = problem.action_to_string(policy.actions[int(row[1])])
            values = ", ".join(f"{v:.2f}" for v in row[2:])
            logger.log(
                ExamplesLogger.LogLevel.V2,
                f"p({s0}) = {row[0]:.2f}: {action} (values: {values})",
            )

    header = ", ".join(["p", "action"] + [str(a) for a in policy.actions])
    np.savetxt(
        conf.file,
        rows,
        delimiter=", ",
        header=f"{conf}\n{header}",
    )

    logger.log(ExamplesLogger.LogLevel.V1, f"Stored {len(rows)} beliefs in {conf.file}")


def parse_arguments(args: Optional[List[str]] = None):
    """converts arguments from commandline (or string) to namespace

    Args:
         args: (`Optional[List[str]]`): a string of arguments, uses cmdline if None

    """
    parser = ArgumentParser(formatter_class=ArgumentDefaultsHelpFormatter)

    parser.add_argument(
        "--verbose",
        "-v",
        choices=[0, 1, 2, 3, 4, 5],
        default=1,
        type=int,
        help="level of logging",
    )

    parser.add_argument(
        "--domain",
        "-D",
        help="which problem to pick actions in",
        required=True,
        choices=["tiger", "crying_baby"],
    )

    parser.add_argument(
        "--policy",
        "-P",
        help="which policy picks the actions",
        default="greedy",
        choices=["greedy", "random"],
    )

    parser.add_argument(
        "--resolution",
        "-r",
        default=11,
        type=int,
        help="number of beliefs to sweep over",
    )

    parser.add_argument(
        "--file", "-f", default="beliefs.csv", help="output file path"
    )

    parser.add_argument(
        "--random_seed", "--seed", default=0, type=int, help="set random seed"
    )

    parsed_args = parser.parse_args(args)

    if parsed_args.resolution < 2:
        parser.error(f"--resolution must be at least 2, not {parsed_args.resolution}")

    return parsed_args
