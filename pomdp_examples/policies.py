"""Policies map a belief to an action

Contains:
    * the :class:`Policy` base every policy implements
    * :class:`GreedyPolicy`: maximizes the expected immediate reward
    * :class:`RandomPolicy`: ignores the belief and picks uniformly
    * :class:`FunctionPolicy`: wraps a user provided function
    * :func:`create_policy`: factory by name

"""

import abc
from typing import Callable

import numpy as np

from pomdp_examples.core import (
    Action,
    ActionSpace,
    DiscreteBelief,
    InvalidConfiguration,
    Problem,
)
from pomdp_examples.misc import ExamplesLogger


def expected_reward(problem: Problem, belief: DiscreteBelief, action: Action) -> float:
    """computes the expected immediate reward of ``action`` under ``belief``

    Sum of `weight * problem.reward(state, action)` over the belief. An empty
    belief has expected reward 0. Errors in the reward function propagate.

    Args:
         problem: (`Problem`): provides the reward function
         belief: (`DiscreteBelief`): (weight, state) pairs
         action: (`Action`):

    RETURNS (`float`):

    """
    return sum(w * problem.reward(s, action) for w, s in belief)


class Policy(abc.ABC, ExamplesLogger):
    """A rule that maps a belief to an action

    Binds a problem and its action space once, on construction, after which
    it is only ever queried. Calling the policy is the same as
    :meth:`select_action`.
    """

    def __init__(self, problem: Problem):
        """binds ``problem`` and its actions

        Args:
             problem: (`Problem`): referenced, not copied

        """

        ExamplesLogger.__init__(self)

        self._problem = problem
        self._actions = ActionSpace.of(problem)

        self.log(
            ExamplesLogger.LogLevel.V3, f"Created {self} over actions {self._actions}"
        )

    @property
    def problem(self) -> Problem:
        """the problem this policy acts in"""
        return self._problem

    @property
    def actions(self) -> ActionSpace:
        """the actions this policy picks from"""
        return self._actions

    def __call__(self, belief: DiscreteBelief) -> Action:
        return self.select_action(belief)

    def _assert_actions(self) -> None:
        """raises :class:`InvalidConfiguration` if there is nothing to pick"""
        if not self._actions:
            raise InvalidConfiguration(
                f"{self.__class__.__name__} cannot select from an empty action space"
            )

    @abc.abstractmethod
    def select_action(self, belief: DiscreteBelief) -> Action:
        """picks an action given ``belief``

        Args:
             belief: (`DiscreteBelief`):

        RETURNS (`Action`): an action in :attr:`actions`

        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__} in {self._problem}"


class GreedyPolicy(Policy):
    """Picks the action with the highest expected immediate reward

    Ties are broken in favour of the action that comes first in the action
    enumeration of the problem.
    """

    def action_values(self, belief: DiscreteBelief) -> np.ndarray:
        """returns the expected immediate reward of each action

        Args:
             belief: (`DiscreteBelief`):

        RETURNS (`np.ndarray`): values in the order of :attr:`actions`

        """
        return np.array(
            [expected_reward(self._problem, belief, a) for a in self._actions],
            dtype=float,
        )

    @staticmethod
    def best_action_index(values: np.ndarray) -> int:
        """returns the index of the first maximum in ``values``, 0 if empty"""

        best_value = -np.inf
        best_index = 0

        for i, value in enumerate(values):
            # strict: earlier actions win ties
            if value > best_value:
                best_value = value
                best_index = i

        return best_index

    def select_action(self, belief: DiscreteBelief) -> Action:
        """returns the action maximizing expected immediate reward

        Raises :class:`InvalidConfiguration` if the problem has no actions.

        Args:
             belief: (`DiscreteBelief`): weights need not be normalized

        RETURNS (`Action`):

        """

        self._assert_actions()

        values = self.action_values(belief)
        best_index = self.best_action_index(values)

        if self.log_is_on(ExamplesLogger.LogLevel.V4):
            self.log(
                ExamplesLogger.LogLevel.V4,
                f"{belief} => {self._actions[best_index]} ({values[best_index]})",
            )

        return self._actions[best_index]


class RandomPolicy(Policy):
    """Picks uniformly from the actions, ignores the belief"""

    def select_action(self, belief: DiscreteBelief) -> Action:
        self._assert_actions()
        return self._actions.sample()


class FunctionPolicy(Policy):
    """Delegates the decision to a function of the belief"""

    def __init__(self, problem: Problem, f: Callable[[DiscreteBelief], Action]):
        """wraps ``f``

        Args:
             problem: (`Problem`):
             f: (`Callable[[DiscreteBelief], Action]`): must return an action of ``problem``

        """
        self._f = f
        super().__init__(problem)

    def select_action(self, belief: DiscreteBelief) -> Action:
        """returns ``f(belief)``

        Raises `ValueError` if the returned action is not in :attr:`actions`

        """

        self._assert_actions()

        action = self._f(belief)

        if not self._actions.contains(action):
            raise ValueError(f"{self._f} returned {action}, not in {self._actions}")

        return action


def create_policy(name: str, problem: Problem) -> Policy:
    """factory function to construct policies by name

    Args:
         name: (`str`): in ["greedy", "random"]
         problem: (`Problem`):

    RETURNS (`Policy`):

    """

    if name == "greedy":
        return GreedyPolicy(problem)
    if name == "random":
        return RandomPolicy(problem)

    raise ValueError(f"{name} not accepted as policy, try 'greedy' or 'random'")
