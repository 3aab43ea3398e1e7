"""Core functionality and models

Contains the protocol for the problems in this package, the action space
policies pick from and the discrete belief they pick with.

"""

from typing import Any, Hashable, Iterable, Iterator, Sequence, Tuple

import numpy as np
from typing_extensions import Protocol

State = Hashable
Action = Hashable


class InvalidConfiguration(Exception):
    """raised when a policy is asked to choose from an empty action space"""


class Problem(Protocol):
    """The protocol for a (PO)MDP problem in this package.

    Policies only need the enumerations of states and actions, and the
    immediate reward function. Dynamics are up to whatever library simulates
    the problem.
    """

    @property
    def states(self) -> Sequence[State]:
        """the (ordered) enumeration of states

        RETURNS (`Sequence[State]`):

        """

    @property
    def actions(self) -> Sequence[Action]:
        """the (ordered) enumeration of actions

        The order is the precedence in which ties between actions are broken

        RETURNS (`Sequence[Action]`):

        """

    def reward(self, state: State, action: Action) -> float:
        """the immediate reward function

        Args:
             state: (`State`):
             action: (`Action`):

        RETURNS (`float`): the reward of taking ``action`` in ``state``

        """


class ActionSpace:
    """An immutable, ordered, finite set of actions"""

    def __init__(self, actions: Iterable[Action]):
        """initiates the space from an enumeration of ``actions``

        Args:
             actions: (`Iterable[Action]`): order is kept

        """
        self._actions: Tuple[Action, ...] = tuple(actions)

    @classmethod
    def of(cls, problem: Problem) -> "ActionSpace":
        """creates the action space of ``problem``"""
        return cls(problem.actions)

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self) -> Iterator[Action]:
        return iter(self._actions)

    def __getitem__(self, idx: int) -> Action:
        return self._actions[idx]

    def contains(self, action: Any) -> bool:
        """returns whether `this` contains ``action``

        Args:
             action: (`Any`): an action

        RETURNS (`bool`): true if in `this`

        """
        return action in self._actions

    def index_of(self, action: Action) -> int:
        """returns the position of ``action`` in the enumeration

        Args:
             action: (`Action`): must be in the space

        RETURNS (`int`):

        """
        assert self.contains(action), f"{action} not in {self}"
        return self._actions.index(action)

    def sample(self) -> Action:
        """returns an action in the space at random

        Raises :class:`InvalidConfiguration` when the space is empty

        RETURNS (`Action`):

        """
        if not self._actions:
            raise InvalidConfiguration("cannot sample from an empty action space")

        return self._actions[np.random.randint(len(self._actions))]

    def __repr__(self):
        return f"ActionSpace {list(self._actions)}"


class DiscreteBelief:
    """A weighted distribution over states as ordered (weight, state) pairs

    Weights are neither validated nor normalized: whatever the caller puts in
    is what the policies weigh rewards with.
    """

    def __init__(self, pairs: Iterable[Tuple[float, State]] = ()):
        """stores ``pairs`` in order

        Args:
             pairs: (`Iterable[Tuple[float, State]]`): (weight, state) pairs

        """
        self._pairs: Tuple[Tuple[float, State], ...] = tuple(
            (float(w), s) for w, s in pairs
        )

    @classmethod
    def from_probabilities(
        cls, states: Sequence[State], probabilities: Iterable[float]
    ) -> "DiscreteBelief":
        """aligns a vector of weights with the enumeration of ``states``

        Args:
             states: (`Sequence[State]`): the state enumeration of a problem
             probabilities: (`Iterable[float]`): one weight per state

        RETURNS (`DiscreteBelief`):

        """
        weights = np.asarray(list(probabilities), dtype=float)

        if weights.shape != (len(states),):
            raise ValueError(
                f"expected {len(states)} weights for states {list(states)}, got {weights.shape}"
            )

        return cls(zip(weights, states))

    @classmethod
    def uniform(cls, states: Sequence[State]) -> "DiscreteBelief":
        """returns a belief with equal weight on all ``states``"""
        if not states:
            return cls()

        return cls.from_probabilities(states, np.full(len(states), 1 / len(states)))

    @classmethod
    def deterministic(cls, states: Sequence[State], state: State) -> "DiscreteBelief":
        """returns a belief with all weight on ``state``"""
        assert state in states, f"{state} not in {list(states)}"
        return cls.from_probabilities(states, [float(s == state) for s in states])

    def __iter__(self) -> Iterator[Tuple[float, State]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other) -> bool:
        return isinstance(other, DiscreteBelief) and self._pairs == other._pairs

    def __hash__(self) -> int:
        return hash(self._pairs)

    def pdf(self, state: State) -> float:
        """returns the (summed) weight of ``state``, 0 if not in the belief"""
        return sum(w for w, s in self._pairs if s == state)

    def support(self) -> Tuple[State, ...]:
        """returns the states with nonzero weight, in order"""
        return tuple(s for w, s in self._pairs if w != 0)

    def total_weight(self) -> float:
        """returns the sum of all weights (1 for a normalized belief)"""
        return sum(w for w, _ in self._pairs)

    def __repr__(self) -> str:
        return "DiscreteBelief(" + ", ".join(f"{s}: {w:.3f}" for w, s in self._pairs) + ")"
