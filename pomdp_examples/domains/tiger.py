"""The tiger problem"""

from typing import Tuple


class Tiger:
    """The classic tiger problem

    A tiger hides behind one of two doors. The agent can listen (at a small
    cost) or open a door: opening the door with the tiger is heavily
    penalized, opening the other one is rewarded.
    """

    # consts
    TIGER_LEFT = "tiger-left"
    TIGER_RIGHT = "tiger-right"

    OPEN_LEFT = "open-left"
    OPEN_RIGHT = "open-right"
    LISTEN = "listen"

    ELEM_TO_STRING = {TIGER_LEFT: "L", TIGER_RIGHT: "R"}

    def __init__(
        self,
        listen_reward: float = -1,
        good_door_reward: float = 10,
        bad_door_reward: float = -100,
    ):
        """Construct the tiger problem

        Args:
             listen_reward: (`float`): reward for listening
             good_door_reward: (`float`): reward for opening the door without tiger
             bad_door_reward: (`float`): reward for opening the door with tiger

        """

        self._listen_reward = listen_reward
        self._good_door_reward = good_door_reward
        self._bad_door_reward = bad_door_reward

        self._states = (self.TIGER_LEFT, self.TIGER_RIGHT)
        self._actions = (self.OPEN_LEFT, self.OPEN_RIGHT, self.LISTEN)

    @property
    def states(self) -> Tuple[str, str]:
        """ tiger left or right """
        return self._states

    @property
    def actions(self) -> Tuple[str, str, str]:
        """ open left, open right, listen """
        return self._actions

    def reward(self, state: str, action: str) -> float:
        """A constant if listening, penalty if opening to door, and reward otherwise

        Args:
             state: (`str`):
             action: (`str`):

        RETURNS (`float`):

        """

        assert state in self._states, f"{state} not in {self._states}"
        assert action in self._actions, f"{action} not in {self._actions}"

        if action == self.LISTEN:
            return self._listen_reward

        tiger_behind_door = (action == self.OPEN_LEFT) == (state == self.TIGER_LEFT)

        return self._bad_door_reward if tiger_behind_door else self._good_door_reward

    def state_to_string(self, state: str) -> str:
        """returns 'L' or 'R' for the location of the tiger"""
        return self.ELEM_TO_STRING[state]

    def action_to_string(self, action: str) -> str:
        """returns the action as is"""
        return action

    def __repr__(self) -> str:
        return (
            f"Tiger problem with rewards {self._listen_reward} (listen), "
            f"{self._good_door_reward} / {self._bad_door_reward} (door)"
        )
