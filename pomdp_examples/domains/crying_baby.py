"""The crying baby problem"""

from typing import Tuple


class CryingBaby:
    """The crying baby problem

    A baby is either hungry or full. Feeding costs something, but a hungry
    baby costs more.
    """

    HUNGRY = "hungry"
    FULL = "full"

    FEED = "feed"
    IGNORE = "ignore"

    def __init__(self, hungry_reward: float = -10, feed_reward: float = -5):
        """Construct the crying baby problem

        Args:
             hungry_reward: (`float`): reward whenever the baby is hungry
             feed_reward: (`float`): added reward whenever the baby is fed

        """
        self._hungry_reward = hungry_reward
        self._feed_reward = feed_reward

        self._states = (self.HUNGRY, self.FULL)
        self._actions = (self.FEED, self.IGNORE)

    @property
    def states(self) -> Tuple[str, str]:
        return self._states

    @property
    def actions(self) -> Tuple[str, str]:
        return self._actions

    def reward(self, state: str, action: str) -> float:
        """penalty when hungry, plus the cost of feeding

        Args:
             state: (`str`):
             action: (`str`):

        RETURNS (`float`):

        """

        assert state in self._states, f"{state} not in {self._states}"
        assert action in self._actions, f"{action} not in {self._actions}"

        reward = 0.0

        if state == self.HUNGRY:
            reward += self._hungry_reward
        if action == self.FEED:
            reward += self._feed_reward

        return reward

    def state_to_string(self, state: str) -> str:
        return state

    def action_to_string(self, action: str) -> str:
        return action

    def __repr__(self) -> str:
        return f"Crying baby problem with rewards {self._hungry_reward} (hungry), {self._feed_reward} (feed)"
