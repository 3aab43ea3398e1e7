""" runs tests on the example problems """

import unittest

from pomdp_examples.core import DiscreteBelief
from pomdp_examples.domains import CryingBaby, Tiger, create_problem
from pomdp_examples.policies import GreedyPolicy


class TestTiger(unittest.TestCase):
    """ tests :class:`pomdp_examples.domains.Tiger` """

    def setUp(self):
        self.tiger = Tiger()

    def test_enumerations(self):
        """ states and actions in order """
        self.assertEqual(self.tiger.states, ("tiger-left", "tiger-right"))
        self.assertEqual(self.tiger.actions, ("open-left", "open-right", "listen"))

    def test_reward(self):
        """ listening costs, opening the door depends on the tiger """

        for state in self.tiger.states:
            self.assertEqual(self.tiger.reward(state, Tiger.LISTEN), -1)

        self.assertEqual(self.tiger.reward(Tiger.TIGER_LEFT, Tiger.OPEN_LEFT), -100)
        self.assertEqual(self.tiger.reward(Tiger.TIGER_LEFT, Tiger.OPEN_RIGHT), 10)
        self.assertEqual(self.tiger.reward(Tiger.TIGER_RIGHT, Tiger.OPEN_LEFT), 10)
        self.assertEqual(self.tiger.reward(Tiger.TIGER_RIGHT, Tiger.OPEN_RIGHT), -100)

        self.assertRaises(AssertionError, self.tiger.reward, "tiger-up", Tiger.LISTEN)
        self.assertRaises(AssertionError, self.tiger.reward, Tiger.TIGER_LEFT, "run")

    def test_custom_rewards(self):
        """ rewards can be configured """
        tiger = Tiger(listen_reward=-5, good_door_reward=1, bad_door_reward=-2)

        self.assertEqual(tiger.reward(Tiger.TIGER_LEFT, Tiger.LISTEN), -5)
        self.assertEqual(tiger.reward(Tiger.TIGER_LEFT, Tiger.OPEN_RIGHT), 1)
        self.assertEqual(tiger.reward(Tiger.TIGER_LEFT, Tiger.OPEN_LEFT), -2)

        # opening a door is now cheaper than listening
        self.assertEqual(
            GreedyPolicy(tiger)(DiscreteBelief.uniform(tiger.states)), Tiger.OPEN_LEFT
        )

    def test_to_string(self):
        """ short descriptions """
        self.assertEqual(self.tiger.state_to_string(Tiger.TIGER_LEFT), "L")
        self.assertEqual(self.tiger.state_to_string(Tiger.TIGER_RIGHT), "R")
        self.assertEqual(self.tiger.action_to_string(Tiger.LISTEN), "listen")


class TestCryingBaby(unittest.TestCase):
    """ tests :class:`pomdp_examples.domains.CryingBaby` """

    def test_reward(self):
        """ hungry costs 10, feeding 5 """
        baby = CryingBaby()

        self.assertEqual(baby.reward(CryingBaby.HUNGRY, CryingBaby.FEED), -15)
        self.assertEqual(baby.reward(CryingBaby.HUNGRY, CryingBaby.IGNORE), -10)
        self.assertEqual(baby.reward(CryingBaby.FULL, CryingBaby.FEED), -5)
        self.assertEqual(baby.reward(CryingBaby.FULL, CryingBaby.IGNORE), 0)

    def test_greedy_never_feeds(self):
        """ feeding has no immediate benefit """
        baby = CryingBaby()
        policy = GreedyPolicy(baby)

        for p in [0.0, 0.5, 1.0]:
            belief = DiscreteBelief.from_probabilities(baby.states, [p, 1 - p])
            self.assertEqual(policy(belief), CryingBaby.IGNORE)


class TestCreateProblem(unittest.TestCase):
    """ tests :func:`pomdp_examples.domains.create_problem` """

    def test_names(self):
        """ known names return problems, others raise """
        self.assertIsInstance(create_problem("tiger"), Tiger)
        self.assertIsInstance(create_problem("crying_baby"), CryingBaby)
        self.assertRaises(ValueError, create_problem, "mountaincar")


if __name__ == "__main__":
    unittest.main()
