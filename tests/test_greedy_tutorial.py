"""tests :mod:`pomdp_examples.greedy_tutorial`"""

import numpy as np
import pytest

from pomdp_examples.core import InvalidConfiguration
from pomdp_examples.domains import Tiger
from pomdp_examples.greedy_tutorial import main, parse_arguments, sweep_beliefs
from pomdp_examples.policies import GreedyPolicy


def test_parse_arguments():
    """defaults and overrides"""

    conf = parse_arguments(["-D=tiger"])
    assert conf.domain == "tiger"
    assert conf.policy == "greedy"
    assert conf.resolution == 11
    assert conf.verbose == 1

    conf = parse_arguments(["-D", "crying_baby", "-P", "random", "-r", "3", "-v", "0"])
    assert conf.domain == "crying_baby"
    assert conf.policy == "random"
    assert conf.resolution == 3
    assert conf.verbose == 0


def test_parse_wrong_arguments():
    """domain is required, resolution at least 2"""

    with pytest.raises(SystemExit):
        parse_arguments([])
    with pytest.raises(SystemExit):
        parse_arguments(["-D=mountaincar"])
    with pytest.raises(SystemExit):
        parse_arguments(["-D=tiger", "-r=1"])


def test_sweep_beliefs():
    """greedy tiger opens a door only when certain enough"""

    rows = sweep_beliefs(GreedyPolicy(Tiger()), 3)

    assert rows.shape == (3, 5)
    np.testing.assert_array_equal(rows[:, 0], [0, 0.5, 1])

    # p(tiger-left) = 0 => open left, .5 => listen, 1 => open right
    np.testing.assert_array_equal(rows[:, 1], [0, 2, 1])

    np.testing.assert_allclose(rows[1, 2:], [-45, -45, -1])
    np.testing.assert_allclose(rows[2, 2:], [-100, 10, -1])

    with pytest.raises(ValueError):
        sweep_beliefs(GreedyPolicy(Tiger()), 1)


def test_sweep_evaluates_rewards_once():
    """each belief costs one reward call per action per state"""

    class CountingTiger(Tiger):
        def __init__(self):
            super().__init__()
            self.num_calls = 0

        def reward(self, state, action):
            self.num_calls += 1
            return super().reward(state, action)

    tiger = CountingTiger()
    sweep_beliefs(GreedyPolicy(tiger), 4)

    assert tiger.num_calls == 4 * 3 * 2


def test_sweep_without_actions():
    """nothing to pick from"""

    class NoActions(Tiger):
        @property
        def actions(self):
            return ()

    with pytest.raises(InvalidConfiguration):
        sweep_beliefs(GreedyPolicy(NoActions()), 3)


def test_main(tmp_path):
    """writes a table of beliefs to file"""

    result_file = tmp_path / "sweep.csv"
    main(["-D=tiger", "-v=0", "-r=5", f"--file={result_file}"])

    rows = np.loadtxt(result_file, delimiter=",", ndmin=2)
    assert rows.shape == (5, 5)
    np.testing.assert_array_equal(rows, sweep_beliefs(GreedyPolicy(Tiger()), 5))

    header = [line for line in result_file.read_text().splitlines() if line.startswith("#")]
    assert header[-1] == "# p, action, open-left, open-right, listen"


def test_main_random(tmp_path):
    """random policies pick any action"""

    result_file = tmp_path / "sweep.csv"
    main(["-D=crying_baby", "-P=random", "-v=0", "-r=50", "--seed=3", f"-f={result_file}"])

    rows = np.loadtxt(result_file, delimiter=",", ndmin=2)
    assert set(rows[:, 1]) == {0, 1}


if __name__ == "__main__":
    pytest.main([__file__])
