""" plotting functionality """

import sys

import matplotlib.pyplot as plt
import numpy as np

from pomdp_examples.analysis.visualization import default_plot_style, plot_action_values


def main(file_name: str) -> None:
    """main: loads a belief sweep and plots the value of each action

    Args:
         file_name: (`str`): output of `pomdp_examples.greedy_tutorial`

    RETURNS (`None`):

    """

    with open(file_name) as result_file:
        header = [line for line in result_file if line.startswith("#")][-1]

    action_labels = [label.strip() for label in header.lstrip("# ").split(",")][2:]

    rows = np.loadtxt(file_name, delimiter=",", ndmin=2)

    plot_action_values(rows, action_labels)
    plt.legend()
    default_plot_style()
    plt.show()


if __name__ == "__main__":

    assert len(sys.argv) == 2, "Expects 1 argument: the belief sweep file"

    main(sys.argv[1])
