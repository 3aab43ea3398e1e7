"""lib functions to enable plotting more easily"""
from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np


def default_plot_style(state: str = "first state") -> None:
    """Default function to show a plot

    Assumes `legend()` is called already, because this is such a common thing
    done by the caller
    """
    plt.xlabel(f"p({state})")
    plt.ylabel("expected immediate reward")
    plt.tight_layout(pad=0)


def plot_action_values(
    rows: np.ndarray,
    action_labels: List[str],
    colors: Optional[List[str]] = None,
) -> None:
    """adds a line per action with its expected reward over the swept beliefs

    Beliefs where the action was chosen are marked on its line.

    Args:
         rows (`np.ndarray`): [p, chosen action, value per action] as returned by `sweep_beliefs`
         action_labels (`List[str]`): one label per action
         colors (`Optional[List[str]]`): optional list of colors to use for plotting

    """

    assert rows.ndim == 2 and rows.shape[1] == len(action_labels) + 2, (
        f"expected rows of {len(action_labels) + 2} columns, got {rows.shape}"
    )

    probabilities = rows[:, 0]
    chosen = rows[:, 1].astype(int)

    for i, label in enumerate(action_labels):
        color = colors[i] if colors else None

        (line,) = plt.plot(probabilities, rows[:, i + 2], label=label, color=color)

        picked = chosen == i
        plt.scatter(
            probabilities[picked], rows[picked, i + 2], color=line.get_color()
        )
