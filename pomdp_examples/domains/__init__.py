"""Imports all problems from modules"""

from pomdp_examples.core import Problem

from .crying_baby import CryingBaby
from .tiger import Tiger


def create_problem(name: str) -> Problem:
    """factory function to construct the example problems

    Args:
         name: (`str`): in ["tiger", "crying_baby"]

    RETURNS (`pomdp_examples.core.Problem`):

    """

    if name == "tiger":
        return Tiger()
    if name == "crying_baby":
        return CryingBaby()

    raise ValueError(f"unknown problem {name}")
