"""miscellaneous functions"""

import logging
import random
from enum import Enum

import numpy as np


def set_random_seed(seed: int) -> None:
    """sets the random seed of our program

    Only makes sure that tutorial runs started at the same moment do not all
    draw the same random actions; it is not a full reproducibility setup.

    Args:
         seed: (`int`): seeds both `numpy` and `random`

    RETURNS (`None`):

    """
    np.random.seed(seed)
    random.seed(seed)


class ExamplesLogger:
    """mixin that provides ``self.log()``

    Every instance logs through a child of the one package logger, named after
    its class (or ``name``). Verbosity is set once, on the package logger, and
    holds for all children. Loggers are looked up by name, so instances are
    never referenced from here.
    """

    PACKAGE = "pomdp_examples"

    class LogLevel(Enum):
        """verbosity of the package, from silent (V0) to everything (V5)"""

        V0 = 1000
        V1 = 30  # setup and results
        V2 = 20  # belief sweeps
        V3 = 15  # policy construction
        V4 = 10  # single decisions
        V5 = 5

        @staticmethod
        def create(level: int) -> "ExamplesLogger.LogLevel":
            """maps the command line verbosity in [0 ... 5] onto a level"""
            return ExamplesLogger.LogLevel["V" + str(level)]

    @staticmethod
    def package_logger() -> logging.Logger:
        """the logger all instances log through

        Receives its (single) handler and the silent level on first access.

        RETURNS (`logging.Logger`):

        """

        logger = logging.getLogger(ExamplesLogger.PACKAGE)

        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter("[%(asctime)s] %(message)s", "%H:%M")
            )
            logger.addHandler(handler)
            logger.setLevel(ExamplesLogger.LogLevel.V0.value)
            logger.propagate = False

        return logger

    @classmethod
    def set_level(cls, level: LogLevel) -> None:
        """messages of ``level`` or more severe are printed from now on"""
        cls.package_logger().setLevel(level.value)

    @classmethod
    def log_is_on(cls, lvl: LogLevel) -> bool:
        """returns whether messages of ``lvl`` would be printed

        Use to avoid formatting expensive messages.

        """
        return cls.package_logger().isEnabledFor(lvl.value)

    def __init__(self, name: str = ""):
        self.logger = self.package_logger().getChild(
            name or self.__class__.__name__
        )

    def log(self, lvl: LogLevel, msg: str) -> None:
        """logs ``msg`` prefixed with the name of ``lvl``"""
        self.logger.log(lvl.value, lvl.name + ": " + msg)
