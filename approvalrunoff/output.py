"""
Print messages about strategy computations depending on a verbosity level.

Works like a stripped-down ``logging.Logger`` and is meant to be used through the
module-level instance `output`.

The verbosity levels are:

- CRITICAL
- ERROR
- WARNING
- INFO
- DETAILS
- DEBUG
- DEBUG2

The default verbosity is `WARNING`, i.e., computations are silent unless asked otherwise.
"""

import logging
import textwrap

# same numeric values as in the logging module
CRITICAL = 50
ERROR = 40
WARNING = 30
INFO = 20
DETAILS = 15
DEBUG = 10
DEBUG2 = 5

DEFAULT = WARNING

WIDTH = 80  # line width used for wrapping

VERBOSITY_TO_NAME = {
    CRITICAL: "CRITICAL",
    ERROR: "ERROR",
    WARNING: "WARNING",
    INFO: "INFO",
    DETAILS: "DETAILS",
    DEBUG: "DEBUG",
    DEBUG2: "DEBUG2",
}


class Output:
    """
    Print messages whose importance is at least the current verbosity level.

    Parameters
    ----------
        verbosity : int
            Minimum level of importance of messages to be printed, one of the constants
            defined in this module.

        logger : logging.Logger, optional
            Every message is additionally passed on to this logger, independently of
            `verbosity`. The log level is decided by the logger itself.
    """

    def __init__(self, verbosity=DEFAULT, logger=None):
        self.verbosity = verbosity
        self.logger = logger

    def set_verbosity(self, verbosity=DEFAULT):
        """
        Set verbosity level.

        Parameters
        ----------
            verbosity : int
                Verbosity level.
        """
        if verbosity not in VERBOSITY_TO_NAME:
            raise ValueError(f"Unknown verbosity level {verbosity}.")
        self.verbosity = verbosity

    def is_enabled_for(self, verbosity):
        """Check whether messages of level `verbosity` are printed."""
        return verbosity >= self.verbosity

    def _print(self, verbosity, msg, wrap, indent):
        if self.is_enabled_for(verbosity):
            if wrap:
                msg = "\n".join(
                    textwrap.fill(
                        line,
                        width=WIDTH,
                        break_long_words=False,
                        initial_indent=indent,
                        subsequent_indent=indent,
                    )
                    for line in msg.split("\n")
                )
            print(msg)

        if self.logger:
            # DETAILS and DEBUG2 are unknown to the logging module
            level = verbosity if verbosity not in (DETAILS, DEBUG2) else logging.DEBUG
            self.logger.log(level, msg)

    def debug2(self, msg, wrap=True, indent=""):
        """Print a message with verbosity level DEBUG2 (per-pairing information)."""
        self._print(DEBUG2, msg, wrap, indent)

    def debug(self, msg, wrap=True, indent=""):
        """Print a message with verbosity level DEBUG (per-ballot outcomes)."""
        self._print(DEBUG, msg, wrap, indent)

    def details(self, msg, wrap=True, indent=""):
        """
        Print a message with verbosity level DETAILS.

        Parameters
        ----------
            msg : str
                The message.

            wrap : bool, optional
                Wrap lines longer than `WIDTH` characters.

            indent : str, optional
                Prefix for every (wrapped) line.
        """
        self._print(DETAILS, msg, wrap, indent)

    def info(self, msg, wrap=True, indent=""):
        """Print a message with verbosity level INFO."""
        self._print(INFO, msg, wrap, indent)

    def warning(self, msg, wrap=True, indent=""):
        """Print a message with verbosity level WARNING."""
        self._print(WARNING, msg, wrap, indent)


output = Output()
