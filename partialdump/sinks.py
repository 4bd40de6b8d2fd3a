"""
Destinations for emitted dumps.

A sink receives one finished line of text. PartialDump.emit() writes to its
sink (stderr by default), PartialDump.warn() to its warn sink (Python warnings
by default, attributed to the caller outside this package).
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import os
import sys
import warnings
from abc import ABC, abstractmethod
from typing import IO

__all__ = [
    "DumpWarning",
    "LoggerSink",
    "Sink",
    "StreamSink",
    "WarningSink",
]

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


# Classes --------------------------------------------------------------------------------------------------------------


class DumpWarning(UserWarning):
    """Warning category used by WarningSink."""


class Sink(ABC):
    """
    A line-oriented output target.

    Attributes:
        separator: Joins the pieces of a PartialDump.warn() message. Default: "".
    """
    separator: str = ""

    @abstractmethod
    def write_line(self, text: str) -> None:
        """Write text as one line."""


class StreamSink(Sink):
    """
    Write lines to a text stream.

    The default stream is sys.stderr looked up at write time, so redirection of
    sys.stderr (e.g. by test harnesses) is honored.
    """

    def __init__(self, stream: IO[str] | None = None, separator: str = ""):
        self.stream = stream
        self.separator = separator

    def write_line(self, text: str) -> None:
        stream = self.stream if self.stream is not None else sys.stderr
        stream.write(text + "\n")
        stream.flush()


class WarningSink(Sink):
    """
    Issue each line with warnings.warn().

    The warning is attributed to the first caller frame outside the partialdump
    package, so it points at the code that asked for the dump.
    """

    def __init__(self, category: type[Warning] = DumpWarning, separator: str = ""):
        self.category = category
        self.separator = separator

    def write_line(self, text: str) -> None:
        warnings.warn(text, self.category, skip_file_prefixes=(_PACKAGE_DIR,))


class LoggerSink(Sink):
    """Log each line through a logging.Logger, by default the 'partialdump' logger."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.WARNING,
        separator: str = " ",
    ):
        self.logger = logger if logger is not None else logging.getLogger("partialdump")
        self.level = level
        self.separator = separator

    def write_line(self, text: str) -> None:
        self.logger.log(self.level, "%s", text)
