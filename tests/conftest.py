#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import sys

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
import partialdump.dumper as dumper_module
from partialdump.dumper import PartialDump
from partialdump.options import DumpOptions
from partialdump.sinks import Sink


# Local Classes --------------------------------------------------------------------------------------------------------

class ListSink(Sink):
    """Collects written lines in memory."""

    def __init__(self, separator: str = ""):
        self.lines: list[str] = []
        self.separator = separator

    def write_line(self, text: str) -> None:
        self.lines.append(text)


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def sink() -> ListSink:
    return ListSink()


@pytest.fixture
def pd(sink) -> PartialDump:
    """Dumper with default options writing both emit() and warn() output to an in-memory sink."""
    return PartialDump(DumpOptions(), sink=sink, warn_sink=sink)


@pytest.fixture
def make_pd(sink):
    """Factory for dumpers with custom options sharing the in-memory sink."""

    def _make(**kwargs) -> PartialDump:
        return PartialDump(DumpOptions(**kwargs), sink=sink, warn_sink=sink)

    return _make


@pytest.fixture
def fresh_default(monkeypatch):
    """Start with no process-wide dumper and restore the previous one afterwards."""
    monkeypatch.setattr(dumper_module, "_default_dumper", None)
    yield


@pytest.fixture
def int_digit_limit():
    """Pin the interpreter's int-to-str digit limit to its stock value."""
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield
    sys.set_int_max_str_digits(previous)
