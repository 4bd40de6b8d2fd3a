#
# partialdump - Sinks Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import io
import logging

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from partialdump.sinks import DumpWarning, LoggerSink, Sink, StreamSink, WarningSink


# Tests ----------------------------------------------------------------------------------------------------------------

class TestSink:
    def test_abstract(self):
        with pytest.raises(TypeError):
            Sink()


class TestStreamSink:
    def test_explicit_stream(self):
        stream = io.StringIO()
        StreamSink(stream).write_line("a => 1")
        assert stream.getvalue() == "a => 1\n"

    def test_default_stderr(self, capsys):
        """Writes to whatever sys.stderr is at write time."""
        StreamSink().write_line("hello")
        captured = capsys.readouterr()
        assert captured.err == "hello\n"
        assert captured.out == ""


class TestWarningSink:
    def test_default_category(self):
        with pytest.warns(DumpWarning, match="careful"):
            WarningSink().write_line("careful")

    def test_custom_category(self):
        with pytest.warns(RuntimeWarning, match="careful"):
            WarningSink(category=RuntimeWarning).write_line("careful")

    def test_attributed_to_caller(self):
        """The warning points at the calling code, not at partialdump."""
        with pytest.warns(DumpWarning) as record:
            WarningSink().write_line("here")
        assert record[0].filename == __file__


class TestLoggerSink:
    def test_default_logger(self, caplog):
        with caplog.at_level(logging.WARNING, logger="partialdump"):
            LoggerSink().write_line("[ 1, 2 ]")
        assert [r.getMessage() for r in caplog.records] == ["[ 1, 2 ]"]
        assert caplog.records[0].name == "partialdump"
        assert caplog.records[0].levelno == logging.WARNING

    def test_custom_logger_and_level(self, caplog):
        logger = logging.getLogger("app.args")
        with caplog.at_level(logging.DEBUG, logger="app.args"):
            LoggerSink(logger, level=logging.DEBUG).write_line("x")
        assert caplog.records[0].name == "app.args"
        assert caplog.records[0].levelno == logging.DEBUG

    def test_separator(self):
        assert LoggerSink().separator == " "
        assert StreamSink().separator == ""
