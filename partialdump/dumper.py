"""
Partial dumping of data structures, optimized for argument printing.

Produces a one-line, human readable, concise dump of arbitrary values for log
messages and warnings. Output is bounded three ways: elements per container
(max_elements), container nesting (max_depth), and total length (max_length).
Depth limiting also bounds output on self-referencing structures.

    >>> def connect(*args, **kwargs):
    ...     log.debug("connect called with: %s", dump(*args, *itertools.chain(*kwargs.items())))

    >>> dump(1, "two", [3, 4])
    '1, "two", [ 3, 4 ]'
    >>> dump("name", "Alice", "age", 30)
    'name => "Alice", age => 30'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import threading
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .options import DumpOptions
from .sentinels import UNSET, UnsetType
from .shapes import Shape, classify, is_reference
from .sinks import Sink, StreamSink, WarningSink
from .formatters import quote_string
from .utils import identity_repr

__all__ = [
    "PartialDump",
    "configure",
    "dump",
    "emit",
    "get_dumper",
    "get_options",
    "warn",
]

ELLIPSIS = "..."
DELIMITER = ", "
PAIR_SEPARATOR = " => "

_REFERENCE_SHAPES = frozenset(
    {Shape.SCALAR_REF, Shape.SEQUENCE, Shape.MAPPING, Shape.OPAQUE_REF}
)

_PRESETS = {
    "default": DumpOptions,
    "compact": DumpOptions.compact,
    "debug": DumpOptions.debug,
    "logging": DumpOptions.logging,
}


# Classes --------------------------------------------------------------------------------------------------------------


class PartialDump:
    """
    Dumper bound to one DumpOptions instance and a pair of sinks.

    Args:
        options: Limits, flags and formatters. Defaults to DumpOptions().
        sink: Destination for emit(). Defaults to StreamSink() on stderr.
        warn_sink: Destination for warn(). Defaults to WarningSink().

    Examples:
        >>> pd = PartialDump(DumpOptions(max_elements=2))
        >>> pd.dump([1, 2, 3, 4, 5])
        '[ 1, 2, ... ]'
        >>> pd.dump({"a": {"b": {"c": 1}}})
        '{ a => { b => <dict object at 0x...> } }'
    """

    def __init__(
        self,
        options: DumpOptions | None = None,
        *,
        sink: Sink | None = None,
        warn_sink: Sink | None = None,
    ):
        self.options = options if options is not None else DumpOptions()
        self.sink = sink if sink is not None else StreamSink()
        self.warn_sink = warn_sink if warn_sink is not None else WarningSink()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(options={self.options!r})"

    # Entry Points -------------------------------------

    def dump(self, *values: Any) -> str:
        """
        Return a one-line, human readable, concise dump of values.

        Even-sized argument lists whose key positions hold only plain values
        (None, numbers, text) render as "key => value" pairs, anything else as a
        comma separated list. The result is cut to max_length when set.
        """
        if self.should_dump_as_pairs(*values):
            text = self.dump_as_pairs(1, *values)
        else:
            text = self.dump_as_list(1, *values)

        max_length = self.options.max_length
        if self.options.has_max_length and len(text) > max_length:
            text = text[: max(max_length - 3, 0)] + ELLIPSIS
        return text

    def emit(self, *values: Any) -> None:
        """Dump values and write the result to the sink as one line."""
        self.sink.write_line(self.dump(*values))

    def warn(self, *values: Any) -> None:
        """
        Write a warning made of values, printing plain strings and numbers as-is.

        Each text or number argument is used verbatim, every other argument
        (None included) is replaced with its dump. The pieces are joined with
        the warn sink's separator.

        Examples:
            >>> pd.warn("unexpected reply: ", {"status": 500})
            # DumpWarning: unexpected reply: { status => 500 }
        """
        pieces = [
            self.dump(value) if value is None or is_reference(value) else _plain_text(value)
            for value in values
        ]
        self.warn_sink.write_line(self.warn_sink.separator.join(pieces))

    # Collection Renderers -----------------------------

    def should_dump_as_pairs(self, *values: Any) -> bool:
        """Check if a top-level argument list reads as key/value pairs."""
        if not self.options.pairs:
            return False
        if len(values) % 2 != 0:
            return False
        return not any(is_reference(key) for key in values[::2])

    def dump_as_list(self, depth: int, *values: Any) -> str:
        """Comma delimited dump of values, cut to max_elements with a trailing '...'."""
        max_elements = self.options.max_elements
        truncated = self.options.has_max_elements and len(values) > max_elements
        if truncated:
            values = values[:max_elements]

        parts = [self.format(depth, value) for value in values]
        if truncated:
            parts.append(ELLIPSIS)
        return DELIMITER.join(parts)

    def dump_as_pairs(self, depth: int, *values: Any) -> str:
        """
        Comma delimited 'key => value' dump of interleaved keys and values.

        max_elements counts pairs. A trailing key without a value is paired with None.
        """
        max_elements = self.options.max_elements
        n_pairs = (len(values) + 1) // 2
        truncated = self.options.has_max_elements and n_pairs > max_elements
        if truncated:
            values = values[: max_elements * 2]

        parts = []
        for i in range(0, len(values), 2):
            key = values[i]
            value = values[i + 1] if i + 1 < len(values) else None
            parts.append(self.format_key(depth, key) + PAIR_SEPARATOR + self.format(depth, value))
        if truncated:
            parts.append(ELLIPSIS)
        return DELIMITER.join(parts)

    # Dispatcher ---------------------------------------

    def format(self, depth: int, value: Any) -> str:
        """Format a single value at the given depth via the formatter for its shape."""
        shape = classify(value, numeric_strings=self.options.numeric_strings)
        if shape in _REFERENCE_SHAPES:
            return self.format_ref(depth, value, shape)
        return self.options.get_formatter(shape)(self, depth, value)

    def format_ref(self, depth: int, value: Any, shape: Shape | None = None) -> str:
        """
        Format a reference value, expanding it only while depth <= max_depth.

        Past the limit the value renders as its identity string and its contents
        are never visited.
        """
        if depth > self.options.max_depth:
            return identity_repr(value)
        if shape is None:
            shape = classify(value, numeric_strings=self.options.numeric_strings)
        return self.options.get_formatter(shape)(self, depth, value)

    def format_key(self, depth: int, key: Any) -> str:
        """Keys that are str pass through unchanged, other keys are formatted as values."""
        if self.options.format_key is not None:
            return self.options.format_key(self, depth, key)
        if isinstance(key, str):
            return key
        return self.format(depth, key)

    def quote(self, text: str) -> str:
        if self.options.quote is not None:
            return self.options.quote(text)
        return quote_string(text)


# Default Dumper -------------------------------------------------------------------------------------------------------

_default_dumper: PartialDump | None = None
_default_lock = threading.Lock()


def get_dumper() -> PartialDump:
    """Return the process-wide PartialDump, creating it with default options on first use."""
    global _default_dumper
    if _default_dumper is None:
        with _default_lock:
            if _default_dumper is None:
                _default_dumper = PartialDump()
    return _default_dumper


def get_options() -> DumpOptions:
    """Return the options of the process-wide dumper."""
    return get_dumper().options


def configure(
    preset: str | None = None,
    *,
    max_length: int | None | UnsetType = UNSET,
    max_elements: int | None | UnsetType = UNSET,
    max_depth: int | UnsetType = UNSET,
    stringify: bool | UnsetType = UNSET,
    pairs: bool | UnsetType = UNSET,
    numeric_strings: bool | UnsetType = UNSET,
    escape_quotes: bool | UnsetType = UNSET,
) -> DumpOptions:
    """
    Configure the process-wide dumper.

    Args:
        preset: "default", "compact", "debug" or "logging" to start from a fresh
                preset; None builds on the current options.
        max_length, max_elements: New limit, or None to remove the limit.
        max_depth, stringify, pairs, numeric_strings, escape_quotes: New value.
        Arguments left UNSET keep their current (or preset) value.

    Returns:
        The new options, also installed on the default dumper.

    Raises:
        ValueError: If preset is not a known preset name.

    Examples:
        >>> configure("compact", max_length=None)
        >>> configure(max_elements=10)  # builds on the compact preset above
    """
    if preset is not None and preset not in _PRESETS:
        raise ValueError(f"unknown preset {preset!r}, expected one of {sorted(_PRESETS)}")

    changes = {
        name: value
        for name, value in (
            ("max_length", max_length),
            ("max_elements", max_elements),
            ("max_depth", max_depth),
            ("stringify", stringify),
            ("pairs", pairs),
            ("numeric_strings", numeric_strings),
            ("escape_quotes", escape_quotes),
        )
        if value is not UNSET
    }

    dumper = get_dumper()
    with _default_lock:
        base = _PRESETS[preset]() if preset is not None else dumper.options
        dumper.options = base.merge(**changes)
        return dumper.options


def dump(*values: Any) -> str:
    """Dump values with the process-wide dumper. See PartialDump.dump()."""
    return get_dumper().dump(*values)


def emit(*values: Any) -> None:
    """Dump values with the process-wide dumper and write them to its sink."""
    get_dumper().emit(*values)


def warn(*values: Any) -> None:
    """Warn with the process-wide dumper. See PartialDump.warn()."""
    get_dumper().warn(*values)


# Private Methods ------------------------------------------------------------------------------------------------------


def _plain_text(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="backslashreplace")
    return str(value)
