"""
Default per-shape formatters.

Each formatter is a plain function with the signature
``(dumper, depth, value) -> str`` and is registered for one Shape in
DumpOptions.formatters. The dumper argument is the PartialDump driving the
call; container formatters use it to recurse one level down via
dumper.dump_as_list() / dumper.dump_as_pairs() and scalar formatters use it
for options and quoting.

Any of these can be replaced per options instance:

    >>> opts = DumpOptions().add_formatter(Shape.NUMBER, lambda d, depth, n: f"{n:.2f}")
"""

# Standard library -----------------------------------------------------------------------------------------------------
import inspect
from itertools import islice
from typing import Any, Iterable

# Local ----------------------------------------------------------------------------------------------------------------
from .shapes import deref
from .utils import class_name, identity_repr, qualified_name

__all__ = [
    "escape_string",
    "format_mapping",
    "format_number",
    "format_object",
    "format_opaque_ref",
    "format_scalar_ref",
    "format_sequence",
    "format_string",
    "format_undef",
    "quote_string",
]


# Scalars --------------------------------------------------------------------------------------------------------------


def format_undef(dumper, depth: int, value: None) -> str:
    return "undef"


def format_number(dumper, depth: int, value: Any) -> str:
    """
    Numbers render with their plain str() form, unquoted.

    Integers too long for decimal conversion (sys.get_int_max_str_digits())
    show their size instead, e.g. '<int: 16610 bits>'.
    """
    try:
        return str(value)
    except ValueError:
        if not isinstance(value, int):
            raise
        return f"<{class_name(value)}: {value.bit_length()} bits>"


def format_string(dumper, depth: int, value: str | bytes | bytearray) -> str:
    """
    Escape and quote text.

    Bytes are decoded as Latin-1, so each byte becomes one character and
    non-printable bytes end up as \\x{..} escapes.

    Examples:
        >>> format_string(PartialDump(), 1, "a\\nb")
        '"a\\\\nb"'
    """
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("latin-1")
    text = escape_string(value, escape_quotes=dumper.options.escape_quotes)
    return dumper.quote(text)


def escape_string(text: str, *, escape_quotes: bool = True) -> str:
    """
    Make text safe for a single log line.

    Newline and carriage return become the two-character sequences \\n and \\r,
    any other non-printable character becomes \\x{<lowercase hex code point>}.
    With escape_quotes, backslashes and double quotes are backslash-escaped first
    so the quoted result stays unambiguous.

    Examples:
        >>> escape_string("tab\\there")
        'tab\\\\x{9}here'
        >>> escape_string('say "hi"')
        'say \\\\"hi\\\\"'
        >>> escape_string('say "hi"', escape_quotes=False)
        'say "hi"'
    """
    if escape_quotes:
        text = text.replace("\\", "\\\\").replace('"', '\\"')

    text = text.replace("\n", "\\n").replace("\r", "\\r")

    if text.isprintable():
        return text
    return "".join(ch if ch.isprintable() else f"\\x{{{ord(ch):x}}}" for ch in text)


def quote_string(text: str) -> str:
    return f'"{text}"'


# Objects --------------------------------------------------------------------------------------------------------------


def format_object(dumper, depth: int, value: Any) -> str:
    """
    User objects show their identity only, unless stringify is enabled.

    With stringify the object's own __str__ runs, which may be slow or have side
    effects; any exception it raises propagates to the caller.
    """
    if dumper.options.stringify:
        return str(value)
    return identity_repr(value)


def format_opaque_ref(dumper, depth: int, value: Any) -> str:
    """
    Fallback for classes, functions, modules and other builtin objects.

    Classes, routines and modules show their dotted name, anything else its
    identity. No __repr__ runs, so views over huge dicts, exceptions carrying
    large payloads and metaclasses with custom __repr__ all stay short.

    Examples:
        >>> format_opaque_ref(pd, 1, len)
        '<function len>'
        >>> format_opaque_ref(pd, 1, {}.values())
        '<dict_values object at 0x7f3a...>'
    """
    if isinstance(value, type):
        return f"<class {qualified_name(value)}>"
    if inspect.isroutine(value):
        return f"<function {qualified_name(value)}>"
    if inspect.ismodule(value):
        return f"<module {qualified_name(value)}>"
    return identity_repr(value)


# Containers -----------------------------------------------------------------------------------------------------------


def format_sequence(dumper, depth: int, value: Iterable[Any]) -> str:
    items = _head(value, dumper.options.max_elements)
    return "[ " + dumper.dump_as_list(depth + 1, *items) + " ]"


def format_mapping(dumper, depth: int, value: Any) -> str:
    flat: list[Any] = []
    for k, v in _head(value.items(), dumper.options.max_elements):
        flat.extend((k, v))
    return "{ " + dumper.dump_as_pairs(depth + 1, *flat) + " }"


def format_scalar_ref(dumper, depth: int, value: Any) -> str:
    return "\\" + dumper.format(depth + 1, deref(value))


# Private Methods ------------------------------------------------------------------------------------------------------


def _head(iterable: Iterable[Any], n: int | None) -> list[Any]:
    """
    Take up to n + 1 items, enough for the renderer to detect truncation.

    Avoids materializing huge or lazy containers just to show a few elements.
    """
    if n is None:
        return list(iterable)
    return list(islice(iterable, n + 1))
