"""
Value shapes used for formatter dispatch.

Every value handed to the dumper is classified into exactly one Shape.
Classification is structural: scalars first (None, numbers, text), then
reference values by container kind (scalar reference, mapping, sequence),
then user objects, and finally anything else.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import inspect
import numbers
import re
import weakref
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Any

__all__ = [
    "Shape",
    "Ref",
    "SCALAR_SHAPES",
    "classify",
    "deref",
    "is_reference",
    "looks_like_number",
]


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Shape(StrEnum):
    """
    Structural category of a value.

    Members are str subclasses, so they print as their plain names in
    messages and can be used as dict keys interchangeably with strings.
    """
    ABSENT = "absent"
    NUMBER = "number"
    STRING = "string"
    SCALAR_REF = "scalar_ref"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OPAQUE_HANDLE = "opaque_handle"
    OPAQUE_REF = "opaque_ref"


@dataclass(frozen=True)
class Ref:
    """
    Explicit reference to exactly one other value.

    Python has no scalar references, so wrap a value in Ref to have it rendered
    as a reference (a leading backslash followed by the referenced value).

    Examples:
        >>> from partialdump.dumper import dump
        >>> dump(Ref(42))
        '\\\\42'
    """
    value: Any


SCALAR_SHAPES = frozenset({Shape.ABSENT, Shape.NUMBER, Shape.STRING})

_NUMERIC_RE = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)\s*",
    re.IGNORECASE,
)

_TEXT_TYPES = (str, bytes, bytearray)


# Methods --------------------------------------------------------------------------------------------------------------

def looks_like_number(text: str) -> bool:
    """
    Check if a string reads as a number.

    Accepts integers, decimals and exponent forms with an optional sign and
    surrounding whitespace, plus 'Inf', 'Infinity' and 'NaN' in any case.

    Examples:
        >>> looks_like_number(" -1.5e3 ")
        True
        >>> looks_like_number("0x1f")
        False
    """
    return _NUMERIC_RE.fullmatch(text) is not None


def classify(value: Any, *, numeric_strings: bool = False) -> Shape:
    """
    Classify a value into its Shape.

    Args:
        value: Any Python object.
        numeric_strings: Treat str values that look like numbers as NUMBER.

    Returns:
        The Shape of the value.

    Examples:
        >>> classify(None)
        <Shape.ABSENT: 'absent'>
        >>> classify([1, 2])
        <Shape.SEQUENCE: 'sequence'>
        >>> classify("42", numeric_strings=True)
        <Shape.NUMBER: 'number'>
    """
    if value is None:
        return Shape.ABSENT
    if isinstance(value, numbers.Number):
        return Shape.NUMBER
    if isinstance(value, _TEXT_TYPES):
        if numeric_strings and isinstance(value, str) and looks_like_number(value):
            return Shape.NUMBER
        return Shape.STRING

    # Reference values: container kind first
    if isinstance(value, (Ref, weakref.ReferenceType)):
        return Shape.SCALAR_REF
    if isinstance(value, abc.Mapping):
        return Shape.MAPPING
    if isinstance(value, (abc.Sequence, abc.Set)):
        return Shape.SEQUENCE

    # Classes, functions and modules are never user objects, whatever module defines them
    if (
        isinstance(value, type)
        or inspect.isroutine(value)
        or inspect.ismodule(value)
    ):
        return Shape.OPAQUE_REF
    if type(value).__module__ != "builtins":
        return Shape.OPAQUE_HANDLE
    return Shape.OPAQUE_REF


def is_reference(value: Any) -> bool:
    """Check if a value is a reference, i.e. anything but None, a number or text."""
    return classify(value) not in SCALAR_SHAPES


def deref(ref: Any) -> Any:
    """Return the value a SCALAR_REF points to; a dead weak reference yields None."""
    if isinstance(ref, weakref.ReferenceType):
        return ref()
    return ref.value
