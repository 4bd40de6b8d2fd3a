"""
Configuration for partial dumps.

DumpOptions holds the limits that keep a dump short (length, elements per
container, recursion depth), the behavior flags, and the per-shape formatter
registry that replaces method overriding as the customization point.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, field, replace as dataclasses_replace
from typing import Any, Callable, Dict

# Local ----------------------------------------------------------------------------------------------------------------
from . import formatters as fmt
from .shapes import Shape

Formatter = Callable[[Any, int, Any], str]


# Classes --------------------------------------------------------------------------------------------------------------


@dataclass
class DumpOptions:
    """
    Limits, flags and formatters used by PartialDump.

    Limits:
        max_length: Maximum length of the final dump string. Longer output is cut
                    and ends with "...". None means unbounded (default).
        max_elements: Maximum elements per sequence, or pairs per mapping, at any
                      single level. None means unbounded. Default: 6.
        max_depth: Maximum container nesting that gets expanded. Deeper containers
                   render as identity strings. Default: 2.

    Flags:
        stringify: Let user objects render via their own __str__ instead of an
                   identity string. Off by default since __str__ may have side effects.
        pairs: Detect key/value argument lists at the top level and render them
               as "key => value". Default: True.
        numeric_strings: Render number-like strings unquoted, as numbers.
        escape_quotes: Backslash-escape '"' and '\\' inside quoted strings. Default: True.

    Hooks:
        format_key: Callable (dumper, depth, key) -> str for pair keys; None keeps
                    str keys as-is and formats any other key as a value.
        quote: Callable (text) -> str wrapping already escaped text; None uses double quotes.
        formatters: Shape -> Callable (dumper, depth, value) -> str. Edit it with
                    add_formatter() and remove_formatter().

    Presets:
        compact(): Tight limits for one-line log messages.
        debug(): Deeper and wider, with user objects stringified.
        logging(): Defaults with a length cap.

    Examples:
        >>> opts = DumpOptions(max_elements=2)
        >>> opts.has_max_length
        False
        >>> opts.merge(max_length=40).max_length
        40

        >>> opts = DumpOptions().add_formatter(Shape.ABSENT, lambda d, depth, v: "None")
    """
    max_length: int | None = None
    max_elements: int | None = 6
    max_depth: int = 2

    stringify: bool = False
    pairs: bool = True
    numeric_strings: bool = False
    escape_quotes: bool = True

    format_key: Formatter | None = None
    quote: Callable[[str], str] | None = None

    formatters: Dict[Shape, Formatter] = field(
        default_factory=lambda: DumpOptions.default_formatters()
    )

    # Static Methods -----------------------------------

    @staticmethod
    def default_formatters() -> Dict[Shape, Formatter]:
        """
        Get the built-in formatter for every shape.

        Returns:
            Dictionary mapping each Shape to its default formatter function
        """
        return {
            Shape.ABSENT: fmt.format_undef,
            Shape.NUMBER: fmt.format_number,
            Shape.STRING: fmt.format_string,
            Shape.SCALAR_REF: fmt.format_scalar_ref,
            Shape.SEQUENCE: fmt.format_sequence,
            Shape.MAPPING: fmt.format_mapping,
            Shape.OPAQUE_HANDLE: fmt.format_object,
            Shape.OPAQUE_REF: fmt.format_opaque_ref,
        }

    # Class Methods ------------------------------------

    @classmethod
    def compact(cls) -> "DumpOptions":
        """Short single-line output: few elements, one level, 80 chars."""
        return cls(max_length=80, max_elements=3, max_depth=1)

    @classmethod
    def debug(cls) -> "DumpOptions":
        """Generous limits and stringified user objects for interactive debugging."""
        return cls(max_elements=20, max_depth=4, stringify=True)

    @classmethod
    def logging(cls) -> "DumpOptions":
        """Default limits plus a length cap suitable for log records."""
        return cls(max_length=256)

    # Methods and Properties ---------------------------

    @property
    def has_max_length(self) -> bool:
        return self.max_length is not None

    @property
    def has_max_elements(self) -> bool:
        return self.max_elements is not None

    def clear_max_length(self) -> "DumpOptions":
        """Remove the length limit. Returns self, to allow chaining."""
        self.max_length = None
        return self

    def clear_max_elements(self) -> "DumpOptions":
        """Remove the per-container element limit. Returns self, to allow chaining."""
        self.max_elements = None
        return self

    def merge(self, **kwargs) -> "DumpOptions":
        """
        Return a copy with the given fields replaced.

        The formatter registry is copied too, so editing the result never
        affects this instance.

        Raises:
            TypeError: If a keyword does not name a DumpOptions field.
        """
        merged = dataclasses_replace(self, **kwargs)
        if "formatters" not in kwargs:
            merged.formatters = dict(self.formatters)
        return merged

    def add_formatter(self, shape: Shape, formatter: Formatter) -> "DumpOptions":
        """
        Register or override the formatter for a shape.

        Args:
            shape: The Shape to format.
            formatter: A callable receiving (dumper, depth, value) and returning str.

        Returns:
            Self, to allow chaining.

        Raises:
            TypeError: If shape is not a Shape or formatter is not callable.
        """
        if not isinstance(shape, Shape):
            raise TypeError(f"shape must be a Shape, got {type(shape).__name__}")
        if not callable(formatter):
            raise TypeError(f"formatter must be callable, got {type(formatter).__name__}")
        self.formatters[shape] = formatter
        return self

    def remove_formatter(self, shape: Shape) -> "DumpOptions":
        """
        Restore the built-in formatter for a shape.

        Returns:
            Self, to allow chaining.

        Raises:
            TypeError: If shape is not a Shape.
        """
        if not isinstance(shape, Shape):
            raise TypeError(f"shape must be a Shape, got {type(shape).__name__}")
        self.formatters[shape] = self.default_formatters()[shape]
        return self

    def get_formatter(self, shape: Shape) -> Formatter:
        """Formatter registered for shape, falling back to the built-in one."""
        formatter = self.formatters.get(shape)
        if formatter is None:
            return self.default_formatters()[shape]
        return formatter
