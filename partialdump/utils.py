"""
partialdump utilities shared across the package.

Contains functions used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import inspect
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(
    obj: Any,
    fully_qualified: bool = False,
    fully_qualified_builtins: bool = False,
) -> str:
    """
    Get the class name of an object or a class.

    Returns class name whether given an instance or the class itself.
    For example, both `class_name(10)` and `class_name(int)` return 'int'.

    Parameters:
        obj (Any): An object or a class.
        fully_qualified (bool): If true, returns the fully qualified name for user objects or classes.
        fully_qualified_builtins (bool): If true, returns the fully qualified name for builtin objects or classes.

    Returns:
        str: The class name.

    Examples:
        >>> class_name(10)
        'int'
        >>> class_name(10, fully_qualified_builtins=True)
        'builtins.int'
        >>> class C: ...
        >>> class_name(C(), fully_qualified=True)
        '__main__.C'
    """
    cls = obj if isinstance(obj, type) else obj.__class__
    qualify = fully_qualified_builtins if cls.__module__ == "builtins" else fully_qualified
    if qualify:
        return cls.__module__ + "." + cls.__name__
    return cls.__name__


def identity_repr(obj: Any) -> str:
    """
    Identity-only representation of an object, e.g. '<app.models.User object at 0x7f3a...>'.

    Never calls the object's own __str__ or __repr__, so it is safe for objects
    with expensive, side-effecting or broken textual representations. Stable for
    the lifetime of the object. Class objects read '<class app.models.User at 0x7f3a...>'.
    """
    if isinstance(obj, type):
        return f"<class {class_name(obj, fully_qualified=True)} at {id(obj):#x}>"
    return f"<{class_name(type(obj), fully_qualified=True)} object at {id(obj):#x}>"


def qualified_name(obj: Any) -> str:
    """
    Dotted name of a class, function or module, read from its attributes only.

    Builtins are not module-qualified. Never calls __repr__, including a
    metaclass __repr__.

    Examples:
        >>> qualified_name(len)
        'len'
        >>> qualified_name(collections.OrderedDict)
        'collections.OrderedDict'
    """
    if inspect.ismodule(obj):
        return obj.__name__
    module = getattr(obj, "__module__", None)
    name = getattr(obj, "__qualname__", None) or getattr(obj, "__name__", None) or "?"
    if module and module != "builtins":
        return f"{module}.{name}"
    return name
