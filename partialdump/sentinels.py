"""
Sentinel for distinguishing an omitted argument from an explicit None.

In partialdump, None is a meaningful configuration value ("clear this limit"),
so configure() and friends need a separate marker for "leave unchanged".

Sentinels:
    UNSET: Represents an unprovided optional argument (distinguishes from None)

Example:
    >>> def configure(max_length: int | None | UnsetType = UNSET) -> None:
    ...     if max_length is not UNSET:
    ...         options.max_length = max_length
"""

from typing import Any

__all__ = [
    'UNSET',
    'UnsetType',
]


# Sentinel Types -------------------------------------------------------------------------------------------------------

class UnsetType:
    """
    Sentinel type for UNSET.

    Singleton optimized for identity checks. Falsy, hashes by identity and
    survives pickling as the same instance.
    """
    __slots__ = ()

    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '<UNSET>'

    def __eq__(self, other: Any) -> bool:
        """Ensures identity-based comparison."""
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        """Ensure pickling returns the singleton instance."""
        return (self.__class__, ())


UNSET = UnsetType()
