"""
Error taxonomy for bankengine.

Every error raised by the package derives from `BankEngineError` and from
the closest built-in exception, so callers can catch either the specific
bankengine class or the usual Python one (``KeyError``, ``IndexError``, ...).

An UNSAFE verdict of a safety check is *not* an error: commits report it
as a plain ``False``.
"""

from __future__ import annotations

__all__ = [
    "BankEngineError",
    "ConfigurationError",
    "KeyNotFound",
    "IndexOutOfRange",
    "ValueNotFound",
]


class BankEngineError(Exception):
    """Base class for all bankengine errors."""


class ConfigurationError(BankEngineError, ValueError):
    """Invalid construction-time parameter (e.g. a negative interest rate)."""


class KeyNotFound(BankEngineError, KeyError):
    """Lookup, update or removal of a key that is not stored."""

    def __init__(self, key: object) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Key not found: {self.key!r}"


class IndexOutOfRange(BankEngineError, IndexError):
    """Positional access outside ``[0, length)``."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Index {index} out of range for length {length}")
        self.index = index
        self.length = length


class ValueNotFound(BankEngineError, ValueError):
    """Value-based removal found no equal element."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Value not found: {value!r}")
        self.value = value
