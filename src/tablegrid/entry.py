"""A single-cell box that tells "no value" apart from every value.

Emptiness is tracked with a private sentinel object instead of ``None``, so
``None``, ``False``, ``0`` and ``""`` are all legal contained values.
"""

import json
from collections.abc import Callable
from typing import Any

from tablegrid.patterns import EMPTY_ENTRY_JSON, EMPTY_ENTRY_TOKEN

# Never equal to (or identical with) any application value
_EMPTY = object()


class Entry:
    """Wrapper around one contained value, or nothing.

    ``Entry()`` is empty; ``Entry(value)`` holds *value*, even when it is ``None``.

        e = Entry(1)
        e.and_modify(lambda value: value + 1)
        assert e.value == 2
    """

    __slots__ = ("_value",)

    def __init__(self, value: Any = _EMPTY) -> None:
        self._value = value

    def is_empty(self) -> bool:
        """Return True if the entry holds no value."""
        return self._value is _EMPTY

    def is_not_empty(self) -> bool:
        """Return True if the entry holds a value."""
        return self._value is not _EMPTY

    @property
    def value(self) -> Any:
        """The contained value.

        An empty entry reads as ``None`` here, the same as ``Entry(None)``.
        Callers that must tell the two apart should use ``get(default)`` with a
        default of their own, or ``is_empty()``.
        """
        return None if self._value is _EMPTY else self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value = value

    def get(self, default: Any = None) -> Any:
        """Return the contained value, or *default* when the entry is empty."""
        return default if self._value is _EMPTY else self._value

    def clear(self) -> None:
        """Discard the stored value; the entry is empty afterwards."""
        self._value = _EMPTY

    def or_insert(self, value: Any) -> "Entry":
        """Store *value* if the entry is empty, otherwise leave it alone."""
        if self._value is _EMPTY:
            self._value = value
        return self

    def and_modify(self, fn: Callable[[Any], Any]) -> "Entry":
        """Replace the contained value with ``fn(value)``; no-op when empty."""
        if self._value is not _EMPTY:
            self._value = fn(self._value)
        return self

    def copy(self) -> "Entry":
        """Return a new entry in the same state."""
        return Entry(self._value)

    def to_json(self) -> str:
        """JSON text of the contained value, ``"null"`` when empty."""
        if self._value is _EMPTY:
            return EMPTY_ENTRY_JSON
        return json.dumps(self._value)

    def __str__(self) -> str:
        return EMPTY_ENTRY_TOKEN if self._value is _EMPTY else str(self._value)

    def __repr__(self) -> str:
        return EMPTY_ENTRY_TOKEN if self._value is _EMPTY else f"Entry({self._value!r})"
