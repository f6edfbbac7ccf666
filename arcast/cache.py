"""A lazily filled, single-value cache."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

V = TypeVar("V")


class Cache(Generic[V]):
    """Holds one value, produced by the first generator it is given."""

    __slots__ = ("_filled", "_value")

    def __init__(self) -> None:
        self._filled = False
        self._value: V | None = None

    def get(self, generator: Callable[[], V]) -> V:
        """Return the cached value, calling ``generator`` only if none is stored yet."""
        if not self._filled:
            self._value = generator()
            self._filled = True
        return self._value  # type: ignore[return-value]

    def __repr__(self) -> str:
        state = repr(self._value) if self._filled else "empty"
        return f"Cache({state})"