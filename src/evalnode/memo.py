"""
Compute-once memoization cells.

A node keeps one cell per derived attribute. A cell has three states:
not yet computed, computed as absent (None), and computed with a value.
Once populated a cell is never invalidated.
"""

import logging
from typing import Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')

_UNSET = object()  # Distinguishes "cached None" from "not cached"
_COMPUTING = object()


class MemoCell(Generic[T]):
    """
    Single value cache without invalidation.

    Example:
        cell = MemoCell('prompt')
        value = cell.get_or_compute(lambda: expensive_computation())
        cell.get_or_compute(lambda: other())  # returns the first value
    """

    __slots__ = ('_name', '_value')

    def __init__(self, name: str = ''):
        """
        Args:
            name: Label used in log and error messages
        """
        self._name = name
        self._value = _UNSET

    @property
    def is_set(self) -> bool:
        """True once a value (including None) has been stored."""
        return self._value is not _UNSET and self._value is not _COMPUTING

    def get_or_compute(self, compute_fn: Callable[[], T]) -> T:
        """
        Return the cached value, computing and storing it on first access.

        If compute_fn raises, the cell stays unset.

        Raises:
            RuntimeError: compute_fn re-entered this cell
        """
        if self._value is _COMPUTING:
            raise RuntimeError(f"Re-entrant evaluation of '{self._name}'")
        if self._value is not _UNSET:
            return self._value

        self._value = _COMPUTING
        try:
            value = compute_fn()
        except BaseException:
            self._value = _UNSET
            raise
        self._value = value
        logger.debug(f"Memoized {self._name} = {value!r}")
        return value

    def peek(self) -> Optional[T]:
        """Return the cached value without computing, or None if not computed."""
        return self._value if self.is_set else None

    def __repr__(self) -> str:
        state = repr(self._value) if self.is_set else '<unset>'
        return f"MemoCell({self._name}={state})"
