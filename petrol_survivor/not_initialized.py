"""Holders that refuse access until they have been given a value."""

from __future__ import annotations

from typing import Any, Callable, Generic, MutableMapping, Optional, TypeVar

T = TypeVar("T")
M = TypeVar("M", bound=MutableMapping)


class NotInitializedError(RuntimeError):
    """Raised when a holder is read before it holds a usable value."""


def _type_label(value_type: Optional[type]) -> str:
    return value_type.__name__ if value_type is not None else "object"


class NotInitialized(Generic[T]):
    """Wraps a value that must be set with ``init`` before it is read."""

    _UNSET: Any = object()

    def __init__(self, name: str = "Unknown", value_type: Optional[type] = None) -> None:
        self.name = name
        self.value_type = value_type
        self._value: Any = self._UNSET

    def init(self, value: T) -> None:
        """Store ``value``, replacing any earlier one."""
        self._value = value

    def ensure_initialized(self) -> T:
        """Return the stored value; raise NotInitializedError if there is none."""
        if self._value is self._UNSET:
            raise NotInitializedError(
                f'Access Violation: The object "{self.name}" of type '
                f'"{_type_label(self.value_type)}" is uninitialized. '
                "Please ensure init() is called before attempting to access it."
            )
        return self._value

    def is_initialized(self) -> bool:
        return self._value is not self._UNSET


def _always_valid(_: Any) -> bool:
    return True


class SettableNotInitialized(Generic[M]):
    """A lazily created mapping that counts as initialized once it validates.

    Storage is created by ``factory`` on the first ``set``. The holder is
    initialized when storage exists and ``validator(storage)`` is true.
    """

    def __init__(
        self,
        name: str = "Unknown",
        factory: Callable[[], M] = dict,  # type: ignore[assignment]
        validator: Callable[[M], bool] = _always_valid,
    ) -> None:
        self.name = name
        self._factory = factory
        self._validator = validator
        self._storage: Optional[M] = None

    def set(self, key: Any, value: Any) -> bool:
        """Assign ``value`` at ``key``; return whether the storage now validates."""
        if self._storage is None:
            self._storage = self._factory()
        self._storage[key] = value
        return bool(self._validator(self._storage))

    def get_unvalidated(self, key: Any) -> Any:
        """Read ``key`` without validation; raise if nothing was ever set."""
        if self._storage is None:
            raise NotInitializedError(
                f'Read Error: Attempted to read from "{self.name}" before it was '
                "allocated. Please call set() at least once to initialize the "
                "underlying storage."
            )
        return self._storage[key]

    def ensure_initialized(self) -> M:
        """Return the storage if it exists and validates; raise otherwise."""
        if not self.is_initialized():
            storage_type = type(self._storage) if self._storage is not None else None
            raise NotInitializedError(
                f'Validation Error: Object "{self.name}" of type '
                f'"{_type_label(storage_type)}" cannot be accessed yet. '
                "It is either currently unallocated or lacks the required data "
                "to pass validation."
            )
        assert self._storage is not None
        return self._storage

    def is_initialized(self) -> bool:
        return self._storage is not None and bool(self._validator(self._storage))

    def clear(self) -> None:
        """Drop the storage, returning to the unallocated state."""
        self._storage = None