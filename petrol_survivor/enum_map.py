"""A fixed-size map keyed by the members of an enumeration."""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, Iterable, Iterator, Mapping, Optional, Tuple, TypeVar, Union

K = TypeVar("K", bound=Enum)
V = TypeVar("V")


class EnumMap(Generic[K, V]):
    """Holds exactly one value per member of ``key_type``.

    ``values`` may be a mapping from members to values (missing members take
    ``default``) or a sequence with one value per member in declaration order.
    """

    def __init__(
        self,
        key_type: type,
        values: Optional[Union[Mapping[K, V], Iterable[V]]] = None,
        default: Any = None,
    ) -> None:
        self._keys: Tuple[K, ...] = tuple(key_type)
        self._index = {key: i for i, key in enumerate(self._keys)}
        self._data: list = [default] * len(self._keys)

        if values is None:
            return
        if isinstance(values, Mapping):
            for key, value in values.items():
                self._data[self._slot(key)] = value
        else:
            items = list(values)
            if len(items) != len(self._keys):
                raise ValueError(
                    f"expected {len(self._keys)} values, got {len(items)}"
                )
            self._data = items

    def _slot(self, key: K) -> int:
        try:
            return self._index[key]
        except KeyError:
            raise KeyError(f"Key out of bounds: {key!r}") from None

    def __getitem__(self, key: K) -> V:
        return self._data[self._slot(key)]

    def __setitem__(self, key: K, value: V) -> None:
        self._data[self._slot(key)] = value

    def get_checked(self, key: K) -> V:
        """Value for ``key``; raises KeyError for a key outside the enumeration."""
        return self._data[self._slot(key)]

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[V]:
        """Iterate over the stored values in key order."""
        return iter(self._data)

    def __contains__(self, key: object) -> bool:
        try:
            return key in self._index
        except TypeError:
            return False

    def keys(self) -> Iterator[K]:
        return iter(self._keys)

    def pairs(self) -> Iterator[Tuple[K, V]]:
        return zip(self._keys, self._data)

    def __repr__(self) -> str:
        body = ", ".join(f"{key.name}={value!r}" for key, value in self.pairs())
        return f"EnumMap({body})"


def all_truthy(mapping: Any) -> bool:
    """True when every value held by ``mapping`` is truthy."""
    values = mapping.values() if isinstance(mapping, Mapping) else mapping
    return all(bool(value) for value in values)