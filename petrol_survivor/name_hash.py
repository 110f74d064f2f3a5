"""32-bit FNV-1a hashing and a hashed-name value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

_FNV_OFFSET_BASIS = 0x811C9DC5
_FNV_PRIME = 0x01000193
_MASK32 = 0xFFFFFFFF


def fnv1a(text: Union[str, bytes]) -> int:
    """32-bit FNV-1a hash of ``text`` (strings are hashed as UTF-8)."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    value = _FNV_OFFSET_BASIS
    for byte in data:
        value ^= byte
        value = (value * _FNV_PRIME) & _MASK32
    return value


@dataclass(frozen=True, order=True)
class NameHash:
    """A name reduced to its FNV-1a hash; compares and hashes by that value."""

    hash: int = 0

    @classmethod
    def from_name(cls, name: Union[str, bytes]) -> NameHash:
        return cls(fnv1a(name))

    def __int__(self) -> int:
        return self.hash

    def __hash__(self) -> int:
        return self.hash