"""An integer-keyed map that can be cleared in constant time."""

from __future__ import annotations

DEFAULT_SIZE = 401 * 401


class FastVersionedMap:
    """Map over the keys ``0 .. size-1`` whose ``reset`` costs O(1).

    Each key remembers the version in which it was last written. The map
    holds a key only while that version equals the current one, so
    ``reset`` just moves to a new version.
    """

    __slots__ = ("_version", "_key_version", "_values")

    def __init__(self, size=DEFAULT_SIZE):
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._version = 1
        self._key_version = [0] * size
        self._values = [0] * size

    @property
    def size(self):
        """Number of keys the map can hold."""
        return len(self._values)

    def _check(self, key):
        if not 0 <= key < len(self._values):
            raise IndexError(f"key {key} outside range [0, {len(self._values)})")

    def reset(self):
        """Forget every key at once."""
        self._version += 1

    def __getitem__(self, key):
        self._check(key)
        if self._key_version[key] != self._version:
            raise KeyError(key)
        return self._values[key]

    def __setitem__(self, key, value):
        self._check(key)
        self._key_version[key] = self._version
        self._values[key] = value

    def __contains__(self, key):
        if not isinstance(key, int) or not 0 <= key < len(self._values):
            return False
        return self._key_version[key] == self._version

    def remove(self, key):
        """Drop ``key``; removing an absent key does nothing."""
        self._check(key)
        self._key_version[key] = 0