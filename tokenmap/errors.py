from typing import Any, TYPE_CHECKING

from tokenmap.key import Key

if TYPE_CHECKING:
    from tokenmap.map import TokenMap


class TokenMapError(Exception):
    """
    Base class for failures raised by a `TokenMap` when the caller asked for
    the "throw" policy.
    """
    pass


class NotFound(TokenMapError, LookupError):
    """
    `get` or `delete` was told to throw and the key has no entry.
    """

    def __init__(self, map: 'TokenMap', key: Key[Any]):
        super().__init__(map, key)
        self.map = map
        self.key = key

    def __str__(self) -> str:
        return f'Looking up "{self.key}" yielded no results.'


class ConflictOnSet(TokenMapError, ValueError):
    """
    `set` was told to throw and the key already has an entry.

    The existing value is read back from the map when the message is built,
    so the message reflects the map as it is at that time.
    """

    def __init__(self, map: 'TokenMap', key: Key[Any], value: Any):
        super().__init__(map, key, value)
        self.map = map
        self.key = key
        self.value = value

    def __str__(self) -> str:
        existing = self.map._entries.get(self.key)
        return (f'Conflict while trying to set {self.key} to "{self.value}"; '
                f'already set to "{existing}".')
