from typing import Any, Literal, Protocol, Self, TypeVar, overload

from tokenmap.debug import debug
from tokenmap.errors import ConflictOnSet, NotFound
from tokenmap.id import IdDict
from tokenmap.key import Key
from tokenmap.policy import (OnConflict, OnDeleteMiss, OnMiss,
                             ON_CONFLICT, ON_DELETE_MISS, ON_MISS, check_policy)

T = TypeVar('T')


class ReadonlyTokenMap(Protocol):
    """The lookup half of `TokenMap`, for consumers that must not mutate it."""

    def has(self, key: Key[Any]) -> bool: ...

    @overload
    def get(self, key: Key[T], *, on_miss: Literal['null'] = 'null') -> T | None: ...

    @overload
    def get(self, key: Key[T], *, on_miss: Literal['throw']) -> T: ...


class TokenMap:
    """
    A heterogeneous map from `Key[T]` to `T`.

    Entries are found by key identity. Each key holds at most one value,
    and the value type can differ from key to key:

        NAME = Key[str]('NAME')
        AGE = Key[int]('AGE')
        m = TokenMap().set(NAME, 'Rock').set(AGE, 42)
        m.get(AGE)                    # int | None
        m.get(AGE, on_miss='throw')   # int

    The type of a stored value is only checked statically, never at runtime.
    """

    __slots__ = ('_entries',)

    def __init__(self) -> None:
        self._entries: IdDict[Any] = IdDict()

    @debug
    def has(self, key: Key[Any]) -> bool:
        return key in self._entries

    def __contains__(self, key: Key[Any]) -> bool:
        return self.has(key)

    @overload
    def get(self, key: Key[T], *, on_miss: Literal['null'] = 'null') -> T | None: ...

    @overload
    def get(self, key: Key[T], *, on_miss: Literal['throw']) -> T: ...

    @debug
    def get(self, key: Key[T], *, on_miss: OnMiss = 'null') -> T | None:
        check_policy('on_miss', on_miss, ON_MISS)
        if key not in self._entries:
            match on_miss:
                case 'null':
                    return None
                case 'throw':
                    raise NotFound(self, key)
        return self._entries[key]

    @debug
    def set(self, key: Key[T], value: T, *, on_conflict: OnConflict = 'overwrite') -> Self:
        check_policy('on_conflict', on_conflict, ON_CONFLICT)
        if key in self._entries:
            match on_conflict:
                case 'overwrite':
                    pass
                case 'ignore':
                    return self
                case 'throw':
                    raise ConflictOnSet(self, key, value)
        self._entries[key] = value
        return self

    @debug
    def delete(self, key: Key[Any], *, on_miss: OnDeleteMiss = 'ignore') -> None:
        check_policy('on_miss', on_miss, ON_DELETE_MISS)
        if key not in self._entries:
            match on_miss:
                case 'ignore':
                    return
                case 'throw':
                    raise NotFound(self, key)
        del self._entries[key]

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({len(self._entries)} entries)'
