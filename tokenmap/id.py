from typing import Any, Generic, TypeVar, Tuple, Dict

V = TypeVar('V')


class IdDict(Generic[V]):
    """
    A dictionary-like store that uses `id(key_object)` as the lookup key,
    holding on to the original key object so its id cannot be reused
    while the entry is alive.

    Keys never need to be hashable and their `__eq__` is never consulted.
    It does not support iteration.
    """

    __slots__ = ('_storage',)

    def __init__(self) -> None:
        self._storage: Dict[int, Tuple[Any, V]] = {}

    def __getitem__(self, key: Any) -> V:
        # We stored (original_key, value) in _storage
        return self._storage[id(key)][1]

    def __setitem__(self, key: Any, value: V) -> None:
        self._storage[id(key)] = (key, value)

    def __delitem__(self, key: Any) -> None:
        del self._storage[id(key)]

    def __contains__(self, key: Any) -> bool:
        return id(key) in self._storage

    def __len__(self) -> int:
        return len(self._storage)

    def get(self, key: Any, default: V | None = None) -> V | None:
        return self._storage.get(id(key), (None, default))[1]

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({len(self)} entries)'
