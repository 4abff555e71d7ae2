from typing import Generic, TypeVar, NoReturn

T = TypeVar('T')


class Key(Generic[T]):
    """
    An opaque lookup handle for `TokenMap`.

    `T` only exists for the type checker: `Key[int]('AGE')` tells it that the
    value stored under this key is an `int`. Nothing about `T` is kept at
    runtime. Keys compare and hash by identity, so two keys built from the
    same name are still two different keys.

    Copying a key (`copy.copy`, `copy.deepcopy`) returns the key itself,
    since a copy would be a different identity. Keys cannot be pickled.
    """

    __slots__ = ('_name',)
    _name: str

    def __init__(self, name: str):
        object.__setattr__(self, '_name', name)

    @property
    def name(self) -> str:
        return self._name

    def __setattr__(self, attr: str, value: object) -> NoReturn:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, attr: str) -> NoReturn:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __copy__(self) -> 'Key[T]':
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> 'Key[T]':
        return self

    def __reduce__(self) -> NoReturn:
        # an unpickled key could never match the original
        raise TypeError(f"cannot pickle {self.__class__.__name__} objects")

    def __str__(self) -> str:
        return f'Key({self._name})'

    def __repr__(self) -> str:
        return f'Key({self._name}) at {id(self):#x}'
