from typing import Literal, Tuple, TypeAlias, get_args

OnMiss: TypeAlias = Literal['null', 'throw']
OnDeleteMiss: TypeAlias = Literal['ignore', 'throw']
OnConflict: TypeAlias = Literal['overwrite', 'ignore', 'throw']

ON_MISS: Tuple[str, ...] = get_args(OnMiss)
ON_DELETE_MISS: Tuple[str, ...] = get_args(OnDeleteMiss)
ON_CONFLICT: Tuple[str, ...] = get_args(OnConflict)


def check_policy(option: str, value: str, allowed: Tuple[str, ...]) -> str:
    if value not in allowed:
        choices = ', '.join(repr(a) for a in allowed)
        raise ValueError(f"Invalid {option} policy {value!r}; expected one of {choices}")
    return value
