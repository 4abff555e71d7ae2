import functools
import os
from typing import Callable, ParamSpec, TypeVar

DEBUG_ENABLED = os.environ.get('TOKENMAP_DEBUG', '').strip().lower() in ('1', 'true', 'yes', 'on')
DEBUG_DEPTH = 0

P = ParamSpec('P')
R = TypeVar('R')


# debug decorator; keeps the wrapped signature for type checkers
def debug(func: Callable[P, R]) -> Callable[P, R]:
    if not DEBUG_ENABLED:
        return func

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        global DEBUG_DEPTH
        saved_depth = DEBUG_DEPTH
        prefix = '  ' * DEBUG_DEPTH
        print(f"{prefix}{func.__name__}({', '.join(repr(x) for x in args)}, {kwargs}) {{")
        DEBUG_DEPTH += 1
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            print(f"{prefix}}}raise {e!r}")
            raise
        else:
            print(f"{'  ' * DEBUG_DEPTH}return {result!r}")
            print(f"{prefix}}}")
            return result
        finally:
            DEBUG_DEPTH -= 1
            assert saved_depth == DEBUG_DEPTH

    return wrapper
