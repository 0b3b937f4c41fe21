"""
callback arity adaptation.

every index-aware operation hands its callback ``(element, index)``. python
callables are strict about arity, so a one-argument lambda such as
``lambda x: x % 2 == 0`` would fail when given the index too. the helpers here
inspect the callback once and return a function that always accepts
``(element, index)`` and forwards only what the callback can take.
"""
import inspect
from .types import *

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def positional_arity(fn: Callable) -> Optional[int]:
    """number of positional arguments fn accepts, None when unbounded"""
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        # builtins without introspectable signatures (bool, some c functions)
        return 1

    count = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in _POSITIONAL:
            count += 1
    return count


def indexed(fn: Callable[..., U]) -> Callable[[Any, int], U]:
    """wrap fn so it can always be called as fn(element, index)"""
    arity = positional_arity(fn)
    if arity is None or arity >= 2:
        return fn
    if arity == 1:
        return lambda item, index: fn(item)
    return lambda item, index: fn()
