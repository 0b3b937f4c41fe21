"""
partial application and composition.

``pipeable`` turns a direct operation ``op(args..., items)`` into its curried
form ``op(args...)(items)``, so operations chain left to right with ``pipe``.
"""
import inspect
from functools import reduce, wraps
from .types import *


def pipeable(func: Callable[..., R], list_param: str = "items") -> Callable[..., Transformer[Any, R]]:
    """
    wrap func so that calling it with every argument except list_param returns a
    unary function awaiting the list.

    the remaining arguments are bound immediately, so a wrong call fails with
    TypeError at partial application rather than inside a pipeline.
    """
    sig = inspect.signature(func)
    if list_param not in sig.parameters:
        raise ValueError(f"{func.__name__} has no parameter named '{list_param}'")
    partial_sig = sig.replace(parameters=[p for p in sig.parameters.values() if p.name != list_param])

    @wraps(func)
    def curried(*args, **kwargs):
        bound = partial_sig.bind(*args, **kwargs)

        def apply(items):
            return func(**{list_param: items}, **bound.arguments)

        apply.__name__ = func.__name__
        apply.__qualname__ = f"{func.__qualname__}.<curried>"
        return apply

    curried.__signature__ = partial_sig
    return curried


def pipeline(*steps: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """compose steps left to right: pipeline(f, g)(x) == g(f(x))"""
    def run(value):
        return reduce(lambda acc, step: step(acc), steps, value)
    return run


def pipe(value: Any, *steps: Callable[[Any], Any]) -> Any:
    """push value through steps left to right and return the result"""
    return pipeline(*steps)(value)


def compose(*steps: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """compose steps right to left: compose(f, g)(x) == f(g(x))"""
    return pipeline(*reversed(steps))
