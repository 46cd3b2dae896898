"""Two-pass iteration over a pair of mappings."""

from typing import Any, Callable, Iterator, Mapping

from .predicates import MISSING, SelectFn


def iterate(
    left: Mapping,
    right: Mapping,
    select: SelectFn,
    resolve: Callable[[Any, Any, Any], Any],
) -> Iterator[Any]:
    """
    Lazily yield ``resolve(left_value, right_value, key)`` for selected keys.

    Keys of ``left`` are visited first, in its iteration order, with the right
    value looked up by key. Keys of ``right`` not in ``left`` follow, in their
    own order. Every key of either mapping is classified exactly once.

    The side of a key absent from its mapping reaches both ``select`` and
    ``resolve`` as MISSING; a stored None is passed through as a value.

    Args:
        left: Left mapping
        right: Right mapping
        select: Predicate deciding whether a key is emitted
        resolve: Function building the emitted record

    Yields:
        Resolved records
    """
    for key, left_value in left.items():
        right_value = right.get(key, MISSING)
        if select(left_value, right_value, key):
            yield resolve(left_value, right_value, key)

    for key, right_value in right.items():
        if key not in left and select(MISSING, right_value, key):
            yield resolve(MISSING, right_value, key)
