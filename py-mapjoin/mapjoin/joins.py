"""Join operations for mappings: join, the per-type wrappers, and discarded values."""

from collections.abc import Mapping
from typing import Any, Iterable

from .engine import iterate
from .errors import MissingComplementError
from .predicates import JoinType, SelectFnOrJoinType
from .resolvers import ResolveFn, absent_as_none, pick_present
from .result import JoinResult
from .selectors import as_selector


def _validate_join_inputs(left, right) -> None:
    """Validate the mappings passed to join()."""
    if not isinstance(left, Mapping):
        raise TypeError(
            f"join() left argument must be a Mapping, got {type(left).__name__}"
        )
    if not isinstance(right, Mapping):
        raise TypeError(
            f"join() right argument must be a Mapping, got {type(right).__name__}"
        )


def join(
    left: Mapping,
    right: Mapping,
    select_or_type: SelectFnOrJoinType,
    resolve: ResolveFn,
) -> JoinResult:
    """
    Join two mappings on their keys.

    Args:
        left: Left mapping
        right: Right mapping
        select_or_type: Join type ("left", "right", "inner", "outer", "full",
            "leftOuter", "rightOuter"), a JoinType, or a select function
            ``(left_value, right_value, key) -> bool`` that receives MISSING
            for the side of a key absent from its mapping
        resolve: Function ``(left_value, right_value, key) -> record``. The
            absent side of a key is passed as None; a stored None is passed
            as is.

    Returns:
        Lazy JoinResult. Its discarded() records come from the same mappings
        joined with the negated select function.

    Raises:
        TypeError: If left or right is not a Mapping, or resolve is not callable
        InvalidJoinTypeError: If the join type tag is not recognized

    Example:
        >>> users = {1: "Alice", 2: "Bob"}
        >>> orders = {2: "book", 3: "pen"}
        >>> list(join(users, orders, "inner", lambda u, o, k: (k, u, o)))
        [(2, 'Bob', 'book')]
    """
    _validate_join_inputs(left, right)

    selector = as_selector(select_or_type)

    if not callable(resolve):
        raise TypeError(
            f"join() resolve argument must be callable, got {type(resolve).__name__}"
        )

    def complement():
        return iterate(left, right, selector.negate().predicate, pick_present)

    return JoinResult(
        iterate(left, right, selector.predicate, absent_as_none(resolve)),
        complement=complement,
    )


def get_discarded_values(joined: Iterable[Any]) -> JoinResult:
    """
    Retrieve the discarded records of a join result.

    The join is run again with the negated select function every time this is
    called; nothing is cached.

    Args:
        joined: A JoinResult returned by join() or one of its wrappers

    Returns:
        Lazy JoinResult over the left-out values

    Raises:
        MissingComplementError: If ``joined`` was not produced by join()
    """
    if not isinstance(joined, JoinResult) or not joined.has_complement:
        raise MissingComplementError(
            f"Expected joined iterable, got {type(joined).__name__}"
        )
    return joined.discarded()


def left_join(left: Mapping, right: Mapping, resolve: ResolveFn) -> JoinResult:
    """Keep every key of the left mapping."""
    return join(left, right, JoinType.LEFT, resolve)


def right_join(left: Mapping, right: Mapping, resolve: ResolveFn) -> JoinResult:
    """Keep every key of the right mapping."""
    return join(left, right, JoinType.RIGHT, resolve)


def inner_join(left: Mapping, right: Mapping, resolve: ResolveFn) -> JoinResult:
    """Keep keys present in both mappings."""
    return join(left, right, JoinType.INNER, resolve)


def outer_join(left: Mapping, right: Mapping, resolve: ResolveFn) -> JoinResult:
    """Keep keys present in just one of the mappings."""
    return join(left, right, JoinType.OUTER, resolve)


def full_join(left: Mapping, right: Mapping, resolve: ResolveFn) -> JoinResult:
    """Keep every key of both mappings."""
    return join(left, right, JoinType.FULL, resolve)


def left_outer_join(left: Mapping, right: Mapping, resolve: ResolveFn) -> JoinResult:
    """Keep keys present only in the left mapping."""
    return join(left, right, JoinType.LEFT_OUTER, resolve)


def right_outer_join(left: Mapping, right: Mapping, resolve: ResolveFn) -> JoinResult:
    """Keep keys present only in the right mapping."""
    return join(left, right, JoinType.RIGHT_OUTER, resolve)
