"""Membership predicates for each join type, and join type negation.

A predicate receives ``(left_value, right_value, key)`` and decides whether the
key is emitted. The side of a key that is absent from its mapping is passed as
``MISSING``; every other value, ``None`` included, counts as defined.
"""

from enum import Enum
from typing import Any, Callable, Dict, Union

from .errors import InvalidJoinTypeError

SelectFn = Callable[[Any, Any, Any], bool]


class _MissingType:
    """Type of MISSING, the placeholder for a key absent from one mapping."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _MissingType()


class JoinType(str, Enum):
    """
    Symbolic join types.

    - ``left``: keep every key of the left mapping.
    - ``right``: keep every key of the right mapping.
    - ``inner``: keep keys present in both mappings.
    - ``outer``: keep keys present in just one mapping.
    - ``full``: keep every key of both mappings.
    - ``leftOuter``: keep keys present only in the left mapping.
    - ``rightOuter``: keep keys present only in the right mapping.
    """

    LEFT = "left"
    RIGHT = "right"
    INNER = "inner"
    OUTER = "outer"
    FULL = "full"
    LEFT_OUTER = "leftOuter"
    RIGHT_OUTER = "rightOuter"

    def __str__(self) -> str:
        return self.value


SelectFnOrJoinType = Union[SelectFn, JoinType, str]


def left_select(left: Any, right: Any, key: Any = None) -> bool:
    return left is not MISSING


def right_select(left: Any, right: Any, key: Any = None) -> bool:
    return right is not MISSING


def inner_select(left: Any, right: Any, key: Any = None) -> bool:
    return left is not MISSING and right is not MISSING


def outer_select(left: Any, right: Any, key: Any = None) -> bool:
    return not (left is not MISSING and right is not MISSING)


def full_select(left: Any, right: Any, key: Any = None) -> bool:
    return left is not MISSING or right is not MISSING


def left_outer_select(left: Any, right: Any, key: Any = None) -> bool:
    return left is not MISSING and right is MISSING


def right_outer_select(left: Any, right: Any, key: Any = None) -> bool:
    return right is not MISSING and left is MISSING


def never_select(left: Any, right: Any, key: Any = None) -> bool:
    """Select nothing. Inverse of ``full`` over keys present on either side."""
    return False


JOIN_TYPE_PREDICATES: Dict[JoinType, SelectFn] = {
    JoinType.LEFT: left_select,
    JoinType.RIGHT: right_select,
    JoinType.INNER: inner_select,
    JoinType.OUTER: outer_select,
    JoinType.FULL: full_select,
    JoinType.LEFT_OUTER: left_outer_select,
    JoinType.RIGHT_OUTER: right_outer_select,
}

# full has no symbolic inverse: "neither side present" never occurs
_INVERSE_JOIN_TYPES: Dict[JoinType, Union[JoinType, SelectFn]] = {
    JoinType.LEFT: JoinType.RIGHT_OUTER,
    JoinType.RIGHT: JoinType.LEFT_OUTER,
    JoinType.INNER: JoinType.OUTER,
    JoinType.OUTER: JoinType.INNER,
    JoinType.FULL: never_select,
    JoinType.LEFT_OUTER: JoinType.RIGHT,
    JoinType.RIGHT_OUTER: JoinType.LEFT,
}


def parse_join_type(join_type: Any) -> JoinType:
    """
    Normalize a join type tag.

    Args:
        join_type: A JoinType member or its string tag, e.g. "leftOuter"

    Returns:
        The matching JoinType member

    Raises:
        InvalidJoinTypeError: If the tag is not recognized
    """
    if isinstance(join_type, JoinType):
        return join_type
    if isinstance(join_type, str):
        try:
            return JoinType(join_type)
        except ValueError:
            pass
    valid = [jt.value for jt in JoinType]
    raise InvalidJoinTypeError(
        f"Invalid join type {join_type!r}. Must be one of: {valid}"
    )


def get_select_fn(join_type: Any) -> SelectFn:
    """Return the membership predicate for a join type tag."""
    return JOIN_TYPE_PREDICATES[parse_join_type(join_type)]


def negate(select_or_type: SelectFnOrJoinType) -> SelectFnOrJoinType:
    """
    Negate a join type or select function.

    A select function is wrapped with a logical NOT. A join type is mapped to
    the join type selecting the keys it leaves out, so that ``negate("inner")``
    is ``"outer"`` rather than a wrapped predicate. ``full`` maps to a predicate
    that never selects.

    Args:
        select_or_type: A select function, JoinType member or string tag

    Returns:
        A select function or a JoinType member

    Raises:
        InvalidJoinTypeError: If a tag is given and it is not recognized

    Example:
        >>> negate("left")
        <JoinType.RIGHT_OUTER: 'rightOuter'>
    """
    if callable(select_or_type):
        select = select_or_type

        def negated(left, right, key=None):
            return not select(left, right, key)

        return negated

    return _INVERSE_JOIN_TYPES[parse_join_type(select_or_type)]


not_ = negate
