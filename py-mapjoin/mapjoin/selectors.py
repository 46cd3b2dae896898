"""Selector: the select argument of join(), resolved once at the call boundary.

join() accepts either a join type tag or a select function. Both are wrapped
in one of two variants so the rest of the pipeline only deals with a
predicate:

- NamedType(join_type): a JoinType, negated through the inverse table
- CustomPredicate(fn): a caller predicate, negated by wrapping it with NOT
"""

from dataclasses import dataclass
from typing import Any, Union

from .predicates import (
    JOIN_TYPE_PREDICATES,
    JoinType,
    SelectFn,
    negate,
    parse_join_type,
)


@dataclass(frozen=True)
class NamedType:
    """Selector backed by one of the seven join types."""

    join_type: JoinType

    @property
    def predicate(self) -> SelectFn:
        return JOIN_TYPE_PREDICATES[self.join_type]

    def negate(self) -> "Selector":
        inverse = negate(self.join_type)
        if isinstance(inverse, JoinType):
            return NamedType(inverse)
        return CustomPredicate(inverse)


@dataclass(frozen=True)
class CustomPredicate:
    """Selector backed by a caller-supplied select function."""

    fn: SelectFn

    @property
    def predicate(self) -> SelectFn:
        return self.fn

    def negate(self) -> "Selector":
        return CustomPredicate(negate(self.fn))


Selector = Union[NamedType, CustomPredicate]


def as_selector(select_or_type: Any) -> Selector:
    """
    Wrap a join type tag or select function into a Selector.

    Args:
        select_or_type: Selector, select function, JoinType or string tag

    Returns:
        NamedType or CustomPredicate

    Raises:
        InvalidJoinTypeError: If a tag is given and it is not recognized
    """
    if isinstance(select_or_type, (NamedType, CustomPredicate)):
        return select_or_type
    if callable(select_or_type):
        return CustomPredicate(select_or_type)
    return NamedType(parse_join_type(select_or_type))
