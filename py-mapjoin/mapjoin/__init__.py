# mapjoin: SQL-style joins over two in-memory mappings, evaluated lazily.

from .errors import (
    DuplicateKeyError,
    InvalidJoinTypeError,
    MapJoinError,
    MissingComplementError,
)
from .joins import (
    full_join,
    get_discarded_values,
    inner_join,
    join,
    left_join,
    left_outer_join,
    outer_join,
    right_join,
    right_outer_join,
)
from .mapping import from_iterable
from .predicates import (
    JOIN_TYPE_PREDICATES,
    MISSING,
    JoinType,
    full_select,
    inner_select,
    left_outer_select,
    left_select,
    negate,
    never_select,
    not_,
    outer_select,
    right_outer_select,
    right_select,
)
from .resolvers import as_dict, pack, pick_one
from .result import JoinResult
from .selectors import CustomPredicate, NamedType, as_selector

__all__ = [
    "join",
    "left_join",
    "right_join",
    "inner_join",
    "outer_join",
    "full_join",
    "left_outer_join",
    "right_outer_join",
    "get_discarded_values",
    "negate",
    "not_",
    "from_iterable",
    "JoinType",
    "JoinResult",
    "NamedType",
    "CustomPredicate",
    "as_selector",
    "JOIN_TYPE_PREDICATES",
    "MISSING",
    "left_select",
    "right_select",
    "inner_select",
    "outer_select",
    "full_select",
    "left_outer_select",
    "right_outer_select",
    "never_select",
    "pick_one",
    "pack",
    "as_dict",
    "MapJoinError",
    "InvalidJoinTypeError",
    "MissingComplementError",
    "DuplicateKeyError",
]
