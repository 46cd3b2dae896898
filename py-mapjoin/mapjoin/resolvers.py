"""Stock resolve functions for join()."""

from typing import Any, Callable, Dict, Tuple

from .predicates import MISSING

ResolveFn = Callable[[Any, Any, Any], Any]


def absent_as_none(resolve: ResolveFn) -> ResolveFn:
    """Wrap ``resolve`` so an absent side reaches it as None instead of MISSING."""

    def resolved(left, right, key):
        return resolve(
            None if left is MISSING else left,
            None if right is MISSING else right,
            key,
        )

    return resolved


def pick_present(left: Any, right: Any, key: Any = None) -> Any:
    # sees MISSING, so a stored None on the left still wins
    return right if left is MISSING else left


def pick_one(left: Any, right: Any, key: Any = None) -> Any:
    """Return the left value, or the right value when the left one is None."""
    return right if left is None else left


def pack(left: Any, right: Any, key: Any) -> Tuple[Any, Any, Any]:
    """Return ``(key, left, right)``."""
    return (key, left, right)


def as_dict(left: Any, right: Any, key: Any) -> Dict[str, Any]:
    """Return ``{"key": key, "left": left, "right": right}``, one row per key."""
    return {"key": key, "left": left, "right": right}
