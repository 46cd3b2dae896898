"""Build mappings from arbitrary iterables."""

import warnings
from typing import Any, Callable, Dict, Iterable, Optional

from .errors import DuplicateKeyError

COLLISION_POLICIES = ("ignore", "override")


def from_iterable(
    iterable: Iterable[Any],
    get_key: Callable[[Any, int], Any],
    collision: Optional[str] = None,
) -> Dict[Any, Any]:
    """
    Index the elements of an iterable by key.

    Args:
        iterable: Elements to index, in order
        get_key: Function ``(element, index) -> key``; index counts from 0
        collision: What to do when a key repeats:
            - None: raise DuplicateKeyError
            - "ignore": keep the first element seen for the key
            - "override": keep the last element seen for the key

    Returns:
        Dict in first-insertion order of its keys

    Raises:
        DuplicateKeyError: If a key repeats and no collision policy is set

    Example:
        >>> from_iterable([{"id": 1}, {"id": 2}], lambda row, i: row["id"])
        {1: {'id': 1}, 2: {'id': 2}}
    """
    if collision is not None and collision not in COLLISION_POLICIES:
        warnings.warn(
            f"Unknown collision policy {collision!r}, expected one of "
            f"{list(COLLISION_POLICIES)}. Duplicate keys will raise.",
            UserWarning,
            stacklevel=2,
        )
        collision = None

    result: Dict[Any, Any] = {}
    for index, value in enumerate(iterable):
        key = get_key(value, index)
        if key not in result or collision == "override":
            result[key] = value
        elif collision != "ignore":
            raise DuplicateKeyError(key)

    return result
