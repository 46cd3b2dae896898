"""JoinResult: lazy, single-pass iterator over the records of a join.

Records are computed one at a time as the consumer pulls them. A result built
by join() also carries a thunk producing the complementary (discarded)
records; the thunk only runs when discarded() is called.
"""

from typing import Any, Callable, Iterator, List, Optional

from .errors import MissingComplementError


class JoinResult:
    """Lazy iterator over joined records.

    Example:
        >>> result = inner_join(users, orders, pack)
        >>> for key, user, order in result:
        ...     process(user, order)

        >>> # Records the join left out, computed on demand
        >>> missing = result.discarded().to_list()
    """

    def __init__(
        self,
        records: Iterator[Any],
        complement: Optional[Callable[[], Iterator[Any]]] = None,
    ):
        """Initialize JoinResult with a record generator.

        Args:
            records: Generator yielding the joined records
            complement: Zero-argument callable returning a fresh generator of
                the discarded records, or None
        """
        self._records = records
        self._complement = complement
        self._exhausted = False

    def __iter__(self) -> "JoinResult":
        """Return self as iterator."""
        return self

    def __next__(self) -> Any:
        """Fetch the next record.

        Raises:
            StopIteration: When the join is exhausted
        """
        try:
            return next(self._records)
        except StopIteration:
            self._exhausted = True
            raise

    def __repr__(self) -> str:
        state = "exhausted" if self._exhausted else "pending"
        return f"JoinResult({state}, has_complement={self.has_complement})"

    @property
    def exhausted(self) -> bool:
        """Check if every record has been consumed."""
        return self._exhausted

    @property
    def has_complement(self) -> bool:
        """Check if discarded records can be derived from this result."""
        return self._complement is not None

    def discarded(self) -> "JoinResult":
        """Return the records this join left out.

        Each call runs the join again with the negated select function; the
        records are resolved to whichever side is defined, left first.

        Returns:
            JoinResult without a complement of its own

        Raises:
            MissingComplementError: If this result carries no complement
        """
        if self._complement is None:
            raise MissingComplementError("Expected a joined iterable")
        return JoinResult(self._complement())

    def to_list(self) -> List[Any]:
        """Collect all remaining records into a list.

        Warning: This consumes the result.
        """
        return list(self)

    def count(self) -> int:
        """Count all remaining records by iterating through them.

        Warning: This consumes the result.

        Returns:
            int: Number of records
        """
        total = 0
        for _ in self:
            total += 1
        return total

    def to_pandas(self, columns: Optional[List[str]] = None):
        """Materialize all remaining records into a pandas DataFrame.

        Dict records become named columns. Tuple or list records are laid out
        positionally and named by ``columns``. Scalar records are placed in a
        single column, named ``value`` unless ``columns`` gives one name.

        Warning: This consumes the result and loads it into memory.

        Args:
            columns: Optional column names

        Returns:
            pandas.DataFrame

        Raises:
            ValueError: If scalar and structured records are mixed, or
                ``columns`` names more than one column for scalar records
        """
        import pandas as pd

        records = list(self)
        if not records:
            # Return empty DataFrame with the requested columns
            return pd.DataFrame(columns=columns or [])

        structured = [isinstance(record, (dict, tuple, list)) for record in records]
        if any(structured) and not all(structured):
            raise ValueError(
                "to_pandas() records must be all scalars or all dicts, tuples or lists"
            )

        if not structured[0]:
            if columns and len(columns) > 1:
                raise ValueError(
                    f"to_pandas() scalar records fill one column, got {len(columns)} names"
                )
            name = columns[0] if columns else "value"
            return pd.DataFrame({name: records})

        return pd.DataFrame(records, columns=columns)

    def to_arrow(self, columns: Optional[List[str]] = None):
        """Materialize all remaining records into a PyArrow Table.

        Records are laid out as in to_pandas().

        Warning: This consumes the result and loads it into memory.

        Returns:
            pyarrow.Table
        """
        import pyarrow as pa

        df = self.to_pandas(columns)
        if df.empty:
            # Return empty table
            return pa.table({str(col): [] for col in df.columns})

        return pa.Table.from_pandas(df, preserve_index=False)
