"""Tests for get_discarded_values() and JoinResult.discarded()."""

import pytest

from mapjoin import (
    JoinResult,
    MissingComplementError,
    full_join,
    get_discarded_values,
    inner_join,
    join,
    left_join,
    outer_join,
    pack,
    right_join,
)

LEFT = {1: "a", 2: "b", 4: "d", 6: "f"}
RIGHT = {2: "x", 3: "y", 6: "z", 7: "w"}

ALL_KEYS = set(LEFT) | set(RIGHT)

# complement records are the defined value for each key, left first
VALUE_TO_KEY = {**{v: k for k, v in RIGHT.items()}, **{v: k for k, v in LEFT.items()}}


def _key(left_value, right_value, key):
    return key


class TestComplementLaw:
    """A join and its discarded values partition the keys."""

    @pytest.mark.parametrize(
        "join_type", ["left", "right", "inner", "outer", "leftOuter", "rightOuter"]
    )
    def test_partition(self, join_type):
        """Kept and discarded keys are disjoint and cover every key."""
        joined = join(LEFT, RIGHT, join_type, _key)
        discarded = get_discarded_values(joined)

        kept = set(joined)
        dropped = {VALUE_TO_KEY[value] for value in discarded}

        assert not kept & dropped
        assert kept | dropped == ALL_KEYS

    @pytest.mark.parametrize(
        "join_type,kept,dropped",
        [
            ("left", [1, 2], [None]),
            ("right", [2, 3], [None]),
            ("inner", [2], [None, None]),
            ("outer", [1, 3], ["b"]),
            ("leftOuter", [1], ["b", None]),
            ("rightOuter", [3], [None, "b"]),
            ("full", [1, 2, 3], []),
        ],
    )
    def test_partition_with_none_values(self, join_type, kept, dropped):
        """Keys holding None are kept or discarded, never lost."""
        joined = join({1: None, 2: "b"}, {2: None, 3: None}, join_type, _key)
        assert list(get_discarded_values(joined)) == dropped
        assert list(joined) == kept
        assert len(kept) + len(dropped) == 3

    def test_full_has_no_discarded_values(self):
        """The complement of full is empty."""
        joined = full_join(LEFT, RIGHT, _key)
        assert list(get_discarded_values(joined)) == []
        assert set(joined) == ALL_KEYS

    def test_custom_select_partition(self):
        """A select function's complement is its logical NOT."""

        def even_keys(left_value, right_value, key):
            return key % 2 == 0

        joined = join(LEFT, RIGHT, even_keys, _key)
        assert list(joined) == [2, 4, 6]
        assert list(get_discarded_values(joined)) == ["a", "y", "w"]


class TestDiscardedValues:
    """Shape and evaluation of the discarded records."""

    def test_inner_discarded(self):
        """inner discards the one-sided keys, resolved to their value."""
        joined = inner_join({1: "a", 2: "b"}, {2: "x", 3: "y"}, pack)
        assert list(get_discarded_values(joined)) == ["a", "y"]

    def test_left_discarded(self):
        """left discards right-only keys."""
        joined = left_join({1: "a", 2: "b"}, {2: "x", 3: "y"}, pack)
        assert list(get_discarded_values(joined)) == ["y"]

    def test_right_discarded(self):
        """right discards left-only keys."""
        joined = right_join({1: "a", 2: "b"}, {2: "x", 3: "y"}, pack)
        assert list(joined.discarded()) == ["a"]

    def test_outer_discarded_prefers_left(self):
        """Shared keys discarded by outer resolve to the left value."""
        joined = outer_join({1: "a", 2: "b"}, {2: "x", 3: "y"}, pack)
        assert list(get_discarded_values(joined)) == ["b"]

    def test_discarded_prefers_stored_none_on_left(self):
        """A stored None on the left wins over the right value."""

        def nothing(left_value, right_value, key):
            return False

        joined = join({1: None}, {1: "x", 2: "y"}, nothing, pack)
        assert list(joined) == []
        assert list(get_discarded_values(joined)) == [None, "y"]

    def test_independent_of_primary_consumption(self):
        """Discarded values do not depend on how far the join was consumed."""
        joined = inner_join(LEFT, RIGHT, pack)
        before = list(get_discarded_values(joined))
        list(joined)
        after = list(get_discarded_values(joined))
        assert before == after == ["a", "d", "y", "w"]

    def test_recomputed_on_each_call(self):
        """Each call runs the join again."""
        calls = []

        def select(left_value, right_value, key):
            calls.append(key)
            return True

        joined = join({1: "a"}, {2: "b"}, select, pack)
        assert calls == []

        first = get_discarded_values(joined)
        second = get_discarded_values(joined)
        assert first is not second
        assert calls == []

        assert list(first) == []
        assert calls == [1, 2]
        assert list(second) == []
        assert calls == [1, 2, 1, 2]

    def test_discarded_is_join_result(self):
        """The discarded values come back as a lazy JoinResult."""
        discarded = get_discarded_values(inner_join(LEFT, RIGHT, pack))
        assert isinstance(discarded, JoinResult)
        assert not discarded.has_complement


class TestMissingComplement:
    """get_discarded_values() only accepts join results."""

    @pytest.mark.parametrize(
        "value",
        [[1, 2, 3], (x for x in range(3)), {1: "a"}, None, iter([])],
        ids=["list", "generator", "dict", "none", "iterator"],
    )
    def test_not_a_join_result(self, value):
        """Plain iterables raise MissingComplementError."""
        with pytest.raises(MissingComplementError, match="Expected joined iterable"):
            get_discarded_values(value)

    def test_result_without_complement(self):
        """A JoinResult built without a complement is rejected."""
        with pytest.raises(MissingComplementError):
            get_discarded_values(JoinResult(iter([1, 2])))

    def test_complement_of_complement(self):
        """Discarded values carry no complement of their own."""
        discarded = get_discarded_values(inner_join(LEFT, RIGHT, pack))
        with pytest.raises(MissingComplementError):
            get_discarded_values(discarded)
        with pytest.raises(MissingComplementError, match="Expected a joined iterable"):
            discarded.discarded()

    def test_missing_complement_is_type_error(self):
        """MissingComplementError can be caught as TypeError."""
        with pytest.raises(TypeError):
            get_discarded_values([])

    def test_complement_not_visible_in_records(self):
        """The complement never shows up among the joined records."""
        joined = inner_join({1: "a"}, {1: "x"}, pack)
        assert list(joined) == [(1, "a", "x")]
