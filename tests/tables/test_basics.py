"""
Tests for container basics and the array/mapping helpers.
"""

import collections as _collections

import pytest as _pytest

import tablekit.errors as errors
import tablekit.tables as tables


class TestExtraction:
    """keys(), values(), keys_values()."""

    def test_mapping(self) -> None:
        """Mappings give their keys and values."""
        t = {"a": 1, "b": 2}

        assert sorted(tables.keys(t)) == ["a", "b"]
        assert sorted(tables.values(t)) == [1, 2]

    def test_sequence_keys_are_indexes(self) -> None:
        """Sequences use their indexes as keys."""
        assert tables.keys(["x", "y"]) == [0, 1]
        assert tables.values(["x", "y"]) == ["x", "y"]

    def test_set_pairs_are_members(self) -> None:
        """Sets pair each member with itself."""
        assert sorted(tables.keys({"a", "b"})) == ["a", "b"]
        assert sorted(tables.values({"a", "b"})) == ["a", "b"]

    def test_keys_values_match(self) -> None:
        """keys_values() returns lists in matching order."""
        t = {"a": 1, "b": 2, "c": 3}

        ks, vs = tables.keys_values(t)

        assert dict(zip(ks, vs)) == t

    def test_results_are_independent(self) -> None:
        """Results are new lists."""
        t = ["a"]
        result = tables.values(t)
        result.append("b")

        assert t == ["a"]

    def test_empty(self) -> None:
        """Empty containers give empty results."""
        assert tables.keys({}) == []
        assert tables.keys_values([]) == ([], [])


class TestFlipAndSets:
    """flip(), iflip(), to_set(), ito_set(), identity_set(), set_of(), set_many()."""

    def test_flip(self) -> None:
        """Values become keys."""
        assert tables.flip({"a": 1, "b": 2}) == {1: "a", 2: "b"}

    def test_flip_last_seen_wins(self) -> None:
        """On duplicate values the last key in iteration order wins."""
        t = _collections.OrderedDict([("a", 1), ("b", 1)])

        assert tables.flip(t) == {1: "b"}

    def test_iflip_highest_index_wins(self) -> None:
        """iflip maps items to their last index."""
        assert tables.iflip(["a", "b", "a"]) == {"a": 2, "b": 1}

    def test_to_set(self) -> None:
        """Membership set of values."""
        assert tables.to_set({"x": "a", "y": "b"}) == {"a": True, "b": True}
        assert tables.to_set(["a", "a"]) == {"a": True}

    def test_ito_set(self) -> None:
        """Membership set of sequence items."""
        assert tables.ito_set(["a", "b"]) == {"a": True, "b": True}

    def test_identity_set(self) -> None:
        """Each value maps to itself."""
        assert tables.identity_set({"x": "a", "y": "b"}) == {"a": "a", "b": "b"}

    def test_set_of(self) -> None:
        """Each value maps to the given value."""
        assert tables.set_of(0, ["a", "b"]) == {"a": 0, "b": 0}

    def test_set_many(self) -> None:
        """Union of several containers' values."""
        assert tables.set_many(["a"], {"k": "b"}, {"c"}) == {"a": True, "b": True, "c": True}

    def test_iunique(self) -> None:
        """Distinct items."""
        assert sorted(tables.iunique(["b", "a", "b"])) == ["a", "b"]

    def test_ivalues(self) -> None:
        """Shallow list copy."""
        t = ("a", "b")

        assert tables.ivalues(t) == ["a", "b"]


class TestInPlaceMerges:
    """override_many(), append_many(), ijoin_many()."""

    def test_override_many(self) -> None:
        """Later sources win."""
        t = {"a": 1}

        result = tables.override_many(t, {"a": 2, "b": 2}, {"b": 3})

        assert result is t
        assert t == {"a": 2, "b": 3}

    def test_append_many(self) -> None:
        """New keys are added."""
        t = {"a": 1}

        tables.append_many(t, {"b": 2}, {"c": 3})

        assert t == {"a": 1, "b": 2, "c": 3}

    def test_append_many_conflict(self) -> None:
        """An existing key is an error."""
        with _pytest.raises(errors.InvalidArgumentError, match="'a'"):
            tables.append_many({"a": 1}, {"a": 2})

    def test_ijoin_many(self) -> None:
        """Sequences are appended in order."""
        assert tables.ijoin_many(["a"], ["b"], ("c", "d")) == ["a", "b", "c", "d"]

    def test_ijoin_with_itself(self) -> None:
        """Joining a list with itself doubles it once."""
        t = ["a", "b"]

        tables.ijoin_many(t, t)

        assert t == ["a", "b", "a", "b"]


class TestArrayHelpers:
    """imap() and friends."""

    def test_iinsert_args_stops_at_none(self) -> None:
        """Appending stops at the first None."""
        assert tables.iinsert_args(["a"], "b", None, "c") == ["a", "b"]

    def test_imap(self) -> None:
        """Extra arguments are passed after the item."""
        assert tables.imap(lambda v, n: v * n, [1, 2], 10) == [10, 20]

    def test_imap_inplace(self) -> None:
        """Items are replaced in the same list."""
        t = [1, 2]

        result = tables.imap_inplace(lambda v: v + 1, t)

        assert result is t
        assert t == [2, 3]

    def test_imap_sliding(self) -> None:
        """Tuple results are flattened up to their first None."""
        result = tables.imap_sliding(
            lambda v: (v, v * 2) if v > 1 else (v, None, v), [1, 2]
        )

        assert result == [1, 2, 4]

    def test_imap_sliding_single_values(self) -> None:
        """Non-tuple results are appended; None is dropped."""
        assert tables.imap_sliding(lambda v: v or None, [0, 1, 2]) == [1, 2]

    def test_ifilter(self) -> None:
        """Order is kept."""
        assert tables.ifilter(lambda v, lim: v > lim, [3, 1, 4, 1, 5], 2) == [3, 4, 5]

    def test_iwalk_and_iwalker(self) -> None:
        """Walkers call the function on every item."""
        seen: list = []

        tables.iwalk(lambda v, tag: seen.append((tag, v)), ["a", "b"], "t")
        tables.iwalker(seen.append)(["c"])

        assert seen == [("t", "a"), ("t", "b"), "c"]

    def test_walk_pairs(self) -> None:
        """walk_pairs() calls fn(key, value)."""
        seen: dict = {}

        tables.walk_pairs(seen.__setitem__, {"a": 1})

        assert seen == {"a": 1}

    def test_generate_n(self) -> None:
        """Generator is called n times."""
        counter = iter(range(10))

        assert tables.generate_n(3, next, counter) == [0, 1, 2]

    def test_imap_of_records(self) -> None:
        """Records indexed by a field."""
        records = [{"id": "a", "v": 1}, {"id": "b", "v": 2}]

        result = tables.imap_of_records(records, "id")

        assert result == {"a": records[0], "b": records[1]}
        assert result["a"] is records[0]

    def test_imap_of_records_missing_field(self) -> None:
        """A record without the field raises NotFoundError."""
        with _pytest.raises(errors.NotFoundError, match="missing record key field"):
            tables.imap_of_records([{"id": "a"}, {"name": "b"}], "id")


class TestMappingHelpers:
    """equals(), count_elements(), remap_to_array(), map_values(), accumulate(), normalize()."""

    def test_equals(self) -> None:
        """Shallow equality by keys and values."""
        inner = [1]

        assert tables.equals({"a": 1, "b": inner}, {"b": inner, "a": 1})
        assert not tables.equals({"a": 1}, {"a": 1, "b": 2})
        assert not tables.equals({"a": 1}, {"a": 2})

    def test_count_elements(self) -> None:
        """Counts pairs."""
        assert tables.count_elements({"a": 1, "b": 2}) == 2
        assert tables.count_elements([]) == 0

    def test_remap_to_array(self) -> None:
        """fn(key, value) per pair."""
        assert tables.remap_to_array(lambda k, v: f"{k}={v}", {"a": 1}) == ["a=1"]

    def test_map_values_keeps_shape(self) -> None:
        """Mappings stay mappings, sequences become lists."""
        assert tables.map_values(lambda v, n: v + n, {"a": 1}, 1) == {"a": 2}
        assert tables.map_values(str, (1, 2)) == ["1", "2"]

    def test_accumulate(self) -> None:
        """Sum with an optional start value."""
        assert tables.accumulate({"a": 1, "b": 2}) == 3
        assert tables.accumulate([1, 2], 10) == 13

    def test_normalize(self) -> None:
        """Values divided by their sum, source untouched."""
        t = {"a": 1, "b": 3}

        assert tables.normalize(t) == {"a": 0.25, "b": 0.75}
        assert tables.normalize(t, 2) == {"a": 0.5, "b": 1.5}
        assert t == {"a": 1, "b": 3}

    def test_normalize_inplace(self) -> None:
        """Values divided in place."""
        t = [1, 3]

        result = tables.normalize_inplace(t)

        assert result is t
        assert t == [0.25, 0.75]

    def test_normalize_inplace_rejects_immutable(self) -> None:
        """Tuples can't be normalized in place."""
        with _pytest.raises(errors.InvalidArgumentError):
            tables.normalize_inplace((1, 2))
