"""Tests for key/value pairs and their copy operation."""

from py_kvstore.pair import Pair


class TestPair:
    """Verify pair fields, copying, and formatting."""

    def test_fields(self) -> None:
        """A pair exposes its key and value."""
        pair = Pair("a", 1)
        assert pair.key == "a"
        assert pair.value == 1

    def test_value_is_mutable(self) -> None:
        """The store overwrites values in place."""
        pair = Pair("a", 1)
        pair.value = 2
        assert pair.value == 2

    def test_str(self) -> None:
        """A pair formats as ``key:value``."""
        assert str(Pair("a", 1)) == "a:1"

    def test_shallow_copy_shares_objects(self) -> None:
        """A shallow copy is a new pair around the same objects."""
        value = [1]
        pair = Pair("xs", value)
        copy = pair.copy()
        assert copy is not pair
        assert copy == pair
        assert copy.value is value

    def test_deep_copy_shares_nothing(self) -> None:
        """A deep copy duplicates mutable keys and values."""
        pair = Pair(("k",), {"n": [1]})
        copy = pair.copy(deep=True)
        assert copy == pair
        assert copy.value is not pair.value
        copy.value["n"].append(2)
        assert pair.value == {"n": [1]}

    def test_copy_is_independent(self) -> None:
        """Rebinding the copy's value leaves the original alone."""
        pair = Pair("a", 1)
        copy = pair.copy()
        copy.value = 5
        assert pair.value == 1
