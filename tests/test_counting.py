import pytest

from oikit.counting import (
    Tally,
    auto_lsd_sort,
    count_unordered,
    fill_random,
    find_positions,
    lsd_radix_sort,
    most_common,
)


def test_tally_add_and_count():
    t = Tally("abracadabra")
    assert t.count("a") == "abracadabra".count("a")
    assert t.count("z") == 0
    assert "b" in t
    assert len(t) == len(set("abracadabra"))


def test_tally_add_times():
    t = Tally()
    t.add("x", 4)
    t.add("x")
    assert t.count("x") == 5


def test_tally_remove_drops_when_exhausted():
    t = Tally()
    t.add("x", 3)
    t.remove("x")
    assert t.count("x") == 2
    t.remove("x", 2)
    assert "x" not in t
    t.remove("missing")
    assert len(t) == 0


def test_tally_total_is_sum():
    words = ["a", "b", "a", "c", "a", "b"]
    t = Tally(words)
    assert t.total() == len(words)


def test_tally_most_and_repeat():
    t = Tally(["a", "b", "a", "c", "b"])
    assert set(t.most_repeat()) == {"a", "b"}
    assert t.most() in {"a", "b"}


def test_tally_most_empty_raises():
    with pytest.raises(ValueError):
        Tally().most()
    assert Tally().most_repeat() == []


def test_tally_merge_and_clear():
    a = Tally(["x", "y"])
    b = Tally(["x", "z", "z"])
    a.merge(b)
    assert a.count("x") == 2
    assert a.count("z") == 2
    assert sorted(a.keys()) == ["x", "y", "z"]
    a.clear()
    assert a.total() == 0


def test_tally_format():
    t = Tally()
    t.add("a", 2)
    t.add("b")
    assert t.format() == "a 2\nb 1\n"


def test_most_common():
    assert most_common([1, 2, 2, 3, 3]) == {2, 3}
    assert most_common([]) == set()


def test_count_unordered_round_trip():
    values = [3, 1, 3, 3, 2, 1]
    pairs = count_unordered(values)
    assert dict(pairs) == {v: values.count(v) for v in set(values)}


def test_fill_random_seeded():
    a = fill_random(50, seed=7)
    assert a == fill_random(50, seed=7)
    assert len(a) == 50
    assert all(0 <= v <= 0x7FFF for v in a)


def test_fill_random_negative_size():
    with pytest.raises(ValueError):
        fill_random(-1)


def test_lsd_radix_sort_source_example():
    assert lsd_radix_sort([1, 3, 73, 889, 951], 1) == [1, 3, 951, 73, 889]


def test_lsd_radix_sort_is_permutation():
    values = fill_random(40, seed=3)
    assert sorted(lsd_radix_sort(values, 3)) == sorted(values)


def test_auto_lsd_sort_sorts():
    values = fill_random(200, seed=11) + [0, 5, 5]
    assert auto_lsd_sort(values) == sorted(values)
    assert auto_lsd_sort([]) == []


def test_radix_rejects_negative():
    with pytest.raises(ValueError):
        auto_lsd_sort([3, -1])
    with pytest.raises(ValueError):
        lsd_radix_sort([-5], 1)