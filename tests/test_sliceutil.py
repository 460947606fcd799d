from chainkit.sliceutil import (
    append_unique,
    contains,
    contains_all,
    copy_items,
    filter_items,
    index_of,
    intersect,
    is_unique,
    map_items,
    unique,
)


def test_copy():
    items = ["a", "b", "c"]
    copied = copy_items(items)
    assert copied == items
    assert copied is not items


def test_contains():
    items = ["a", "b", "c"]
    assert contains(items, "a") is True
    assert contains(items, "d") is False


def test_contains_all():
    items = ["a", "b", "c"]
    assert contains_all(items, ["a", "b"]) is True
    assert contains_all(items, ["a", "d"]) is False


def test_map():
    items = ["a", "b", "c"]
    mapped = map_items(items, str.upper)
    assert mapped == ["A", "B", "C"]
    assert mapped is not items


def test_filter():
    items = ["a", "b", "c"]
    filtered = filter_items(items, lambda s: s != "c")
    assert filtered == ["a", "b"]
    assert filtered is not items


def test_is_unique():
    assert is_unique(["a", "b", "c"]) is True
    assert is_unique(["a", "b", "a"]) is False


def test_intersect():
    assert intersect(["a", "b", "c"], ["a", "b"]) == ["a", "b"]
    assert intersect(["a", "b"], ["a", "b", "c"]) == ["a", "b"]
    assert intersect(["a", "b", "c"], ["a", "b", "c"], ["a", "b"]) == ["a", "b"]
    assert intersect(["a", "b", "c"], ["d", "e", "f"]) == []
    assert intersect(["d", "e", "f"], ["a", "b", "c"]) == []
    assert intersect(["a", "b", "c"], []) == []
    assert intersect([], ["a", "b", "c"]) == []
    assert intersect([], []) == []


def test_intersect_without_arguments():
    assert intersect() == []


def test_unique():
    assert unique(["a", "b", "c"]) == ["a", "b", "c"]
    assert unique(["a", "b", "a", "c", "b"]) == ["a", "b", "c"]
    assert unique(["a", "b", "c", "a", "b", "c"]) == ["a", "b", "c"]
    assert unique([]) == []


def test_unique_across_sequences():
    assert unique(["a", "b"], ["b", "c"], ["c", "a"]) == ["a", "b", "c"]


def test_index_of():
    assert index_of(["a", "b", "c"], "b") == 1
    assert index_of(["a", "b", "c"], "d") == -1


def test_append_unique():
    assert append_unique(["a", "b"], "c") == ["a", "b", "c"]
    assert append_unique(["a", "b", "c"], "c") == ["a", "b", "c"]
    assert append_unique(["a", "b", "c"], "d") == ["a", "b", "c", "d"]