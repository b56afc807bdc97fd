import pytest

from circlestark.containers import ComponentVec, TreeVec


def test_component_vec_flatten():
    vec = ComponentVec([["a", "b"], [], ["c"]])
    assert vec.flatten() == ["a", "b", "c"]


def test_component_vec_flatten_cols():
    vec = ComponentVec([[[1, 2], [3]], [[4]]])
    assert vec.flatten_cols() == [1, 2, 3, 4]


def test_component_vec_default_is_empty():
    vec = ComponentVec()
    assert vec.flatten() == []
    assert len(vec) == 0


def test_tree_vec_map():
    tv = TreeVec([[1, 2], [3]])
    mapped = tv.map(len)
    assert mapped == [2, 1]
    assert isinstance(mapped, TreeVec)


def test_tree_vec_zip():
    tv = TreeVec(["x", "y"])
    assert tv.zip(["p", "q"]) == [("x", "p"), ("y", "q")]


def test_tree_vec_zip_length_mismatch():
    with pytest.raises(ValueError):
        TreeVec([1, 2]).zip([1])


def test_tree_vec_map_cols_preserves_shape():
    tv = TreeVec([["a", "bb"], [], ["ccc"]])
    mapped = tv.map_cols(str.upper)
    assert mapped == [["A", "BB"], [], ["CCC"]]
    assert [len(t) for t in mapped] == [len(t) for t in tv]


def test_tree_vec_zip_cols():
    tv = TreeVec([["a", "b"], ["c"]])
    other = TreeVec([[1, 2], [3]])
    assert tv.zip_cols(other) == [[("a", 1), ("b", 2)], [("c", 3)]]


def test_tree_vec_zip_cols_then_flatten_is_zip_of_flattens():
    tv = TreeVec([["a", "b"], ["c"], []])
    other = TreeVec([[1, 2], [3], []])
    assert tv.zip_cols(other).flatten() == list(zip(tv.flatten(), other.flatten()))


def test_tree_vec_zip_cols_column_mismatch():
    with pytest.raises(ValueError):
        TreeVec([[1, 2]]).zip_cols([[1]])


def test_tree_vec_zip_cols_tree_mismatch():
    with pytest.raises(ValueError):
        TreeVec([[1], [2]]).zip_cols([[1]])


def test_tree_vec_flatten():
    tv = TreeVec([["a"], ["b", "c"]])
    assert tv.flatten() == ["a", "b", "c"]


def test_tree_vec_flatten_cols():
    tv = TreeVec([[[1, 2], [3]], [[4, 5]]])
    assert tv.flatten_cols() == [1, 2, 3, 4, 5]