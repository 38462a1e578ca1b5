import pytest

from dsakit.bst import BinarySearchTree

VALUES = [50, 30, 70, 20, 40, 60, 80, 30, 65]


def test_inorder_is_sorted():
    tree = BinarySearchTree(VALUES)
    assert tree.inorder() == sorted(VALUES)
    assert list(tree) == sorted(VALUES)
    assert len(tree) == len(VALUES)


def test_level_order_of_source_example():
    tree = BinarySearchTree([10, 5, 15, 3, 7, 12, 18])
    assert tree.level_order() == [[10], [5, 15], [3, 7, 12, 18]]


def test_preorder_and_postorder_place_root():
    tree = BinarySearchTree(VALUES)
    assert tree.preorder()[0] == VALUES[0]
    assert tree.postorder()[-1] == VALUES[0]
    assert sorted(tree.preorder()) == sorted(tree.postorder()) == sorted(VALUES)


def test_min_max():
    tree = BinarySearchTree(VALUES)
    assert tree.min() == min(VALUES)
    assert tree.max() == max(VALUES)


def test_min_max_empty_raise():
    tree = BinarySearchTree()
    with pytest.raises(ValueError):
        tree.min()
    with pytest.raises(ValueError):
        tree.max()


def test_search_and_contains():
    tree = BinarySearchTree(VALUES)
    assert tree.search(40).value == 40
    assert tree.search(99) is None
    assert 65 in tree
    assert 66 not in tree


@pytest.mark.parametrize("value", [20, 80, 30, 50, 70, 65])
def test_delete_keeps_order(value):
    tree = BinarySearchTree(VALUES)
    assert tree.delete(value) is True
    expected = sorted(VALUES)
    expected.remove(value)
    assert tree.inorder() == expected
    assert len(tree) == len(VALUES) - 1


def test_delete_absent_value():
    tree = BinarySearchTree(VALUES)
    assert tree.delete(999) is False
    assert tree.inorder() == sorted(VALUES)


def test_delete_everything():
    tree = BinarySearchTree(VALUES)
    for value in VALUES:
        assert tree.delete(value)
    assert list(tree) == []
    assert len(tree) == 0


def test_inorder_ascii():
    tree = BinarySearchTree([65, 66, 67, 97, 100])
    assert tree.inorder_ascii() == ["A", "B", "C", "a", "d"]


def test_inorder_ascii_out_of_range():
    tree = BinarySearchTree([200, -5])
    assert tree.inorder_ascii() == ["?", "?"]