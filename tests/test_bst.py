from dsakit.bst import BinarySearchTree


def test_source_scenario():
    tree = BinarySearchTree()
    tree.insert(5)
    assert tree.in_order_traversal() == [5]
    tree.insert(6)
    assert tree.in_order_traversal() == [5, 6]
    assert tree.contains(5)
    assert tree.contains(6)
    tree.remove(5)
    assert tree.in_order_traversal() == [6]
    assert not tree.contains(5)
    assert tree.contains(6)
    tree.insert(9)
    tree.insert(7)
    tree.insert(8)
    assert tree.in_order_traversal_iterative() == [6, 7, 8, 9]

    tree2 = tree.copy()
    assert tree2.in_order_traversal() == [6, 7, 8, 9]


def test_copy_is_deep():
    tree = BinarySearchTree([6, 9, 7, 8])
    duplicate = tree.copy()
    duplicate.remove(7)
    duplicate.insert(1)
    assert tree.in_order_traversal() == [6, 7, 8, 9]
    assert duplicate.in_order_traversal() == [1, 6, 8, 9]


def test_duplicates_ignored():
    tree = BinarySearchTree([3, 3, 1, 1])
    assert tree.in_order_traversal() == [1, 3]


def test_remove_node_with_two_children():
    keys = [50, 30, 70, 20, 40, 60, 80]
    tree = BinarySearchTree(keys)
    tree.remove(50)
    assert 50 not in tree
    assert tree.in_order_traversal() == sorted(k for k in keys if k != 50)


def test_remove_missing_key_keeps_tree():
    tree = BinarySearchTree([2, 1, 3])
    tree.remove(10)
    assert tree.in_order_traversal() == [1, 2, 3]


def test_traversals_agree_and_are_sorted():
    keys = [15, 3, 27, 8, 1, 42, 19, 11, 4]
    tree = BinarySearchTree(keys)
    assert tree.in_order_traversal() == sorted(keys)
    assert tree.in_order_traversal_iterative() == tree.in_order_traversal()
    assert list(tree) == sorted(keys)


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.in_order_traversal() == []
    assert tree.in_order_traversal_iterative() == []
    assert 1 not in tree