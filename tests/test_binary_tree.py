import io

import pytest

from dsakit.binary_tree import (
    Node,
    bst_insert,
    build_level_order,
    count,
    delete,
    fill_level_order,
    height,
    inorder,
    leaf_nodes,
    level_order,
    main,
    min_node,
    postorder,
    preorder,
    sample_tree,
)

SAMPLES = [
    [50, 30, 20, 40, 70, 60, 80],
    [50, 60, 30, 70, 20, 65, 25],
    [5, 3, 8, 3, 5, 1, 9, 8],
    [1],
]


def _bst(values, ties_left=True):
    root = None
    for value in values:
        root = bst_insert(root, value, ties_left=ties_left)
    return root


@pytest.mark.parametrize("values", SAMPLES)
@pytest.mark.parametrize("ties_left", [True, False])
def test_bst_inorder_is_sorted(values, ties_left):
    assert inorder(_bst(values, ties_left)) == sorted(values)


def test_ties_go_left_or_right():
    left = _bst([5, 5], ties_left=True)
    assert left.left.data == 5 and left.right is None
    right = _bst([5, 5], ties_left=False)
    assert right.right.data == 5 and right.left is None


@pytest.mark.parametrize("values", SAMPLES[:3])
def test_delete_each_value_keeps_order(values):
    for target in set(values):
        root = _bst(values, ties_left=False)
        root = delete(root, target)
        expected = sorted(values)
        expected.remove(target)
        assert inorder(root) == expected


def test_delete_missing_value_changes_nothing():
    root = _bst(SAMPLES[0])
    before = level_order(root)
    assert level_order(delete(root, 999)) == before


def test_delete_only_node_empties_tree():
    assert delete(Node(7), 7) is None
    assert delete(None, 7) is None


def test_min_node():
    for values in SAMPLES:
        assert min_node(_bst(values)).data == min(values)
    with pytest.raises(ValueError):
        min_node(None)


def test_fill_level_order_appends_at_first_gap():
    root = _bst(SAMPLES[0], ties_left=False)
    before = level_order(root)
    root = fill_level_order(root, 12)
    assert level_order(root) == before + [12]
    assert count(root) == len(before) + 1


def test_fill_level_order_on_empty_tree():
    root = fill_level_order(None, 4)
    assert level_order(root) == [4]


@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5, 6, 7], [9, 8], [3]])
def test_build_level_order_round_trip(values):
    assert level_order(build_level_order(values)) == values


def test_build_level_order_with_missing_children():
    root = build_level_order([1, 2, 3, -1, 4, -1, -1, -1, -1])
    assert root.left.left is None
    assert root.left.right.data == 4
    assert level_order(root) == [1, 2, 3, 4]
    assert build_level_order([]) is None


@pytest.mark.parametrize("values", SAMPLES)
def test_traversals_agree_on_contents(values):
    root = _bst(values)
    assert preorder(root)[0] == values[0]
    assert postorder(root)[-1] == values[0]
    assert sorted(preorder(root)) == sorted(postorder(root)) == sorted(level_order(root))
    assert count(root) == len(values)


def test_empty_tree_measures():
    assert height(None) == 0
    assert count(None) == 0
    assert leaf_nodes(None) == 0
    assert inorder(None) == preorder(None) == postorder(None) == level_order(None) == []


def test_long_chain_does_not_overflow():
    values = list(range(3000))
    root = _bst(values)
    assert height(root) == len(values)
    assert leaf_nodes(root) == 1
    assert postorder(root) == values[::-1]


def test_leaf_count_of_level_order_tree():
    values = list(range(1, 8))
    root = build_level_order(values)
    assert leaf_nodes(root) == count(root) - len([1, 2, 3])


def test_sample_tree():
    root = sample_tree()
    assert preorder(root) == [1, 2, 4, 5, 3]
    assert inorder(root) == [4, 2, 5, 1, 3]
    assert height(root) == 3
    assert level_order(root) == [1, 2, 3, 4, 5]


def test_main_reads_level_order(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2 3 -1 -1 -1 -1\n"))
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "1 2 3"
    assert "Number of nodes = 3" in out
    assert "Height = 2" in out
    assert "Number of leaf nodes = 2" in out


def test_main_demo(capsys):
    assert main(["--demo"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == " ".join(str(v) for v in sorted(SAMPLES[0]))
    assert out[1].split()[-1] == "12"
    assert "20" not in out[2].split()
    assert "30" not in out[3].split()