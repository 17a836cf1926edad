# dsakit

A small collection of classic data structures and algorithms, written to be
read, run and experimented with. Alongside the algorithms it ships a few
interactive console programs: a binary-search driver, a bounded stack and
queue menu, a least-squares regression calculator, a binary-tree inspector,
a one-over cricket match and a game of tic-tac-toe against the computer.

dsakit has no runtime dependencies and needs Python 3.10 or later.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.searching` | `binary_search` for ascending sequences and `binary_search_descending` for descending ones; both return an index or `None` |
| `dsakit.sorting` | `heap_sort`, `quick_sort`, `radix_sort`, `bucket_sort`, `counting_sort`, `insertion_sort`, `merge_sort`, `reverse` |
| `dsakit.expressions` | `evaluate_postfix`, `evaluate_prefix`, `infix_to_postfix`, `precedence` |
| `dsakit.misc` | `printed_width_sum`: adds two numbers by measuring width-padded output |
| `dsakit.linked_lists` | `LinkedList`, the slot-ordered `SlotList`, `format_day`, `busiest_day` |
| `dsakit.stack_queue` | `BoundedStack`, `BoundedQueue` and their `OverflowError_` / `UnderflowError` |
| `dsakit.sparse_matrix` | `RowList`, `build_row_lists`, `format_row_lists`, `busiest_row` |
| `dsakit.regression` | `fit_line`, the `Regression` result, `format_report` |
| `dsakit.binary_tree` | `Node`, `bst_insert`, `delete`, `min_node`, `fill_level_order`, `build_level_order`, traversals (`inorder`, `preorder`, `postorder`, `level_order`), `height`, `count`, `leaf_nodes`, `sample_tree` |
| `dsakit.cricket` | `Player`, `Team`, `Game`: a one-over, four-a-side cricket match |
| `dsakit.tictactoe_board` | `Mark`, `Board`, `ComputerMove`, `computer_move` |
| `dsakit.tictactoe_game` | `Match`, `parse_coordinate`: the full interactive tic-tac-toe session |

## Using the library

Every sorting function returns a new list and leaves its input alone.
`radix_sort` accepts non-negative integers only, `bucket_sort` accepts values
in `[0, 1)` only (both raise `ValueError` otherwise), and `counting_sort`
handles negative integers.

```python
from dsakit.sorting import merge_sort, counting_sort

merge_sort([10, 20, 15, 17, 9, 21])   # [9, 10, 15, 17, 20, 21]
counting_sort([3, -1, 2, -1])         # [-1, -1, 2, 3]
```

Expressions are written with single-digit operands (letters for
`infix_to_postfix`). Postfix evaluation uses integer arithmetic that truncates
toward zero; prefix evaluation uses floats:

```python
from dsakit.expressions import evaluate_postfix, evaluate_prefix, infix_to_postfix

evaluate_postfix("231*+9-")       # -4
evaluate_prefix("+9*26")          # 21.0
infix_to_postfix("a+b*(c^d-e)")   # "abcd^e-*+"
```

Trees are built from plain `Node` objects and the traversals return lists:

```python
from dsakit.binary_tree import sample_tree, inorder, height, count

root = sample_tree()
inorder(root)                 # [4, 2, 5, 1, 3]
height(root), count(root)     # (3, 5)
```

Stacks and queues have a fixed capacity and raise when they overflow or
underflow:

```python
from dsakit.stack_queue import BoundedStack, OverflowError_

stack = BoundedStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except OverflowError_:
    print("full")
```

`fit_line(xs, ys)` returns a `Regression` with the sums, the line
`y = a + b·x` and R²; `format_report` turns it into text.

## Command-line programs

| Command | What it does |
| --- | --- |
| `dsakit-search` | reads a count, that many integers and a target from standard input and reports the target's index; the numbers are taken as sorted high to low unless `--ascending` is given |
| `dsakit-stack-queue` | menu for inserting, deleting and showing stack and queue elements; `--capacity` sets the size of each (default 100) |
| `dsakit-regression` | reads X and Y values through a menu and prints the regression line and R² |
| `dsakit-tree` | reads level-order integers (a negative value means no child) and prints the traversals, height, node count and leaf count; `--demo` instead runs a built-in search-tree insertion and deletion demonstration |
| `dsakit-cricket` | pick two teams of four from a pool of eleven and play one over each; `--seed` fixes the random outcomes |
| `dsakit-tictactoe` | play "War of the Lands", tic-tac-toe against the computer; `--seed` fixes the computer's random choices |

## Limits

All programs are text-only and work on standard input and output; there is
no graphical interface, and nothing is saved between runs.