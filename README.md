# judgekit

A collection of solved short programming exercises. Each one is a plain
Python function that takes the problem's inputs as arguments and returns
the answer. The exercises in four of the modules can also be run as
commands that read judge-style input on standard input and print the
answers.

## Installation

```
pip install .
```

Install with the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module               | Contents                                                           |
|----------------------|--------------------------------------------------------------------|
| `judgekit.numeric`   | exercises that compute a number from a few integers                |
| `judgekit.verdicts`  | exercises that answer with a verdict such as `YES` / `NO`          |
| `judgekit.arrays`    | exercises over sequences of integers (prefix sums, sorting, DP)    |
| `judgekit.textual`   | exercises over strings                                             |
| `judgekit.trees`     | binary-tree traversals and comparisons built on `TreeNode`         |
| `judgekit.ladder`    | shortest word-ladder length                                        |

## Using the functions

```python
from judgekit.numeric import ageing, sndmax
from judgekit.arrays import missp
from judgekit.textual import wordle
from judgekit.ladder import ladder_length

ageing(30)             # 20
sndmax(4, 9, 7)        # 7
missp([1, 2, 2, 3, 3, 3])   # [1, 3]
wordle("abc", "abd")   # "GGB"

ladder_length("hit", "cog", ["hot", "dot", "dog", "lot", "log", "cog"])  # 5
```

Functions in `judgekit.verdicts` return the verdict word itself, for
example `bullbear(5, 7)` returns `"PROFIT"`. Functions in
`judgekit.arrays` and `judgekit.textual` that answer yes or no return a
`bool`. Some raise `ValueError` on input they cannot work with, such as
`proc18a` with an empty list or `wordle` with a guess shorter than the
answer.

The tree functions work on `judgekit.trees.TreeNode` values, a dataclass
with `val`, `left` and `right`:

- `level_order(root)` and `zigzag_level_order(root)` list node values level by level;
- `max_depth(root)` and `min_depth(root)` count the nodes on the longest and shortest root-to-leaf paths;
- `is_same_tree(p, q)` and `is_symmetric(root)` compare shapes and values.

```python
from judgekit.trees import TreeNode, level_order, is_symmetric

root = TreeNode(1, TreeNode(2), TreeNode(2))
level_order(root)    # [[1], [2, 2]]
is_symmetric(root)   # True
```

## Commands

Four commands are installed:

```
judgekit-numeric
judgekit-verdicts
judgekit-arrays
judgekit-textual
```

Each is given the name of an exercise in its module (the name of its
function, for example `ageing` or `wordle`) and reads that exercise's
input from standard input as whitespace-separated tokens. Most exercises
start with the number of test cases; the answers are written to standard
output, one per case. Input that ends too early is reported as a usage
error.

```
printf '2\n30\n45\n' | judgekit-numeric ageing
```

prints

```
20
35
```

## What is not included

`judgekit.trees` and `judgekit.ladder` are library functions only: there
is no command that reads trees or word lists from standard input.