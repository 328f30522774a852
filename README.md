# edakit

A small collection of classic data structures and algorithms in plain
Python, with no third-party dependencies.

## What is inside

| Module             | Contents |
|--------------------|----------|
| `edakit.linked`    | `Node`, `LinkedList`, `Stack`, `Queue` and `validate_parentheses` |
| `edakit.misc`      | `is_prime`, `format_array` and three maximum-subsequence-sum functions: `mss_cubic`, `mss_quadratic`, `mss_linear` |
| `edakit.textio`    | `read_text_file`, which copies a text file to a stream |
| `edakit.sorting`   | `selection_sort`, `quick_sort`, `split`, `k_smallest`, `random_int`, `random_array`, `random_int_array`, `linspace` |
| `edakit.bst`       | `BST` and `BSTNode`, with subtree sizes and rank lookup |
| `edakit.avl`       | Self-balancing `AVL` tree with `AVLNode`, `RotationType` and `Side` |
| `edakit.rb`        | `RBTree`, `RBNode`, `NodeColor`, and `read_keys` for binary key files |
| `edakit.tree`      | General `Tree` of `TreeNode` objects with any number of children |
| `edakit.labyrinth` | Grid route search: `Cell`, `path_exists`, `find_path`, `format_path` |
| `edakit.maze`      | Random `Maze` generation by depth-first carving |
| `edakit.image`     | `Image`, `Point2D` and `read_bmp` for 8-bit BMP files |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Linked structures. `Stack.pop` and `Queue.pop` return the removed value, or
`None` when empty. `validate_parentheses` returns `(valid, position)`, where
position is the index of an unmatched `)` or else of the last character read.

```python
from edakit.linked import LinkedList, Stack, validate_parentheses

items = LinkedList()
for value in (1, 3, 5, 3):
    items.insert_first(value)
items.remove(3)              # removes every occurrence
print(list(items), len(items))   # [5, 1] 2
print(items)                 # 5 -> 1 -> 

stack = Stack()
stack.push(10)
stack.push(20)
print(stack.peek(), len(stack))  # 20 2

print(validate_parentheses("(a(b)c)"))  # (True, 6)
print(validate_parentheses("a)b"))      # (False, 1)
```

Binary search tree. Equal values go to the right; `kth` is 1-based and
returns the node or `None`.

```python
from edakit.bst import BST

tree = BST()
for value in (16, 4, 2, 20, 15, 18, 35, 50):
    tree.insert(value)
print(tree.ascending())      # [2, 4, 15, 16, 18, 20, 35, 50]
print(tree.kth(3).value)     # 15
print(tree.traverse(), end="")
```

`AVL` rebalances with single and double rotations on insertion; each
rotation is logged at debug level on the `edakit.avl` logger.

Sorting works in place and accepts an optional `random.Random` for the
pivot choice; `k_smallest` takes a 0-based rank and raises `IndexError`
when it is out of range.

```python
import random
from edakit.sorting import quick_sort, k_smallest

values = [5.0, 1.0, 4.0, 2.0]
quick_sort(values, random.Random(0))
print(values)                            # [1.0, 2.0, 4.0, 5.0]
print(k_smallest([9.0, 3.0, 7.0], 0))    # 3
```

Maximum subsequence sum, returned as `(start, end, total)`:

```python
from edakit.misc import mss_linear

print(mss_linear([-2, 11, -1, 3, -3, -2]))   # (1, 3, 13)
```

Finding a route through a grid of open (truthy) and blocked cells;
`find_path` returns the list of cells or `None`, and both search functions
raise `ValueError` when the start lies outside the grid:

```python
from edakit.labyrinth import Cell, find_path, format_path

grid = [
    [True, True, False],
    [False, True, True],
    [False, False, True],
]
path = find_path(grid, Cell(0, 0), Cell(2, 2))
print(format_path(path))   # (0,0)-(0,1)-(1,1)-(1,2)-(2,2)-
```

Generating a maze (pass `rng=random.Random(seed)` for a repeatable one):

```python
from edakit.maze import Maze

print(Maze(21, 21))
```

## Commands

- `edakit-labyrinth [START_ROW START_COL END_ROW END_COL]` searches the
  built-in 8×8 grid (default from `(1,2)` to `(5,4)`) and prints
  `Existe Ruta` with the route, or `No Existe Ruta`.
- `edakit-rb [FILE]` reads little-endian 32-bit keys (default
  `keys_sorted.bin`), prints each as it is inserted into an `RBTree`, then
  prints the tree.
- `edakit-image [FILE]` reads an 8-bit BMP (default `images/image_1.bmp`),
  thresholds it at 120 and prints it with blanks and stars.

## Limits

- `RBTree` keeps colours, parents and sides on its nodes, but insertion only
  adds red leaves; it does not recolour or rotate, so the tree is not
  balanced.
- `read_bmp` accepts only uncompressed 8-bit BMP files whose rows carry no
  padding (pixel data size equal to width times height); there is no
  writing of images and no region labelling.