# exercisekit

Classic programming exercises as a small Python library: binary search
trees, a red-black tree, minimum spanning trees, a queue built from two
stacks, number puzzles, base conversions, array, matrix and text helpers,
a worker wage register and a few small object models.

It uses only the standard library and needs Python 3.10 or later.

## Installation

```
pip install exercisekit
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "exercisekit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `exercisekit.bintree` | `TreeNode` and functions over it: `insert`, `lookup`, `tree_min`, `tree_max`, `is_bst`, `size`, `max_depth`, `min_depth`, `is_balanced`, `successor`, `predecessor`, `lowest_common_ancestor`, traversals (`inorder`, `preorder`, `postorder`, `reverse_order`, `breadth_first`), `root_to_leaf_paths`, `match_tree`, `is_subtree`, `mirror`, `minimal_bst`, `get_level`, `levels`, `level_print`, `nth_max`, `split_even_odd_levels` |
| `exercisekit.rbtree` | `RedBlackTree` with `insert`, `inorder`, `level_order`, `len()` and `in`; the `Color` enum |
| `exercisekit.graphs` | `Edge`, `Graph` (adjacency lists, `add_edge`, `neighbours`), `DisjointSet` (`find`, `union`), and `kruskal_mst`, `prim_mst`, `boruvka_mst` |
| `exercisekit.twostackqueue` | `TwoStackQueue` with `enqueue`, `dequeue` and `len()`; `dequeue` on an empty queue raises `QueueEmptyError` |
| `exercisekit.numbers` | `is_even`, `largest_of_three`, `is_leap_year`, `sum_below`, `sum_natural`, `factorial`, `fibonacci_terms`, `gcd`, `gcd_recursive`, `lcm`, `count_digits`, `reverse_number`, `is_palindrome_number`, `is_prime`, `primes_between`, `is_armstrong`, `armstrong_between`, `factors`, `prime_sum_pairs` |
| `exercisekit.conversions` | `to_binary`, `binary_to_decimal`, `to_octal`, `binary_to_octal`, `octal_to_binary` |
| `exercisekit.arithmetic` | `quotient_remainder`, `swap`, `rotate_three`, `quadratic_roots` (returns `QuadraticRoots`), `sign` (returns `Sign`), `multiplication_table`, `power`, `calculate` |
| `exercisekit.arrays` | `average`, `largest`, `largest_nonnegative`, `standard_deviation`, `add_matrices`, `multiply_elementwise`, `transpose` |
| `exercisekit.text` | `ascii_value`, `is_vowel`, `is_alphabet`, `uppercase_alphabet`, `reverse_sentence`, `char_frequency`, `count_character_classes` (returns `CharacterCounts`), `keep_alphabets`, `string_length`, `concatenate` |
| `exercisekit.workers` | `Worker` records with `total_hours`, `wages` and `report`, and `register_workers`; hours outside 0 to 4, or not exactly five days of hours, raise `InvalidWorkHours` |
| `exercisekit.models` | `Customer`, `Student`, `Shape`/`Rectangle`/`Triangle`, `Animal`/`Dog`/`BabyDog`, `Account`/`Programmer`, `Pair`, `Triple` |
| `exercisekit.cli` | `main`, the `exercisekit` command |

A few behaviours worth knowing:

- `bintree.insert` puts values equal to a node's value into its left subtree.
- `kruswal`-style input for `kruskal_mst` is a square cost matrix in which
  `None` or `math.inf` marks a missing edge. All three spanning-tree
  functions raise `ValueError` when the graph is not connected.
- `conversions` writes binary and octal values as ordinary integers whose
  decimal digits are the digits of that base, so binary 101 is the integer
  `101`. Digits not valid in the base raise `ValueError`.
- `arrays.average`, `largest` and `standard_deviation` accept 1 to 100
  values, and the matrix functions accept square matrices of size 1 to 100;
  anything else raises `ValueError`.
- `arithmetic.quotient_remainder` truncates toward zero, and
  `calculate` follows floating-point rules on division by zero
  (`calculate(1, "/", 0)` is `inf`); an unknown operator raises `ValueError`.

## Examples

```python
from exercisekit.bintree import insert, inorder, nth_max
from exercisekit.numbers import gcd, is_leap_year, factorial, primes_between
from exercisekit.conversions import to_binary, octal_to_binary
from exercisekit.arithmetic import quotient_remainder
from exercisekit.text import count_character_classes
from exercisekit.graphs import Edge, boruvka_mst
from exercisekit.twostackqueue import TwoStackQueue

root = None
for ch in "FBADCEGIH":
    root = insert(root, ch)
inorder(root)                 # ['A', 'B', 'C', 'D', 'E', 'F', 'G', 'H', 'I']
nth_max(root, 5)              # 'E'

gcd(12, 18)                   # 6
is_leap_year(2000)            # True
is_leap_year(1900)            # False
factorial(5)                  # 120
primes_between(3, 20)         # [3, 5, 7, 11, 13, 17, 19]

to_binary(5)                  # 101
octal_to_binary(17)           # 1111
quotient_remainder(-7, 2)     # (-3, -1)

count_character_classes("Hello 123")
# CharacterCounts(vowels=2, consonants=3, digits=3, spaces=1)

edges = [Edge(0, 1, 10), Edge(0, 2, 6), Edge(0, 3, 5), Edge(1, 3, 15), Edge(2, 3, 4)]
sum(edge.weight for edge in boruvka_mst(4, edges))   # 19

queue = TwoStackQueue()
for item in (7, 6, 2, 3):
    queue.enqueue(item)
queue.dequeue()               # 7
len(queue)                    # 3
```

## Commands

Installing the package provides these commands:

```
exercisekit            # print "Hello World!"
exercisekit 42         # print "Entered integer number is 42"
exercisekit-bintree    # walk through the binary search tree operations on a sample tree
exercisekit-graphs     # print Kruskal, Prim and Boruvka spanning trees of sample graphs
exercisekit-rbtree     # build a sample red-black tree and print its traversals
```

## What it does not do

The exercises are plain functions and classes: nothing in the package
prompts for input or reads from standard input, apart from the single
optional integer the `exercisekit` command takes as an argument. The
records in `workers` and `models` are kept in memory only; there is no
storage. There is no network server of any kind.