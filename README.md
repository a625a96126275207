# scratchkit

A collection of small, self-contained building blocks for learning how
classic data structures, algorithms and system queries behave. It uses
only the Python standard library.

## Installation

```
pip install scratchkit
```

To run the test suite:

```
pip install "scratchkit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `scratchkit.linked_list` | `LinkedList`: a singly linked list with `append`, `prepend`, `search` (returns a bool), `delete` (returns whether a node was removed), `render` (`10 -> 20 -> NULL`), iteration and `len()` |
| `scratchkit.minmax_list` | `MinMaxList`: a head-inserting list with `min_val` / `max_val`, `insert`, `delete`, `reverse` and `render`; an empty list reports the 32-bit `INT_MAX` as minimum and `INT_MIN` as maximum |
| `scratchkit.bst` | `BinarySearchTree`: `insert` (duplicates are ignored and return `False`), `in_order`, `pre_order`, `post_order`, `len()`, `in` and in-order iteration |
| `scratchkit.containers` | `Stack` (capacity 500 by default; raises `StackOverflowError` when full and `StackUnderflowError` when empty) and `Deque` (`push_front`, `front`, `back`, iteration) |
| `scratchkit.search` | `binsearch` (index of the target in a sorted sequence, or `-1`), `insertion_sort`, `sort_strings` |
| `scratchkit.dispatch` | `DispatchTable` (`register`, `call`; an unknown key raises `KeyError`), plus `add`, `is_even` and `select_if` |
| `scratchkit.numerics` | `q_rsqrt` (fast inverse square root in single precision), `mandelbrot`, `map_range`, `render_mandelbrot` (rows of RGB tuples), `make_table` |
| `scratchkit.strings_tool` | `extract_strings` and `print_strings` for pulling printable ASCII runs out of binary data |
| `scratchkit.sysinfo` | `list_directory` (entries with inode and type, including `.` and `..`), `system_names`, `resolve_ipv4`, `leading_options` |
| `scratchkit.server` | `ListService`, a small text protocol over a linked list; `hello_response`; `serve` |

## Examples

```python
from scratchkit.linked_list import LinkedList
from scratchkit.bst import BinarySearchTree
from scratchkit.search import binsearch
from scratchkit.dispatch import DispatchTable

numbers = LinkedList([10, 20])
print(numbers.render())        # 10 -> 20 -> NULL
print(numbers.search(20))      # True

tree = BinarySearchTree([10, 15, 8, 7, 6, 9, 14, 20])
print(tree.in_order())         # [6, 7, 8, 9, 10, 14, 15, 20]

print(binsearch([1, 4, 6, 13, 22, 51, 71], 22))   # 4

table = DispatchTable({"start": lambda: "started"})
print(table.call("start"))     # started
```

`ListService` can be used without a network:

```python
from scratchkit.server import ListService

service = ListService()
service.handle("insert:5")
print(service.handle("print"))   # ends with "List: 5 "
```

## Command-line tools

Print the printable character runs (four or more characters end with a
newline) found in one or more files:

```
scratchkit-strings /path/to/file
```

List the entries of a directory, printing each one's name, inode number
and type number:

```
scratchkit-ls /path/to/directory
```

Start the server on port 8081 (options: `--host`, `--port`, and
`--hello` to serve a fixed hello-world page instead of the list):

```
scratchkit-server
```

Each connection is read once (up to 1024 bytes). Text of the form
`insert:5`, `search:5` or `delete:5` acts on the list; the exact text
`print` returns its contents; anything else gets a `400 Bad Request`
reply. Replies are HTTP-style text.

## What it does not do

- The server answers one connection at a time, reads a single chunk per
  connection and keeps the list only in memory; nothing is stored between
  runs.
- `render_mandelbrot` returns pixel data; it does not open a window or
  write an image file.
- There is no interactive prompt for the dispatch table; functions are
  called by key from Python.