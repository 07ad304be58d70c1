# saga

`saga` keeps tabular data in memory as a set of named columns. You can build a
table from rows, append more rows, and fill or add a column with a fixed value
or with values from a function that takes no arguments.

Everything lives in the `saga.table` module: the `Table` class, the `new`
function and the `TableError` exception.

## Installation

```
pip install .
```

## Usage

```python
import sys

from saga.table import new

table = new(
    ["id", "name", "active"],
    [0, "Name 0", True],
    [1, "Name 1", False],
)

# Append rows. Headers the table does not have are skipped, and columns
# missing from the headers are filled with None.
table.insert_rows(["id"], [2], [3])

# Set every value in a column to a fixed value. If the column does not
# exist yet, it is added.
table.update_column("active", False)

# A callable with no arguments is called once per row.
counter = iter(range(100))
table.update_column("rank", lambda: next(counter))

print(table.column("id"))    # [0, 1, 2, 3]
print(table.column("rank"))  # [0, 1, 2, 3]
print(table.num_rows)        # 4
print(table.headers)         # {'id': 0, 'name': 1, 'active': 2, 'rank': 3}

# Check the table's invariants; raises TableError if one is broken.
table.validate()

# Print the headers and every column's values (to stdout by default).
table.dump(sys.stdout)
```

`insert_rows` and `update_column` change the table in place and return it, so
calls can be chained.

A table can also be built directly from a header-to-position mapping and a
list of columns:

```python
from saga.table import Table

table = Table({"id": 0, "name": 1}, [[0, 1], ["Name 0", "Name 1"]])
```

### Behaviour notes

- `new(headers, *rows)` uses only as many values from each row as there are
  headers, so extra values at the end of a row are ignored. A row with fewer
  values than there are headers raises `TableError`.
- `insert_rows(headers, *rows)` does nothing when no rows are given or when
  none of the headers exist in the table. A row too short to hold a value for
  every known header raises `TableError`.
- `update_column(name, None)` sets every value in the column to `None`.
- `column(name)` returns a copy of the column's values and raises `KeyError`
  for an unknown column. The `headers` property is also a copy.
- `validate()` raises `TableError` when the number of headers and columns
  differ, when two headers share a position, when a position is out of range,
  or when columns hold different numbers of values.
- Two tables are equal when both are valid, have the same column names, and
  each column holds the same values, whatever order the columns were added
  in. A table that fails `validate()` is never equal to another. Tables are
  not hashable.

## What it does not do

`saga` is a library only: it has no command-line tool, and it does not read
or write tables from files or any other storage. Tables exist only in memory.

## Running the tests

```
pip install ".[test]"
pytest
```