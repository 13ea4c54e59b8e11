# memfit

A small simulator of contiguous memory allocation, as taught in operating
systems courses. Memory is a single region split into blocks, each either
free or held by a program. Programs are placed with one of three rules:

- **first fit**: the first free block large enough,
- **best fit**: the smallest free block large enough,
- **worst fit**: the largest free block large enough.

Freeing a program merges its block with free neighbours, and compaction
slides every program to the start of memory, leaving one free block at the
end.

## Installation

```
pip install .
```

## Interactive use

The `memfit` command starts an interactive session on a memory of 500
units, reading from standard input. The placement rule is chosen with an
optional argument, `first` (the default), `best` or `worst`:

```
memfit
memfit best
memfit worst
memfit --help
```

The menu offers:

1. allocate a program (asks for a program ID and a size),
2. free a program by its ID,
3. compact memory,
4. show the current layout,
5. exit.

Input is read as whitespace-separated words, so answers may be given on one
line or several. The session also ends when input runs out. A choice other
than 1 to 5, or a size that is not a non-negative whole number, prints
`Invalid Input!`. After each change the layout is printed as a chain of
blocks, for example:

```
[PID: P1, Size: 100, Start: 0, End: 100] -> [FREE, Size: 400, Start: 100, End: 500] -> NULL
```

The session can also be driven from code with `memfit.cli.run(strategy,
lines, out)`, which takes a `Strategy` (or its value as a string), an
iterable of input lines and a text stream to write to, and returns the
final `Memory`.

## Library use

```python
from memfit.memory import CompactionNeeded, Memory, Strategy

for strategy in Strategy:
    memory = Memory(500)
    memory.allocate("P1", 100, strategy)
    memory.allocate("P2", 200, strategy)
    memory.deallocate("P1")
    try:
        memory.allocate("P3", 250, strategy)
    except CompactionNeeded:
        memory.compact()
        memory.allocate("P3", 250, strategy)
    print(memory.render())
```

`Memory(capacity=500)` starts as one free block. Its members:

- `allocate(pid, size, strategy=Strategy.FIRST)` places a program and
  returns its `Block`.
- `deallocate(pid)` frees the first block held by `pid` and returns the
  merged free `Block`.
- `compact()` moves all programs to the start of memory.
- `render()` returns the layout as a string like the one above.
- `blocks` is a tuple of the current blocks, and iterating over a `Memory`
  yields them in order.
- `free_size` is the total free memory.

Each `Block` has `pid` (`None` for a free block), `size`, `start`, and the
properties `end` and `is_free`.

Errors are raised as exceptions derived from `AllocationError`:

- `NotEnoughSpace`: the request is larger than all free memory together.
- `CompactionNeeded`: there is enough free memory in total, but no single
  free block can hold the request.
- `UnknownProgram`: no block belongs to the given program.
- `MemoryFull`: compaction was asked for with no free memory left.

A negative size or a capacity that is not positive raises `ValueError`.

## Limits

The memory layout lives only for the length of a session or of a `Memory`
object; nothing is saved to disk. The command always uses a memory of 500
units.

## Running the tests

```
pip install ".[test]"
pytest
```