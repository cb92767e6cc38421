# pushswap

Work with a list of distinct integers on two stacks, `a` and `b`, using a
small fixed set of instructions: `sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`,
`rr`, `rra`, `rrb`, `rrr`. Every instruction applied is printed on its own
line.

## Installing

```
pip install .
```

## Running

Give the numbers as separate arguments:

```
push-swap 3 1 2 5 4
```

or as one quoted string with the numbers separated by spaces:

```
push-swap "3 1 2 5 4"
```

The command does the following, all on standard output:

1. Prints `Stack a:` and then stack `a` as built, one value per line, top
   first, followed by a blank line.
2. Prints the values in ascending order on one line.
3. Moves the values from `a` to `b` chunk by chunk (`pushswap.sorting.chunk_sort`),
   printing `pa` for each move from `a` to `b` and `ra` for each rotation of `b`.
4. Prints `Stack B apres chunk sort:` and then stack `b`.
5. Prints `L'ordre est bon` when `b` read from the top matches the ascending
   order, and `L'ordre n'est pas correct.` otherwise.

When an argument is not a whole number (optional leading spaces and one sign
are allowed), falls outside the 32-bit signed range, or appears twice, the
command writes `Error` to standard error and exits with status 1. It does the
same if the chunk pass stops making progress.

## Using it as a library

```python
from pushswap.stack import Stack, build_stack
from pushswap.sorting import sort_three, sorted_reference
from pushswap.parsing import validate_args, ParseError

a = build_stack([3, 1, 2])
sort_three(a)           # prints "ra"
print(list(a))          # [1, 2, 3]

try:
    validate_args(["1", "1"])
except ParseError:
    print("duplicates rejected")
```

Main modules:

- `pushswap.stack`: `Stack` (`add`, `swap`, `push_to`, `rotate`, `reverse`,
  `head`) and `build_stack`, whose first value ends up on top.
- `pushswap.instructions`: one function per instruction; each acts on the
  stacks and writes its name to `out` (standard output by default).
- `pushswap.parsing`: `split_args`, `check_syntax`, `check_overflow`,
  `check_duplicates`, `validate_args`, `check_args` and `ParseError`.
- `pushswap.sorting`: `quicksort`, `sorted_reference`, `sort_two`,
  `sort_three`, `Chunk`, `init_chunk`, `process_chunk`, `update_chunk`,
  `chunk_sort`.
- `pushswap.cli`: `main`, `format_stack`, `format_sorted_reference`,
  `check_order`.

Helper modules: character tests and `atoi`/`itoa` in `pushswap.chars`, byte
buffer functions in `pushswap.memory`, string helpers in `pushswap.strtools`
and `pushswap.strsearch`, a singly linked list in `pushswap.lists`, a minimal
`printf`/`sprintf` in `pushswap.formatting`, stream writers in
`pushswap.output`, and a buffered `LineReader` in `pushswap.linereader`.

## What it does not do

- The command does not finish sorting: it only moves every value into `b`
  by chunks and then checks the order of `b`. Nothing moves the values back
  into `a`.
- The command does not use `sort_two` or `sort_three`; they are only
  available from the library.
- There is no checker command that reads a list of instructions and tests
  whether they sort the stack.

## Tests

```
pip install .[test]
pytest
```