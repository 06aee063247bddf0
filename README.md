# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a small set of
operations. It prints the operations it used, one per line, so that
applying them to the input leaves stack `a` in ascending order and stack `b`
empty.

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |

An operation that cannot change anything (swapping or rotating a stack of
fewer than two elements, pushing from an empty stack) is skipped and not
recorded.

## Installing

```
pip install .
```

## Usage

Numbers may be given as separate arguments, or several to one argument
separated by spaces:

```
push_swap 3 2 1
push_swap "5 4 3" 2 1
```

The same command can be started with `python -m pushswap.cli`.

The first element given is the top of stack `a`. A list that is already
sorted produces no output. If no arguments are given, nothing is printed.

On invalid input the command writes `Error` to standard error and exits
with status 1. Input is invalid when:

- an argument is empty or holds no digit;
- a space-separated word holds anything besides an optional leading sign
  and digits;
- a number falls outside the 32-bit signed range;
- a number appears more than once.

## Strategy

Two, three, four and five numbers are sorted by dedicated routines: for
four and five, the smallest number is rotated to the top by the shorter way,
parked on `b`, and the rest sorted before it is pushed back. Larger inputs
are ranked, pushed to `b` in chunks of ranks (16 for up to 100 numbers, 36
beyond), and then pushed back to `a` highest rank first.

## Library use

```python
from pushswap.stacks import Stacks
from pushswap.parsing import make_stack
from pushswap.sorting import sort_it

stacks = Stacks(make_stack(["3", "1", "2"]))
sort_it(stacks)
print(stacks.moves)   # ['ra']
```

- `pushswap.stacks` holds `Item` (a number and its index), `Stacks` with the
  operations as methods and the list of recorded `moves`, and helpers such as
  `is_sorted` and `index_by_ascending_order`.
- `pushswap.parsing` holds `validate_arguments`, `make_stack`,
  `check_duplicates`, `parse_int` and `split_words`; they raise
  `ParseError` on invalid input.
- `pushswap.sorting` holds `sort_it` and the strategies it picks from.
- `pushswap.cli.run` takes the argument list and returns the operations as a
  list of strings, raising `pushswap.parsing.ParseError` on invalid input;
  `pushswap.cli.main` is the command.

## What it does not do

The package only produces the list of operations. It has no checker that
reads operations from input and verifies that they sort a given list.