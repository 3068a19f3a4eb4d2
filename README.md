# pushswap

Works on a list of distinct integers with two stacks, `a` and `b`, and a
fixed set of stack operations. As it sorts, it prints the name of each
named operation it performs, one per line.

## Operations

| Name  | Effect                                                    |
|-------|-----------------------------------------------------------|
| `sa`  | swap the first two elements of `a`                        |
| `sb`  | swap the first two elements of `b`                        |
| `ss`  | `sa` and `sb` together                                    |
| `pa`  | move the top of `b` onto `a`                              |
| `pb`  | move the top of `a` onto `b`                              |
| `ra`  | rotate `a` up: the first element becomes the last         |
| `rb`  | rotate `b` up                                             |
| `rr`  | `ra` and `rb` together                                    |
| `rra` | rotate `a` down: the last element becomes the first       |
| `rrb` | rotate `b` down                                           |
| `rrr` | `rra` and `rrb` together                                  |

Each of these is a method of `pushswap.stacks.Stacks`. An operation that
changes nothing (for example `sa` on a stack with one element) prints
nothing.

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments, or as one argument that holds
the numbers separated by spaces:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The first element of stack `a` is the first number given. If an
argument is not a valid 32-bit integer, or a number is repeated, the
command writes `Error` to standard error and exits with status 1.
With no arguments it prints nothing and exits with status 1.

Up to three numbers are handled by `pushswap.small.sort_small`; more
are handled by `pushswap.quick.sort_large`.

## Library use

```python
import io

from pushswap.parsing import parse_arguments
from pushswap.small import sort_small
from pushswap.stacks import Stacks

numbers = parse_arguments(["3", "2", "1"])
out = io.StringIO()
stacks = Stacks(numbers, verbose=False, out=out)
sort_small(stacks)
print(stacks.stack("a"))        # (1, 2, 3)
print(out.getvalue().split())   # ['ra', 'sa']
```

`parse_arguments` raises `pushswap.parsing.InputError` for invalid
input. `Stacks(..., verbose=True)` writes a step-by-step description and
the state of both stacks instead of the bare operation names.
`Stacks.check_order(name)` returns an `OrderStatus` telling whether a
stack is strictly ascending from the top.

Other modules:

- `pushswap.order`: `maximum_below`, `minimum_above`, `median` and
  `nth_smallest` over a sequence of values.
- `pushswap.small.bubble_sort`: sorts one stack with swaps and rotations.
- `pushswap.quick`: `cheapest_move`, `move_to_b`, `quick_move` and
  `sort_large`.
- `pushswap.printf`: `sprintf` and `printf` for the conversions
  `c s p d i u x X %` with the flags `-`, `0`, `+`, space and `#`,
  width and precision; `pushswap.printf_format` holds the flag handling.
- `pushswap.lines.LineReader`: reads a file descriptor line by line.
- `pushswap.textutil` and `pushswap.chars`: small string and ASCII
  character helpers.

## Limitations

- For more than three numbers, `sort_large` does not guarantee that
  stack `a` ends up sorted, and the last rotations it makes to bring the
  minimum to the top are applied to the stacks without being printed.
- There is no command that reads a list of operations and checks them
  against the input.

## Tests

```
pip install .[test]
pytest
```