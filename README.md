# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of instructions. It prints the instructions it uses, one per line. Applied
in order, they leave the numbers in ascending order with the smallest number on
top of stack `a`.

## Instructions

| Name  | Effect                                     |
|-------|--------------------------------------------|
| `sa`  | swap the top two elements of `a`           |
| `sb`  | swap the top two elements of `b`           |
| `ss`  | `sa` and `sb` at once                      |
| `pa`  | move the top of `b` onto `a`               |
| `pb`  | move the top of `a` onto `b`               |
| `ra`  | rotate `a` so the top goes to the bottom   |
| `rb`  | rotate `b` so the top goes to the bottom   |
| `rr`  | `ra` and `rb` at once                      |
| `rra` | rotate `a` so the bottom comes to the top  |
| `rrb` | rotate `b` so the bottom comes to the top  |
| `rrr` | `rra` and `rrb` at once                    |

An instruction that has nothing to act on does nothing. Examples are a swap on
fewer than two elements or a push from an empty stack.

## Command line

```
push_swap 3 2 1
push_swap "4 67 3" 87 23
```

Numbers can be given as separate arguments, or several can share one argument
with spaces between them. The first number is the top of stack `a`.

- With no arguments nothing is printed.
- Input that is already sorted prints nothing.
- The program prints `Error` to standard error and exits with status 1 if any
  word is not a whole number in the 32-bit signed range, or if any number
  appears twice.
  A whole number is an optional `+` or `-` followed by digits.

## Library

```python
from pushswap.sorting import solve

solve([3, 2, 1])          # ['sa', 'rra']
```

- `pushswap.parser.parse_args(args)` turns command-line arguments into a list
  of integers. It raises `pushswap.parser.ParseError`, a subclass of
  `ValueError`, on bad input.
- `pushswap.parser` also provides:
  - `is_number`
  - `parse_int`
  - `has_duplicates`
  - `split_words`
  - `count_total_numbers`
- `pushswap.stacks.Stack` is a list-like stack with its top at index 0. It has
  `swap`, `push_to`, `rotate`, `reverse_rotate`, `is_sorted` and `replace`.
- `pushswap.operations.Machine(values, emit=None)` holds stacks `a` and `b`.
  It has one method per instruction. Each applied instruction is appended to
  `machine.instructions` and, if `emit` is given, passed to it.
- `pushswap.normalize.normalize(values)` replaces each value by its rank.
- `pushswap.sorting.push_swap(machine)` sorts `machine.a`, and
  `solve(values)` returns the list of instructions.

Two to five numbers are sorted with short fixed sequences. Larger inputs are
first replaced by their ranks. They are then moved to `b` in chunks of ranks
(5 chunks for up to 100 numbers, 10 beyond that) and brought back largest
first. After a large sort, stack `a` therefore holds the ranks `0 .. n-1`
rather than the original values.

## What it does not do

There is no command that reads a list of instructions and checks whether it
sorts a given input. To check a sequence yourself, create a `Machine`, call
its instruction methods, and inspect `machine.a` and `machine.b`.