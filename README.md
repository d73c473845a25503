# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of operations. Each operation is printed as it is performed.

## Install

    pip install .

## Usage

Pass the numbers either as separate arguments or as a single
space-separated string:

    push_swap 3 2 1
    push_swap "4 67 3 87 23"

The same entry point can be run as a module:

    python -m pushswap.cli 3 2 1

The program prints one operation per line, such as `sa`, `pb` or `rra`.
Applied in order to stack `a` (first number on top), the operations
leave it sorted in ascending order with `b` empty. Input that is
already sorted prints nothing.

Each number may have one leading `+` or `-` followed by digits only.
A token that does not fit that form, a value outside the 32-bit signed
range, or a repeated value makes the program print `Error` to standard
output and exit with status 1. Running with no arguments exits with
status 1 and prints nothing.

## Operations

| Op    | Effect                                    |
|-------|-------------------------------------------|
| `sa`  | swap the top two elements of `a`          |
| `sb`  | swap the top two elements of `b`          |
| `ss`  | `sa` and `sb`                             |
| `pa`  | move the top of `b` onto `a`              |
| `pb`  | move the top of `a` onto `b`              |
| `ra`  | rotate `a` up (top goes to the bottom)    |
| `rb`  | rotate `b` up                             |
| `rr`  | `ra` and `rb`                             |
| `rra` | rotate `a` down (bottom comes to the top) |
| `rrb` | rotate `b` down                           |
| `rrr` | `rra` and `rrb`                           |

A single-stack operation that has nothing to act on (for example `sa`
with fewer than two elements in `a`) changes nothing and prints nothing.
The combined operations `ss`, `rr` and `rrr` always print their own name.

## Strategy

- two elements: a single swap when out of order;
- three elements: a fixed case table (`sort_three`);
- four or five: move the smallest values to `b`, sort the remaining
  three, then move them back (`sort_five`);
- more: values are replaced by their rank and sorted with a binary
  radix sort across the two stacks (`radix_sort`).

`pushswap.sorting.sort_stacks` picks the strategy by size.

## Library use

    import io
    from pushswap.stack import Stacks
    from pushswap.sorting import sort_stacks

    out = io.StringIO()
    stacks = Stacks([3, 1, 2], out)
    sort_stacks(stacks)
    print(out.getvalue())   # the operations, one per line
    print(list(stacks.a))   # [1, 2, 3]

Modules:

- `pushswap.stack`: `Stacks` (the two stacks as deques, top at index 0,
  with the eleven operations as methods) and `is_sorted`.
- `pushswap.parsing`: `split_words`, `parse_int`, `has_syntax_error` and
  `parse_arguments`, which raises `InputError` for bad input.
- `pushswap.sorting`: `find_min_index`, `normalize`, `count_max_bits`,
  `sort_three`, `sort_five`, `radix_sort` and `sort_stacks`.
- `pushswap.cli`: `main(argv=None)`, returning the exit status.

The `pushswap.libft` subpackage holds small general helpers:

- `chars`: ASCII classification (`isalpha`, `isdigit`, `isalnum`,
  `isascii`, `isprint`), `tolower`, `toupper` and `itoa` for 32-bit
  integers.
- `strings`: string functions that treat a NUL character as the end of
  the text (`strlen`, `split`, `strchr`, `strrchr`, `strdup`, `striteri`,
  `strjoin`, `strlcat`, `strlcpy`, `strmapi`, `strncmp`, `strnstr`,
  `strtrim`, `substr`).
- `memory`: byte-buffer functions on bytes-like objects (`bzero`,
  `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`).
- `lists`: `ListNode` and a doubly linked `LinkedList` with `add_front`,
  `add_back`, `last`, `clear`, `iterate` and `map`.
- `printf`: `render` and `printf` supporting `%c %s %d %i %u %x %X %p %%`,
  plus `format_signed`, `format_unsigned` and `format_pointer`.
- `output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`,
  writing to an OS file descriptor.

## What it does not do

There is no checker: the package prints a sequence of operations but
has no command that reads operations back and verifies them against a
list of numbers.

## Tests

    pip install .[test]
    pytest