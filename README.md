# drillbook

A set of small console programming drills. You can import each one as a library
module or run it as a command.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Commands

- `drillbook-scroller`: prints lines in which each column walks down through a
  text, and each column starts after a random delay. By default the text is
  "HELLO WORLD!" shown as binary, with 128 columns, a spacing of 256 and one
  line every 30 ms. The options are `--rows`, `--spacing`, `--text`,
  `--format {binary,string}`, `--interval` (in milliseconds) and `--limit`,
  which sets how many lines to print. Without `--limit` it runs until you
  interrupt it with Ctrl-C.
- `drillbook-factorial [VALUE ...]`: prints the exact factorial of each value,
  with the time it took. Values come from the arguments, or from a prompt when
  there are none. The run stops at the first value that is not an integer in
  1..20000, or when input ends. It then prints a short system report.
- `drillbook-dice`: plays a dice race and prints every turn. On alternate turns
  the rolls count as negative. The game ends when a player's total passes the
  win limit, or in a draw once the turn limit is passed. The options are
  `--players`, `--win-limit`, `--draw-limit` and `--range`.
- `drillbook-mtable`: prints a multiplication table laid out in one of the loop
  styles. Use `--loop {for,while,goto,do}` (default `do`) and `--size`
  (default 10).
- `drillbook-bitshift [VALUE ...]`: for each integer it shows the parity, the
  sign, the 32-bit pattern and the pattern of `check_n_shift(value)`. Values
  come from the arguments or from a prompt. It stops after a value of 0, and
  input that is not a number counts as 0.
- `drillbook-shapes [QUERY]`: looks up a shape by numeric id or by name,
  ignoring case. It prints `Shape name: ...` or `Undefined shape!`.
- `drillbook-arrays`: runs four drills in turn:
  1. reverses a word you type;
  2. prints a 3×3 product matrix;
  3. sorts `--size` random values in 1..100;
  4. reads `--size` integers and reports the minimum and maximum.

## Library use

```python
from drillbook.factorial import factorial, string_multiply
from drillbook.mtable import Loop, render
from drillbook.bitshift import check_n_shift, to_bits
from drillbook.shapes import Shape, shape_name, shape_by_name
from drillbook.arrays import reverse_string, count_digits, matrix_text, min_max

factorial(5)                 # "120"
string_multiply("12", "34")  # "408"
print(render(Loop.FOR, 3))
check_n_shift(3, 2)          # 0
to_bits(-1, 8)               # "11111111"
shape_name(Shape.SQUARE)     # "Square"
shape_by_name("circle")      # Shape.CIRCLE
reverse_string("abc")        # "cba"
count_digits(-120)           # 3
min_max([3, 1, 2])           # (1, 3)
```

The randomised parts accept an `rng` argument, such as `random.Random(seed)`,
which makes their output repeatable. These are `Scroller`, `DiceGame`,
`random_values`, `bounded_rand` and `rand_in_range`.

`drillbook.sysinfo.system_info()` returns the system report:

- on Linux, the CPU vendor and model and the total and free RAM, read from
  `/proc`;
- the operating system family;
- the Python implementation and version.

## Limitations

- The scroller does not stop when a key is pressed. End it with Ctrl-C or set
  `--limit`.
- On systems other than Linux and Windows, the system report has no CPU or
  memory details.