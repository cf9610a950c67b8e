"""Small exercises on strings, matrices, sorting and extremes."""

import argparse
import sys

from drillbook.randutil import rand_in_range

_RULE_WIDTH = 128


def reverse_string(text):
    """Return ``text`` reversed."""
    return text[::-1]


def count_digits(value):
    """Number of decimal digits of ``value``, ignoring its sign."""
    return len(str(abs(value)))


def matrix_text(width=3, height=3):
    """A ``height`` by ``width`` table of ``x * y``, right-aligned in columns."""
    digits = count_digits((width - 1) * (height - 1))
    return "".join(
        "".join(f"{x * y:>{digits}} " for x in range(width)) + "\n"
        for y in range(height)
    )


def sort_report(values):
    """Two lines showing ``values`` as given and sorted."""
    values = list(values)
    if values:
        digits = max(count_digits(min(values)), count_digits(max(values))) + 1
    else:
        digits = count_digits(0) + 1

    def cells(seq):
        return "".join(f"{v:>{digits}}" for v in seq)

    return f"Unsorted :{cells(values)}\nSorted   :{cells(sorted(values))}\n"


def random_values(size=10, low=1, high=100, rng=None):
    """``size`` random integers in the closed range ``[low, high]``."""
    if size < 0:
        raise ValueError("size must not be negative")
    return [rand_in_range(low, high, rng) for _ in range(size)]


def min_max(values):
    """Return ``(smallest, largest)`` of a non-empty sequence."""
    values = list(values)
    if not values:
        raise ValueError("min_max() needs at least one value")
    return min(values), max(values)


def _heading(title):
    line = f"\n{title} "
    return line + "-" * (_RULE_WIDTH - len(line))


def _read_values(size):
    digits = count_digits(size) + 1
    values = []
    for number in range(1, size + 1):
        try:
            text = input(f"Enter value{number:>{digits}}: ")
            values.append(int(text.strip()))
        except (ValueError, EOFError):
            print("\tNot a number!")
            return None
    return values


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the array exercises.")
    parser.add_argument("--size", type=int, default=10)
    args = parser.parse_args(argv)

    print(_heading("1) String Reverse"))
    try:
        words = input("Type something : ").split()
    except EOFError:
        words = []
    print(f"In reverse     : {reverse_string(words[0] if words else '')}")

    print(_heading("2) Heap allocated 2d array"))
    print(matrix_text(), end="")

    print(_heading("3) Sorted vector"))
    print(sort_report(random_values(args.size)), end="")

    print(_heading("4) Min and Max"))
    values = _read_values(args.size)
    if values:
        low, high = min_max(values)
        print("\nEntered values: " + "".join(f"{v}  " for v in values))
        print(f"Min           : {low}")
        print(f"Max           : {high}")
    return 0


if __name__ == "__main__":
    sys.exit(main())