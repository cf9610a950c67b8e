"""Multiplication tables, laid out the way four different loop styles build them."""

import argparse
import enum
import sys


class Loop(enum.Enum):
    """The loop style whose layout a table follows."""

    FOR = "for"
    WHILE = "while"
    GOTO = "goto"
    DO = "do"


def _rows(size):
    for y in range(1, size + 1):
        yield "".join(f"{x * y:3} " for x in range(1, size + 1))


def table_for(size):
    """Rows each ending in a newline, followed by a blank line."""
    return "".join(row + "\n" for row in _rows(size)) + "\n"


def table_while(size):
    """Rows each ending in a newline."""
    return "".join(row + "\n" for row in _rows(size))


def table_do(size):
    """Rows each ending in a newline; at least one cell is always written."""
    return "".join(row + "\n" for row in _rows(max(size, 1)))


def table_goto(size):
    """Rows each preceded by a newline, with a final newline; never empty."""
    return "".join("\n" + row for row in _rows(max(size, 1))) + "\n"


_BUILDERS = {
    Loop.FOR: table_for,
    Loop.WHILE: table_while,
    Loop.GOTO: table_goto,
    Loop.DO: table_do,
}


def render(loop, size):
    """Return the table of ``size`` built in the given loop style."""
    return _BUILDERS[Loop(loop)](size)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Print a multiplication table.")
    parser.add_argument("--loop", choices=[l.value for l in Loop], default=Loop.DO.value)
    parser.add_argument("--size", type=int, default=10)
    args = parser.parse_args(argv)
    sys.stdout.write(render(Loop(args.loop), args.size))
    return 0


if __name__ == "__main__":
    sys.exit(main())