"""A vertical text rain: columns scroll through a text at random starts."""

import argparse
import enum
import itertools
import sys
import time

from drillbook.randutil import bounded_rand


class Format(enum.Enum):
    """How the scrolled text is derived from the input text."""

    BINARY = "binary"
    STRING = "string"


def convert(text, fmt):
    """Return ``text`` as shown by the scroller in the given format.

    In binary format every byte becomes a space followed by its eight bits.
    """
    if fmt is Format.BINARY:
        return "".join(f" {byte:08b}" for byte in text.encode("utf-8"))
    return text


class Scroller:
    """Produces lines in which each column walks through the text."""

    def __init__(self, rows=8, spacing=8, text="", fmt=Format.STRING, rng=None):
        if rows < 0:
            raise ValueError("rows must not be negative")
        self.rows = rows
        self.spacing = spacing
        self.text = convert(text, fmt)
        self._rng = rng
        self._offsets = [self._restart() for _ in range(rows)]

    def _restart(self):
        return -bounded_rand(self.spacing, self._rng)

    def next_line(self):
        """Return the next line and advance every column by one."""
        chars = []
        for column, offset in enumerate(self._offsets):
            # A column waiting to start redraws its delay on every line.
            if offset < 0 or offset >= len(self.text):
                offset = self._restart()
            chars.append(" " if offset < 0 else self.text[offset])
            self._offsets[column] = offset + 1
        return "".join(chars)

    def lines(self):
        """Yield lines without end."""
        while True:
            yield self.next_line()

    def run(self, ms=30, stream=None, limit=None):
        """Write a line every ``ms`` milliseconds; return how many were written."""
        out = sys.stdout if stream is None else stream
        written = 0
        for line in itertools.islice(self.lines(), limit):
            time.sleep(ms / 1000)
            out.write(line + "\n")
            out.flush()
            written += 1
        return written


def main(argv=None):
    parser = argparse.ArgumentParser(description="Scroll a text down the terminal.")
    parser.add_argument("--rows", type=int, default=128)
    parser.add_argument("--spacing", type=int, default=256)
    parser.add_argument("--text", default="HELLO WORLD!")
    parser.add_argument(
        "--format", choices=[f.value for f in Format], default=Format.BINARY.value
    )
    parser.add_argument("--interval", type=int, default=30, help="milliseconds")
    parser.add_argument("--limit", type=int, default=None, help="lines to show")
    args = parser.parse_args(argv)

    scroller = Scroller(args.rows, args.spacing, args.text, Format(args.format))
    try:
        scroller.run(args.interval, limit=args.limit)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())