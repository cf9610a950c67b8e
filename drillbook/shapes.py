"""Look shapes up by number or by name."""

import enum
import re
import sys


class Shape(enum.Enum):
    """The known shapes, numbered from zero."""

    CIRCLE = 0
    SQUARE = 1
    RECTANGLE = 2


DEFAULT_NAMES = {
    Shape.CIRCLE: "Circle",
    Shape.SQUARE: "Square",
    Shape.RECTANGLE: "Rectangle",
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class CorruptedMapError(ValueError):
    """A name map does not hold exactly one entry per shape."""


def shape_name(shape, names=None):
    """Return the name of ``shape`` (a Shape or its number) from ``names``."""
    names = DEFAULT_NAMES if names is None else names
    if len(names) != len(Shape):
        raise CorruptedMapError("name map must hold one entry per shape")
    try:
        key = Shape(shape)
    except ValueError:
        raise LookupError(f"undefined shape: {shape!r}") from None
    try:
        return names[key]
    except KeyError:
        raise LookupError(f"undefined shape: {shape!r}") from None


def shape_by_name(text, names=None):
    """Return the shape whose name in ``names`` matches ``text``, ignoring case."""
    names = DEFAULT_NAMES if names is None else names
    wanted = text.lower()
    if wanted:
        for shape, name in names.items():
            if name.lower() == wanted:
                return shape
    raise LookupError(f"undefined shape: {text!r}")


def describe(text, names=None):
    """Answer a query by number or by name as a line of text."""
    match = _LEADING_INT.match(text)
    try:
        if match:
            return f"Shape name: {shape_name(int(match.group(1)), names)}"
        return f"Shape name: {shape_name(shape_by_name(text, names))}"
    except CorruptedMapError:
        return "Corrupted map!"
    except LookupError:
        return "Undefined shape!"


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if args:
        text = args[0]
    else:
        try:
            text = input("Enter name or id: ")
        except EOFError:
            text = ""
    words = text.split()
    print(describe(words[0] if words else ""))
    return 0


if __name__ == "__main__":
    sys.exit(main())