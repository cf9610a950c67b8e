"""Shift a 32-bit integer: odd or negative values right, the rest left."""

import sys

INT_BITS = 32
_MASK = (1 << INT_BITS) - 1
_SIGN = 1 << (INT_BITS - 1)


def _to_int32(value):
    value &= _MASK
    return value - (1 << INT_BITS) if value & _SIGN else value


def check_n_shift(value, shift=2):
    """Shift right if ``value`` is odd or negative, otherwise left, in 32 bits."""
    value = _to_int32(value)
    if value & 1 or value < 0:
        return value >> shift
    return _to_int32(value << shift)


def to_bits(value, width=INT_BITS):
    """Two's-complement bit string of ``value`` in ``width`` bits."""
    return format(value & ((1 << width) - 1), f"0{width}b")


def describe(value):
    """Say whether ``value`` is odd or even, and negative or positive."""
    parity = "odd" if value & 1 else "even"
    sign = "negative" if value < 0 else "positive"
    return f"Value is {parity} and {sign}."


def _inputs(argv):
    if argv:
        for text in argv:
            print(f"Enter value : {text}")
            yield text
        return
    while True:
        try:
            yield input("Enter value : ")
        except EOFError:
            return


def main(argv=None):
    values = sys.argv[1:] if argv is None else argv
    for text in _inputs(values):
        try:
            value = _to_int32(int(text.strip()))
        except ValueError:
            value = 0
        print(describe(value))
        print(f"Given value is : {to_bits(value)}")
        print(f"Result      is : {to_bits(check_n_shift(value))}")
        if not value:
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())