"""Factorials as decimal strings, and an interactive factorial prompt."""

import math
import sys
import time

from drillbook.sysinfo import system_info

MAX_INPUT = 20000
_DIRECT_LIMIT = 10 ** 1000


def _check_digits(operand):
    if not (operand.isascii() and operand.isdigit()):
        raise ValueError(f"not a non-negative decimal number: {operand!r}")


def string_multiply(a, b):
    """Multiply two non-negative decimal strings digit by digit."""
    _check_digits(a)
    _check_digits(b)
    if a == "0" or b == "0":
        return "0"
    hi, lo = (a, b) if len(a) > len(b) else (b, a)
    sums = [0] * (len(hi) + len(lo))
    for y, lo_digit in enumerate(reversed(lo)):
        factor = int(lo_digit)
        for x, hi_digit in enumerate(reversed(hi)):
            sums[x + y] += int(hi_digit) * factor

    digits = []
    carry = 0
    for column in sums:
        carry += column
        digits.append(str(carry % 10))
        carry //= 10
    return "".join(reversed(digits)).lstrip("0") or "0"


def _to_decimal(value):
    """Decimal text of a non-negative int, free of the int-to-str digit limit."""
    if value < _DIRECT_LIMIT:
        return str(value)
    half = value.bit_length() * 3 // 20
    high, low = divmod(value, 10 ** half)
    return _to_decimal(high) + _to_decimal(low).zfill(half)


def factorial(n):
    """Return ``n!`` as a decimal string."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return _to_decimal(math.factorial(n))


def _parse(text):
    try:
        return int(text.strip())
    except ValueError:
        return None


def _prompted():
    while True:
        try:
            yield input("Enter value : ")
        except EOFError:
            return


def _given(values):
    for value in values:
        print(f"Enter value : {value}")
        yield value


def main(argv=None):
    values = sys.argv[1:] if argv is None else argv
    entries = _given(values) if values else _prompted()
    for entry in entries:
        print()
        value = _parse(entry)
        if not value or value < 0 or value > MAX_INPUT:
            print(f"Not a value! Valid value range [ 0..{MAX_INPUT} ]")
            break
        begin = time.perf_counter()
        print(factorial(value) + "\n")
        elapsed = int((time.perf_counter() - begin) * 1000)
        print(f"Time elapsed : {elapsed}[ms]")

    print(system_info(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())