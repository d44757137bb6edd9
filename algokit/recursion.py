"""Iterative and recursive versions of classic integer and string routines."""

import argparse

from .timing import Chronometer, swap


def _check_natural(number, name="number"):
    if not isinstance(number, int):
        raise TypeError(f"{name} must be an integer")
    if number < 0:
        raise ValueError(f"{name} must not be negative")


def iterative_dec2bin(number):
    """Return the binary digits of number; zero gives an empty string."""
    _check_natural(number)
    digits = ""
    while number > 0:
        digits = str(number % 2) + digits
        number //= 2
    return digits


def recursive_dec2bin(number):
    """Return the binary digits of a positive number, built recursively."""
    _check_natural(number)
    if number == 0:
        raise ValueError("number must be positive")
    if number == 1:
        return "1"
    return recursive_dec2bin(number // 2) + str(number % 2)


def iterative_sum_digits(number):
    """Return the sum of the decimal digits of number."""
    _check_natural(number)
    total = 0
    while number > 0:
        total += number % 10
        number //= 10
    return total


def recursive_sum_digits(number):
    """Return the sum of the decimal digits of number, recursively."""
    _check_natural(number)
    if number == 0:
        return 0
    return number % 10 + recursive_sum_digits(number // 10)


def iterative_factorial(number):
    """Return number! computed with a loop."""
    _check_natural(number)
    result = 1
    for factor in range(1, number + 1):
        result *= factor
    return result


def recursive_factorial(number):
    """Return number! computed recursively."""
    _check_natural(number)
    if number == 0:
        return 1
    return number * recursive_factorial(number - 1)


def _check_fib_index(n):
    if not isinstance(n, int):
        raise TypeError("n must be an integer")
    if n < 1:
        raise ValueError("n must be at least 1")


def fibo_iterative(n):
    """Return the n-th Fibonacci number (1-based) with a loop."""
    _check_fib_index(n)
    previous, current = 1, 1
    for _ in range(3, n + 1):
        previous, current = current, previous + current
    return current


def fibo_memoization(n):
    """Return the n-th Fibonacci number (1-based) from a filled table."""
    _check_fib_index(n)
    if n <= 2:
        return 1
    table = [0, 1, 1]
    for _ in range(3, n + 1):
        table.append(table[-1] + table[-2])
    return table[n]


def fibo_recursive(n):
    """Return the n-th Fibonacci number (1-based) by plain recursion."""
    _check_fib_index(n)
    if n <= 2:
        return 1
    return fibo_recursive(n - 1) + fibo_recursive(n - 2)


def iterative_gcd(a, b):
    """Return the greatest common divisor of two natural numbers."""
    _check_natural(a, "a")
    _check_natural(b, "b")
    while b != 0:
        a, b = b, a % b
    return a


def recursive_gcd(a, b):
    """Return the greatest common divisor of two natural numbers, recursively."""
    _check_natural(a, "a")
    _check_natural(b, "b")
    if b == 0:
        return a
    return recursive_gcd(b, a % b)


def _check_exponent(n):
    if not isinstance(n, int):
        raise TypeError("n must be an integer")


def iterative_power(x, n):
    """Return x raised to the integer n by repeated multiplication."""
    _check_exponent(n)
    if n < 0:
        return iterative_power(1 / x, -n)
    result = 1.0
    for _ in range(n):
        result *= x
    return result


def recursive_power(x, n):
    """Return x raised to the integer n by recursive squaring."""
    _check_exponent(n)
    if n < 0:
        return recursive_power(1 / x, -n)
    if n == 0:
        return 1.0
    if n == 1:
        return x
    if n % 2 == 0:
        return recursive_power(x * x, n // 2)
    return x * recursive_power(x * x, (n - 1) // 2)


def iterative_reverse(text):
    """Return text reversed by swapping from both ends inwards."""
    chars = list(text)
    low, high = 0, len(chars) - 1
    while low < high:
        swap(chars, low, high)
        low += 1
        high -= 1
    return "".join(chars)


def _reverse_between(chars, low, high):
    if low < high:
        swap(chars, low, high)
        _reverse_between(chars, low + 1, high - 1)


def recursive_reverse(text):
    """Return text reversed by recursive swapping from both ends."""
    chars = list(text)
    _reverse_between(chars, 0, len(chars) - 1)
    return "".join(chars)


_SAMPLE_SENTENCE = (
    "Recursion reverses this sentence by swapping one pair of characters "
    "at a time, from both ends towards the middle."
)


def _fmt(value):
    return f"{value:g}" if isinstance(value, float) else str(value)


def _timed(label, func, *args, trailer="\n"):
    crono = Chronometer()
    crono.start()
    value = func(*args)
    print(f"{label}: {_fmt(value)}")
    ms = crono.stop()
    print(f"time: {ms:g} ms", end="\n" + trailer)


_DEMOS = {
    "binary": lambda: (
        _timed("iterative dec2bin(1073741825)", iterative_dec2bin, 1073741825),
        _timed("recursive dec2bin(1073741825)", recursive_dec2bin, 1073741825),
    ),
    "digits": lambda: (
        _timed("iterativeSumDigits(123456)", iterative_sum_digits, 123456),
        _timed("recursiveSumDigits(123456)", recursive_sum_digits, 123456),
    ),
    "factorial": lambda: (
        _timed("iterative factorial(30)", iterative_factorial, 30),
        _timed("recursive factorial(30)", recursive_factorial, 30),
    ),
    "fibonacci": lambda: (
        _timed("iterative fibonacci(40)", fibo_iterative, 40),
        _timed("recursive fibonacci(40)", fibo_recursive, 40),
    ),
    "gcd": lambda: (
        _timed("iterative gcd(389, 271)", iterative_gcd, 389, 271),
        _timed("recursive gcd(389, 271)", recursive_gcd, 389, 271, trailer="\n\n\n"),
        _timed("iterative gcd(97835033, 45083758)", iterative_gcd, 97835033, 45083758),
        _timed("recursive gcd(97835033, 45083758)", recursive_gcd, 97835033, 45083758),
    ),
    "power": lambda: (
        _timed("iterative power(2, 1000)", iterative_power, 2, 1000),
        _timed("recursive power(2, 1000)", recursive_power, 2, 1000),
    ),
    "reverse": lambda: (
        _timed("iterative reverse(prueba)", iterative_reverse, _SAMPLE_SENTENCE),
        _timed("recursive reverse(prueba)", recursive_reverse, _SAMPLE_SENTENCE),
    ),
}


def main(argv=None):
    """Run and time the iterative and recursive demonstrations."""
    parser = argparse.ArgumentParser(
        description="Compare iterative and recursive routines."
    )
    parser.add_argument(
        "demos",
        nargs="*",
        choices=sorted(_DEMOS),
        metavar="DEMO",
        help=f"demonstrations to run (default: all of {', '.join(sorted(_DEMOS))})",
    )
    args = parser.parse_args(argv)
    for name in args.demos or list(_DEMOS):
        _DEMOS[name]()
    return 0