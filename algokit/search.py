"""Sequential and binary search over sequences."""

import argparse

from .timing import Chronometer


def sequential_search(values, key):
    """Return the first index holding key, or -1 if absent."""
    for index, value in enumerate(values):
        if value == key:
            return index
    return -1


def binary_search(values, key):
    """Return an index holding key in an ascending sequence, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if key == values[mid]:
            return mid
        if key < values[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def binary_r_search(values, low, high, key):
    """Recursively search values[low..high] (inclusive) for key; -1 if absent."""
    if low > high:
        return -1
    mid = low + (high - low) // 2
    if key == values[mid]:
        return mid
    if key < values[mid]:
        return binary_r_search(values, low, mid - 1, key)
    return binary_r_search(values, mid + 1, high, key)


def main(argv=None):
    """Time the three searches for a missing key in 1..size."""
    parser = argparse.ArgumentParser(description="Compare search speeds.")
    parser.add_argument(
        "--size", type=int, default=1_000_000, help="number of elements"
    )
    args = parser.parse_args(argv)
    if args.size < 1:
        parser.error("--size must be positive")
    values = list(range(1, args.size + 1))
    crono = Chronometer()

    runs = [
        ("sequential", lambda: sequential_search(values, 0)),
        ("binary", lambda: binary_search(values, 0)),
        ("binaryR", lambda: binary_r_search(values, 0, len(values) - 1, 0)),
    ]
    for name, run in runs:
        print(f"Starting {name}")
        crono.start()
        result = run()
        ms = crono.stop()
        print(f"result = {result}")
        print(f"time = {ms:g} ms")
    return 0