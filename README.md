# algokit

Small, readable implementations of classic algorithms, along with a simple
chronometer for timing them.

## Contents

- `algokit.recursion`: iterative and recursive versions of decimal-to-binary
  conversion (`iterative_dec2bin`, `recursive_dec2bin`), digit sum,
  factorial, Fibonacci (`fibo_iterative`, `fibo_memoization`,
  `fibo_recursive`), GCD, power and string reversal.
- `algokit.search`: `sequential_search`, `binary_search` and
  `binary_r_search`. Each returns the index of the key, or `-1` when the key
  is missing. The binary searches expect an ascending sequence.
- `algokit.vector`: a fixed-size `Vector` with bounds-checked indexing,
  `resize`, `assign` and `copy`. A size of zero or less raises `RangeError`;
  an index outside the vector raises `IndexOutOfBounds`.
- `algokit.text`: `split(text, delimiter)` and `IpAddress.parse("host:port")`.
- `algokit.timing`: the `Chronometer` class, whose `stop()` returns the
  milliseconds since `start()` (or `-1.0` if it was not started), plus the
  `swap` and `seq_to_str` helpers.
- `algokit.errors`: the exceptions the package raises. `RangeError`,
  `OutOfMemory`, `IndexOutOfBounds`, `NoSuchElement`, `IllegalAction` and
  `Overflow` all derive from `StructureError`.

## Installation

```
pip install .
```

## Usage

```python
from algokit.search import binary_search
from algokit.recursion import recursive_gcd
from algokit.timing import Chronometer, seq_to_str
from algokit.vector import Vector

values = [1, 30, 76, 89, 92, 94]
print(binary_search(values, 89))    # 3
print(recursive_gcd(389, 271))      # 1

v = Vector(5, 1)
print(v)                            # [1, 1, 1, 1, 1]
v.resize(3)
print(len(v))                       # 3

crono = Chronometer()
crono.start()
seq_to_str(range(10_000))
print(crono.stop(), "ms")
```

## Commands

```
algokit-recursion [DEMO ...]   # runs and times the recursion examples
algokit-search [--size N]      # times the three searches (default N = 1000000)
```

`algokit-recursion` accepts any of `binary`, `digits`, `factorial`,
`fibonacci`, `gcd`, `power` and `reverse`; with none given it runs them all.

## Not included

The package has no sorting routines and no command for timing sorts; it
covers recursion, searching, the `Vector` type, text parsing and timing only.

## Running the tests

```
pip install .[test]
pytest
```