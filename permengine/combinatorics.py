from collections import Counter
from math import factorial as _factorial, prod
from typing import Iterable

from permengine.pptypes import HashableT, InvalidArgument

# largest n with n! < 2**63. ints here never overflow, but counts past this
# point will not fit a signed 64-bit field on the consumer side.
INT64_FACTORIAL_CEILING = 20


def factorial(n: int) -> int:
    if n < 0:
        raise InvalidArgument("Factorial is not defined for negative numbers")
    return _factorial(n)


def frequency_table(symbols: Iterable[HashableT] | str) -> dict[HashableT, int]:
    if symbols is None:
        raise InvalidArgument("Input sequence cannot be None")
    return dict(Counter(symbols))


def estimate_unique_permutations(symbols: Iterable[HashableT] | str) -> int:
    """
    Number of distinct orderings of `symbols`: n! over the product of count!
    for every repeated symbol. Exact, despite the name.
    """
    if symbols is None:
        return 1
    counts = frequency_table(symbols)
    n = sum(counts.values())
    if n == 0:
        return 1
    denominator = prod(factorial(c) for c in counts.values() if c > 1)
    return factorial(n) // denominator
