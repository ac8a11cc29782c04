from functools import partial
from typing import Iterable

from permengine.permute_core import backtrack, heap, insertion
from permengine.pptypes import (
    HashableT, InvalidArgument, PermKernel, PermSet, PermutationFunc
)


def _ppwrap(
    func: PermKernel,
    symbols: Iterable[HashableT] | str,
    include_duplicates: bool
) -> PermSet:
    if symbols is None:
        raise InvalidArgument("Input sequence cannot be None")
    try:
        elements = tuple(symbols)
    except (TypeError, ValueError):
        raise TypeError("Input must be an iterable of symbols")
    perms = func(elements)
    if not include_duplicates:
        # set round trip: order of the result is undefined
        perms = list(set(perms))
    if isinstance(symbols, str):
        return ["".join(perm) for perm in perms]
    return perms


def generate_recursive(
    symbols: Iterable[HashableT] | str, include_duplicates: bool = True
) -> PermSet:
    return _ppwrap(
        partial(backtrack, prune=not include_duplicates),
        symbols,
        include_duplicates
    )


def generate_iterative(
    symbols: Iterable[HashableT] | str, include_duplicates: bool = True
) -> PermSet:
    return _ppwrap(heap, symbols, include_duplicates)


def generate_iterative_alt(
    symbols: Iterable[HashableT] | str, include_duplicates: bool = True
) -> PermSet:
    return _ppwrap(insertion, symbols, include_duplicates)


ALGORITHMS: dict[str, PermutationFunc] = {
    "recursive": generate_recursive,
    "iterative": generate_iterative,
    "iterative_alt": generate_iterative_alt,
}
