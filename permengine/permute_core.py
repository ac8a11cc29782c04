"""
Permutation kernels. Each takes a tuple of symbols and returns every ordering
of it as a list of tuples, duplicates included. No argument checking happens
here; see permengine.permute for the public wrappers.
"""
from permengine.pptypes import HashableT, Perm


def backtrack(
    symbols: tuple[HashableT, ...], prune: bool = False
) -> list[Perm]:
    """
    Recursive prefix extension. With `prune`, a symbol value already tried at
    a given depth is not tried again at that depth, so each distinct
    permutation is emitted once.
    """
    perms = []

    def extend(prefix, remaining):
        if not remaining:
            perms.append(prefix)
            return
        # values tried at this depth; belongs to this frame only
        tried = set() if prune else None
        for i, symbol in enumerate(remaining):
            if tried is not None:
                if symbol in tried:
                    continue
                tried.add(symbol)
            extend(prefix + (symbol,), remaining[:i] + remaining[i + 1:])

    extend((), symbols)
    return perms


def heap(symbols: tuple[HashableT, ...]) -> list[Perm]:
    """
    Heap's algorithm, iterative form. Every emitted permutation differs from
    the previous one by a single transposition.
    """
    work = list(symbols)
    n = len(work)
    control = [0] * n
    perms = [tuple(work)]
    i = 0
    while i < n:
        if control[i] < i:
            j = 0 if i % 2 == 0 else control[i]
            work[j], work[i] = work[i], work[j]
            perms.append(tuple(work))
            control[i] += 1
            i = 0
        else:
            control[i] = 0
            i += 1
    return perms


def insertion(symbols: tuple[HashableT, ...]) -> list[Perm]:
    perms = [()]
    for symbol in symbols:
        perms = [
            perm[:k] + (symbol,) + perm[k:]
            for perm in perms
            for k in range(len(perm) + 1)
        ]
    return perms
