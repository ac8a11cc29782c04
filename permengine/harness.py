"""
Side-by-side run of every generator on one input. Timing and agreement are
reported, never enforced: a divergence shows up as `consistent` or
`equivalent` being False on the returned report.
"""
from collections import Counter
from dataclasses import dataclass
from time import perf_counter_ns
from typing import Iterable

from permengine.combinatorics import estimate_unique_permutations
from permengine.permute import ALGORITHMS
from permengine.pptypes import HashableT, InvalidArgument

LABELS = {
    "recursive": "Recursive method:",
    "iterative": "Iterative method:",
    "iterative_alt": "Iterative Alt:",
}


@dataclass(frozen=True)
class AlgorithmTiming:
    name: str
    count: int
    elapsed_ns: int

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_ns / 1_000_000


@dataclass(frozen=True)
class PerformanceReport:
    input: str | tuple
    length: int
    expected: int
    include_duplicates: bool
    timings: tuple[AlgorithmTiming, ...]
    equivalent: bool

    @property
    def consistent(self) -> bool:
        return len({t.count for t in self.timings}) <= 1

    def format(self) -> str:
        lines = [
            f'Performance Comparison for: "{_display(self.input)}"',
            f"String length: {self.length}",
            f"Expected permutations: {self.expected}",
            f"Include duplicates: {str(self.include_duplicates).lower()}",
            "=" * 50,
        ]
        for t in self.timings:
            label = LABELS.get(t.name, f"{t.name}:")
            lines.append(
                f"{label:<20}{t.count:8d} permutations, {t.elapsed_ms:8.3f} ms"
            )
        lines.append(f"Results consistent: {str(self.consistent).lower()}")
        lines.append(f"Results equivalent: {str(self.equivalent).lower()}")
        return "\n".join(lines)


def _display(symbols: str | tuple) -> str:
    if isinstance(symbols, str):
        return symbols
    return " ".join(map(str, symbols))


def compare_performance(
    symbols: Iterable[HashableT] | str, include_duplicates: bool = True
) -> PerformanceReport:
    if symbols is None:
        raise InvalidArgument("Input sequence cannot be None")
    if not isinstance(symbols, str):
        # generators each consume the input, so pin it down once
        symbols = tuple(symbols)
    timings, tallies = [], []
    for name, func in ALGORITHMS.items():
        start = perf_counter_ns()
        result = func(symbols, include_duplicates)
        elapsed = perf_counter_ns() - start
        timings.append(AlgorithmTiming(name, len(result), elapsed))
        tallies.append(Counter(result))
    return PerformanceReport(
        input=symbols,
        length=len(symbols),
        expected=estimate_unique_permutations(symbols),
        include_duplicates=include_duplicates,
        timings=tuple(timings),
        equivalent=all(t == tallies[0] for t in tallies[1:]),
    )
