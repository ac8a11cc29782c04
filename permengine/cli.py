"""
Command-line front end for permengine.

    permengine abc
    permengine aab --unique
    permengine abcd --iterative --max-display 5
    permengine abc --performance
    permengine            (interactive menu)
"""
from __future__ import annotations

import argparse
import logging
import sys
from time import perf_counter_ns
from typing import Iterable

from permengine.combinatorics import estimate_unique_permutations, factorial
from permengine.harness import compare_performance
from permengine.permute import ALGORITHMS
from permengine.pptypes import InvalidArgument

DEFAULT_ALGORITHM = "recursive"
ALGORITHM_CHOICES = ("recursive", "iterative")
MAX_DISPLAY = 20
WARN_ABOVE = factorial(10)
COMPLEXITY_NOTES = (
    "Time Complexity Analysis:",
    "* Recursive: O(n!) time, O(n!) space (recursion stack plus result storage)",
    "* Iterative: O(n!) time, O(n!) space",
    "* For large strings (n > 10), both methods become impractical",
    "* Iterative methods avoid deep recursion but still have factorial complexity",
)

logger = logging.getLogger("permengine")


def setup_logger(
    name: str = "permengine", level: int = logging.INFO
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    # rebind to the current stderr on every call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    ch = logging.StreamHandler()
    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
    )
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="permengine",
        description=(
            "Generate every permutation of a string with a recursive or an "
            "iterative (Heap's) algorithm, or compare all algorithms."
        ),
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="String to permute. Omit to start the interactive menu.",
    )
    parser.add_argument(
        "--unique", "--nodupes",
        dest="include_duplicates",
        action="store_false",
        help="Exclude duplicate permutations.",
    )
    parser.add_argument(
        "--algorithm",
        choices=ALGORITHM_CHOICES,
        default=DEFAULT_ALGORITHM,
        help=f"Generation algorithm (default: {DEFAULT_ALGORITHM}).",
    )
    parser.add_argument(
        "--recursive", "--rec",
        dest="algorithm",
        action="store_const",
        const="recursive",
        help="Shorthand for --algorithm recursive.",
    )
    parser.add_argument(
        "--iterative", "--iter",
        dest="algorithm",
        action="store_const",
        const="iterative",
        help="Shorthand for --algorithm iterative.",
    )
    parser.add_argument(
        "--performance", "--perf",
        dest="performance",
        action="store_true",
        help="Run every algorithm and compare timings.",
    )
    parser.add_argument(
        "--max-display",
        dest="max_display",
        type=int,
        default=MAX_DISPLAY,
        help=f"Number of permutations to print (default: {MAX_DISPLAY}).",
    )
    parser.add_argument(
        "--warn-above",
        dest="warn_above",
        type=int,
        default=WARN_ABOVE,
        help=(
            "Warn before generating more than this many orderings "
            f"(default: {WARN_ABOVE})."
        ),
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def _check_workload(symbols: str, warn_above: int) -> None:
    total = factorial(len(symbols))
    if total > warn_above:
        logger.warning(
            "input of length %d yields %d orderings (%d distinct); "
            "this may exhaust memory",
            len(symbols), total, estimate_unique_permutations(symbols)
        )


def generate_and_display(
    symbols: str,
    include_duplicates: bool = True,
    algorithm: str = DEFAULT_ALGORITHM,
    max_display: int = MAX_DISPLAY,
    warn_above: int = WARN_ABOVE,
) -> None:
    if max_display < 0:
        raise InvalidArgument("--max-display must be non-negative")
    _check_workload(symbols, warn_above)
    print(f'\nGenerating permutations for: "{symbols}"')
    print(f"Algorithm: {algorithm}")
    print(f"Include duplicates: {str(include_duplicates).lower()}")
    print("=" * 50)

    start = perf_counter_ns()
    perms = ALGORITHMS[algorithm](symbols, include_duplicates)
    elapsed = (perf_counter_ns() - start) / 1_000_000
    logger.debug("%s produced %d permutations", algorithm, len(perms))

    print(f"Generated {len(perms)} permutations")
    print(f"Time taken: {elapsed:.3f} ms")
    shown = min(max_display, len(perms))
    print(f"\nFirst {shown} permutations:")
    for i, perm in enumerate(perms[:shown], 1):
        print(f"{i}. {perm}")
    if len(perms) > shown:
        print(f"... and {len(perms) - shown} more")


def run_performance(
    symbols: str,
    include_duplicates: bool = True,
    warn_above: int = WARN_ABOVE,
) -> None:
    _check_workload(symbols, warn_above)
    report = compare_performance(symbols, include_duplicates)
    if not (report.consistent and report.equivalent):
        logger.warning("algorithms disagree on %r", symbols)
    print(report.format())
    print()
    for line in COMPLEXITY_NOTES:
        print(line)


def _ask_duplicates() -> bool:
    answer = input("Include duplicate permutations? (y/n): ")
    return answer.strip().lower() == "y"


def interactive(max_display: int = MAX_DISPLAY, warn_above: int = WARN_ABOVE) -> None:
    print("=== String Permutations Generator ===")
    try:
        while True:
            print("\nOptions:")
            print("1. Generate permutations")
            print("2. Performance comparison")
            print("3. Exit")
            choice = input("Choose option (1-3): ").strip()
            if choice == "1":
                symbols = input("Enter string to permute: ")
                include_duplicates = _ask_duplicates()
                algorithm = input("Algorithm (recursive/iterative): ").strip().lower()
                if algorithm not in ALGORITHM_CHOICES:
                    print(f"Invalid algorithm. Using {DEFAULT_ALGORITHM}.")
                    algorithm = DEFAULT_ALGORITHM
                generate_and_display(
                    symbols, include_duplicates, algorithm, max_display, warn_above
                )
            elif choice == "2":
                symbols = input("Enter string for performance test: ")
                run_performance(symbols, _ask_duplicates(), warn_above)
            elif choice == "3":
                print("Goodbye!")
                return
            else:
                print("Invalid option. Please try again.")
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye!")


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logger(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.input is None:
            if not sys.stdin.isatty():
                parser.print_help()
                return 0
            interactive(args.max_display, args.warn_above)
        elif args.performance:
            run_performance(args.input, args.include_duplicates, args.warn_above)
        else:
            generate_and_display(
                args.input,
                args.include_duplicates,
                args.algorithm,
                args.max_display,
                args.warn_above,
            )
    except InvalidArgument as exc:
        print(f"Error: {exc}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 2
    return 0
