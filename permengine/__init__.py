from permengine.combinatorics import (
    INT64_FACTORIAL_CEILING, estimate_unique_permutations, factorial,
    frequency_table
)
from permengine.harness import (
    AlgorithmTiming, PerformanceReport, compare_performance
)
from permengine.permute import (
    ALGORITHMS, generate_iterative, generate_iterative_alt, generate_recursive
)
from permengine.pptypes import InvalidArgument
