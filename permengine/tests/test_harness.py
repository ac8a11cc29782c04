import pytest

from permengine import (
    ALGORITHMS, AlgorithmTiming, InvalidArgument, PerformanceReport,
    compare_performance
)


def test_compare_distinct():
    report = compare_performance("abcd")
    assert report.length == 4
    assert report.expected == 24
    assert report.include_duplicates is True
    assert [t.name for t in report.timings] == list(ALGORITHMS)
    assert all(t.count == 24 for t in report.timings)
    assert all(t.elapsed_ns >= 0 for t in report.timings)
    assert report.consistent
    assert report.equivalent


@pytest.mark.parametrize("include_duplicates, count", ((True, 24), (False, 12)))
def test_compare_repeats(include_duplicates, count):
    report = compare_performance("aabc", include_duplicates)
    assert report.expected == 12
    assert [t.count for t in report.timings] == [count] * 3
    assert report.consistent and report.equivalent


def test_compare_iterator_input():
    report = compare_performance(iter((3, 1, 3)))
    assert report.input == (3, 1, 3)
    assert report.expected == 3
    assert all(t.count == 6 for t in report.timings)
    assert report.equivalent


def test_compare_none():
    with pytest.raises(InvalidArgument):
        compare_performance(None)


def test_inconsistent_report():
    report = PerformanceReport(
        input="ab",
        length=2,
        expected=2,
        include_duplicates=True,
        timings=(
            AlgorithmTiming("recursive", 2, 1_500_000),
            AlgorithmTiming("iterative", 1, 2_000),
        ),
        equivalent=False,
    )
    assert not report.consistent
    assert report.timings[0].elapsed_ms == 1.5
    text = report.format()
    assert "Results consistent: false" in text
    assert "Results equivalent: false" in text


def test_format():
    text = compare_performance("abc").format()
    lines = text.splitlines()
    assert lines[0] == 'Performance Comparison for: "abc"'
    assert "String length: 3" in lines
    assert "Expected permutations: 6" in lines
    assert "Include duplicates: true" in lines
    assert lines[5].startswith("Recursive method:")
    assert lines[6].startswith("Iterative method:")
    assert lines[7].startswith("Iterative Alt:")
    assert "6 permutations" in lines[7]
    assert lines[-2] == "Results consistent: true"
