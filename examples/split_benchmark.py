#!/usr/bin/env python3
"""
Benchmark the range-splitting iterator variants.

This script compares the simple, merged and merged_perf iterators on the
canonical comma-separated inputs, then repeats the comparison for the
subsequence-capable variants with a two-character separator.

Usage:
    python examples/split_benchmark.py

Output:
    Per-operation time and allocation for every variant and test case
"""

import logging

import spansplit
from spansplit import BenchmarkConfig
from spansplit.types import BenchmarkReport

SUBSEQUENCE_CASES = (
    "art::arst::ar::str::st::rst::ar::st::arst::ars::t::arst::",
    "arstarstarst::arstarstarst::arstarstarst::arstarstarst",
)


def print_report(title: str, report: BenchmarkReport) -> None:
    print(f"\n{'=' * 72}")
    print(title)
    print(f"{'=' * 72}")

    case_indexes = sorted({r.case_index for r in report.results})
    for case_index in case_indexes:
        rows = report.for_case(case_index)
        baseline = max(rows, key=lambda r: r.mean_ns)
        print(
            f"\nCase {case_index}: {rows[0].case_length} elements, "
            f"{rows[0].segments} segments"
        )
        print(
            f"{'Variant':<14} {'Mean (ns)':>11} {'StdDev':>9} "
            f"{'Median':>9} {'Alloc (B)':>10} {'Speedup':>8}"
        )
        print("-" * 72)
        for r in sorted(rows, key=lambda r: r.mean_ns):
            alloc = "-" if r.allocated_bytes is None else str(r.allocated_bytes)
            speedup = baseline.mean_ns / r.mean_ns if r.mean_ns else float("inf")
            print(
                f"{r.variant:<14} {r.mean_ns:>11.1f} {r.std_ns:>9.1f} "
                f"{r.median_ns:>9.1f} {alloc:>10} {speedup:>7.2f}x"
            )

    for warning in report.trace.warnings if report.trace else []:
        print(f"\n⚠ {warning}")


def main():
    """Run both benchmark sweeps."""
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    print("=" * 72)
    print("SPANSPLIT VARIANT BENCHMARK")
    print("=" * 72)

    config = BenchmarkConfig(return_trace=True)
    print(f"\nSeparator: {config.separator!r}")
    print(f"Samples: {config.repeat} x {config.number} drains")
    print_report("ELEMENT SEPARATOR", spansplit.run_benchmark(config))

    report = spansplit.run_benchmark(
        config,
        separator="::",
        test_cases=SUBSEQUENCE_CASES,
        variants=("merged", "merged_perf", "sequence"),
    )
    print_report("SUBSEQUENCE SEPARATOR", report)


if __name__ == "__main__":
    main()
