"""Constants for spansplit - defaults and canonical benchmark inputs."""

# Returned by matchers when the separator does not occur in the scanned tail
NOT_FOUND = -1

# Default iterator variant used by split_ranges()
DEFAULT_VARIANT = "merged_perf"

# Default separator for the benchmark
DEFAULT_SEPARATOR = ","

# Benchmark inputs
# Case 0: many short fields and a trailing separator.
# Case 1: few long fields, no trailing separator.
BENCHMARK_TEST_CASES = (
    "art,arst,ar,str,st,rst,ar,st,arst,ars,t,arst,arst,art,arst,ar,str,st,rst,"
    "ar,st,arst,ars,t,arst,",
    "arstarstarst,arstarstarst,arstarstarst,arstarstarst,arstarstarst,"
    "arstarstarst,arstarstarst,arstarstarst",
)

# Benchmark defaults
# Structure: {"number": 1000, "repeat": 5, "warmup": 1}
# Keys: number (drains per sample), repeat (samples), warmup (untimed samples)
DEFAULT_BENCHMARK = {
    "number": 1000,
    "repeat": 5,
    "warmup": 1,
}
