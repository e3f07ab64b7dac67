import spansplit


def test_package_imports():
    assert spansplit.split_ranges is not None
    assert spansplit.run_benchmark is not None


def test_public_api_exported():
    for name in spansplit.__all__:
        assert hasattr(spansplit, name), name


def test_variant_registry():
    assert set(spansplit.VARIANTS) == {"simple", "merged", "merged_perf", "sequence"}
