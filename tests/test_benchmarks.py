"""Structural tests for indic-id benchmarks.

Verifies that each benchmark function is callable and returns a dict
with the expected required keys.
"""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent / "benchmarks"))

_REQUIRED_KEYS = {"operation", "ops_per_second", "avg_latency_ms"}


def test_bench_checksum_throughput_returns_expected_keys() -> None:
    """bench_checksum_validation_throughput returns a dict with required keys."""
    from bench_checksum_throughput import run_benchmark

    result = run_benchmark()
    assert isinstance(result, dict)
    for key in _REQUIRED_KEYS:
        assert key in result, f"Missing key: {key!r}"


def test_bench_checksum_throughput_ops_per_second_positive() -> None:
    """ops_per_second must be a positive float."""
    from bench_checksum_throughput import run_benchmark

    result = run_benchmark()
    assert float(result["ops_per_second"]) > 0.0  # type: ignore[arg-type]


def test_bench_checksum_pools_are_valid() -> None:
    """Every generated identifier in the benchmark pools validates."""
    from bench_checksum_throughput import _make_aadhaar_pool, _make_gstin_pool

    from indic_id import is_valid_aadhaar, is_valid_gstin

    assert all(is_valid_aadhaar(number) for number in _make_aadhaar_pool())
    assert all(is_valid_gstin(gstin) for gstin in _make_gstin_pool())


def test_bench_scrub_latency_returns_expected_keys() -> None:
    """bench_scrub_latency returns a dict with required keys."""
    from bench_scrub_latency import run_benchmark

    result = run_benchmark()
    assert isinstance(result, dict)
    for key in _REQUIRED_KEYS:
        assert key in result, f"Missing key: {key!r}"


def test_bench_scrub_latency_p99_present() -> None:
    """p99_latency_ms must be present and not below p50."""
    from bench_scrub_latency import run_benchmark

    result = run_benchmark()
    assert "p99_latency_ms" in result
    assert float(result["p99_latency_ms"]) >= float(result["p50_latency_ms"])  # type: ignore[arg-type]
