"""Benchmark: Checksum validation throughput, validations per second.

Measures how many Verhoeff (Aadhaar) and Mod-36 (GSTIN) validations can be
completed per second over a fixed pool of generated identifiers.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from indic_id.checksums.alphabet import ALPHABET
from indic_id.checksums.mod36 import generate_mod36_check_digit, validate_mod36_check_digit
from indic_id.checksums.verhoeff import validate_verhoeff
from indic_id.validators.aadhaar import generate_aadhaar

_ITERATIONS: int = 10_000
_POOL_SIZE: int = 100


def _make_aadhaar_pool() -> list[str]:
    """Build valid Aadhaar-format numbers for benchmarking."""
    return [generate_aadhaar(serial * 7919) for serial in range(_POOL_SIZE)]


def _make_gstin_pool() -> list[str]:
    """Build valid GSTINs across state codes 01-35."""
    pool: list[str] = []
    for i in range(_POOL_SIZE):
        base = f"{i % 35 + 1:02d}ABCDE{i:04d}F1Z"
        pool.append(base + ALPHABET[generate_mod36_check_digit(base)])
    return pool


def bench_checksum_validation_throughput() -> dict[str, object]:
    """Benchmark validate_verhoeff() and validate_mod36_check_digit() throughput.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p99_latency_ms, memory_peak_mb.
    """
    aadhaar_pool = _make_aadhaar_pool()
    gstin_pool = _make_gstin_pool()

    start = time.perf_counter()
    for i in range(_ITERATIONS):
        validate_verhoeff(aadhaar_pool[i % _POOL_SIZE])
        validate_mod36_check_digit(gstin_pool[i % _POOL_SIZE])
    total = time.perf_counter() - start

    operations = _ITERATIONS * 2
    result: dict[str, object] = {
        "operation": "checksum_validation_throughput",
        "iterations": operations,
        "total_seconds": round(total, 4),
        "ops_per_second": round(operations / total, 1),
        "avg_latency_ms": round(total / operations * 1000, 4),
        "p99_latency_ms": 0.0,
        "memory_peak_mb": 0.0,
    }
    print(
        f"[bench_checksum_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def run_benchmark() -> dict[str, object]:
    """Entry point returning the benchmark result dict."""
    return bench_checksum_validation_throughput()


if __name__ == "__main__":
    result = run_benchmark()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "throughput_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
