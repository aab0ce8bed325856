"""Benchmark: PII scrubbing latency, per-document p50/p99.

Measures the per-call latency of PiiRedactor.redact() on a short document
mixing verified identifiers with look-alike numbers that fail verification.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from indic_id.detection.redactor import PiiRedactor

_WARMUP: int = 100
_ITERATIONS: int = 2_000

_DOCUMENT: str = (
    "Customer KYC note. Aadhaar 9999 9999 0019 verified against PAN ABCPE1234F. "
    "Billing GSTIN 27AAPFR5055K1ZM. Order reference 9999-9999-0018 and "
    "internal code ABCDE1234F are not identifiers. "
) * 5


def bench_scrub_latency() -> dict[str, object]:
    """Benchmark PiiRedactor.redact() per-call latency.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p99_latency_ms, memory_peak_mb.
    """
    redactor = PiiRedactor()

    for _ in range(_WARMUP):
        redactor.redact(_DOCUMENT)

    latencies_ms: list[float] = []
    for _ in range(_ITERATIONS):
        t0 = time.perf_counter()
        redactor.redact(_DOCUMENT)
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000

    result: dict[str, object] = {
        "operation": "scrub_latency",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p50_latency_ms": round(sorted_lats[n // 2], 4),
        "p99_latency_ms": round(sorted_lats[min(int(n * 0.99), n - 1)], 4),
        "memory_peak_mb": 0.0,
    }
    print(
        f"[bench_scrub_latency] {result['operation']}: "
        f"p99={result['p99_latency_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


def run_benchmark() -> dict[str, object]:
    """Entry point returning the benchmark result dict."""
    return bench_scrub_latency()


if __name__ == "__main__":
    result = run_benchmark()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
