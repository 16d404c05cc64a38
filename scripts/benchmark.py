#!/usr/bin/env python3
"""Benchmark script for diffgate performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import tempfile
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of diffgate package."""
    start = time.perf_counter()
    import diffgate  # noqa: F401

    return time.perf_counter() - start


def benchmark_stale_audit(directories: int, files_per_directory: int) -> float:
    """Measure a full stale approval audit over a synthetic snapshot tree."""
    from diffgate.application.audit.stale_approvals import audit_stale_approved_files
    from diffgate.domain.model.audit_config import AuditConfig

    config = AuditConfig(error_on_stale_approved_files=True)

    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        expected: list[str] = []
        for d in range(directories):
            folder = root / f"suite_{d}"
            folder.mkdir()
            for f in range(files_per_directory):
                approved = folder / f"test_{f}.approved.txt"
                approved.write_text("x")
                expected.append(approved.as_posix())

        start = time.perf_counter()
        audit_stale_approved_files(expected, config)
        return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run diffgate benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = []

    # Import time
    import_time = benchmark_import_time()
    results.append(
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": import_time,
        }
    )

    # Stale approval audit
    audit_time = benchmark_stale_audit(directories=50, files_per_directory=40)
    results.append(
        {
            "name": "Stale Audit (50 dirs x 40 files)",
            "unit": "seconds",
            "value": audit_time,
        }
    )

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
