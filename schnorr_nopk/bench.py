"""
Generate-and-verify benchmark.

Usage:
    schnorr-nopk-bench                     # 100 vectors, OS randomness
    schnorr-nopk-bench --count 1000 --seed 7
    schnorr-nopk-bench -v                  # DEBUG logging
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from dataclasses import dataclass
from typing import List, Optional

from .vectors import DEFAULT_MAX_ATTEMPTS, random_schnorr_input
from .verify import verify_input

logger = logging.getLogger(__name__)


@dataclass
class BenchResult:
    count: int
    generate_seconds: float
    verify_seconds: float
    failures: int

    @property
    def verify_ms_per_sig(self) -> float:
        return 1000.0 * self.verify_seconds / self.count if self.count else 0.0

    @property
    def generate_ms_per_sig(self) -> float:
        return 1000.0 * self.generate_seconds / self.count if self.count else 0.0


def run_benchmark(
    count: int,
    seed: Optional[int] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> BenchResult:
    """Generate *count* vectors, then time verifying all of them."""
    if count < 1:
        raise ValueError("count must be ≥ 1")
    rng = random.Random(seed) if seed is not None else None

    start = time.perf_counter()
    vectors = [
        random_schnorr_input(rng, max_attempts=max_attempts)
        for _ in range(count)
    ]
    generated = time.perf_counter()
    failures = sum(1 for v in vectors if not verify_input(v))
    done = time.perf_counter()

    if failures:
        logger.warning("%d of %d generated vectors failed to verify", failures, count)
    return BenchResult(
        count=count,
        generate_seconds=generated - start,
        verify_seconds=done - generated,
        failures=failures,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Schnorr no-pubkey-check benchmark")
    parser.add_argument("--count", type=int, default=100, help="Number of signatures (default: 100)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible vectors")
    parser.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS,
                        help=f"Nonce resampling cap (default: {DEFAULT_MAX_ATTEMPTS})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable DEBUG logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        result = run_benchmark(args.count, args.seed, args.max_attempts)
    except ValueError as exc:
        parser.error(str(exc))

    print(f"signatures : {result.count}")
    print(f"generate   : {result.generate_seconds:.3f} s ({result.generate_ms_per_sig:.3f} ms/sig)")
    print(f"verify     : {result.verify_seconds:.3f} s ({result.verify_ms_per_sig:.3f} ms/sig)")
    print(f"failures   : {result.failures}")
    return 1 if result.failures else 0


if __name__ == "__main__":
    sys.exit(main())
