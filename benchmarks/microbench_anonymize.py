"""Microbenchmark: anonymization throughput for IPv4 and IPv6."""

import argparse
import json
import os
import random
from pathlib import Path

from cryptopan import CryptoPAn, Timer
from cryptopan.utils import get_logger

logger = get_logger("microbench")


def benchmark_anonymize(N_values, widths, num_trials=5, seed=42):
    """Benchmark anonymize_v4 / anonymize_v6 over random addresses."""
    results = []
    rng = random.Random(seed)
    engine = CryptoPAn(os.urandom(64))

    for width in widths:
        anonymize = engine.anonymize_v4 if width == 4 else engine.anonymize_v6
        for N in N_values:
            logger.info(f"Benchmarking width={width}, N={N}")

            addresses = [rng.getrandbits(8 * width).to_bytes(width, "big") for _ in range(N)]

            # Warmup
            for addr in addresses[:100]:
                anonymize(addr)

            times = []
            for _ in range(num_trials):
                with Timer(f"width={width} N={N}", verbose=False) as t:
                    for addr in addresses:
                        anonymize(addr)
                times.append(t.elapsed)

            avg_time = sum(times) / len(times)
            results.append({
                "width": width,
                "N": N,
                "avg_time": avg_time,
                "throughput": N / avg_time,
            })

    return results


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Microbenchmark anonymization")
    parser.add_argument("--out", type=Path, default=Path("results/benchmarks/microbench.json"))
    parser.add_argument("--N", type=int, nargs="+", default=[1000, 10000])
    parser.add_argument("--widths", type=int, nargs="+", default=[4, 16], choices=[4, 16])
    parser.add_argument("--trials", type=int, default=5)
    parser.add_argument("--seed", type=int, default=42)

    args = parser.parse_args()

    get_logger("microbench", level="INFO")

    results = benchmark_anonymize(
        N_values=args.N,
        widths=args.widths,
        num_trials=args.trials,
        seed=args.seed,
    )

    args.out.parent.mkdir(parents=True, exist_ok=True)
    with open(args.out, "w") as f:
        json.dump(results, f, indent=2)

    print(f"Results saved to {args.out}")
