from __future__ import annotations

import argparse
import math
import statistics
import time
from typing import Dict, List, Sequence

import numpy as np

from rangefold.algebra import Magma
from rangefold.algebra.typical import Additive, BitXor, Gcd, Max, Min
from rangefold.common.constants import RNG_SEEDS, VALUE_HIGH, VALUE_LOW, seed_everywhere
from rangefold.structure.ranged import (
    AccumulativeArray,
    FenwickTree,
    NaiveVec,
    SegmentTree,
    SparseTable,
    SquareRootDecomposition,
)


OPERATORS: Dict[str, Magma] = {
    "add": Additive(),
    "xor": BitXor(),
    "max": Max(),
    "min": Min(),
    "gcd": Gcd(),
}

STRUCTURES = {
    "naive": NaiveVec,
    "acc": AccumulativeArray,
    "fenwick": FenwickTree,
    "segment": SegmentTree,
    "sparse": SparseTable,
    "sqrt": SquareRootDecomposition,
}


def percentile(sorted_values: Sequence[float], pct: float) -> float:
    if not sorted_values:
        return float("nan")
    if pct <= 0:
        return sorted_values[0]
    if pct >= 1:
        return sorted_values[-1]
    idx = (len(sorted_values) - 1) * pct
    lo = math.floor(idx)
    hi = math.ceil(idx)
    if lo == hi:
        return sorted_values[int(idx)]
    weight = idx - lo
    return sorted_values[lo] * (1.0 - weight) + sorted_values[hi] * weight


def summarize(label: str, durations: List[float]) -> str:
    durations.sort()
    mean = statistics.fmean(durations) if durations else float("nan")
    median = statistics.median(durations) if durations else float("nan")
    p95 = percentile(durations, 0.95)
    return f"{label}: mean={mean * 1e6:.2f}us,median={median * 1e6:.2f}us,p95={p95 * 1e6:.2f}us"


def run_benchmark(args: argparse.Namespace) -> None:
    seed_everywhere(args.seed)
    gen = np.random.default_rng(args.seed)
    operator = OPERATORS[args.op]
    low = 0 if args.op in ("xor", "gcd") else VALUE_LOW
    values = [int(x) for x in gen.integers(low, VALUE_HIGH, size=args.size)]
    starts = gen.integers(0, args.size + 1, size=args.queries)
    widths = gen.integers(0, args.size + 1, size=args.queries)
    spans = [(int(s), int(min(args.size, s + w))) for s, w in zip(starts, widths)]
    points = [int(x) for x in gen.integers(0, args.size, size=args.queries)]

    for name in args.structures:
        cls = STRUCTURES[name]
        try:
            t0 = time.perf_counter()
            structure = cls(values, operator)
            build = time.perf_counter() - t0
        except TypeError as exc:
            print(f"[{name}] skipped: {exc}")
            continue
        print(f"[{name}] n={args.size} op={operator!r} build={build:.6f}s")

        if hasattr(structure, "range_op"):
            durations: List[float] = []
            for start, end in spans:
                t0 = time.perf_counter()
                structure.range_op(start, end)
                durations.append(time.perf_counter() - t0)
            print("  " + summarize("range_op", durations))

        if hasattr(structure, "set_at"):
            durations = []
            for index in points:
                t0 = time.perf_counter()
                structure.set_at(values[index], index)
                durations.append(time.perf_counter() - t0)
            print("  " + summarize("set_at", durations))


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark the ranged fold structures.")
    parser.add_argument("--size", type=int, default=10000, help="Number of elements.")
    parser.add_argument("--queries", type=int, default=2000, help="Timed queries per structure.")
    parser.add_argument("--seed", type=int, default=RNG_SEEDS["bench"], help="Deterministic RNG seed.")
    parser.add_argument("--op", choices=sorted(OPERATORS), default="add", help="Operator to fold with.")
    parser.add_argument(
        "--structures",
        nargs="+",
        choices=list(STRUCTURES),
        default=list(STRUCTURES),
        help="Structures to time.",
    )
    args = parser.parse_args()
    if args.size <= 0:
        parser.error("--size must be positive")
    run_benchmark(args)


if __name__ == "__main__":
    main()
