import argparse
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np
import scipy.sparse as sp

from sparsetext import SparseMatrix

# ---------- Builders ----------


def build_dense_int(m: int, n: int, density: float, seed: int) -> np.ndarray:
    rs = np.random.RandomState(seed)
    out = rs.randint(-100, 101, size=(m, n)).astype(np.int64)
    out[rs.random_sample((m, n)) >= density] = 0
    return out


def build_pair(
    m: int, k: int, n: int, density: float, seed: int
) -> Tuple[SparseMatrix, SparseMatrix, np.ndarray, np.ndarray]:
    A_dense = build_dense_int(m, k, density, seed)
    B_dense = build_dense_int(k, n, density, seed + 101)
    return SparseMatrix.from_dense(A_dense), SparseMatrix.from_dense(B_dense), A_dense, B_dense


# ---------- Timing helpers ----------


def time_op(fn: Callable[[], Any], warmup: int, repeat: int) -> List[float]:
    for _ in range(warmup):
        fn()
    times: List[float] = []
    for _ in range(repeat):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        times.append(t1 - t0)
    return times


def summarize(name: str, times: List[float]) -> Optional[Dict[str, float]]:
    if not times:
        return None
    arr = np.array(times, dtype=np.float64)
    return {
        "name": name,
        "min_ms": float(arr.min() * 1e3),
        "median_ms": float(np.median(arr) * 1e3),
        "mean_ms": float(arr.mean() * 1e3),
    }


# ---------- Main ----------


def main():
    p = argparse.ArgumentParser(description="Sparse integer matmul: scan vs indexed kernels")
    p.add_argument("--m", type=int, default=300)
    p.add_argument("--k", type=int, default=300, help="Inner dimension")
    p.add_argument("--n", type=int, default=300)
    p.add_argument("--density", type=float, default=0.01)
    p.add_argument("--warmup", type=int, default=1)
    p.add_argument("--repeat", type=int, default=3)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--no_scan", action="store_true", help="Skip the quadratic scan kernel")
    p.add_argument("--no_scipy", action="store_true")
    p.add_argument("--validate", action="store_true")
    args = p.parse_args()

    A, B, A_dense, B_dense = build_pair(args.m, args.k, args.n, args.density, args.seed)
    results: List[Dict[str, float]] = []

    kernels = ["indexed"] if args.no_scan else ["indexed", "scan"]
    outputs = {}
    for kernel in kernels:
        times = time_op(lambda: A.multiply(B, kernel=kernel), args.warmup, args.repeat)
        stats = summarize("sparsetext:" + kernel, times)
        if stats:
            results.append(stats)
        outputs[kernel] = A.multiply(B, kernel=kernel)

    if not args.no_scipy:
        A_sp = sp.csr_matrix(A_dense)
        B_sp = sp.csr_matrix(B_dense)
        times = time_op(lambda: A_sp @ B_sp, args.warmup, args.repeat)
        stats = summarize("scipy:csr", times)
        if stats:
            results.append(stats)

    if args.validate:
        ref = A_dense @ B_dense
        for kernel, C in outputs.items():
            if not np.array_equal(C.toarray(), ref):
                raise AssertionError(f"Validation failed: {kernel} kernel vs dense numpy")

    print(
        f"Matmul Benchmarks: m={args.m} k={args.k} n={args.n} density={args.density} "
        f"nnzA={A.nnz} nnzB={B.nnz}"
    )
    for r in results:
        print(
            f"{r['name']:>20}: min {r['min_ms']:.3f} ms | median {r['median_ms']:.3f} ms | mean {r['mean_ms']:.3f} ms"
        )


if __name__ == "__main__":
    main()
