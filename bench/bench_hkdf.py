# MIT License © 2025 Motohiro Suzuki
"""
bench/bench_hkdf.py

HKDF fill() throughput benchmark

- n requests of `chunk` bytes each, served from as few generators as possible
- a generator is replaced when its 255-block budget cannot cover the next request
- reports elapsed time, requests/s and MB/s

Run:
  python3 -m bench.bench_hkdf
  python3 -m bench.bench_hkdf --n 20000 --chunk 7 --hash sha512
"""

from __future__ import annotations

import argparse
import logging
import os
import time
from dataclasses import dataclass

from diagnostics.logging_config import setup_logging
from hkdf_core.algorithms import HashAlgorithm, select_hash
from hkdf_core.config import load_config
from hkdf_core.hkdf import Hkdf

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchResult:
    name: str
    ops: int
    seconds: float
    bytes_total: int
    generators: int

    @property
    def ops_per_sec(self) -> float:
        return self.ops / self.seconds if self.seconds > 0 else 0.0

    @property
    def mb_per_sec(self) -> float:
        return (self.bytes_total / (1024 * 1024)) / self.seconds if self.seconds > 0 else 0.0


def run_bench(n: int, chunk: int, algorithm: HashAlgorithm | str) -> BenchResult:
    alg = select_hash(algorithm)
    if chunk > 255 * alg.digest_size:
        raise ValueError(f"chunk must be <= {255 * alg.digest_size} for {alg.name}")

    ikm = os.urandom(32)
    salt = os.urandom(alg.digest_size)
    buf = bytearray(chunk)
    generators = 1

    t0 = time.perf_counter()
    gen = Hkdf(alg, ikm=ikm, salt=salt, info=b"bench")
    try:
        for _ in range(n):
            if gen.remaining < chunk:
                gen.close()
                gen = Hkdf(alg, ikm=ikm, salt=salt, info=b"bench")
                generators += 1
            gen.fill(buf)
    finally:
        gen.close()
    t1 = time.perf_counter()

    return BenchResult(
        name=f"Hkdf.fill ({alg.name}, chunk={chunk})",
        ops=n,
        seconds=max(1e-12, t1 - t0),
        bytes_total=n * chunk,
        generators=generators,
    )


def main() -> None:
    cfg = load_config()
    ap = argparse.ArgumentParser()
    ap.add_argument("--n", type=int, default=20000, help="number of fill() requests")
    ap.add_argument("--chunk", type=int, default=32, help="bytes per request")
    ap.add_argument("--hash", default=cfg.default_hash, help="sha1 / sha256 / sha384 / sha512")
    args = ap.parse_args()

    if args.n <= 0:
        raise SystemExit("--n must be > 0")
    if args.chunk < 0:
        raise SystemExit("--chunk must be >= 0")

    setup_logging(cfg)
    r = run_bench(n=args.n, chunk=args.chunk, algorithm=args.hash)
    logger.info("bench done generators=%d", r.generators)

    print("=== bench_hkdf ===")
    print(f"case         : {r.name}")
    print(f"requests     : {r.ops}")
    print(f"generators   : {r.generators}")
    print(f"elapsed_sec  : {r.seconds:.6f}")
    print(f"ops_per_sec  : {r.ops_per_sec:,.0f}")
    print(f"mb_per_sec   : {r.mb_per_sec:,.2f}")


if __name__ == "__main__":
    main()
