# MIT License © 2025 Motohiro Suzuki
"""
fuzz/fuzz_hkdf.py

Randomized harness for the incremental Expand stage (pure Python)

Per case:
- random ikm / salt / info (including empty)
- random total length within the 255-block budget, split into random chunks
- concatenated chunks must equal one read() of the same total from a fresh generator
- one random over-limit request must raise OutputLimitExceededError and change nothing

Run:
  python3 -m fuzz.fuzz_hkdf
  python3 -m fuzz.fuzz_hkdf --cases 500 --seed 1 --hash sha1
"""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass

from diagnostics.logging_config import setup_logging
from hkdf_core.algorithms import HashAlgorithm, select_hash
from hkdf_core.config import load_config
from hkdf_core.errors import OutputLimitExceededError
from hkdf_core.hkdf import MAX_BLOCKS, Hkdf

logger = logging.getLogger(__name__)


@dataclass
class FuzzStats:
    cases: int = 0
    chunks: int = 0
    bytes_total: int = 0
    limit_rejected: int = 0
    mismatches: int = 0


def _rand_bytes(rng: random.Random, max_len: int) -> bytes:
    return bytes(rng.getrandbits(8) for _ in range(rng.randint(0, max_len)))


def _split(rng: random.Random, total: int) -> list[int]:
    parts = []
    left = total
    while left > 0:
        n = rng.randint(0, min(left, 3 * 64))
        parts.append(n)
        left -= n
    return parts


def run_case(rng: random.Random, alg: HashAlgorithm, stats: FuzzStats) -> None:
    ikm = _rand_bytes(rng, 80)
    salt = _rand_bytes(rng, 80)
    info = _rand_bytes(rng, 80)
    limit = MAX_BLOCKS * alg.digest_size
    total = rng.randint(0, limit)

    with Hkdf(alg, ikm=ikm, salt=salt, info=info) as ref:
        expected = ref.read(total)

    with Hkdf(alg, ikm=ikm, salt=salt, info=info) as gen:
        out = bytearray()
        for n in _split(rng, total):
            out += gen.read(n)
            stats.chunks += 1

        left = gen.remaining
        if left != limit - total:
            stats.mismatches += 1
            logger.warning("remaining mismatch: got %d want %d", left, limit - total)

        counter = gen.blocks_produced
        buf = bytearray(b"\xa5" * (left + rng.randint(1, 64)))
        try:
            gen.fill(buf)
            stats.mismatches += 1
            logger.warning("over-limit request of %d bytes was served", len(buf))
        except OutputLimitExceededError:
            stats.limit_rejected += 1
        if gen.blocks_produced != counter or gen.remaining != left or set(buf) != {0xA5}:
            stats.mismatches += 1
            logger.warning("rejected request changed generator state")

    if bytes(out) != expected:
        stats.mismatches += 1
        logger.warning("chunked output diverged: total=%d", total)

    stats.cases += 1
    stats.bytes_total += total


def run_fuzz(cases: int, seed: int, algorithm: HashAlgorithm | str) -> FuzzStats:
    alg = select_hash(algorithm)
    rng = random.Random(seed)
    stats = FuzzStats()
    for _ in range(cases):
        run_case(rng, alg, stats)
    return stats


def main() -> None:
    cfg = load_config()
    ap = argparse.ArgumentParser()
    ap.add_argument("--cases", type=int, default=200, help="number of random cases")
    ap.add_argument("--seed", type=int, default=5869, help="PRNG seed")
    ap.add_argument("--hash", default=cfg.default_hash, help="sha1 / sha256 / sha384 / sha512")
    args = ap.parse_args()

    if args.cases <= 0:
        raise SystemExit("--cases must be > 0")

    setup_logging(cfg)
    stats = run_fuzz(cases=args.cases, seed=args.seed, algorithm=args.hash)

    print("=== fuzz_hkdf ===")
    print(f"cases          : {stats.cases}")
    print(f"chunks         : {stats.chunks}")
    print(f"bytes_total    : {stats.bytes_total}")
    print(f"limit_rejected : {stats.limit_rejected}")
    print(f"mismatches     : {stats.mismatches}")

    if stats.mismatches:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
