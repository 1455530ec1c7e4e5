import argparse
import random
import sys
import time
from typing import List, Optional, Sequence, Tuple

from linkedintset import LinkedIntSet

DEFAULT_ITERS = 10000
DEFAULT_ROUNDS = 10


def run_round(s: LinkedIntSet, rands: List[int]) -> Tuple[int, float]:
    contained = 0

    start_time = time.time()

    while rands:
        v = rands.pop()

        if s.contains(v):
            contained += 1
        s.add(v)

    end_time = time.time()

    return contained, end_time - start_time


def positive_int(text: str) -> int:
    n = int(text)
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return n


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="LinkedIntSet insert/contains timings")
    parser.add_argument("--iters", type=positive_int, default=DEFAULT_ITERS)
    parser.add_argument("--rounds", type=positive_int, default=DEFAULT_ROUNDS)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    s = LinkedIntSet()

    contained = 0
    for r in range(args.rounds):
        rands = [rng.randint(0, args.iters - 1) for _ in range(args.iters)]

        c, elapsed = run_round(s, rands)
        contained += c

        print(f"time taken for round {r}: {elapsed:.6f}")
        sys.stdout.flush()

    print(f"pre-contained count: {contained}")
    print(f"total elems: {len(s)}")
    s.release()
    return 0


if __name__ == "__main__":
    sys.exit(main())
