from __future__ import annotations

import argparse
import random
from typing import Callable, List

import solarhijri
from solarhijri.core.types import GregorianDate, PersianDate


def parse_ymd(s: str) -> GregorianDate:
    y, m, d = s.rsplit("-", 2)
    return GregorianDate(int(y), int(m), int(d))


def roundtrip_test(
    name: str,
    forward: Callable[[float], PersianDate],
    backward: Callable[[int, int, int], float],
    N: int,
    jd_start: float,
    jd_end: float,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0
    span = int(jd_end - jd_start)

    for _ in range(N):
        jd0 = jd_start + random.randint(0, span)
        p = forward(jd0)
        jd1 = backward(*p)
        if jd1 != jd0:
            failures += 1
            print("\nFAIL")
            print("variant:", name)
            print("gregorian:", solarhijri.jd_to_gregorian(jd0))
            print("persian:", p)
            print("jd0, jd1:", jd0, jd1)
            if failures >= max_failures:
                return failures
    return failures


def main(argv: List[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> persian -> gregorian.")
    p.add_argument("--N", type=int, default=2000, help="Trials per variant.")
    p.add_argument("--start", type=str, default="1600-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2400-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--engine", default="astronomical", help="Astronomical engine name.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per variant.")
    args = p.parse_args(argv)

    jd_start = solarhijri.gregorian_to_jd(*parse_ymd(args.start))
    jd_end = solarhijri.gregorian_to_jd(*parse_ymd(args.end))
    if jd_end < jd_start:
        raise SystemExit("--end must be >= --start")

    variants = [
        ("arithmetic", solarhijri.jd_to_persian, solarhijri.persian_to_jd),
        (
            args.engine,
            lambda jd: solarhijri.jd_to_persian_astronomical(jd, engine=args.engine),
            lambda y, m, d: solarhijri.persian_astronomical_to_jd(y, m, d, engine=args.engine),
        ),
    ]

    total_fail = 0
    for name, fwd, back in variants:
        print(f"Testing {name} ...")
        total_fail += roundtrip_test(
            name, fwd, back, N=args.N, jd_start=jd_start, jd_end=jd_end,
            seed=args.seed, max_failures=args.max_failures,
        )

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
