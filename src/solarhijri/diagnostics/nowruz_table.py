from __future__ import annotations

import argparse

import solarhijri


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Nowruz (1 Farvardin) Gregorian dates for the arithmetic and astronomical calendars."
    )
    p.add_argument("--from-year", type=int, default=1390, help="First Persian year.")
    p.add_argument("--to-year", type=int, default=1420, help="Last Persian year.")
    p.add_argument("--engine", default="astronomical", help="Astronomical engine name.")
    p.add_argument("--only-diff", action="store_true", help="Only list years where the variants disagree.")
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    header = f"{'Year':>5}  {'Arithmetic':<10}  {'Astronomical':<12}  {'Equinox JD':>14}  Leap(a/x)"
    print(header)
    print("-" * len(header))

    n_diff = 0
    for Y in range(Y0, Y1 + 1):
        a = solarhijri.convert_persian_to_gregorian(Y, 1, 1)
        x = solarhijri.convert_persian_astronomical_to_gregorian(Y, 1, 1, engine=args.engine)
        differ = a != x
        n_diff += differ
        if args.only_diff and not differ:
            continue
        eq = solarhijri.tehran_equinox(a.year, engine=args.engine)
        la = "L" if solarhijri.leap_persian(Y) else "-"
        lx = "L" if solarhijri.leap_persian_astronomical(Y, engine=args.engine) else "-"
        mark = "  *" if differ else ""
        print(
            f"{Y:>5}  {a.year:04d}-{a.month:02d}-{a.day:02d}  {x.year:04d}-{x.month:02d}-{x.day:02d}    "
            f"{eq:>14.5f}  {la}/{lx}{mark}"
        )

    print(f"\nYears where the variants disagree: {n_diff}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
