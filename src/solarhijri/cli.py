from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^-?\d{1,4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    y, m, d = s.rsplit("-", 2)
    return int(y), int(m), int(d)


def _fmt(t) -> str:
    return f"{t[0]:04d}-{t[1]:02d}-{t[2]:02d}"


def _dates_last(argv: list[str]) -> list[str]:
    """Move date arguments behind "--" so argparse never reads a negative year as an option."""
    dates = [a for a in argv if _DATE_RE.match(a)]
    rest = [a for a in argv if a != "--" and not _DATE_RE.match(a)]
    return rest + ["--"] + dates if dates else rest


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _engine_name(use_ephemeris: bool) -> str:
    """Register the Skyfield-backed engine on demand and return its name."""
    if not use_ephemeris:
        return "astronomical"
    import solarhijri
    from solarhijri.engines.specs import EPHEMERIS

    if EPHEMERIS.name not in solarhijri.list_engines():
        solarhijri.register_engine(EPHEMERIS.name, solarhijri.make_calendar(EPHEMERIS))
    return EPHEMERIS.name


def cmd_day(argv: list[str]) -> int:
    import solarhijri

    p = argparse.ArgumentParser(prog="solarhijri day", description="Gregorian -> Persian dates (both variants)")
    p.add_argument("date", help="YYYY-MM-DD (proleptic Gregorian)")
    p.add_argument("--ephemeris", action="store_true", help="Use a JPL ephemeris via Skyfield for the equinox")
    args = p.parse_args(_dates_last(argv))

    info = solarhijri.day_info(*_parse_ymd(args.date), engine=_engine_name(args.ephemeris))
    print(f"Gregorian             : {_fmt(info['gregorian'])}")
    print(f"JD (midnight)         : {info['jd']:.1f}")
    print(f"Persian (arithmetic)  : {_fmt(info['persian'])}")
    print(f"Persian (astronomical): {_fmt(info['persian_astronomical'])}")
    print(f"Weekday               : {info['weekday']} {info['weekday_name']}")
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import solarhijri

    p = argparse.ArgumentParser(prog="solarhijri to-gregorian", description="Persian -> Gregorian date")
    p.add_argument("date", help="YYYY-MM-DD (Persian)")
    p.add_argument("--variant", choices=["arithmetic", "astronomical"], default="arithmetic")
    p.add_argument("--ephemeris", action="store_true", help="Astronomical variant from a JPL ephemeris")
    args = p.parse_args(_dates_last(argv))

    y, m, d = _parse_ymd(args.date)
    if args.variant == "arithmetic":
        g = solarhijri.convert_persian_to_gregorian(y, m, d)
    else:
        g = solarhijri.convert_persian_astronomical_to_gregorian(y, m, d, engine=_engine_name(args.ephemeris))
    print(_fmt(g))
    return 0


def cmd_equinox(argv: list[str]) -> int:
    import solarhijri

    p = argparse.ArgumentParser(prog="solarhijri equinox", description="March equinox at the Tehran meridian")
    p.add_argument("year", type=int, help="Gregorian year")
    p.add_argument("--ephemeris", action="store_true", help="Use a JPL ephemeris via Skyfield")
    args = p.parse_args(argv)

    eng = solarhijri.get_engine(_engine_name(args.ephemeris))
    a = eng.astronomy
    jde = a.equinox_jde(args.year, 0)
    dt = a.delta_t_seconds(args.year)
    eot = a.equation_of_time(jde)
    ev = eng.locator.event(args.year)
    nowruz = solarhijri.jd_to_gregorian(ev.jd + 0.5)

    print(f"March equinox {args.year}:")
    print(f"  JDE (TT)          = {jde:.6f}")
    print(f"  Delta T           = {dt:.2f} s")
    print(f"  Equation of time  = {eot * 1440.0:+.3f} min")
    print(f"  Tehran apparent JD= {ev.jd_frac:.6f}")
    print(f"  Equinox day (JD)  = {ev.jd}")
    print(f"  Nowruz            = {_fmt(nowruz)} (Persian year {eng.from_jd(ev.jd + 0.5).year})")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    levels = ["DEBUG", "INFO", "WARNING", "ERROR"]
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--log-level", default="WARNING", choices=levels)
    opts, argv = pre.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, opts.log_level), format="%(levelname)s %(name)s: %(message)s")

    # shorthand: `solarhijri [--log-level L] YYYY-MM-DD ...`
    dates = [a for a in argv if a != "--"]
    if dates and _DATE_RE.match(dates[0]):
        return cmd_day(dates)

    p = argparse.ArgumentParser(prog="solarhijri", description="Persian (Solar Hijri) calendar toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", choices=levels)
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Persian dates")
    sub.add_parser("to-gregorian", help="Persian -> Gregorian date")
    sub.add_parser("equinox", help="March equinox at the Tehran meridian")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["nowruz-table", "leap-years", "round-trip"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "to-gregorian":
        return cmd_to_gregorian(rest)

    if args.cmd == "equinox":
        return cmd_equinox(rest)

    if args.cmd == "diag":
        tool_map = {
            "nowruz-table": "solarhijri.diagnostics.nowruz_table",
            "leap-years": "solarhijri.diagnostics.leap_years",
            "round-trip": "solarhijri.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
