from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys
from datetime import MAXYEAR, MINYEAR


def _year(s: str) -> int:
    """argparse type for years that must fit datetime.date."""
    y = int(s)
    if not MINYEAR <= y <= MAXYEAR:
        raise argparse.ArgumentTypeError(f"year must be in {MINYEAR}..{MAXYEAR}, got {y}")
    return y


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


def cmd_easter(years: list[int]) -> int:
    import computus

    for y in years:
        print(f"{y}  {computus.easter(y).isoformat()}")
    return 0


def cmd_letters(years: list[int]) -> int:
    import computus

    for y in years:
        first, second = computus.sunday_letters(y)
        print(f"{y}  {first}{second}")
    return 0


def cmd_feast(year: int, name: str) -> int:
    import computus

    d, found = computus.resolve(year, name)
    if not found:
        print(f"Unknown feast '{name}'. Available: {', '.join(computus.FEAST_TABLE.names())}", file=sys.stderr)
        return 1
    print(d.isoformat())
    return 0


def cmd_feasts(year: int) -> int:
    import computus

    rows = computus.feasts_in_year(year)
    w = max(len(name) for name, _ in rows)
    for name, d in rows:
        print(f"{name.ljust(w)}  {d.isoformat()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="computus", description="Easter, movable feasts and Sunday letters.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_easter = sub.add_parser("easter", help="Date of Easter Sunday")
    p_easter.add_argument("years", type=_year, nargs="+")

    p_letters = sub.add_parser("letters", help="Sunday letter(s) of a year")
    p_letters.add_argument("years", type=int, nargs="+")

    p_feast = sub.add_parser("feast", help="Date of one movable feast")
    p_feast.add_argument("year", type=_year)
    p_feast.add_argument("name", help='Feast name, e.g. "Ash Wednesday"')

    p_feasts = sub.add_parser("feasts", help="All movable feasts of a year")
    p_feasts.add_argument("year", type=_year)

    # diagnostics
    sub.add_parser("table", help="Print Easter table for a range of years (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["easter-scatter"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd in ("easter", "letters", "feast", "feasts") and rest:
        p.error(f"unrecognized arguments: {' '.join(rest)}")

    if args.cmd == "easter":
        return cmd_easter(args.years)

    if args.cmd == "letters":
        return cmd_letters(args.years)

    if args.cmd == "feast":
        return cmd_feast(args.year, args.name)

    if args.cmd == "feasts":
        return cmd_feasts(args.year)

    if args.cmd == "table":
        return _run_module_main("computus.diagnostics.easter_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "easter-scatter": "computus.diagnostics.easter_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
