from __future__ import annotations

from datetime import date
import argparse

import computus


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def letters_label(year: int) -> str:
    first, second = computus.sunday_letters(year)
    return first + second


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Easter, Sunday letters and key movable feasts for a range of years."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Easter", "Letters", "Ash Wed", "Pentecost"]
    colw = [5] + [max(10 if args.dates == "iso" else 6, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        cols = [
            str(Y),
            fmt(computus.easter(Y)),
            letters_label(Y),
            fmt(computus.ash_wednesday(Y)),
            fmt(computus.pentecost(Y)),
        ]
        print("  ".join(c.ljust(w) for c, w in zip(cols, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
