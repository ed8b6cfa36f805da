"""
IndexedList Command-Line Interface (CLI)

Small driver around the container and its benchmark:
- demo: walk through push/pop/delete and show the list state
- bench: time list, deque and IndexedList and print memory summaries
- report: sweep input sizes and write the results to CSV

Usage examples:
    python -m linkedvector.cli demo
    python -m linkedvector.cli bench --elements 100000 --payload-count 20
    python -m linkedvector.cli report --path bench.csv --base 1000 --steps 6
"""

import argparse
import logging
import sys

from .bench import report
from .datastructures import DEFAULT_ITEM_SIZE, IndexedList

# Defaults for the two benchmark scenarios.
DEFAULT_ELEMENTS = 100_000
DEFAULT_PAYLOAD_COUNT = 20
DEFAULT_PAYLOAD_SIZE = 8 * (24 + 50_000)  # bytes per modeled large record
PRIMITIVE_ELEMENT = 0xDEADBEEFDEADBEEF


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_demo(args):
    """Run the push/pop/delete walkthrough and print each state."""
    lst: IndexedList[int] = IndexedList()

    def show(step):
        print(f"{step:<16} {lst!r}  len={len(lst)} true_len={lst.true_len()} free={lst.free_len()}")

    lst.push_back(100)
    show("push_back(100)")
    lst.push_back(200)
    show("push_back(200)")
    lst.push_front(300)
    show("push_front(300)")
    print(f"pop_front() -> {lst.pop_front()}")
    show("after pop")
    print(f"delete(1) -> {lst.delete(1)}")
    show("after delete")
    lst.push_back(400)
    show("push_back(400)")
    print(report.describe("IndexedList", lst, DEFAULT_ITEM_SIZE))


def cmd_bench(args):
    """Time the three containers on a large-payload and a primitive workload."""
    print("Starting benches.")
    print(
        f"payload count = {args.payload_count}, elements = {args.elements}, "
        f"payload size = {report.human_bytes(args.payload_size)}"
    )

    scenarios = [
        ("Large payload", args.payload_count, bytes(args.payload_size), args.payload_size),
        ("int", args.elements, PRIMITIVE_ELEMENT, None),
    ]
    for title, count, element, item_size in scenarios:
        print(f"\n==== Benchmark - {title} ====")
        rows = report.run_suite(count, element, item_size=item_size, iterations=args.iterations)
        for line in report.format_rows(rows):
            print(line)

    print("\nDone.")


def cmd_report(args):
    """Sweep exponentially growing sizes and write a CSV report."""
    rows = report.sweep(args.base, args.steps, element=PRIMITIVE_ELEMENT, iterations=args.iterations)
    n = report.write_csv(args.path, rows)
    print(f"Wrote {n} rows to {args.path}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m linkedvector.cli", description="IndexedList demo and benchmark")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("demo", help="Walk through basic list operations")
    s.set_defaults(func=cmd_demo)

    s = sub.add_parser("bench", help="Compare list, deque and IndexedList")
    s.add_argument("--elements", type=int, default=DEFAULT_ELEMENTS)
    s.add_argument("--payload-count", type=int, default=DEFAULT_PAYLOAD_COUNT)
    s.add_argument("--payload-size", type=int, default=DEFAULT_PAYLOAD_SIZE)
    s.add_argument("--iterations", type=int, default=5)
    s.set_defaults(func=cmd_bench)

    s = sub.add_parser("report", help="Write a CSV sweep over input sizes")
    s.add_argument("--path", required=True)
    s.add_argument("--base", type=int, default=1000)
    s.add_argument("--steps", type=int, default=6)
    s.add_argument("--iterations", type=int, default=5)
    s.set_defaults(func=cmd_report)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m linkedvector.cli`."""
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
