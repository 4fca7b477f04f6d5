"""CLI with subcommands for generating and checking pseudo-Hilbert curves."""

import argparse
import sys
import time

from pseudohilbert.analyze import check_curve, curve_stats, print_curve_summary
from pseudohilbert.config import (
    CHECK_MAX_ORDER,
    DEFAULT_WORKERS,
    MAX_ORDER,
    MIN_ORDER,
    OUTPUT_DIR,
)
from pseudohilbert.curve import InvalidOrderError, generate
from pseudohilbert.serialize import FORMATS, CurveFormatError, load_curve, save_curve, write_text


def progress_line(done, total, elapsed):
    """Format a progress string like ``[done/total pct% elapsed_s eta eta_s]``."""
    pct = done * 100 // total if total else 0
    rate = done / elapsed if elapsed > 0 else 0
    eta = (total - done) / rate if rate > 0 else 0
    return f"[{done}/{total} {pct:>3}% {elapsed:.0f}s eta {eta:.0f}s]"


def _order_range(args):
    if args.min_order > args.max_order:
        raise InvalidOrderError(
            f"--min-order {args.min_order} is greater than --max-order {args.max_order}"
        )
    return range(args.min_order, args.max_order + 1)


def cmd_generate(args):
    """Generate and write one curve file per order."""
    orders = _order_range(args)
    t_start = time.monotonic()
    for done, order in enumerate(orders, 1):
        curve = generate(order, workers=args.workers)
        path = save_curve(curve, order, args.output, fmt=args.format)
        del curve
        elapsed = time.monotonic() - t_start
        print(f"order {order} pseudo-hilbert curve written to {path} "
              f"{progress_line(done, len(orders), elapsed)}")


def cmd_show(args):
    """Print a curve in text form."""
    write_text(generate(args.order), sys.stdout)


def cmd_check(args):
    """Generate curves and verify point count, bounds, and seam continuity."""
    failed = 0
    for order in _order_range(args):
        curve = generate(order, workers=args.workers)
        problems = check_curve(curve, order)
        print_curve_summary(curve_stats(curve, order))
        if problems:
            failed += 1
            for p in problems:
                print(f"  PROBLEM: {p}")
        else:
            print("  OK")
        del curve
    if failed:
        print(f"{failed} order(s) failed")
        return 1
    return 0


def cmd_inspect(args):
    """Load a saved curve file and print its summary."""
    curve = load_curve(args.path, args.order, fmt=args.format)
    print(f"{args.path}:")
    print_curve_summary(curve_stats(curve, args.order))
    problems = check_curve(curve, args.order)
    for p in problems:
        print(f"  PROBLEM: {p}")
    return 1 if problems else 0


def _add_order_range(p, max_order=MAX_ORDER):
    p.add_argument("--min-order", type=int, default=MIN_ORDER,
                   help=f"First order to process (default: {MIN_ORDER})")
    p.add_argument("--max-order", type=int, default=max_order,
                   help=f"Last order to process (default: {max_order})")
    p.add_argument("--workers", type=int, default=DEFAULT_WORKERS,
                   help="Threads per recursion level, 1 = sequential "
                        f"(default: {DEFAULT_WORKERS})")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pseudohilbert",
        description="Pseudo-Hilbert space-filling curve generator",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # generate
    p_gen = subparsers.add_parser("generate", help="Write curve files for a range of orders")
    _add_order_range(p_gen)
    p_gen.add_argument("-o", "--output", default=OUTPUT_DIR,
                       help=f"Output directory (default: {OUTPUT_DIR})")
    p_gen.add_argument("--format", choices=FORMATS, default="binary",
                       help="Output format (default: binary)")
    p_gen.set_defaults(func=cmd_generate)

    # show
    p_show = subparsers.add_parser("show", help="Print one curve as text")
    p_show.add_argument("order", type=int, help="Curve order")
    p_show.set_defaults(func=cmd_show)

    # check
    p_check = subparsers.add_parser("check", help="Verify generated curves")
    _add_order_range(p_check, max_order=CHECK_MAX_ORDER)
    p_check.set_defaults(func=cmd_check)

    # inspect
    p_inspect = subparsers.add_parser("inspect", help="Summarize a saved curve file")
    p_inspect.add_argument("path", help="Curve file")
    p_inspect.add_argument("--order", type=int, required=True,
                           help="Order the file was generated with")
    p_inspect.add_argument("--format", choices=FORMATS, default="binary",
                           help="File format (default: binary)")
    p_inspect.set_defaults(func=cmd_inspect)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        status = args.func(args)
    except (InvalidOrderError, CurveFormatError, MemoryError, OSError) as e:
        print(f"Error: {str(e) or type(e).__name__}", file=sys.stderr)
        sys.exit(1)
    if status:
        sys.exit(status)
