from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ..errors import PnmError
from ..filters import FilterKind, FilterSpec
from ..transform import TransformJob, TransformSettings

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pnmtool",
        description="Apply one filter to a P3/P6 image and write it as P2, P3, P5 or P6.",
    )
    ops = parser.add_mutually_exclusive_group()
    ops.add_argument("-n", dest="kind", action="store_const", const=FilterKind.NEGATE, help="negate")
    ops.add_argument("-b", dest="amount", type=int, metavar="AMOUNT", help="brighten by a signed amount")
    ops.add_argument("-p", dest="kind", action="store_const", const=FilterKind.SHARPEN, help="sharpen")
    ops.add_argument("-s", dest="kind", action="store_const", const=FilterKind.SMOOTH, help="smooth")
    ops.add_argument("-g", dest="kind", action="store_const", const=FilterKind.GRAYSCALE, help="grayscale")
    ops.add_argument("-c", dest="kind", action="store_const", const=FilterKind.CONTRAST, help="contrast")
    parser.add_argument(
        "-o",
        dest="output",
        choices=("a", "b"),
        required=True,
        help="output encoding: -oa ascii, -ob binary",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="more logging (repeatable)")
    parser.add_argument("basename", help="output path without extension (.ppm or .pgm is added)")
    parser.add_argument("image", help="input image (.ppm, P3 or P6)")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def _resolve_filter(args: argparse.Namespace) -> FilterSpec:
    if args.amount is not None:
        return FilterSpec(FilterKind.BRIGHTEN, args.amount)
    return FilterSpec(args.kind or FilterKind.NONE)


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.verbose)
    settings = TransformSettings(filter=_resolve_filter(args), binary=args.output == "b")
    try:
        job = TransformJob(settings)
        job.transform_file(args.image, args.basename)
    except (PnmError, OSError) as exc:
        print(str(exc), file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
