#!/usr/bin/env python3

"""
dhb - convert between numbers in decimal, binary, octal, or hexadecimal
Usage: dhb [-g N] [-w N] SRC_BASE TGT_BASE NUM
"""

import argparse
import re
import sys
from dataclasses import dataclass
from typing import NoReturn

from rich.console import Console
from rich.markup import escape

from dhb import __version__
from dhb.conversions import SUPPORTED_LABELS, NumeralBase, convert_base
from dhb.errors import ConversionError, InvalidOptionValue, MissingArgument
from dhb.formatting import group_digits, set_width, strip_prefix


err_console = Console(stderr=True, highlight=False, soft_wrap=True)

_INT_PATTERN = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class Config:
    src_base: NumeralBase
    tgt_base: NumeralBase
    number: str
    grouping: int = 0
    width: int = 0


def run(config: Config, verbose: bool = False) -> str:
    num = strip_prefix(config.number)
    if verbose:
        err_console.print(f"[dim]input digits:[/dim] {escape(num)}")

    converted = convert_base(num, config.src_base, config.tgt_base)
    if verbose:
        err_console.print(
            f"{config.src_base.label} -> {config.tgt_base.label}: {converted}"
        )

    converted = set_width(converted, config.width)
    return group_digits(converted, config.grouping)


def parse_int_option(option: str, value: str | None) -> int:
    if value is None:
        return 0
    # plain ASCII digits only, int() alone would take "1_0" or " 7 "
    if not _INT_PATTERN.fullmatch(value):
        raise InvalidOptionValue(option, value)
    return int(value)


def build_parser() -> argparse.ArgumentParser:
    bases = ", ".join(f"'{label}'" for label in SUPPORTED_LABELS)
    parser = argparse.ArgumentParser(
        prog="dhb",
        description="Convert between numbers in decimal, binary, octal, or hexadecimal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dhb hex dec 0xDEADBEEF            # 3735928559
  dhb dec bin 3735928559            # 11011110101011011011111011101111
  dhb dec oct 3735928559            # 33653337357
  dhb -g 4 dec hex 3735928559       # DEAD BEEF
  dhb -g 4 -w 12 dec hex 3735928559 # 0000 DEAD BEEF
        """,
    )

    # optional here so the first missing one can be reported by name
    parser.add_argument("src_base", nargs="?", metavar="SRC_BASE",
                        help=f"input number base, one of {bases}")
    parser.add_argument("tgt_base", nargs="?", metavar="TGT_BASE",
                        help=f"output number base, one of {bases}")
    parser.add_argument("num", nargs="?", metavar="NUM",
                        help="an arbitrarily large positive integer")
    parser.add_argument("-g", "--grouping", metavar="N",
                        help="how to visually group the digits in the output number "
                             "(default behavior is to concatenate all digits)")
    parser.add_argument("-w", "--width", metavar="N",
                        help="minimum number of digits in the output")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log each conversion step to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    for name, value in (("SRC_BASE", args.src_base),
                        ("TGT_BASE", args.tgt_base),
                        ("NUM", args.num)):
        if value is None:
            raise MissingArgument(name)

    return Config(
        src_base=NumeralBase.from_label(args.src_base),
        tgt_base=NumeralBase.from_label(args.tgt_base),
        number=args.num,
        grouping=parse_int_option("--grouping", args.grouping),
        width=parse_int_option("--width", args.width),
    )


def print_err_and_exit(message: str) -> NoReturn:
    err_console.print(f"[red]error: {escape(message)}[/red]")
    err_console.print("try 'dhb --help' for more information")
    sys.exit(1)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = config_from_args(args)
        result = run(config, verbose=args.verbose)
    except ConversionError as e:
        print_err_and_exit(str(e))

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
