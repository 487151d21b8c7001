"""
Copyright (c) 2026 The h2cstartup Authors. All rights reserved.

SPDX-License-Identifier: MIT

Parse command-line arguments to be accessible by any other importing file in the
project. The attributes below hold their defaults until parse() is called, so
library users can drive the extractor and code generator without a command line.
"""

# Standard Python deps
import argparse
import sys
from enum import IntEnum

# Internal deps
from .vectors import GenerationOptions, MAX_VECTORS


class EXIT(IntEnum):
    ok = 0
    no_input = 1
    no_file = 2
    bad_option = 4


class _Parser(argparse.ArgumentParser):
    """
    argparse exits with status 2 on a bad option, which would be
    indistinguishable from a missing header file.
    """
    def error( self, message:str ) -> None:
        self.print_usage(sys.stderr)
        print(f"{self.prog}: error: {message}", file=sys.stderr)
        sys.exit(EXIT.bad_option)


def _irq_count( v:str ) -> int:
    try:
        n = int(v)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid -n argument: {v}")
    if n < 0 or n > MAX_VECTORS:
        raise argparse.ArgumentTypeError(f"-n argument out of range: {n}")
    return n


_parser = _Parser(
    prog="h2cstartup",
    description="produce C source file startup_<mcuname>.c containing the "
                "complete startup module with properly named exception vectors "
                "from an MCU resource definition header file",
)

_parser.add_argument(
    "header",
    metavar="MCU.h",
    help="MCU header file defining the IRQn_Type enumeration",
    type=str,
    nargs="?",
)

_parser.add_argument(
    "-i",
    help="define names for unused NVIC interrupts",
    action="store_true",
)

_parser.add_argument(
    "-n",
    metavar="IRQN",
    help=f"define table with IRQN vectors up to IRQN-1 (0..{MAX_VECTORS})",
    type=_irq_count,
    default=None,
)

_parser.add_argument(
    "-s",
    help="use short standard names for core exception handlers",
    action="store_true",
)

_parser.add_argument(
    "-v",
    help="-v for verbose, -vv for debug",
    action="count",
    default=0,
)


header = None
add_unused_irqs = False
vector_count = None
short_core_names = False
verbose = False
debug = False


def parse( argv=None ) -> GenerationOptions:
    """
    Parse argv (default: sys.argv[1:]) into the module attributes and return
    the resulting generation options.
    """
    global header, add_unused_irqs, vector_count, short_core_names, verbose, debug

    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        _parser.print_help()
        sys.exit(EXIT.ok)

    _args = _parser.parse_args(argv)
    if _args.header is None:
        print("file not specified", file=sys.stderr)
        sys.exit(EXIT.no_input)

    header = _args.header
    add_unused_irqs = _args.i
    vector_count = _args.n
    short_core_names = _args.s
    verbose = _args.v >= 1
    debug = _args.v >= 2

    return GenerationOptions(
        add_unused_irqs=add_unused_irqs,
        vector_count=vector_count,
        short_core_names=short_core_names,
    )
