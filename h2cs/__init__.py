"""
Copyright (c) 2026 The h2cstartup Authors. All rights reserved.

SPDX-License-Identifier: MIT
"""

"""
Parse command-line arguments.
"""
from . import args

"""
Model the vector table: named slots, core/NVIC regions, generation options.
"""
from . import vectors

"""
Extract the IRQn_Type enumeration from the MCU header into an InterruptTable.
"""
from . import header

"""
Generate the C startup module from the InterruptTable.
"""
from . import codegen

from . import log


def main( argv=None ) -> int:
    """
    Run h2cstartup: read the header named on the command line and write
    startup_<mcu>.c to the current directory.
    """
    options = args.parse(argv)

    table, max_irqn = header.read(args.header)

    out_name = codegen.startup_name(args.header)
    output = codegen.emit(table, max_irqn, options, args.header, out_name)
    [log.verbose(line) for line in output.splitlines()]

    codegen.write(out_name, output)
    log.info(f"generated {out_name} from {codegen.stripped_name(args.header)}")
    return args.EXIT.ok
