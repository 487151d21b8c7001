"""
Copyright (c) 2026 The h2cstartup Authors. All rights reserved.

SPDX-License-Identifier: MIT
"""

# Standard Python deps
import re
import sys
from typing import Iterable, Tuple

# Internal deps
from . import args
from . import log
from . import vectors
from .vectors import InterruptTable


"""
Any line containing this marks the start of the IRQn_Type enumeration.
"""
MARKER = "_IRQn"


"""
One enumerator per line: a whitespace-free token, '=', a decimal value.
Whatever follows the value (comma, comment) is ignored.
"""
_entry = re.compile(r"^\s*(\S+)\s+=\s*([-+]?\d+)")


def _strip_suffix( token:str, irqn:int ) -> str:
    """
    Turn a CMSIS enumerator into a handler name prefix.

    Peripheral enumerators end in "n" (USART1_IRQn -> USART1_IRQ) while core
    exception enumerators end in "IRQn" (NonMaskableInt_IRQn -> NonMaskableInt_),
    so one or four characters are dropped depending on the sign of the value.
    Headers laid out differently get mangled names.
    """
    return token[:max(len(token) - (1 if irqn >= 0 else 4), 0)]


def extract( lines:Iterable[str] ) -> Tuple[InterruptTable, int]:
    """
    Scan header lines for the IRQn_Type enumeration.

    Returns the table of named slots and the highest IRQ number seen, which is
    vectors.NO_IRQN if the header defines none.
    """
    table = InterruptTable()
    recording = False

    for lineno,line in enumerate(lines):
        if not recording and MARKER in line:
            log.debug(f"enumeration starts on line {lineno+1}")
            recording = True
        if not recording:
            continue

        m = _entry.match(line)
        irqn = int(m.group(2)) if m else None
        if m is None or irqn >= vectors.MAX_VECTORS:
            if "}" in line:
                log.debug(f"enumeration ends on line {lineno+1}")
                break
            if m is not None:
                log.verbose(f"line {lineno+1}: skipped IRQn {irqn} beyond the NVIC")
            continue

        token = m.group(1)
        name = _strip_suffix(token, irqn)
        table.max_irqn = max(table.max_irqn, irqn)
        if vectors.accepts(irqn):
            table.define(irqn, name)
            log.debug(f"{irqn=} {name=}")
        else:
            log.warning(f"line {lineno+1}: vector number out of range: {line.rstrip()}")

    return (table, table.max_irqn)


def read( header:str ) -> Tuple[InterruptTable, int]:
    """
    Extract the interrupt table from a header file.
    """
    try:
        with open(header, "r", errors="replace") as header_handle:
            table, max_irqn = extract(header_handle)
    except OSError as e:
        log.error(f"{header} file not found: {e.strerror}")
        sys.exit(args.EXIT.no_file)

    log.verbose(f"{header}: {len(table)} named vectors, highest IRQn {max_irqn}")
    [log.debug(ln) for ln in str(table).splitlines()]
    return (table, max_irqn)
