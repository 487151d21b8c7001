"""
Copyright (c) 2026 The h2cstartup Authors. All rights reserved.

SPDX-License-Identifier: MIT

Model of a Cortex-M vector table as described by a CMSIS device header.

Slots are keyed by the header's own IRQ numbers: core exceptions are negative
(-14 for NMI up to -1 for SysTick), NVIC interrupts start at 0. The reset
vector (-15) and the initial stack pointer (-16) are never taken from a header.
"""

# Standard Python deps
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

# External deps
from intervaltree import IntervalTree


"""
Lowest core exception number a header may name.
"""
CORE_FIRST = -14


"""
Architectural limit on the number of NVIC interrupts.
"""
MAX_VECTORS = 496


"""
Value of max_irqn when a header defines no interrupt at all.
"""
NO_IRQN = -15


_regions = IntervalTree.from_tuples([
    (CORE_FIRST, 0, "core"),
    (0, MAX_VECTORS, "nvic"),
])


"""
Short standard names of the core exceptions that have one. HardFault, BusFault,
UsageFault, PendSV and SysTick keep the names given by the header.
"""
STANDARD_CORE_NAMES = {
    -14: "NMI_",
    -12: "MemManage_",
    -5: "SVC_",
    -4: "DebugMon_",
}


def region( irqn:int ) -> Optional[str]:
    """
    Return "core" or "nvic" for a slot that can be named by a header, else None.
    """
    hits = _regions[irqn]
    return next(iter(hits)).data if hits else None


def accepts( irqn:int ) -> bool:
    return region(irqn) is not None


def standard_name( irqn:int ) -> Optional[str]:
    return STANDARD_CORE_NAMES.get(irqn)


@dataclass(frozen=True)
class GenerationOptions:
    """
    Class representing the user's choices for the generated startup module.
    """
    add_unused_irqs: bool = False       # name unused NVIC slots IRQ<n>_IRQHandler
    vector_count: Optional[int] = None  # number of NVIC vectors, None = from header
    short_core_names: bool = False      # NMI_Handler instead of NonMaskableInt_Handler etc.


class InterruptTable:
    """
    Class representing the sparse set of named vectors found in a header.
    """
    def __init__( self ):
        self._names: Dict[int, str] = {}
        self.max_irqn = NO_IRQN


    def define( self, irqn:int, name:str ) -> None:
        """
        Name a slot, replacing any earlier name. An empty name leaves the slot
        unnamed.
        """
        assert accepts(irqn)
        if name:
            self._names[irqn] = name
        else:
            self._names.pop(irqn, None)


    def name( self, irqn:int ) -> Optional[str]:
        return self._names.get(irqn)


    def items( self ) -> Iterator[Tuple[int, str]]:
        """
        Iterate (irqn, name) pairs by ascending irqn.
        """
        return iter(sorted(self._names.items()))


    def __contains__( self, irqn:int ) -> bool:
        return irqn in self._names


    def __len__( self ) -> int:
        return len(self._names)


    def __str__( self ) -> str:
        string = ""
        for irqn, name in self.items():
            string += "[{:>4}] {:<5} {}\n".format(irqn, region(irqn), name)
        return string
