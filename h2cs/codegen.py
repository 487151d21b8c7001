"""
Copyright (c) 2026 The h2cstartup Authors. All rights reserved.

SPDX-License-Identifier: MIT
"""

# Standard Python deps
import sys
from typing import Optional

# Internal deps
from . import args
from . import log
from . import vectors
from .vectors import GenerationOptions, InterruptTable


"""
Declarations are padded to this column before their attribute.
"""
_proto_width = 48


_weak_alias = '__attribute__ ((weak, alias("Default_Handler")));'


_heading = """/*
    {out_name}
    gcc-arm compatible C startup module generated by h2cstartup from {in_name}
    Do not edit, regenerate from the MCU header instead.

"""


_startup = """// the names below represent memory addresses, not real variables
extern int
   _sdata,  // start of .data section
   _edata,  // end of data section
   _sidata, // start of .data section image in Flash
   _sbss,   // start of .bss section
   _ebss,   // end of .bss section
   _estack; // bottom of stack location

// external functions called during startup
void SystemInit(void);
void __libc_init_array(void);
int main(void);

// code executed after core reset
__attribute__ ((naked, noreturn)) void Reset_Handler(void)
{
   SystemInit();
   // initialize .data section values from Flash
   for (int *dptr = &_sdata, *sptr = &_sidata; dptr < &_edata;)
       *dptr++ = *sptr++;
   // zero the .bss section
   for (int *dptr = &_sbss; dptr < &_ebss; dptr++)
       *dptr = 0;
   __libc_init_array();
   main();
   for (;;);
}

// the default empty handler for exceptions not handled by user
static void Default_Handler(void)
{
    for (;;);
}

"""


_vectable_start = """
struct vectable_ {
    void *Initial_SP;
    void (*Core_Exceptions[15])(void);
    void (*NVIC_Interrupts[])(void);
};

#define CX(a) [(a) - 1]

const struct vectable_ g_pfnvectors __attribute__((section(".isr_vector"))) = {
    .Initial_SP = &_estack,
    .Core_Exceptions = {
        CX( 1) = Reset_Handler,
"""


_vectable_mid = """    },
    .NVIC_Interrupts = {
"""


_vectable_end = """    }
};
"""


def stripped_name( path:str ) -> str:
    """
    Strip any directory components, POSIX or Windows style, from a path.
    """
    idx = path.rfind("/")
    if idx < 0:
        idx = path.rfind("\\")
    return path[idx + 1:]


def startup_name( header:str ) -> str:
    """
    Name of the startup module generated from a header: stm32f401xe.h gives
    startup_stm32f401xe.c in the current directory.
    """
    name = "startup_" + stripped_name(header)
    return name[:-1] + "c"


def _handler_name( table:InterruptTable, irqn:int, options:GenerationOptions ):
    """
    Name of the handler bound to a slot, or None if the slot stays empty.
    """
    name = table.name(irqn)
    if name is not None:
        if options.short_core_names and vectors.region(irqn) == "core":
            name = vectors.standard_name(irqn) or name
        return f"{name}Handler"
    if options.add_unused_irqs and vectors.region(irqn) == "nvic":
        return f"IRQ{irqn}_IRQHandler"
    return None


def _mk_heading( mcu_irqs:int, count:Optional[int], options:GenerationOptions,
                 in_name:str, out_name:str ) -> str:
    """
    Generate the comment block at the top of the startup module.
    """
    string = _heading.format(out_name=out_name, in_name=stripped_name(in_name))
    if options.short_core_names:
        string += "    Standard short core exception names.\n"
    if count is not None and count > -1 and count != mcu_irqs:
        string += f"    {count} NVIC IRQ vectors (MCU defines {mcu_irqs}).\n"
    if options.add_unused_irqs:
        string += "    Unused vector names defined.\n"
    return string + "*/\n\n"


def _mk_handlers( table:InterruptTable, last:int, options:GenerationOptions ) -> str:
    """
    Generate the weak alias declarations of every handler in the table.
    """
    string = ""
    for irqn in range(vectors.CORE_FIRST, last + 1):
        handler = _handler_name(table, irqn, options)
        if handler is not None:
            proto = f"void {handler}(void)"
            string += f"{proto:<{_proto_width}}{_weak_alias}\n"
    return string


def _mk_core_vectors( table:InterruptTable, options:GenerationOptions ) -> str:
    """
    Generate the Core_Exceptions initializers. CX() takes the exception
    number, which is the IRQ number plus 16.
    """
    string = ""
    for irqn in range(vectors.CORE_FIRST, 0):
        if irqn in table:
            cx = irqn + 16
            string += f"        CX({cx:>2}) = {_handler_name(table, irqn, options)}"
            string += ",\n" if cx < 15 else "\n"
    return string


def _mk_nvic_vectors( table:InterruptTable, last:int, options:GenerationOptions ) -> str:
    """
    Generate the NVIC_Interrupts initializers. Slots without a handler are
    left out and are zero in the image.
    """
    width = 3 if last > 99 else 2
    string = ""
    for irqn in range(0, last + 1):
        handler = _handler_name(table, irqn, options)
        if handler is not None:
            string += f"        [{irqn:>{width}}] = {handler}"
            string += ",\n" if irqn < last else "\n"
    return string


def emit( table:InterruptTable, max_irqn:int, options:GenerationOptions,
          in_name:str, out_name:str ) -> str:
    """
    Generate the complete startup module.

    args
    ====

        table
                    named vectors extracted from the header

        max_irqn
                    highest IRQ number the header defines

        options
                    the user's generation choices

        in_name
                    header path, shown stripped in the heading

        out_name
                    name of the generated file, shown in the heading
    """
    mcu_irqs = max_irqn + 1

    """
    Without placeholder names there is nothing to put in slots beyond the
    header's last interrupt, so never ask for more than the MCU defines.
    """
    count = options.vector_count
    if count is not None and count > mcu_irqs and not options.add_unused_irqs:
        count = mcu_irqs

    """
    A requested count fixes the last slot: higher interrupts are dropped and,
    with placeholder names, missing ones are added.
    """
    last = max_irqn if count is None else count - 1
    log.debug(f"{mcu_irqs=} {count=} {last=}")

    return (
        _mk_heading(mcu_irqs, count, options, in_name, out_name)
        + _startup
        + _mk_handlers(table, last, options)
        + _vectable_start
        + _mk_core_vectors(table, options)
        + _vectable_mid
        + _mk_nvic_vectors(table, last, options)
        + _vectable_end
    )


def write( path:str, output:str ) -> None:
    """
    Write the generated startup module.
    """
    try:
        with open(path, "w") as out_handle:
            out_handle.write(output)
    except OSError as e:
        log.error(f"cannot create file {path}: {e.strerror}")
        sys.exit(args.EXIT.no_file)
