"""
Copyright (c) 2026 The h2cstartup Authors. All rights reserved.

SPDX-License-Identifier: MIT
"""

# Standard Python deps
import sys

# Internal deps
from . import args


def info( msg:str="" ) -> None:
    print(f"[INFO] {msg if msg else ''}")

def verbose( msg:str="" ) -> None:
    if (args.verbose):
        print(f"[VERBOSE] {msg if msg else ''}")

def debug( msg:str="" ) -> None:
    if (args.debug):
        print(f"[DEBUG] {msg if msg else ''}")

def warning( msg:str="" ) -> None:
    print(f"[WARNING] {msg if msg else ''}", file=sys.stderr)

def error( msg:str="" ) -> None:
    print(f"[ERROR] {msg if msg else ''}", file=sys.stderr)
