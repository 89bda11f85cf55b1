"""Output formatting utilities for comptrace.

User-facing results go to stdout; errors and warnings go to stderr so that
command output stays pipeable.
"""

import sys

from comptrace.lib.log_lib import format_levels


def print_ok(msg):
    """Print a success message."""
    print(f"  [OK] {msg}")


def print_warn(msg):
    """Print a warning message to stderr."""
    print(f"  [WARN] {msg}", file=sys.stderr)


def print_error(msg):
    """Print an error message to stderr."""
    print(f"  ERROR: {msg}", file=sys.stderr)


def print_mask(name, mask):
    """Print a component's enabled levels as ``name=levels  (0xMASK)``."""
    print(f"{name}={format_levels(mask)}  (0x{mask:08x})")
