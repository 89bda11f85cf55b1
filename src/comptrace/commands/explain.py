"""comptrace explain — preview the levels a configuration gives components.

Builds a throwaway registry configured with SPEC, defines each NAME in
order, then applies the optional bulk operations. Prints the resulting
enabled levels per component:

    $ comptrace explain '*=error:Router=level_info' Router Queue
    Queue=error  (0x00000001)
    Router=level_info  (0x0000000f)

'print-list' as SPEC prints the registry listing instead.
"""

import argparse

from comptrace.lib.log_lib import (
    ComponentRegistry, LogComponent, LogConfigError, parse_levels,
)
from comptrace.output import print_mask


def register(subparsers, parents):
    """Register the 'explain' subcommand."""
    p = subparsers.add_parser(
        "explain",
        parents=parents,
        help="Show the levels a configuration enables for given components",
        description=(
            "Define the given components in a fresh registry configured\n"
            "with SPEC and print the levels each one ends up with."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("spec", metavar="SPEC", help="Configuration string")
    p.add_argument("names", metavar="NAME", nargs="+",
                   help="Component names, defined in the order given")
    p.add_argument("--block", metavar="NAME=LEVELS", action="append",
                   default=[],
                   help="Block LEVELS on component NAME at definition")
    p.add_argument("--enable-all", metavar="LEVELS",
                   help="Enable LEVELS on every component afterwards")
    p.add_argument("--disable-all", metavar="LEVELS",
                   help="Disable LEVELS on every component afterwards")
    p.set_defaults(func=run)


def _parse_blocks(blocks):
    """Turn ['A=warn|debug', ...] into {'A': mask}."""
    masks = {}
    for item in blocks:
        name, sep, expr = item.partition("=")
        if not sep or not name:
            raise LogConfigError(f"--block expects NAME=LEVELS, got '{item}'")
        masks[name] = masks.get(name, 0) | parse_levels(expr, item)
    return masks


def run(args):
    log = args.components.cli
    masks = _parse_blocks(args.block)
    enable_all = parse_levels(args.enable_all) if args.enable_all else 0
    disable_all = parse_levels(args.disable_all) if args.disable_all else 0

    registry = ComponentRegistry(config=args.spec)
    for name in args.names:
        component = LogComponent(name, registry, masks.get(name, 0))
        log.logic("defined {comp!r}", comp=component)

    if registry.list_requested:
        registry.print_list()
        return 0

    if enable_all:
        registry.enable_all(enable_all)
    if disable_all:
        registry.disable_all(disable_all)

    for name in registry.component_names():
        print_mask(name, registry.get(name).levels)
    return 0
