"""comptrace check — validate a log configuration string.

Parses SPEC exactly as a registry would and prints one line per clause,
with the level names normalized:

    $ comptrace check 'Router=warn|debug:*=error'
      Router  warn|debug  (0x00000006)
      *       error       (0x00000001)
      [OK] 2 directive(s)

Exits with status 2 and the parser's message when SPEC is invalid.
"""

import argparse

from comptrace.lib.log_lib import format_levels, is_print_list, parse_directives
from comptrace.output import print_ok, print_warn


def register(subparsers, parents):
    """Register the 'check' subcommand."""
    p = subparsers.add_parser(
        "check",
        parents=parents,
        help="Validate a log configuration string",
        description=(
            "Parse a configuration string such as 'A=warn|debug:*=error'\n"
            "and show the directives it produces."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("spec", metavar="SPEC", help="Configuration string")
    p.set_defaults(func=run)


def run(args):
    log = args.components.cli
    if is_print_list(args.spec):
        print_ok("'print-list' lists registered components instead of "
                 "configuring them")
        return 0

    directives = parse_directives(args.spec)
    log.debug("parsed {n} clause(s) from {spec!r}",
              n=len(directives), spec=args.spec)
    if not directives:
        print_warn("Configuration is empty; no component will be enabled")
        return 0

    rendered = [(d.target, format_levels(d.levels), d.levels)
                for d in directives]
    max_target = max(len(target) for target, _, _ in rendered)
    max_levels = max(len(names) for _, names, _ in rendered)
    for target, names, mask in rendered:
        print(f"  {target:<{max_target}}  {names:<{max_levels}}  (0x{mask:08x})")
    print_ok(f"{len(directives)} directive(s)")
    return 0
