"""Main CLI entry point for comptrace.

Implements a Docker-style two-pass argument parser:
  1. First pass: extract global flags (--log, --config)
  2. Second pass: dispatch to the subcommand

Global flags can appear before OR after the subcommand:
  comptrace --log 'comptrace.cli' check 'A=warn'     # works
  comptrace check 'A=warn' --log 'comptrace.cli'     # also works

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import sys

from comptrace._version import BASE_VERSION, VERSION
from comptrace.lib.log_lib import LogConfigError


# ---------------------------------------------------------------------------
# Global flags (Docker-style: can precede the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--log": {"nargs": "?", "action": "append", "metavar": "SPEC",
              "help": "Log configuration for comptrace's own components; "
                      "repeatable, clauses accumulate "
                      "(bare --log lists components)"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Path to config file "
                         "(default: ~/.comptrace/config.json)"},
}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        global_parser.add_argument(flag, **kwargs)

    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


def _join_log_specs(specs):
    """Merge repeated --log values into one configuration string."""
    if not specs:
        return None
    return ":".join(specs)


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in comptrace.commands must export:
      register(subparsers, parents) — add itself to the subparser
      run(args) — execute the command
    """
    from comptrace.commands import check, explain, levels
    return [levels, check, explain]


def _build_parser(commands):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="comptrace",
        description="comptrace — component-scoped tracing configuration tool",
        epilog=(
            "Run 'comptrace <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--log, --config) can appear before or after\n"
            "the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"comptrace {BASE_VERSION} ({VERSION})",
    )

    # Add global flags to main parser too (for --help display)
    for flag, kwargs in GLOBAL_FLAGS.items():
        parser.add_argument(flag, **kwargs)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[])

    return parser


def _init_tracing(global_args):
    """Resolve the log configuration and set up the process registry.

    Returns the command's AppComponents.

    Raises:
        LogConfigError: The resolved configuration string is invalid
    """
    from comptrace.components import define_components
    from comptrace.config import resolve_log_config
    from comptrace.lib.log_lib import init_registry

    spec, source = resolve_log_config(
        cli_value=_join_log_specs(global_args.log),
        config_path=global_args.config,
    )
    registry = init_registry(config=spec)
    comps = define_components(registry)
    comps.config.debug("log configuration {spec!r} from {source}",
                       spec=spec, source=source or "defaults")
    if registry.list_requested:
        registry.print_list()
    return comps


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for comptrace CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success, 2 = invalid configuration).
    """
    from comptrace.output import print_error

    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    # Handle bare --log (list components and exit)
    if global_args.log and None in global_args.log:
        from comptrace.components import format_component_list
        print(format_component_list())
        return 0

    try:
        comps = _init_tracing(global_args)
    except LogConfigError as e:
        print_error(f"--log: {e}")
        return 2

    # Pass 2: parse subcommand + specific args
    commands = _discover_commands()
    parser = _build_parser(commands)

    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)
    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    args.components = comps
    comps.cli.info("running '{cmd}'", cmd=args.command)

    try:
        return args.func(args) or 0
    except LogConfigError as e:
        print_error(str(e))
        return 2
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
