"""comptrace levels — list the level names a configuration may use."""

from comptrace.lib.log_lib import format_level_list


def register(subparsers, parents):
    """Register the 'levels' subcommand."""
    p = subparsers.add_parser(
        "levels",
        parents=parents,
        help="List level and prefix names with their bit values",
    )
    p.set_defaults(func=run)


def run(args):
    print(format_level_list())
    return 0
