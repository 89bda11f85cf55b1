"""
Log level and prefix flags.

Levels are bits in a 32-bit mask. The six granular levels are ordered by
severity; enabling a cumulative group enables its own level and every
level below it:

    ←── severe ─────────────────────────────── chatty ──→
    error   warn   debug   info   function   logic
    0x01    0x02   0x04    0x08   0x10       0x20

The four prefix flags live in the top nibble and are independent of the
levels and of each other. They only tell the emitter which annotations to
put in front of a message.

The system stores raw integers; the enums exist so that the cumulative
groups can be derived instead of written out by hand.
"""

import enum
from functools import reduce
from operator import or_


class Level(enum.IntFlag):
    """Granular severity/category levels, lowest bit = most severe."""
    ERROR = 0x00000001      # Serious error messages only
    WARN = 0x00000002       # Warning messages
    DEBUG = 0x00000004      # Rare ad-hoc debug messages
    INFO = 0x00000008       # Informational messages (banners etc.)
    FUNCTION = 0x00000010   # Function tracing
    LOGIC = 0x00000020      # Control flow tracing within functions


class Prefix(enum.IntFlag):
    """Annotations the emitter may prepend to a message."""
    LEVEL = 0x10000000      # [label]
    NODE = 0x20000000       # node printer output
    TIME = 0x40000000       # time printer output
    FUNC = 0x80000000       # component:function()


MASK_32 = 0xFFFFFFFF

NONE = 0

ERROR = int(Level.ERROR)
WARN = int(Level.WARN)
DEBUG = int(Level.DEBUG)
INFO = int(Level.INFO)
FUNCTION = int(Level.FUNCTION)
LOGIC = int(Level.LOGIC)

PREFIX_FUNC = int(Prefix.FUNC)
PREFIX_TIME = int(Prefix.TIME)
PREFIX_NODE = int(Prefix.NODE)
PREFIX_LEVEL = int(Prefix.LEVEL)
PREFIX_ALL = reduce(or_, (int(p) for p in Prefix))

# Every bit below the prefix nibble, including bits not yet named
LEVEL_ALL = ~PREFIX_ALL & MASK_32
ALL = LEVEL_ALL | PREFIX_ALL

GRANULAR_LEVELS = tuple(sorted(Level, key=int))


def cumulative(level: Level) -> int:
    """Return ``level`` OR'ed with every granular level more severe than it."""
    level = Level(level)
    return reduce(or_, (int(lv) for lv in GRANULAR_LEVELS if lv <= level))


LEVEL_ERROR = cumulative(Level.ERROR)
LEVEL_WARN = cumulative(Level.WARN)
LEVEL_DEBUG = cumulative(Level.DEBUG)
LEVEL_INFO = cumulative(Level.INFO)
LEVEL_FUNCTION = cumulative(Level.FUNCTION)
LEVEL_LOGIC = cumulative(Level.LOGIC)

# Severity order, used by format_levels() to pick the widest group
CUMULATIVE_GROUPS = (
    ('level_logic', LEVEL_LOGIC),
    ('level_function', LEVEL_FUNCTION),
    ('level_info', LEVEL_INFO),
    ('level_debug', LEVEL_DEBUG),
    ('level_warn', LEVEL_WARN),
    ('level_error', LEVEL_ERROR),
)

_LABELS = {
    ERROR: 'error',
    WARN: 'warn',
    DEBUG: 'debug',
    INFO: 'info',
    FUNCTION: 'function',
    LOGIC: 'logic',
}

UNKNOWN_LABEL = 'unknown'


def get_level_label(level: int) -> str:
    """Return the display label for a single granular level.

    Multi-bit values, prefix flags and unnamed bits all map to
    ``UNKNOWN_LABEL``.
    """
    return _LABELS.get(int(level), UNKNOWN_LABEL)
