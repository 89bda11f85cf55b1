"""
Configuration string parsing for component log levels.

A configuration string is a ':'-separated list of clauses, each naming a
component (or '*' for every component) and the levels to enable for it:

    COMPONENT[=LEVEL|LEVEL...]:COMPONENT[=...]

    Examples:
        Router                      # every level, no prefixes
        Router=warn|debug           # just those two levels
        Router=level_info|prefix_time:Queue=error
        *=level_warn                # warn and error everywhere
        *=all                       # everything, including all prefixes

A bare component name enables LEVEL_ALL. Clauses for the same component
accumulate; nothing in the string can turn a level off.

The whole-string value 'print-list' is not a configuration at all: it asks
the registry to list the registered components instead.
"""

from dataclasses import dataclass
from typing import Dict, List

from .errors import LogConfigError, UnknownLevelError
from .levels import (
    ALL, CUMULATIVE_GROUPS, DEBUG, ERROR, FUNCTION, INFO, LEVEL_ALL,
    LEVEL_DEBUG, LEVEL_ERROR, LEVEL_FUNCTION, LEVEL_INFO, LEVEL_LOGIC,
    LEVEL_WARN, LOGIC, MASK_32, PREFIX_ALL, PREFIX_FUNC, PREFIX_LEVEL,
    PREFIX_NODE, PREFIX_TIME, WARN,
)


WILDCARD = '*'
PRINT_LIST = 'print-list'

CLAUSE_SEP = ':'
LEVEL_ASSIGN = '='
LEVEL_SEP = '|'

# Names accepted on the right of '=' (case-sensitive)
LEVEL_NAMES: Dict[str, int] = {
    'error': ERROR,
    'warn': WARN,
    'debug': DEBUG,
    'info': INFO,
    'function': FUNCTION,
    'logic': LOGIC,
    'level_error': LEVEL_ERROR,
    'level_warn': LEVEL_WARN,
    'level_debug': LEVEL_DEBUG,
    'level_info': LEVEL_INFO,
    'level_function': LEVEL_FUNCTION,
    'level_logic': LEVEL_LOGIC,
    'level_all': LEVEL_ALL,
    'prefix_func': PREFIX_FUNC,
    'prefix_time': PREFIX_TIME,
    'prefix_node': PREFIX_NODE,
    'prefix_level': PREFIX_LEVEL,
    'prefix_all': PREFIX_ALL,
    'all': ALL,
    '*': ALL,
    # Short prefix aliases
    'func': PREFIX_FUNC,
    'time': PREFIX_TIME,
    'node': PREFIX_NODE,
    'level': PREFIX_LEVEL,
}

# Descriptions for the `comptrace levels` listing
LEVEL_DESCRIPTIONS: Dict[str, str] = {
    'error':          'Serious error messages only',
    'warn':           'Warning messages',
    'debug':          'Rare ad-hoc debug messages',
    'info':           'Informational messages',
    'function':       'Function call tracing',
    'logic':          'Control flow tracing within functions',
    'level_error':    'error',
    'level_warn':     'error + warn',
    'level_debug':    'level_warn + debug',
    'level_info':     'level_debug + info',
    'level_function': 'level_info + function',
    'level_logic':    'level_function + logic',
    'level_all':      'Every level, no prefixes (bare component name)',
    'prefix_func':    'Prefix with component:function()',
    'prefix_time':    'Prefix with the time printer output',
    'prefix_node':    'Prefix with the node printer output',
    'prefix_level':   'Prefix with [level]',
    'prefix_all':     'All four prefixes',
    'all':            'Every level and every prefix',
}

_GRANULAR_NAMES = ('error', 'warn', 'debug', 'info', 'function', 'logic')
_PREFIX_NAMES = ('prefix_func', 'prefix_time', 'prefix_node', 'prefix_level')


@dataclass(frozen=True)
class Directive:
    """One parsed clause: enable ``levels`` on ``target``."""
    target: str
    levels: int

    @property
    def is_wildcard(self) -> bool:
        return self.target == WILDCARD

    def matches(self, name: str) -> bool:
        """True if this directive applies to the component called ``name``."""
        return self.is_wildcard or self.target == name


def is_print_list(spec: str) -> bool:
    """True if ``spec`` is the listing sentinel rather than a configuration."""
    return spec == PRINT_LIST


def parse_levels(expr: str, clause: str = '') -> int:
    """Parse a '|'-separated level expression into a mask.

    Args:
        expr: Level expression like "warn|debug|prefix_time"
        clause: The clause being parsed, used in error messages

    Returns:
        The OR of every named level

    Raises:
        UnknownLevelError: A token is not a known level name
        LogConfigError: The expression or one of its tokens is empty
    """
    if not expr:
        raise LogConfigError(f"Empty level list in clause '{clause or expr}'")
    mask = 0
    for token in expr.split(LEVEL_SEP):
        if not token:
            raise LogConfigError(f"Empty level name in clause '{clause or expr}'")
        try:
            mask |= LEVEL_NAMES[token]
        except KeyError:
            raise UnknownLevelError(token, clause) from None
    return mask


def parse_directives(spec: str) -> List[Directive]:
    """Parse a configuration string into directives, in order.

    Empty clauses (stray ':') are skipped. The 'print-list' sentinel
    parses to an empty list; callers check is_print_list() first.

    Args:
        spec: Configuration string like "A=warn|debug:*=error"

    Returns:
        List of Directive, one per non-empty clause

    Raises:
        LogConfigError: Any clause is malformed or names an unknown level
    """
    if spec == PRINT_LIST:
        return []
    spec = spec.strip()
    if not spec:
        return []

    directives = []
    for clause in spec.split(CLAUSE_SEP):
        if not clause:
            continue
        if LEVEL_ASSIGN in clause:
            target, _, expr = clause.partition(LEVEL_ASSIGN)
            levels = parse_levels(expr, clause)
        else:
            target, levels = clause, LEVEL_ALL
        if not target:
            raise LogConfigError(f"Missing component name in clause '{clause}'")
        directives.append(Directive(target=target, levels=levels))
    return directives


def format_levels(mask: int) -> str:
    """Render a mask as a '|'-separated list of level names.

    Prefers the widest name that covers the bits: 'all', then 'level_all',
    then the largest cumulative group, then single levels. Prefix bits are
    listed after the levels. An empty mask renders as '0'.

    Bits with no name are rendered together as one hex term such as
    '0x00000100', so a non-empty mask never reads as '0'. Parsing the
    result back is defined only for masks made of named bits.
    """
    mask &= MASK_32
    if not mask:
        return '0'
    if mask & ALL == ALL:
        return 'all'

    names = []
    if mask & LEVEL_ALL == LEVEL_ALL:
        names.append('level_all')
    else:
        covered = 0
        for group_name, group in CUMULATIVE_GROUPS:
            # A single-bit group reads better under its plain name
            if group != ERROR and mask & group == group:
                names.append(group_name)
                covered = group
                break
        for name in _GRANULAR_NAMES:
            bit = LEVEL_NAMES[name]
            if mask & bit and not covered & bit:
                names.append(name)
        unnamed = mask & LEVEL_ALL & ~LEVEL_LOGIC
        if unnamed:
            names.append(f'0x{unnamed:08x}')

    if mask & PREFIX_ALL == PREFIX_ALL:
        names.append('prefix_all')
    else:
        names.extend(n for n in _PREFIX_NAMES if mask & LEVEL_NAMES[n])

    return LEVEL_SEP.join(names)


def format_level_list() -> str:
    """Format the table of level names for display.

    Returns:
        Formatted string listing every level name with its value and
        description.
    """
    lines = ["Available levels:"]
    max_name = max(len(name) for name in LEVEL_DESCRIPTIONS)
    for name, desc in LEVEL_DESCRIPTIONS.items():
        value = LEVEL_NAMES[name]
        lines.append(f"  {name:<{max_name}}  0x{value:08x}  {desc}")
    lines.append("")
    lines.append("Aliases: '*' = all, func/time/node/level = prefix_*")
    return "\n".join(lines)
