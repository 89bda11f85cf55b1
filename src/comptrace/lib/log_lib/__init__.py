"""
log_lib — component-scoped, level-filtered tracing.

A reusable tracing library providing:
- Per-component enabled/blocked level bitmasks
- A registry of components keyed by name
- A configuration mini-language ("A=warn|debug:*=error") read from the
  environment or applied at runtime
- Swappable time/node prefix printers
- Message emission and a function tracing decorator

Public API:
    LogComponent       — one named component
    ComponentRegistry  — name → component mapping and active configuration
    init_registry      — create the process registry
    get_registry       — access the process registry
    PrinterHooks       — time/node prefix printer slots
    Directive          — one parsed configuration clause
    parse_directives   — parse a configuration string
    parse_levels       — parse a '|'-separated level expression
    format_levels      — render a mask as level names
    format_level_list  — level-name table for display
    get_level_label    — display label of a single level
    emit_message       — emit one message for a component
    trace              — function tracing decorator
    LogConfigError     — base of all configuration errors
"""

from .levels import (
    Level, Prefix, cumulative, get_level_label,
    NONE, ERROR, WARN, DEBUG, INFO, FUNCTION, LOGIC,
    LEVEL_ERROR, LEVEL_WARN, LEVEL_DEBUG, LEVEL_INFO, LEVEL_FUNCTION,
    LEVEL_LOGIC, LEVEL_ALL,
    PREFIX_FUNC, PREFIX_TIME, PREFIX_NODE, PREFIX_LEVEL, PREFIX_ALL,
    ALL,
)
from .errors import (
    LogConfigError, UnknownLevelError, DuplicateComponentError,
    UnknownComponentError, RegistryNotInitialized,
)
from .component import LogComponent
from .registry import ComponentRegistry, init_registry, get_registry, ENV_VAR
from .directives import (
    Directive, parse_directives, parse_levels, format_levels,
    format_level_list, is_print_list, LEVEL_NAMES, PRINT_LIST, WILDCARD,
)
from .printers import PrinterHooks, PrefixPrinter
from .emit import emit_message, emit_function, emit_uncond
from .trace import trace

__all__ = [
    'Level', 'Prefix', 'cumulative', 'get_level_label',
    'NONE', 'ERROR', 'WARN', 'DEBUG', 'INFO', 'FUNCTION', 'LOGIC',
    'LEVEL_ERROR', 'LEVEL_WARN', 'LEVEL_DEBUG', 'LEVEL_INFO',
    'LEVEL_FUNCTION', 'LEVEL_LOGIC', 'LEVEL_ALL',
    'PREFIX_FUNC', 'PREFIX_TIME', 'PREFIX_NODE', 'PREFIX_LEVEL', 'PREFIX_ALL',
    'ALL',
    'LogConfigError', 'UnknownLevelError', 'DuplicateComponentError',
    'UnknownComponentError', 'RegistryNotInitialized',
    'LogComponent', 'ComponentRegistry', 'init_registry', 'get_registry',
    'ENV_VAR',
    'Directive', 'parse_directives', 'parse_levels', 'format_levels',
    'format_level_list', 'is_print_list', 'LEVEL_NAMES', 'PRINT_LIST',
    'WILDCARD',
    'PrinterHooks', 'PrefixPrinter',
    'emit_message', 'emit_function', 'emit_uncond',
    'trace',
]
