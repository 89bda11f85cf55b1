"""
Message composition for LogComponent.

A message is only formatted when its level is enabled on the component.
The line is assembled in a fixed order, each part gated on a prefix flag:

    [time printer] [node printer] Name:func(): [label] message

Time and node text come from the registry's PrinterHooks; an unset hook
contributes nothing.
"""

import sys
from typing import TYPE_CHECKING, Any, Iterable, Optional, TextIO

from .levels import (
    FUNCTION, PREFIX_FUNC, PREFIX_LEVEL, PREFIX_NODE, PREFIX_TIME,
    get_level_label,
)

if TYPE_CHECKING:
    from .component import LogComponent


def _sink(component: 'LogComponent', file: Optional[TextIO]) -> TextIO:
    if file is not None:
        return file
    if component.registry.file is not None:
        return component.registry.file
    return sys.stderr


def _caller_name(depth: int) -> str:
    # depth 1 = whoever called the emit_* function
    try:
        return sys._getframe(depth + 1).f_code.co_name
    except ValueError:
        return '<unknown>'


def _write_hook_prefixes(component: 'LogComponent', out: TextIO) -> None:
    printers = component.registry.printers
    if component.is_enabled(PREFIX_TIME):
        printer = printers.get_time_printer()
        if printer is not None:
            printer(out)
            out.write(" ")
    if component.is_enabled(PREFIX_NODE):
        printer = printers.get_node_printer()
        if printer is not None:
            printer(out)
            out.write(" ")


def emit_message(component: 'LogComponent', level: int, message: str, *,
                 func_name: Optional[str] = None,
                 file: Optional[TextIO] = None,
                 _depth: int = 1, **kwargs: Any) -> None:
    """Write ``message`` for ``component`` if ``level`` is enabled.

    Args:
        component: Component the message belongs to
        level: Level to test and to label the message with
        message: Format string (uses str.format with kwargs)
        func_name: Name for the function prefix; taken from the caller's
            frame when omitted
        file: Output stream; defaults to the registry's stream, then stderr
        **kwargs: Values for template placeholders
    """
    if not component.is_enabled(level):
        return
    out = _sink(component, file)
    _write_hook_prefixes(component, out)
    if component.is_enabled(PREFIX_FUNC):
        if func_name is None:
            func_name = _caller_name(_depth)
        out.write(f"{component.name}:{func_name}(): ")
    if component.is_enabled(PREFIX_LEVEL):
        out.write(f"[{get_level_label(level)}] ")
    text = message.format(**kwargs) if kwargs else message
    out.write(text + "\n")


def format_params(params: Iterable[Any]) -> str:
    """Join parameters the way a function-trace record shows them."""
    return ', '.join(str(p) for p in params)


def emit_function(component: 'LogComponent', params: Iterable[Any] = (), *,
                  func_name: Optional[str] = None,
                  file: Optional[TextIO] = None,
                  _depth: int = 1) -> None:
    """Write a ``Name:func(p1, p2)`` record if FUNCTION is enabled.

    Function records always carry the component and function name, so the
    function and level prefixes do not apply; time and node still do.
    """
    if not component.is_enabled(FUNCTION):
        return
    out = _sink(component, file)
    _write_hook_prefixes(component, out)
    if func_name is None:
        func_name = _caller_name(_depth)
    out.write(f"{component.name}:{func_name}({format_params(params)})\n")


def emit_uncond(message: str, file: Optional[TextIO] = None) -> None:
    """Write ``message`` regardless of any component configuration."""
    out = file if file is not None else sys.stderr
    out.write(message + "\n")
