"""
LogComponent — one named, independently filterable source of messages.

A component is normally defined once at module level and used for every
message the module emits:

    _log = LogComponent('Router', registry)

    def route(pkt):
        _log.function(pkt)
        if _log.is_enabled(DEBUG):
            _log.debug("routing {pkt}", pkt=pkt)

Defining the component registers it and applies the registry's active
configuration to it, so the enabled levels are right from the first call.
"""

import threading
from typing import TYPE_CHECKING, Any, Optional, TextIO

from . import emit
from .levels import (
    DEBUG, ERROR, INFO, LOGIC, MASK_32, NONE, WARN, get_level_label,
)

if TYPE_CHECKING:
    from .registry import ComponentRegistry


class LogComponent:
    """Enabled/blocked level masks for one component.

    ``levels`` is the set of enabled levels and prefixes. ``mask`` is the
    set of levels this component may never enable; it is fixed at
    construction and exists so that code on the logging path can define a
    component without logging into itself. ``levels & mask`` is always 0.

    is_enabled() reads a single int and takes no lock. Mutators take a
    per-component lock so concurrent enable/disable calls do not lose
    updates.
    """

    def __init__(self, name: str, registry: 'ComponentRegistry',
                 mask: int = NONE):
        self._name = name
        self._levels = NONE
        self._mask = NONE
        self._lock = threading.Lock()
        self._registry = registry

        # An invalid configuration string must fail before the name is taken
        registry.directives
        registry.register(self)
        if mask:
            self.set_mask(mask)
        registry.apply_config(self)

    def __repr__(self) -> str:
        return (f"LogComponent({self._name!r}, levels=0x{self._levels:08x}, "
                f"mask=0x{self._mask:08x})")

    @property
    def name(self) -> str:
        return self._name

    @property
    def levels(self) -> int:
        """Currently enabled levels and prefixes."""
        return self._levels

    @property
    def mask(self) -> int:
        """Levels blocked for the lifetime of this component."""
        return self._mask

    @property
    def registry(self) -> 'ComponentRegistry':
        return self._registry

    def is_enabled(self, level: int) -> bool:
        """True if any bit of ``level`` is enabled."""
        return (self._levels & level) != 0

    def is_none_enabled(self) -> bool:
        """True if no level or prefix is enabled."""
        return self._levels == 0

    def enable(self, level: int) -> None:
        """Enable ``level``, minus any blocked bits."""
        with self._lock:
            self._levels = (self._levels | (level & ~self._mask)) & MASK_32

    def disable(self, level: int) -> None:
        with self._lock:
            self._levels &= ~level & MASK_32

    def set_mask(self, level: int) -> None:
        """Block ``level`` permanently, clearing it if already enabled.

        Meant to be called from the constructor only.
        """
        with self._lock:
            self._mask = (self._mask | level) & MASK_32
            self._levels &= ~level & MASK_32

    get_level_label = staticmethod(get_level_label)

    # -----------------------------------------------------------------
    # Emission helpers (see emit.py)
    # -----------------------------------------------------------------

    def log(self, level: int, message: str, *,
            file: Optional[TextIO] = None, **kwargs: Any) -> None:
        """Emit ``message`` at ``level`` if that level is enabled."""
        emit.emit_message(self, level, message, file=file,
                          _depth=2, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        emit.emit_message(self, ERROR, message, _depth=2, **kwargs)

    def warn(self, message: str, **kwargs: Any) -> None:
        emit.emit_message(self, WARN, message, _depth=2, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        emit.emit_message(self, DEBUG, message, _depth=2, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        emit.emit_message(self, INFO, message, _depth=2, **kwargs)

    def logic(self, message: str, **kwargs: Any) -> None:
        emit.emit_message(self, LOGIC, message, _depth=2, **kwargs)

    def function(self, *params: Any, file: Optional[TextIO] = None) -> None:
        """Emit a function-trace record for the calling function."""
        emit.emit_function(self, params, file=file, _depth=2)
