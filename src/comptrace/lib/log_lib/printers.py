"""
Prefix printer hooks.

The emitter can put a time stamp and a node identifier in front of every
message, but log_lib knows nothing about clocks or nodes. Applications plug
that knowledge in by setting a printer: any callable taking the output
stream and writing the prefix text to it.

    def sim_time(file):
        file.write(f"+{clock.now():.6f}s")

    registry.printers.set_time_printer(sim_time)

An unset slot is None and the emitter skips that prefix.
"""

from typing import Optional, Protocol, TextIO


class PrefixPrinter(Protocol):
    """Writes one prefix to the output stream."""

    def __call__(self, file: TextIO) -> None: ...


class PrinterHooks:
    """Two swappable prefix printers, one for time and one for node.

    Owned by a ComponentRegistry. Getters return None for an unset slot;
    setting None resets the slot.
    """

    def __init__(self, time_printer: Optional[PrefixPrinter] = None,
                 node_printer: Optional[PrefixPrinter] = None):
        self._time_printer = time_printer
        self._node_printer = node_printer

    def get_time_printer(self) -> Optional[PrefixPrinter]:
        return self._time_printer

    def set_time_printer(self, printer: Optional[PrefixPrinter]) -> None:
        self._time_printer = printer

    def get_node_printer(self) -> Optional[PrefixPrinter]:
        return self._node_printer

    def set_node_printer(self, printer: Optional[PrefixPrinter]) -> None:
        self._node_printer = printer

    def reset(self) -> None:
        """Unset both printers."""
        self._time_printer = None
        self._node_printer = None
