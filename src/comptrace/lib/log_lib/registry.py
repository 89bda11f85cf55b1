"""
ComponentRegistry — the set of log components known to a process.

The registry owns every LogComponent, keyed by name, together with the
active configuration string and the prefix printer hooks.

Configuration reaches components two ways:
    configure(spec)       parses now and applies to every registered
                          component; the parsed directives are cached
    LogComponent(...)     replays the cached directives onto the new
                          component (parsing $COMPTRACE_LOG on first need)

enable_all()/disable_all() change the components that exist at the time
of the call and are not remembered. A component registered afterwards
only sees the parsed configuration, including its '*' directives:

    reg = ComponentRegistry(config='')
    reg.enable_all(ERROR)
    late = LogComponent('Late', reg)    # late.is_none_enabled() is True

The configuration string is replayed additively, so re-applying it never
turns off a level enabled by hand in between.
"""

import os
import sys
import threading
from typing import Dict, Iterator, List, Mapping, Optional, TextIO

from .component import LogComponent
from .directives import Directive, format_levels, is_print_list, parse_directives
from .errors import (
    DuplicateComponentError, RegistryNotInitialized, UnknownComponentError,
)
from .printers import PrinterHooks


ENV_VAR = 'COMPTRACE_LOG'


class ComponentRegistry:
    """Name → LogComponent mapping plus the configuration that feeds it.

    Usage::

        reg = ComponentRegistry()               # reads $COMPTRACE_LOG lazily
        net = LogComponent('Net', reg)
        reg.configure('Net=level_debug|prefix_level')
        reg.enable('Net', LOGIC)
        reg.print_list()
    """

    def __init__(
        self,
        config: Optional[str] = None,
        env_var: str = ENV_VAR,
        environ: Mapping[str, str] = None,
        file: TextIO = None,
        printers: PrinterHooks = None,
    ):
        self.env_var = env_var
        self.file = file
        self.printers = printers if printers is not None else PrinterHooks()
        self.list_requested = False
        self._environ = environ if environ is not None else os.environ
        self._config: Optional[str] = config
        self._directives: Optional[List[Directive]] = None
        self._components: Dict[str, LogComponent] = {}
        self._lock = threading.RLock()

    # -----------------------------------------------------------------
    # Container protocol
    # -----------------------------------------------------------------

    def __contains__(self, name: str) -> bool:
        return name in self._components

    def __iter__(self) -> Iterator[LogComponent]:
        return iter(list(self._components.values()))

    def __len__(self) -> int:
        return len(self._components)

    def get(self, name: str) -> Optional[LogComponent]:
        return self._components.get(name)

    def component_names(self) -> List[str]:
        """Every registered component name, sorted."""
        return sorted(self._components)

    # -----------------------------------------------------------------
    # Registration
    # -----------------------------------------------------------------

    def register(self, component: LogComponent) -> None:
        """Insert ``component``. Called from LogComponent.__init__.

        Raises:
            DuplicateComponentError: The name is already taken
        """
        with self._lock:
            if component.name in self._components:
                raise DuplicateComponentError(component.name)
            self._components[component.name] = component

    def define(self, name: str, mask: int = 0) -> LogComponent:
        """Create and register a component in this registry."""
        return LogComponent(name, self, mask)

    # -----------------------------------------------------------------
    # Configuration
    # -----------------------------------------------------------------

    @property
    def config(self) -> str:
        """The active configuration string.

        Read from the environment the first time it is needed when no
        string was passed in.
        """
        if self._config is None:
            self._config = self._environ.get(self.env_var, '')
        return self._config

    @property
    def directives(self) -> List[Directive]:
        """Parsed form of ``config``; parsed once, then cached.

        Raises:
            LogConfigError: The configuration string is invalid
        """
        with self._lock:
            if self._directives is None:
                self._directives = parse_directives(self.config)
            return list(self._directives)

    def apply_config(self, component: LogComponent) -> None:
        """Enable on ``component`` every level the configuration names for it.

        With the 'print-list' sentinel active nothing is enabled and
        ``list_requested`` is set instead.
        """
        if is_print_list(self.config):
            self.list_requested = True
            return
        for directive in self.directives:
            if directive.matches(component.name):
                component.enable(directive.levels)

    def configure(self, spec: str) -> List[Directive]:
        """Make ``spec`` the active configuration and apply it to every
        registered component.

        The string is fully parsed before anything changes, so an invalid
        string leaves the registry as it was.

        Args:
            spec: Configuration string, or 'print-list'

        Returns:
            The parsed directives ([] for 'print-list')

        Raises:
            LogConfigError: ``spec`` is invalid
        """
        if is_print_list(spec):
            with self._lock:
                self._config = spec
                self._directives = []
                self.list_requested = True
            self.print_list()
            return []

        directives = parse_directives(spec)
        with self._lock:
            self._config = spec
            self._directives = directives
            for component in self._components.values():
                for directive in directives:
                    if directive.matches(component.name):
                        component.enable(directive.levels)
        return list(directives)

    # -----------------------------------------------------------------
    # Administrative control
    # -----------------------------------------------------------------

    def enable(self, name: str, level: int) -> None:
        """Enable ``level`` on the component called ``name``.

        Raises:
            UnknownComponentError: No component has that name
        """
        component = self._components.get(name)
        if component is None:
            raise UnknownComponentError(name)
        component.enable(level)

    def disable(self, name: str, level: int) -> None:
        """Disable ``level`` on ``name``; unknown names are ignored."""
        component = self._components.get(name)
        if component is not None:
            component.disable(level)

    def enable_all(self, level: int) -> None:
        """Enable ``level`` on every component registered so far."""
        with self._lock:
            for component in self._components.values():
                component.enable(level)

    def disable_all(self, level: int) -> None:
        """Disable ``level`` on every component registered so far."""
        with self._lock:
            for component in self._components.values():
                component.disable(level)

    # -----------------------------------------------------------------
    # Listing
    # -----------------------------------------------------------------

    def format_list(self) -> str:
        """One ``name=levels`` line per component, sorted by name."""
        with self._lock:
            return "\n".join(
                f"{name}={format_levels(self._components[name].levels)}"
                for name in sorted(self._components)
            )

    def print_list(self, file: TextIO = None) -> None:
        """Write the component listing (default: stdout)."""
        out = file if file is not None else sys.stdout
        listing = self.format_list()
        if listing:
            print(listing, file=out)


# =============================================================================
# Process registry
# =============================================================================

_registry: Optional[ComponentRegistry] = None


def init_registry(config: Optional[str] = None, env_var: str = ENV_VAR,
                  file: TextIO = None) -> ComponentRegistry:
    """Create the process registry.

    Call once at program startup, before defining components through
    get_registry(). Calling it again replaces the registry; components
    already defined stay attached to the old one.

    Args:
        config: Configuration string; None reads ``env_var`` on first need
        env_var: Environment variable holding the configuration
        file: Stream for emitted messages (default: stderr)

    Returns:
        The new ComponentRegistry
    """
    global _registry
    _registry = ComponentRegistry(config=config, env_var=env_var, file=file)
    return _registry


def get_registry() -> ComponentRegistry:
    """Return the process registry.

    Raises:
        RegistryNotInitialized: init_registry() has not been called
    """
    if _registry is None:
        raise RegistryNotInitialized(
            "init_registry() must be called before get_registry()")
    return _registry
