"""Exceptions raised by log_lib.

Everything derives from LogConfigError, itself a ValueError, so callers
that only care about "the log configuration is bad" can catch one type.
"""


class LogConfigError(ValueError):
    """Invalid log configuration or registry usage."""


class UnknownLevelError(LogConfigError):
    """A configuration string named a level that does not exist."""

    def __init__(self, token: str, clause: str = ''):
        self.token = token
        self.clause = clause
        where = f" in clause '{clause}'" if clause else ''
        super().__init__(f"Unknown log level '{token}'{where}")


class DuplicateComponentError(LogConfigError):
    """A second component tried to register under an existing name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Log component '{name}' is already registered")


class UnknownComponentError(LogConfigError):
    """An administrative call named a component that was never registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Log component '{name}' not found")


class RegistryNotInitialized(LogConfigError):
    """get_registry() was called before init_registry()."""
