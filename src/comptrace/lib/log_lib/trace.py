"""
Function tracing decorator.

Emits a function-trace record through a LogComponent, the decorator
equivalent of calling ``component.function(*args)`` as the first line of
the function. Return values and exceptions are reported at the logic
level so that plain function tracing stays one line per call.
"""

import functools
from pathlib import Path

from . import emit
from .levels import FUNCTION, LOGIC


def _short_repr(value):
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(component):
    """Decorator factory tracing calls to a function on ``component``.

    Shows entry with arguments when FUNCTION is enabled on the component,
    and the return value or exception when LOGIC is enabled too.

    Usage::

        _log = LogComponent('Queue', registry)

        @trace(_log)
        def push(item, priority=0):
            ...
    """
    def decorator(func):
        name = func.__name__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not component.is_enabled(FUNCTION):
                return func(*args, **kwargs)

            params = [_short_repr(arg) for arg in args]
            params.extend(f"{key}={_short_repr(value)}"
                          for key, value in kwargs.items())
            emit.emit_function(component, params, func_name=name)

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                emit.emit_message(component, LOGIC,
                                  "{fn} raised: {exc}: {msg}", func_name=name,
                                  fn=name, exc=type(e).__name__, msg=str(e))
                raise

            if result is not None:
                emit.emit_message(component, LOGIC, "{fn} returned: {val}",
                                  func_name=name, fn=name,
                                  val=_short_repr(result))
            return result

        return wrapper
    return decorator
