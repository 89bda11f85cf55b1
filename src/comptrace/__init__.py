"""comptrace — component-scoped, level-filtered tracing.

Callers tag messages with a component name and a level; a configuration
string such as ``Router=level_debug:*=error`` decides which combinations
are emitted. The library lives in comptrace.lib.log_lib; this package adds
the ``comptrace`` command for inspecting level names and configurations.
"""

from comptrace._version import __version__, __app_name__

__all__ = ["__version__", "__app_name__"]
