"""Configuration resolution for the comptrace command.

The log configuration string for the command's own components comes from
the first layer that provides one:
  1. --log SPEC on the command line
  2. $COMPTRACE_LOG
  3. "log" in the nearest .comptrace.json, walking up from the cwd
  4. "log" in the global config (~/.comptrace/config.json or --config PATH)

An empty string in a layer counts as set and stops the search, so
``--log ''`` silences a configuration that the files would enable.
"""

import json
import os
from pathlib import Path

from comptrace.lib.log_lib import ENV_VAR


PROJECT_CONFIG_NAME = ".comptrace.json"


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.comptrace/)."""
    return Path.home() / ".comptrace"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .comptrace.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from path, returning {} on any read/parse error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config(path=None):
    """Load the global config file (or the file given with --config)."""
    return load_json(path or get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .comptrace.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------
def resolve_log_config(cli_value=None, config_path=None, start_dir=None,
                       environ=None):
    """Resolve the log configuration string and where it came from.

    Args:
        cli_value: Value of --log (None if not given)
        config_path: Value of --config (None for the default global file)
        start_dir: Directory to start the project config search from
        environ: Environment mapping (default: os.environ)

    Returns:
        (spec, source) where source is 'cli', 'env', the config file path,
        or None when no layer set anything (spec is then '').
    """
    if cli_value is not None:
        return cli_value, "cli"

    env = os.environ if environ is None else environ
    if ENV_VAR in env:
        return env[ENV_VAR], "env"

    project_cfg, project_path = load_project_config(start_dir)
    if isinstance(project_cfg.get("log"), str):
        return project_cfg["log"], str(project_path)

    global_cfg = load_global_config(config_path)
    if isinstance(global_cfg.get("log"), str):
        return global_cfg["log"], str(config_path or get_global_config_path())

    return "", None
