"""Shared test fixtures for comptrace test suite."""

import io
import os
from unittest.mock import patch

import pytest

import comptrace.lib.log_lib.registry as _registry_mod
from comptrace.lib.log_lib import ENV_VAR, ComponentRegistry


# ---------------------------------------------------------------------------
# Process state isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _clean_log_env(monkeypatch):
    """Keep a developer's $COMPTRACE_LOG out of the tests."""
    monkeypatch.delenv(ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def _reset_process_registry():
    """Restore the init_registry() singleton after each test."""
    saved = _registry_mod._registry
    _registry_mod._registry = None
    yield
    _registry_mod._registry = saved


# ---------------------------------------------------------------------------
# Registry fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def buf():
    """A StringIO buffer for capturing emitted messages."""
    return io.StringIO()


@pytest.fixture
def registry(buf):
    """An empty-configuration registry writing to ``buf``."""
    return ComponentRegistry(config='', environ={}, file=buf)


@pytest.fixture
def make_registry(buf):
    """Factory for registries with a given configuration string."""
    def _make(config=None, environ=None, **kwargs):
        kwargs.setdefault('file', buf)
        return ComponentRegistry(config=config, environ=environ or {}, **kwargs)
    return _make


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.comptrace/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch, tmp_config_home):
    """Run from an empty directory with an empty home."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work
