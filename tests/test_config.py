"""Tests for comptrace.config — log configuration resolution."""

import json

import pytest

from comptrace.config import (
    find_project_config,
    get_global_config_path,
    load_json,
    load_project_config,
    resolve_log_config,
)


class TestFindProjectConfig:
    """Test .comptrace.json discovery by walking up directories."""

    def test_finds_config_in_dir(self, tmp_path):
        cfg_file = tmp_path / ".comptrace.json"
        cfg_file.write_text('{"log": "A"}')
        assert find_project_config(str(tmp_path)) == cfg_file

    def test_finds_config_in_parent(self, tmp_path):
        cfg_file = tmp_path / ".comptrace.json"
        cfg_file.write_text('{"log": "A"}')
        child = tmp_path / "subdir" / "deep"
        child.mkdir(parents=True)
        assert find_project_config(str(child)) == cfg_file

    def test_returns_none_when_missing(self, tmp_path):
        assert find_project_config(str(tmp_path)) is None


class TestLoadJson:
    """Test JSON file loading with error handling."""

    def test_load_valid_json(self, tmp_path):
        f = tmp_path / "test.json"
        f.write_text('{"key": "value"}')
        assert load_json(f) == {"key": "value"}

    def test_load_missing_file(self, tmp_path):
        assert load_json(tmp_path / "nope.json") == {}

    def test_load_malformed_json(self, tmp_path):
        f = tmp_path / "bad.json"
        f.write_text("{not json")
        assert load_json(f) == {}

    def test_non_object_treated_as_empty(self, tmp_path):
        f = tmp_path / "list.json"
        f.write_text("[1, 2]")
        assert load_json(f) == {}

    def test_load_project_config_returns_path(self, tmp_path):
        cfg_file = tmp_path / ".comptrace.json"
        cfg_file.write_text('{"log": "A=warn"}')
        data, path = load_project_config(str(tmp_path))
        assert data == {"log": "A=warn"}
        assert path == cfg_file


class TestResolveLogConfig:
    """Precedence: CLI > env > project file > global file."""

    @pytest.fixture
    def project(self, tmp_path):
        proj = tmp_path / "proj"
        proj.mkdir()
        (proj / ".comptrace.json").write_text(json.dumps({"log": "P=info"}))
        return proj

    @pytest.fixture
    def global_file(self, tmp_config_home):
        path = get_global_config_path()
        path.parent.mkdir()
        path.write_text(json.dumps({"log": "G=warn"}))
        return path

    def test_cli_wins(self, project, global_file):
        spec, source = resolve_log_config(
            cli_value="C=error", start_dir=project,
            environ={"COMPTRACE_LOG": "E=debug"})
        assert (spec, source) == ("C=error", "cli")

    def test_empty_cli_value_still_wins(self, project):
        spec, source = resolve_log_config(cli_value="", start_dir=project,
                                          environ={})
        assert (spec, source) == ("", "cli")

    def test_env_over_files(self, project, global_file):
        spec, source = resolve_log_config(
            start_dir=project, environ={"COMPTRACE_LOG": "E=debug"})
        assert (spec, source) == ("E=debug", "env")

    def test_project_over_global(self, project, global_file):
        spec, source = resolve_log_config(start_dir=project, environ={})
        assert spec == "P=info"
        assert source == str(project / ".comptrace.json")

    def test_global_file(self, tmp_path, global_file):
        empty = tmp_path / "empty"
        empty.mkdir()
        spec, source = resolve_log_config(start_dir=empty, environ={})
        assert (spec, source) == ("G=warn", str(global_file))

    def test_explicit_config_path(self, tmp_path, tmp_config_home):
        custom = tmp_path / "custom.json"
        custom.write_text(json.dumps({"log": "X=logic"}))
        empty = tmp_path / "empty"
        empty.mkdir()
        spec, source = resolve_log_config(config_path=str(custom),
                                          start_dir=empty, environ={})
        assert (spec, source) == ("X=logic", str(custom))

    def test_nothing_configured(self, tmp_path, tmp_config_home):
        empty = tmp_path / "empty"
        empty.mkdir()
        assert resolve_log_config(start_dir=empty, environ={}) == ("", None)

    def test_non_string_log_ignored(self, tmp_path, tmp_config_home):
        proj = tmp_path / "proj"
        proj.mkdir()
        (proj / ".comptrace.json").write_text(json.dumps({"log": 5}))
        assert resolve_log_config(start_dir=proj, environ={}) == ("", None)
