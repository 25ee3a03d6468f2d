"""Tests for hierarchical configuration loading."""

import json

import pytest
import yaml

from core.exceptions import ConfigurationError
from core.types import StoreBackend
from optionsgroup.core.config import unified_config
from optionsgroup.core.config.settings_sources import USER_CONFIG_FILE_NAMES, find_config_files
from optionsgroup.core.config.unified_config import (
    OptionsGroupConfig,
    StoreConfig,
    get_config,
    reset_config,
    set_config,
)


def write_yaml(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")


class TestStoreConfig:
    """Store section defaults and path resolution."""

    def test_defaults(self):
        config = StoreConfig()
        assert config.backend == "json"
        assert config.backend_type is StoreBackend.JSON
        assert config.autoload is True

    def test_blank_path_is_unset(self):
        assert StoreConfig(path="   ").path is None

    def test_default_paths(self, monkeypatch, tmp_path):
        monkeypatch.setattr(unified_config, "DEFAULT_STORE_DIR", tmp_path)
        assert StoreConfig(backend="json").resolved_path() == tmp_path / "options.json"
        assert StoreConfig(backend="duckdb").resolved_path() == tmp_path / "options.duckdb"
        assert StoreConfig(backend="memory").resolved_path() is None

    def test_explicit_path_is_expanded(self):
        resolved = StoreConfig(path="~/opts.json").resolved_path()
        assert "~" not in str(resolved)
        assert resolved.name == "opts.json"


class TestLoadHierarchical:
    """Precedence between defaults, files, environment and overrides."""

    def test_defaults_without_sources(self, isolated_config):
        config = OptionsGroupConfig.load_hierarchical(project_dir=isolated_config)
        assert config.store.backend == "json"
        assert config.default_group is None
        assert config.debug is False

    def test_project_yaml_file(self, isolated_config):
        write_yaml(isolated_config / ".optionsgroup.yaml", {
            "store": {"backend": "duckdb", "path": "opts.duckdb"},
            "default_group": "my_plugin",
        })

        config = OptionsGroupConfig.load_hierarchical(project_dir=isolated_config)

        assert config.store.backend == "duckdb"
        assert config.store.path == "opts.duckdb"
        assert config.default_group == "my_plugin"

    def test_project_toml_file(self, isolated_config):
        (isolated_config / ".optionsgroup.toml").write_text(
            'default_group = "from_toml"\n[store]\nbackend = "memory"\n', encoding="utf-8"
        )

        config = OptionsGroupConfig.load_hierarchical(project_dir=isolated_config)

        assert config.default_group == "from_toml"
        assert config.store.backend == "memory"

    def test_project_file_beats_user_file(self, isolated_config, tmp_path):
        write_yaml(tmp_path / "home" / "config.yaml", {"default_group": "user", "debug": True})
        write_yaml(isolated_config / ".optionsgroup.yaml", {"default_group": "project"})

        config = OptionsGroupConfig.load_hierarchical(project_dir=isolated_config)

        assert config.default_group == "project"
        assert config.debug is True

    def test_explicit_file_beats_project_file(self, isolated_config, tmp_path):
        write_yaml(isolated_config / ".optionsgroup.yaml", {"default_group": "project"})
        explicit = tmp_path / "explicit.json"
        explicit.write_text(json.dumps({"default_group": "explicit"}), encoding="utf-8")

        config = OptionsGroupConfig.load_hierarchical(project_dir=isolated_config, config_file=explicit)

        assert config.default_group == "explicit"

    def test_environment_beats_files(self, isolated_config, monkeypatch):
        write_yaml(isolated_config / ".optionsgroup.yaml", {
            "store": {"backend": "json", "path": "from_file.json"},
        })
        monkeypatch.setenv("OPTIONSGROUP_STORE__BACKEND", "duckdb")

        config = OptionsGroupConfig.load_hierarchical(project_dir=isolated_config)

        assert config.store.backend == "duckdb"
        assert config.store.path == "from_file.json"

    def test_overrides_beat_environment(self, isolated_config, monkeypatch):
        monkeypatch.setenv("OPTIONSGROUP_DEFAULT_GROUP", "from_env")

        config = OptionsGroupConfig.load_hierarchical(
            project_dir=isolated_config, default_group="from_override"
        )

        assert config.default_group == "from_override"

    def test_missing_explicit_file(self, isolated_config, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            OptionsGroupConfig.load_hierarchical(
                project_dir=isolated_config, config_file=tmp_path / "nope.yaml"
            )
        assert exc_info.value.config_key == "config_file"

    def test_invalid_backend(self, isolated_config):
        write_yaml(isolated_config / ".optionsgroup.yaml", {"store": {"backend": "redis"}})

        with pytest.raises(ConfigurationError):
            OptionsGroupConfig.load_hierarchical(project_dir=isolated_config)

    def test_malformed_file_is_skipped(self, isolated_config, log_messages):
        (isolated_config / ".optionsgroup.json").write_text("{broken", encoding="utf-8")

        config = OptionsGroupConfig.load_hierarchical(project_dir=isolated_config)

        assert config.store.backend == "json"
        assert log_messages


class TestConfigHelpers:
    """File discovery, serialization and the global instance."""

    def test_find_config_files_order(self, tmp_path):
        (tmp_path / ".optionsgroup.json").write_text("{}", encoding="utf-8")
        (tmp_path / ".optionsgroup.yaml").write_text("{}", encoding="utf-8")

        found = find_config_files([tmp_path])

        assert [p.name for p in found] == [".optionsgroup.yaml", ".optionsgroup.json"]

    def test_find_config_files_across_directories(self, tmp_path):
        user_dir = tmp_path / "user"
        user_dir.mkdir()
        (user_dir / "config.toml").write_text("", encoding="utf-8")
        (user_dir / ".optionsgroup.yaml").write_text("{}", encoding="utf-8")

        found = find_config_files([tmp_path / "missing", user_dir], USER_CONFIG_FILE_NAMES)

        assert found == [user_dir / "config.toml"]

    def test_save_to_file_round_trip(self, isolated_config, tmp_path):
        config = OptionsGroupConfig.load_hierarchical(
            project_dir=isolated_config, default_group="saved", store={"backend": "duckdb"}
        )
        target = tmp_path / "out" / "config.json"

        config.save_to_file(target)
        reloaded = OptionsGroupConfig.load_hierarchical(project_dir=isolated_config, config_file=target)

        assert reloaded.default_group == "saved"
        assert reloaded.store.backend == "duckdb"

    def test_to_dict_omits_unset_values(self, isolated_config):
        data = OptionsGroupConfig.load_hierarchical(project_dir=isolated_config).to_dict()
        assert "default_group" not in data
        assert data["store"]["backend"] == "json"

    def test_global_config(self, isolated_config):
        config = get_config()
        assert get_config() is config

        replacement = OptionsGroupConfig.load_hierarchical(project_dir=isolated_config, debug=True)
        set_config(replacement)
        assert get_config() is replacement

        reset_config()
        assert get_config() is not replacement
