"""Tests for workspace configuration loading."""

import json
from pathlib import Path

import pytest

from quickreact.config import (
    ConfigError,
    OutputLayout,
    load_workspace_config,
    locate_config_file,
)


class TestDefaults:
    """Test behavior without a config file."""

    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_workspace_config(tmp_path)
        assert config.is_default()
        assert config.root == tmp_path.resolve()
        assert config.layout == OutputLayout()
        assert config.raw == {}

    def test_default_layout(self):
        layout = OutputLayout()
        assert layout.out_dir is None
        assert layout.index_file == "index_qr.js"
        assert layout.app_file == "App_qr.js"
        assert layout.component_path("Header") == "components/Header/index.js"
        assert layout.scaffold_dirs == ("components", "images", "assets")
        assert layout.confirm_overwrite is True


class TestLocateConfigFile:
    """Test config file discovery."""

    def test_toml_preferred(self, tmp_path):
        (tmp_path / "quickreact.toml").write_text("")
        (tmp_path / ".quickreactrc").write_text("{}")
        assert locate_config_file(tmp_path) == tmp_path / "quickreact.toml"

    def test_rc_fallback(self, tmp_path):
        (tmp_path / ".quickreactrc").write_text("{}")
        assert locate_config_file(tmp_path) == tmp_path / ".quickreactrc"

    def test_explicit_missing(self, tmp_path):
        assert locate_config_file(tmp_path, tmp_path / "other.toml") is None

    def test_nothing_found(self, tmp_path):
        assert locate_config_file(tmp_path) is None


class TestLoading:
    """Test parsing of TOML and JSON config files."""

    def test_toml_layout(self, tmp_path):
        (tmp_path / "quickreact.toml").write_text(
            "[output]\n"
            'out_dir = "web/src"\n'
            'components_dir = "parts"\n'
            'app_file = "App.js"\n'
            "\n"
            "[files]\n"
            "confirm_overwrite = false\n",
            encoding="utf-8",
        )
        config = load_workspace_config(tmp_path)
        assert not config.is_default()
        assert config.layout.out_dir == (tmp_path / "web" / "src").resolve()
        assert config.layout.component_path("Nav") == "parts/Nav/index.js"
        assert config.layout.app_file == "App.js"
        assert config.layout.index_file == "index_qr.js"
        assert config.layout.confirm_overwrite is False
        assert config.raw["output"]["components_dir"] == "parts"

    def test_absolute_out_dir_kept(self, tmp_path):
        target = tmp_path / "elsewhere"
        (tmp_path / "quickreact.toml").write_text(f'[output]\nout_dir = "{target.as_posix()}"\n')
        assert load_workspace_config(tmp_path).layout.out_dir == Path(target.as_posix())

    def test_rc_is_json(self, tmp_path):
        (tmp_path / ".quickreactrc").write_text(json.dumps({"output": {"images_dir": "img"}}))
        config = load_workspace_config(tmp_path)
        assert config.layout.images_dir == "img"
        assert config.path == tmp_path.resolve() / ".quickreactrc"

    def test_explicit_path(self, tmp_path):
        explicit = tmp_path / "conf" / "qr.toml"
        explicit.parent.mkdir()
        explicit.write_text('[output]\nassets_dir = "static"\n')
        config = load_workspace_config(tmp_path, explicit)
        assert config.layout.assets_dir == "static"

    def test_invalid_json(self, tmp_path):
        (tmp_path / ".quickreactrc").write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON in .quickreactrc") as exc_info:
            load_workspace_config(tmp_path)
        assert exc_info.value.code == "CONFIG_ERROR"
        assert exc_info.value.path is not None

    def test_invalid_toml(self, tmp_path):
        (tmp_path / "quickreact.toml").write_text("out_dir = ")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_workspace_config(tmp_path)

    def test_section_must_be_table(self, tmp_path):
        (tmp_path / "quickreact.toml").write_text('output = "dist"\n')
        with pytest.raises(ConfigError, match=r"\[output\] section must be a table") as exc_info:
            load_workspace_config(tmp_path)
        assert exc_info.value.hint

    @pytest.mark.parametrize("content", ["[]", '"dist"', "3"])
    def test_json_must_be_an_object(self, tmp_path, content):
        (tmp_path / ".quickreactrc").write_text(content)
        with pytest.raises(ConfigError, match="must hold a JSON object") as exc_info:
            load_workspace_config(tmp_path)
        assert exc_info.value.hint

    def test_quoted_confirm_overwrite_is_rejected(self, tmp_path):
        """``"false"`` must not be read as a truthy string."""
        (tmp_path / "quickreact.toml").write_text('[files]\nconfirm_overwrite = "false"\n')
        with pytest.raises(ConfigError, match="confirm_overwrite must be true or false"):
            load_workspace_config(tmp_path)

    def test_json_confirm_overwrite_must_be_boolean(self, tmp_path):
        (tmp_path / ".quickreactrc").write_text(json.dumps({"files": {"confirm_overwrite": 0}}))
        with pytest.raises(ConfigError):
            load_workspace_config(tmp_path)

    def test_json_confirm_overwrite_false(self, tmp_path):
        (tmp_path / ".quickreactrc").write_text(json.dumps({"files": {"confirm_overwrite": False}}))
        assert load_workspace_config(tmp_path).layout.confirm_overwrite is False
