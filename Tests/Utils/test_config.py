# test_config.py
# Description: Tests for configuration loading and saving
#
# Imports
import sys
if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib
#
# Local Imports
from tabswitch import config
#
########################################################################################################################
#
# Tests:

class TestLoadConfig:
    """Test defaults, merging and error fallbacks."""

    def test_defaults_without_file(self, isolated_config):
        assert not isolated_config.exists()
        loaded = config.load_config()
        assert loaded["tabs"]["panel_matching"] == "position"
        assert loaded["logging"]["level"] == "INFO"
        # Loading never creates the file
        assert not isolated_config.exists()

    def test_user_file_merges_over_defaults(self, write_config):
        write_config('[logging]\nlevel = "DEBUG"\n')
        loaded = config.load_config()
        assert loaded["logging"]["level"] == "DEBUG"
        assert loaded["logging"]["console"] is True
        assert loaded["tabs"]["panel_matching"] == "position"

    def test_malformed_file_falls_back_to_defaults(self, write_config, log_messages):
        write_config('[tabs\npanel_matching = ')
        loaded = config.load_config()
        assert loaded["tabs"]["panel_matching"] == "position"
        assert any(message.startswith("ERROR:") for message in log_messages)

    def test_result_is_cached_until_reload(self, write_config):
        path = write_config('[logging]\nlevel = "DEBUG"\n')
        assert config.get_setting("logging", "level") == "DEBUG"
        path.write_text('[logging]\nlevel = "ERROR"\n', encoding="utf-8")
        assert config.get_setting("logging", "level") == "DEBUG"
        config.load_config(force_reload=True)
        assert config.get_setting("logging", "level") == "ERROR"


class TestGetSetting:
    """Test the setting getter."""

    def test_missing_section_returns_default(self):
        assert config.get_setting("nope", "key", 42) == 42

    def test_missing_key_returns_default(self):
        assert config.get_setting("tabs", "nope", "fallback") == "fallback"

    def test_non_table_section_returns_default(self, write_config):
        write_config('tabs = "flat"\n')
        assert config.get_setting("tabs", "panel_matching", "x") == "x"


class TestSaveSetting:
    """Test writing settings back to the TOML file."""

    def test_save_creates_file_and_reloads(self, isolated_config):
        assert config.save_setting("tabs", "panel_matching", "token") is True
        with open(isolated_config, "rb") as f:
            assert tomllib.load(f)["tabs"]["panel_matching"] == "token"
        assert config.get_setting("tabs", "panel_matching") == "token"

    def test_save_nested_section(self, isolated_config):
        assert config.save_setting("tabs.demo", "default", "tab2") is True
        with open(isolated_config, "rb") as f:
            assert tomllib.load(f)["tabs"]["demo"]["default"] == "tab2"

    def test_save_keeps_other_values(self, write_config):
        path = write_config('[logging]\nlevel = "WARNING"\n')
        config.save_setting("tabs", "panel_matching", "token")
        with open(path, "rb") as f:
            data = tomllib.load(f)
        assert data["logging"]["level"] == "WARNING"
        assert data["tabs"]["panel_matching"] == "token"

    def test_save_refuses_corrupted_file(self, write_config):
        path = write_config('[tabs\n')
        assert config.save_setting("tabs", "panel_matching", "token") is False
        assert path.read_text(encoding="utf-8") == '[tabs\n'

    def test_save_into_non_table_fails(self, write_config):
        write_config('tabs = "flat"\n')
        assert config.save_setting("tabs", "panel_matching", "token") is False


class TestDeepMerge:
    """Test recursive dictionary merging."""

    def test_nested_merge_does_not_mutate_base(self):
        base = {"a": {"b": 1, "c": 2}}
        merged = config.deep_merge_dicts(base, {"a": {"c": 3}, "d": 4})
        assert merged == {"a": {"b": 1, "c": 3}, "d": 4}
        assert base == {"a": {"b": 1, "c": 2}}

#
# End of test_config.py
########################################################################################################################
