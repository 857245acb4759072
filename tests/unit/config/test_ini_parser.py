"""
Unit tests for cefbundle.ini parser.
"""

import pytest

from cefbundle.config.ini_parser import BundleIniConfig, BundleIniConfigError
from cefbundle.errors import ConfigurationError


class TestBundleIniConfig:
    """Test suite for BundleIniConfig parser."""

    @pytest.fixture
    def tmp_ini_path(self, tmp_path):
        """Fixture to provide a temporary INI file path."""
        return tmp_path / "cefbundle.ini"

    @pytest.fixture
    def full_config(self, tmp_ini_path):
        """Create config with a base section and two example sections."""
        content = """
[cefbundle]
profile = dev
skip-pdb = false

[example:cefsimple]
min_locales = false
use_upx = true

[example:demo]
profile = release
"""
        tmp_ini_path.write_text(content)
        return tmp_ini_path

    def test_file_not_found(self, tmp_path):
        """Test error when INI file doesn't exist."""
        with pytest.raises(BundleIniConfigError, match="Configuration file not found"):
            BundleIniConfig(tmp_path / "nonexistent.ini")

    def test_error_is_configuration_error(self, tmp_path):
        with pytest.raises(ConfigurationError):
            BundleIniConfig(tmp_path / "nonexistent.ini")

    def test_load_missing_returns_none(self, tmp_path):
        """Test that a project without cefbundle.ini has no INI layer."""
        assert BundleIniConfig.load(tmp_path) is None

    def test_load_existing(self, full_config, tmp_path):
        config = BundleIniConfig.load(tmp_path)
        assert config is not None
        assert config.ini_path == full_config

    def test_base_options(self, full_config):
        """Test reading the base section with dashed keys normalized."""
        config = BundleIniConfig(full_config)
        assert config.get_options() == {"profile": "dev", "skip_pdb": "false"}

    def test_example_overrides(self, full_config):
        """Test example sections override and extend the base section."""
        config = BundleIniConfig(full_config)

        assert config.get_options("cefsimple") == {
            "profile": "dev",
            "skip_pdb": "false",
            "min_locales": "false",
            "use_upx": "true",
        }
        assert config.get_options("demo")["profile"] == "release"

    def test_unknown_example_uses_base(self, full_config):
        config = BundleIniConfig(full_config)
        assert config.get_options("other") == config.get_options()

    def test_get_examples(self, full_config):
        config = BundleIniConfig(full_config)
        assert config.get_examples() == ["cefsimple", "demo"]

    def test_unknown_key(self, tmp_ini_path):
        """Test that typos in keys are reported."""
        tmp_ini_path.write_text("[cefbundle]\nskip_pbd = true\n")
        config = BundleIniConfig(tmp_ini_path)

        with pytest.raises(BundleIniConfigError, match="Unknown key 'skip_pbd'"):
            config.get_options()

    def test_malformed_file(self, tmp_ini_path):
        """Test that a syntactically broken file is reported."""
        tmp_ini_path.write_text("profile = dev\n")
        with pytest.raises(BundleIniConfigError, match="Failed to parse"):
            BundleIniConfig(tmp_ini_path)

    def test_empty_file(self, tmp_ini_path):
        tmp_ini_path.write_text("")
        config = BundleIniConfig(tmp_ini_path)
        assert config.get_options("cefsimple") == {}
