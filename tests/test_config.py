"""
Tests for configuration handling.
"""

import pytest

from boxcrypt.config import (
    ENV_IV_SIZE,
    ENV_OUTPUT_ENCODING,
    BoxcryptConfig,
    ConfigError,
    get_default_config,
)


class TestBoxcryptConfig:
    """Test configuration validation and environment loading."""

    def test_defaults(self):
        """Test the default configuration."""
        config = BoxcryptConfig()
        assert config.iv_size == 12
        assert config.output_encoding == "base64"

    @pytest.mark.parametrize("iv_size", [0, 8, 11, 13, 24])
    def test_invalid_iv_size(self, iv_size):
        """Test unsupported IV sizes are rejected."""
        with pytest.raises(ConfigError):
            BoxcryptConfig(iv_size=iv_size)

    def test_invalid_encoding(self):
        """Test unsupported output encodings are rejected."""
        with pytest.raises(ConfigError):
            BoxcryptConfig(output_encoding="base32")

    def test_from_env_defaults(self):
        """Test an empty environment gives defaults."""
        assert BoxcryptConfig.from_env({}) == BoxcryptConfig()

    def test_from_env_values(self):
        """Test values are read and normalised."""
        config = BoxcryptConfig.from_env({ENV_IV_SIZE: "16", ENV_OUTPUT_ENCODING: " HEX "})
        assert config.iv_size == 16
        assert config.output_encoding == "hex"

    def test_from_env_non_integer_iv(self):
        """Test a non-numeric IV size is rejected."""
        with pytest.raises(ConfigError):
            BoxcryptConfig.from_env({ENV_IV_SIZE: "twelve"})

    def test_get_default_config_reads_environment(self, monkeypatch):
        """Test the default config follows os.environ."""
        monkeypatch.setenv(ENV_OUTPUT_ENCODING, "hex")
        monkeypatch.delenv(ENV_IV_SIZE, raising=False)
        assert get_default_config() == BoxcryptConfig(output_encoding="hex")
