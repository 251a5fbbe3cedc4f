"""
Configuration management for boxcrypt.

Only the symmetric cipher has tunable parameters: the IV length and the text
encoding of its outputs. Defaults give AES-256-GCM with a 96-bit IV and
base64 output. A 128-bit IV can be selected to read data produced by
systems that used a full-block IV.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


ENV_IV_SIZE = "BOXCRYPT_IV_SIZE"
ENV_OUTPUT_ENCODING = "BOXCRYPT_OUTPUT_ENCODING"

DEFAULT_IV_SIZE = 12
SUPPORTED_IV_SIZES = (12, 16)
DEFAULT_OUTPUT_ENCODING = "base64"
SUPPORTED_OUTPUT_ENCODINGS = ("base64", "hex")


class ConfigError(Exception):
    """Raised when configuration values are invalid."""
    pass


@dataclass(frozen=True)
class BoxcryptConfig:
    """Symmetric cipher parameters."""
    iv_size: int = DEFAULT_IV_SIZE
    output_encoding: str = DEFAULT_OUTPUT_ENCODING

    def __post_init__(self):
        if self.iv_size not in SUPPORTED_IV_SIZES:
            raise ConfigError(
                f"IV size must be one of {SUPPORTED_IV_SIZES}, got {self.iv_size}"
            )
        if self.output_encoding not in SUPPORTED_OUTPUT_ENCODINGS:
            raise ConfigError(
                f"Output encoding must be one of {SUPPORTED_OUTPUT_ENCODINGS}, "
                f"got {self.output_encoding!r}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'BoxcryptConfig':
        """
        Build a configuration from environment variables.

        Reads BOXCRYPT_IV_SIZE and BOXCRYPT_OUTPUT_ENCODING; unset variables
        fall back to the defaults.

        Args:
            environ: Mapping to read from, defaults to os.environ

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        if environ is None:
            environ = os.environ

        raw_iv_size = environ.get(ENV_IV_SIZE, str(DEFAULT_IV_SIZE))
        try:
            iv_size = int(raw_iv_size)
        except ValueError:
            raise ConfigError(f"{ENV_IV_SIZE} must be an integer, got {raw_iv_size!r}")

        output_encoding = environ.get(ENV_OUTPUT_ENCODING, DEFAULT_OUTPUT_ENCODING).strip().lower()

        return cls(iv_size=iv_size, output_encoding=output_encoding)


def get_default_config() -> BoxcryptConfig:
    """Return the configuration derived from the current environment."""
    return BoxcryptConfig.from_env()
