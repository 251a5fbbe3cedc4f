"""
Entropy and secure memory utilities.

This module provides the injectable random source used for keys, nonces and
IVs, and a zeroable container for decoded secret material.
"""

import secrets
from typing import Callable, Optional, Union

from .errors import EntropyError


# An entropy source takes a byte count and returns that many random bytes
EntropySource = Callable[[int], bytes]


def system_entropy(length: int) -> bytes:
    """Read `length` bytes from the operating system CSPRNG."""
    return secrets.token_bytes(length)


def generate_random_bytes(length: int, entropy: Optional[EntropySource] = None) -> bytes:
    """
    Generate cryptographically secure random bytes.

    Args:
        length: Number of random bytes to generate
        entropy: Optional entropy source, defaults to the system CSPRNG

    Returns:
        `length` random bytes

    Raises:
        EntropyError: If the source fails or returns the wrong number of bytes
    """
    source = entropy if entropy is not None else system_entropy

    try:
        data = source(length)
    except (OSError, NotImplementedError) as e:
        raise EntropyError(f"Random source unavailable: {e}") from e

    if not isinstance(data, (bytes, bytearray)) or len(data) != length:
        raise EntropyError(f"Random source returned a short read, expected {length} bytes")

    return bytes(data)


def secure_zero(data: Union[bytearray, memoryview]) -> None:
    """
    Overwrite a mutable buffer with zeros.

    Immutable bytes cannot be scrubbed under CPython, so callers keep secret
    material in a bytearray for as long as they need it.

    Args:
        data: Memory to zero (must be mutable)
    """
    if isinstance(data, (bytearray, memoryview)):
        for i in range(len(data)):
            data[i] = 0
    else:
        raise TypeError("Data must be bytearray or memoryview")


class SecureBytes:
    """
    A container for sensitive byte data that zeros itself when cleared.

    Use as a context manager around the lifetime of a decoded key.
    """

    def __init__(self, data: bytes):
        self._data = bytearray(data)
        self._is_valid = True

    def __len__(self) -> int:
        if not self._is_valid:
            raise ValueError("SecureBytes has been cleared")
        return len(self._data)

    def __bytes__(self) -> bytes:
        if not self._is_valid:
            raise ValueError("SecureBytes has been cleared")
        return bytes(self._data)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.clear()

    def __del__(self):
        if hasattr(self, '_data'):
            self.clear()

    def __repr__(self) -> str:
        return f"SecureBytes(<{len(self._data)} bytes>)"

    def clear(self) -> None:
        """Explicitly clear the stored data."""
        if self._is_valid:
            secure_zero(self._data)
            self._is_valid = False

    def is_cleared(self) -> bool:
        """Check if the SecureBytes has been cleared."""
        return not self._is_valid
