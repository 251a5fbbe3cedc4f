"""
Key generation for boxcrypt.

Key pairs are X25519 (Curve25519) keys as used by the NaCl box construction,
exchanged as base64 text. Shared keys for the symmetric cipher are exchanged
as hex.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from nacl.public import PrivateKey

from .aead import KEY_SIZE as SHARED_KEY_SIZE
from .codec import decode_base64, encode_base64, encode_hex
from .errors import EncodingError, KeyFormatError
from .utils import EntropySource, SecureBytes, generate_random_bytes


logger = logging.getLogger(__name__)

# Curve25519 public and private keys are both 32 bytes
KEY_SIZE = PrivateKey.SIZE


@dataclass(frozen=True)
class KeyPair:
    """A base64-encoded X25519 key pair."""
    public_key: str
    private_key: str = field(repr=False)

    def to_dict(self) -> dict:
        return {'publicKey': self.public_key, 'privateKey': self.private_key}


def decode_key(text: str, name: str = "key") -> bytes:
    """
    Decode a base64 X25519 key and check its length.

    Args:
        text: Base64-encoded key
        name: Label used in error messages

    Returns:
        The 32 raw key bytes

    Raises:
        KeyFormatError: If the key is not valid base64 or not 32 bytes
    """
    try:
        raw = decode_base64(text)
    except EncodingError as e:
        raise KeyFormatError(f"{name} is not valid base64") from e

    if len(raw) != KEY_SIZE:
        raise KeyFormatError(f"{name} must be {KEY_SIZE} bytes, got {len(raw)}")

    return raw


def generate_key_pair(entropy: Optional[EntropySource] = None) -> KeyPair:
    """
    Generate a fresh X25519 key pair.

    The private scalar is drawn from the entropy source and the public point
    is derived from it by scalar multiplication of the base point.

    Args:
        entropy: Optional entropy source, defaults to the system CSPRNG

    Returns:
        KeyPair with both keys base64-encoded

    Raises:
        EntropyError: If the random source fails
    """
    with SecureBytes(generate_random_bytes(KEY_SIZE, entropy)) as seed:
        private_key = PrivateKey(bytes(seed))

    pair = KeyPair(
        public_key=encode_base64(bytes(private_key.public_key)),
        private_key=encode_base64(bytes(private_key)),
    )
    logger.debug("Generated new X25519 key pair")
    return pair


def derive_public_key(private_key: str) -> str:
    """
    Recompute the base64 public key belonging to a base64 private key.

    Raises:
        KeyFormatError: If the private key is malformed
    """
    with SecureBytes(decode_key(private_key, "private key")) as secret:
        return encode_base64(bytes(PrivateKey(bytes(secret)).public_key))


def generate_shared_key(entropy: Optional[EntropySource] = None) -> str:
    """Generate a random 256-bit shared key for the symmetric cipher, as hex."""
    with SecureBytes(generate_random_bytes(SHARED_KEY_SIZE, entropy)) as key:
        return encode_hex(bytes(key))
