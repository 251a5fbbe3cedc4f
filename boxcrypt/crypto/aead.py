"""
Shared-secret authenticated encryption with AES-256-GCM.

The key is a 256-bit value exchanged as hex. Every encryption draws a fresh
random IV, and ciphertext, IV and tag are returned separately. Tag
verification happens inside OpenSSL in constant time before any plaintext
is released.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..config import BoxcryptConfig, get_default_config
from .codec import decode_hex, decode_text, decode_utf8, encode_text, encode_utf8
from .errors import AuthenticationError, EncodingError, KeyFormatError
from .utils import EntropySource, SecureBytes, generate_random_bytes


logger = logging.getLogger(__name__)

KEY_SIZE = 32  # AES-256
TAG_SIZE = 16


@dataclass(frozen=True)
class SymmetricCiphertext:
    """Detached AES-GCM output; all fields share the configured text encoding."""
    ciphertext: str
    iv: str
    tag: str

    def to_dict(self) -> dict:
        return {'ciphertext': self.ciphertext, 'iv': self.iv, 'tag': self.tag}


class SymmetricCipher:
    """
    AES-256-GCM cipher with hex keys and detached IV and tag.
    """

    def __init__(self, config: Optional[BoxcryptConfig] = None,
                 entropy: Optional[EntropySource] = None):
        """
        Initialize the cipher.

        Args:
            config: IV size and output encoding, defaults to the environment config
            entropy: Optional entropy source for IVs, defaults to the system CSPRNG
        """
        self.config = config if config is not None else get_default_config()
        self._entropy = entropy

    @property
    def algorithm_name(self) -> str:
        return "AES-256-GCM"

    @property
    def key_size(self) -> int:
        return KEY_SIZE

    @property
    def iv_size(self) -> int:
        return self.config.iv_size

    @property
    def tag_size(self) -> int:
        return TAG_SIZE

    def encrypt(self, plaintext: str, key: str,
                associated_data: Optional[bytes] = None) -> SymmetricCiphertext:
        """
        Encrypt UTF-8 text under a hex shared key.

        Args:
            plaintext: Text to encrypt
            key: 64-character hex key
            associated_data: Additional data to authenticate (not encrypted)

        Returns:
            SymmetricCiphertext with ciphertext, IV and tag encoded separately

        Raises:
            KeyFormatError: If the key is malformed or not 32 bytes
            EncodingError: If the plaintext cannot be encoded as UTF-8
            EntropyError: If no IV can be drawn
        """
        message = encode_utf8(plaintext)

        with SecureBytes(self._decode_key(key)) as secret:
            iv = generate_random_bytes(self.iv_size, self._entropy)
            ciphertext, tag = self.seal(bytes(secret), iv, message, associated_data)

        encoding = self.config.output_encoding
        return SymmetricCiphertext(
            ciphertext=encode_text(ciphertext, encoding),
            iv=encode_text(iv, encoding),
            tag=encode_text(tag, encoding),
        )

    def decrypt(self, ciphertext: str, iv: str, tag: str, key: str,
                associated_data: Optional[bytes] = None) -> str:
        """
        Verify and decrypt a detached AES-GCM ciphertext.

        Args:
            ciphertext: Encoded ciphertext
            iv: Encoded IV used for encryption
            tag: Encoded authentication tag
            key: 64-character hex key
            associated_data: Additional authenticated data given at encryption

        Returns:
            The recovered UTF-8 text

        Raises:
            EncodingError: If an input is malformed or the plaintext is not UTF-8
            KeyFormatError: If the key, IV or tag has the wrong length
            AuthenticationError: If verification fails
        """
        encoding = self.config.output_encoding
        raw_ciphertext = decode_text(ciphertext, encoding)
        raw_iv = decode_text(iv, encoding)
        raw_tag = decode_text(tag, encoding)

        with SecureBytes(self._decode_key(key)) as secret:
            message = self.open(bytes(secret), raw_iv, raw_ciphertext, raw_tag, associated_data)

        return decode_utf8(message)

    def seal(self, key: bytes, iv: bytes, plaintext: bytes,
             associated_data: Optional[bytes] = None) -> Tuple[bytes, bytes]:
        """
        Encrypt raw bytes.

        Returns:
            Tuple of (ciphertext, authentication_tag)
        """
        self._check_lengths(key, iv)

        aesgcm = AESGCM(key)

        # AES-GCM returns ciphertext with tag appended
        ciphertext_with_tag = aesgcm.encrypt(iv, plaintext, associated_data)

        logger.debug(f"Sealed {len(plaintext)} bytes with {self.algorithm_name}")
        return ciphertext_with_tag[:-TAG_SIZE], ciphertext_with_tag[-TAG_SIZE:]

    def open(self, key: bytes, iv: bytes, ciphertext: bytes, tag: bytes,
             associated_data: Optional[bytes] = None) -> bytes:
        """
        Verify and decrypt raw bytes.

        Raises:
            KeyFormatError: If the key, IV or tag has the wrong length
            AuthenticationError: If verification fails
        """
        self._check_lengths(key, iv)
        if len(tag) != TAG_SIZE:
            raise KeyFormatError(f"{self.algorithm_name} requires {TAG_SIZE}-byte tag")

        aesgcm = AESGCM(key)

        try:
            plaintext = aesgcm.decrypt(iv, ciphertext + tag, associated_data)
        except InvalidTag:
            logger.warning(f"{self.algorithm_name} authentication failed")
            raise AuthenticationError() from None

        logger.debug(f"Opened {len(plaintext)} bytes with {self.algorithm_name}")
        return plaintext

    def _check_lengths(self, key: bytes, iv: bytes) -> None:
        if len(key) != KEY_SIZE:
            raise KeyFormatError(f"{self.algorithm_name} requires {KEY_SIZE}-byte key")
        if len(iv) != self.iv_size:
            raise KeyFormatError(f"{self.algorithm_name} requires {self.iv_size}-byte IV")

    @staticmethod
    def _decode_key(key: str) -> bytes:
        try:
            raw = decode_hex(key)
        except EncodingError as e:
            raise KeyFormatError("Shared key is not valid hex") from e

        if len(raw) != KEY_SIZE:
            raise KeyFormatError(f"Shared key must be {KEY_SIZE} bytes, got {len(raw)}")
        return raw


def create_symmetric_cipher(config: Optional[BoxcryptConfig] = None,
                            entropy: Optional[EntropySource] = None) -> SymmetricCipher:
    """Create a SymmetricCipher instance."""
    return SymmetricCipher(config=config, entropy=entropy)


def encrypt_symmetric(plaintext: str, key: str) -> SymmetricCiphertext:
    """Encrypt `plaintext` under hex `key` with the default cipher."""
    return create_symmetric_cipher().encrypt(plaintext, key)


def decrypt_symmetric(ciphertext: str, iv: str, tag: str, key: str) -> str:
    """Decrypt a detached ciphertext under hex `key` with the default cipher."""
    return create_symmetric_cipher().decrypt(ciphertext, iv, tag, key)
