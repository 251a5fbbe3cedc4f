"""
Public-key authenticated encryption with the NaCl box construction.

X25519 key agreement between the sender's private key and the recipient's
public key yields a shared secret; messages are sealed under it with
XSalsa20-Poly1305 and a random 24-byte nonce. The ciphertext is bound to both
key pairs and the nonce, so a successful open also authenticates the sender.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from nacl.exceptions import CryptoError
from nacl.public import Box, PrivateKey, PublicKey

from .codec import decode_base64, decode_utf8, encode_base64, encode_utf8
from .errors import AuthenticationError, KeyFormatError
from .keypair import decode_key
from .utils import EntropySource, SecureBytes, generate_random_bytes


logger = logging.getLogger(__name__)

NONCE_SIZE = Box.NONCE_SIZE  # 24 bytes
MAC_SIZE = 16  # Poly1305 tag prepended to every box


@dataclass(frozen=True)
class AsymmetricCiphertext:
    """Base64 box ciphertext and the nonce it was sealed with."""
    ciphertext: str
    nonce: str

    def to_dict(self) -> dict:
        return {'ciphertext': self.ciphertext, 'nonce': self.nonce}


class AsymmetricCipher:
    """
    NaCl box cipher over base64 keys.

    Holds no key material between calls; only the entropy source is kept.
    """

    def __init__(self, entropy: Optional[EntropySource] = None):
        """
        Args:
            entropy: Optional entropy source for nonces, defaults to the system CSPRNG
        """
        self._entropy = entropy

    @property
    def algorithm_name(self) -> str:
        return "X25519-XSalsa20-Poly1305"

    def encrypt(self, plaintext: str, recipient_public_key: str,
                sender_private_key: str) -> AsymmetricCiphertext:
        """
        Encrypt UTF-8 text from the sender to the recipient.

        Args:
            plaintext: Text to encrypt
            recipient_public_key: Base64 public key of the recipient
            sender_private_key: Base64 private key of the sender

        Returns:
            AsymmetricCiphertext with base64 ciphertext and nonce

        Raises:
            KeyFormatError: If a key is malformed or unusable
            EncodingError: If the plaintext cannot be encoded as UTF-8
            EntropyError: If no nonce can be drawn
        """
        message = encode_utf8(plaintext)
        public_key = decode_key(recipient_public_key, "recipient public key")

        with SecureBytes(decode_key(sender_private_key, "sender private key")) as secret:
            try:
                box = Box(PrivateKey(bytes(secret)), PublicKey(public_key))
            except CryptoError as e:
                raise KeyFormatError("Recipient public key is not a usable curve point") from e

        nonce = generate_random_bytes(NONCE_SIZE, self._entropy)
        encrypted = box.encrypt(message, nonce)

        logger.debug(f"Sealed {len(message)} bytes with {self.algorithm_name}")
        return AsymmetricCiphertext(
            ciphertext=encode_base64(encrypted.ciphertext),
            nonce=encode_base64(nonce),
        )

    def decrypt(self, ciphertext: str, nonce: str, sender_public_key: str,
                recipient_private_key: str) -> str:
        """
        Open a box sealed by the sender for the recipient.

        Args:
            ciphertext: Base64 ciphertext
            nonce: Base64 24-byte nonce
            sender_public_key: Base64 public key of the sender
            recipient_private_key: Base64 private key of the recipient

        Returns:
            The recovered UTF-8 text

        Raises:
            EncodingError: If the ciphertext or nonce is not valid base64,
                or the recovered plaintext is not UTF-8
            KeyFormatError: If a key or the nonce has the wrong length
            AuthenticationError: If the box does not open
        """
        raw_ciphertext = decode_base64(ciphertext)
        raw_nonce = decode_base64(nonce)
        if len(raw_nonce) != NONCE_SIZE:
            raise KeyFormatError(f"Nonce must be {NONCE_SIZE} bytes, got {len(raw_nonce)}")

        public_key = decode_key(sender_public_key, "sender public key")

        with SecureBytes(decode_key(recipient_private_key, "recipient private key")) as secret:
            try:
                box = Box(PrivateKey(bytes(secret)), PublicKey(public_key))
                message = box.decrypt(raw_ciphertext, raw_nonce)
            except CryptoError:
                logger.warning(f"{self.algorithm_name} authentication failed")
                raise AuthenticationError() from None

        logger.debug(f"Opened {len(message)} bytes with {self.algorithm_name}")
        return decode_utf8(message)


def create_asymmetric_cipher(entropy: Optional[EntropySource] = None) -> AsymmetricCipher:
    """Create an AsymmetricCipher instance."""
    return AsymmetricCipher(entropy=entropy)


def encrypt_asymmetric(plaintext: str, public_key: str, private_key: str) -> AsymmetricCiphertext:
    """
    Encrypt `plaintext` from the owner of `private_key` to the owner of `public_key`.

    `public_key` belongs to the recipient and `private_key` to the sender.
    """
    return create_asymmetric_cipher().encrypt(plaintext, public_key, private_key)


def decrypt_asymmetric(ciphertext: str, nonce: str, public_key: str, private_key: str) -> str:
    """
    Decrypt a box from the owner of `public_key`, addressed to `private_key`.

    `public_key` belongs to the sender and `private_key` to the recipient.
    """
    return create_asymmetric_cipher().decrypt(ciphertext, nonce, public_key, private_key)
