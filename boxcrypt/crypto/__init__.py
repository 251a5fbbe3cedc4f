"""
Cryptographic primitives for boxcrypt.

This module provides:
- X25519 key pair and shared key generation
- Public-key authenticated encryption (NaCl box)
- Shared-secret authenticated encryption (AES-256-GCM)
- Strict base64/hex/UTF-8 codecs
"""

from .errors import (
    BoxcryptError,
    EncodingError,
    KeyFormatError,
    AuthenticationError,
    EntropyError,
)
from .aead import SymmetricCipher, SymmetricCiphertext, encrypt_symmetric, decrypt_symmetric
from .box import AsymmetricCipher, AsymmetricCiphertext, encrypt_asymmetric, decrypt_asymmetric
from .keypair import KeyPair, generate_key_pair, generate_shared_key, derive_public_key

__all__ = [
    'BoxcryptError',
    'EncodingError',
    'KeyFormatError',
    'AuthenticationError',
    'EntropyError',
    'SymmetricCipher',
    'SymmetricCiphertext',
    'encrypt_symmetric',
    'decrypt_symmetric',
    'AsymmetricCipher',
    'AsymmetricCiphertext',
    'encrypt_asymmetric',
    'decrypt_asymmetric',
    'KeyPair',
    'generate_key_pair',
    'generate_shared_key',
    'derive_public_key',
]
