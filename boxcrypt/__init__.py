"""
boxcrypt: small authenticated-encryption toolkit.

Two modes are offered:
- Public-key encryption between two parties with the NaCl box construction
  (X25519 + XSalsa20-Poly1305), keys and ciphertexts as base64
- Shared-secret encryption with AES-256-GCM, keys as hex, IV and tag detached

Basic Usage:
    >>> from boxcrypt import generate_key_pair, encrypt_asymmetric, decrypt_asymmetric
    >>>
    >>> alice = generate_key_pair()
    >>> bob = generate_key_pair()
    >>>
    >>> # Alice encrypts for Bob
    >>> sealed = encrypt_asymmetric("hello", bob.public_key, alice.private_key)
    >>>
    >>> # Bob decrypts, authenticating Alice
    >>> decrypt_asymmetric(sealed.ciphertext, sealed.nonce, alice.public_key, bob.private_key)
    'hello'
"""

__version__ = "1.0.0"

# Key generation
from .crypto.keypair import KeyPair, generate_key_pair, generate_shared_key, derive_public_key

# Ciphers
from .crypto.box import (
    AsymmetricCipher,
    AsymmetricCiphertext,
    create_asymmetric_cipher,
    encrypt_asymmetric,
    decrypt_asymmetric,
)
from .crypto.aead import (
    SymmetricCipher,
    SymmetricCiphertext,
    create_symmetric_cipher,
    encrypt_symmetric,
    decrypt_symmetric,
)

# Errors and configuration
from .crypto.errors import (
    BoxcryptError,
    EncodingError,
    KeyFormatError,
    AuthenticationError,
    EntropyError,
)
from .config import BoxcryptConfig, ConfigError


__all__ = [
    # Version info
    '__version__',

    # Key generation
    'KeyPair',
    'generate_key_pair',
    'generate_shared_key',
    'derive_public_key',

    # Public-key encryption
    'AsymmetricCipher',
    'AsymmetricCiphertext',
    'create_asymmetric_cipher',
    'encrypt_asymmetric',
    'decrypt_asymmetric',

    # Shared-secret encryption
    'SymmetricCipher',
    'SymmetricCiphertext',
    'create_symmetric_cipher',
    'encrypt_symmetric',
    'decrypt_symmetric',

    # Errors and configuration
    'BoxcryptError',
    'EncodingError',
    'KeyFormatError',
    'AuthenticationError',
    'EntropyError',
    'BoxcryptConfig',
    'ConfigError',
]
