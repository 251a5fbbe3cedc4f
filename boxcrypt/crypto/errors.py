"""
Error types for boxcrypt.

Every failure is surfaced as a distinct subclass of BoxcryptError. Only
EntropyError is worth retrying.
"""


class BoxcryptError(Exception):
    """Base class for all boxcrypt errors."""
    retryable = False


class EncodingError(BoxcryptError):
    """Raised when base64, hex or UTF-8 input is malformed."""
    pass


class KeyFormatError(BoxcryptError):
    """Raised when a key, nonce, IV or tag has the wrong format or length."""
    pass


class AuthenticationError(BoxcryptError):
    """
    Raised when authenticated decryption fails.

    The message is always the same regardless of the cause (wrong key,
    tampered ciphertext, wrong nonce, truncation).
    """

    def __init__(self, message: str = "Decryption failed"):
        super().__init__(message)


class EntropyError(BoxcryptError):
    """Raised when the random source is unavailable or returns a short read."""
    retryable = True
