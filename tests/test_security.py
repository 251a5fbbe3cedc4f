"""
Security Tests for boxcrypt.

Tests nonce/IV uniqueness, entropy handling and secret hygiene.
"""

import pytest

from boxcrypt import (
    AsymmetricCipher,
    BoxcryptConfig,
    SymmetricCipher,
    generate_key_pair,
    generate_shared_key,
)
from boxcrypt.crypto.errors import (
    AuthenticationError,
    BoxcryptError,
    EncodingError,
    EntropyError,
    KeyFormatError,
)
from boxcrypt.crypto.utils import SecureBytes, generate_random_bytes, secure_zero


def failing_entropy(length: int) -> bytes:
    raise OSError("entropy pool unavailable")


def short_entropy(length: int) -> bytes:
    return b"\x00" * (length - 1)


class TestNonceUniqueness:
    """Test that repeated encryptions never reuse a nonce or IV."""

    def test_asymmetric_nonces_unique(self, alice, bob):
        """Test identical plaintexts give distinct nonces and ciphertexts."""
        cipher = AsymmetricCipher()
        results = [cipher.encrypt("same message", bob.public_key, alice.private_key)
                   for _ in range(500)]

        assert len({r.nonce for r in results}) == len(results)
        assert len({r.ciphertext for r in results}) == len(results)

    def test_symmetric_ivs_unique(self, shared_key):
        """Test identical plaintexts give distinct IVs and ciphertexts."""
        cipher = SymmetricCipher(BoxcryptConfig())
        results = [cipher.encrypt("same message", shared_key) for _ in range(500)]

        assert len({r.iv for r in results}) == len(results)
        assert len({r.ciphertext for r in results}) == len(results)


class TestEntropySource:
    """Test injected entropy sources."""

    def test_seeded_source_is_reproducible(self, alice, bob, seeded_entropy):
        """Test the same seed reproduces the same nonce sequence."""
        first = AsymmetricCipher(entropy=seeded_entropy(42))
        second = AsymmetricCipher(entropy=seeded_entropy(42))

        for _ in range(3):
            a = first.encrypt("hello", bob.public_key, alice.private_key)
            b = second.encrypt("hello", bob.public_key, alice.private_key)
            assert a == b

    def test_seeded_sequence_advances(self, shared_key, seeded_entropy):
        """Test a seeded source still yields a fresh IV per call."""
        cipher = SymmetricCipher(BoxcryptConfig(), entropy=seeded_entropy(1))
        ivs = {cipher.encrypt("hello", shared_key).iv for _ in range(50)}
        assert len(ivs) == 50

    def test_failing_source_raises_entropy_error(self, alice, bob, shared_key):
        """Test entropy failures surface as EntropyError."""
        with pytest.raises(EntropyError):
            generate_key_pair(failing_entropy)
        with pytest.raises(EntropyError):
            generate_shared_key(failing_entropy)
        with pytest.raises(EntropyError):
            AsymmetricCipher(entropy=failing_entropy).encrypt(
                "hello", bob.public_key, alice.private_key)
        with pytest.raises(EntropyError):
            SymmetricCipher(BoxcryptConfig(), entropy=failing_entropy).encrypt(
                "hello", shared_key)

    def test_short_read_raises_entropy_error(self):
        """Test a source returning too few bytes is refused."""
        with pytest.raises(EntropyError):
            generate_random_bytes(24, short_entropy)

    def test_entropy_error_chains_cause(self):
        """Test the underlying OS error is kept as the cause."""
        with pytest.raises(EntropyError) as excinfo:
            generate_random_bytes(16, failing_entropy)
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_system_source_length(self):
        """Test the default source returns the requested length."""
        assert len(generate_random_bytes(0)) == 0
        assert len(generate_random_bytes(24)) == 24


class TestErrorTaxonomy:
    """Test the error hierarchy."""

    def test_all_errors_share_base(self):
        """Test every error derives from BoxcryptError."""
        for error in (EncodingError, KeyFormatError, AuthenticationError, EntropyError):
            assert issubclass(error, BoxcryptError)

    def test_only_entropy_error_is_retryable(self):
        """Test retryability flags."""
        assert EntropyError("x").retryable
        assert not EncodingError("x").retryable
        assert not KeyFormatError("x").retryable
        assert not AuthenticationError().retryable

    def test_errors_are_distinct(self):
        """Test no error type is a subclass of another."""
        assert not issubclass(KeyFormatError, EncodingError)
        assert not issubclass(EncodingError, KeyFormatError)
        assert not issubclass(AuthenticationError, KeyFormatError)


class TestSecureMemory:
    """Test zeroing of secret buffers."""

    def test_secure_zero(self):
        """Test bytearrays are overwritten."""
        buf = bytearray(b"secret")
        secure_zero(buf)
        assert buf == bytearray(6)

    def test_secure_zero_rejects_bytes(self):
        """Test immutable bytes are refused."""
        with pytest.raises(TypeError):
            secure_zero(b"secret")

    def test_secure_bytes_context(self):
        """Test SecureBytes is cleared on context exit."""
        with SecureBytes(b"secret") as secret:
            assert bytes(secret) == b"secret"
            assert len(secret) == 6
        assert secret.is_cleared()
        with pytest.raises(ValueError):
            bytes(secret)

    def test_secure_bytes_repr_hides_content(self):
        """Test repr shows only the length."""
        secret = SecureBytes(b"topsecret")
        assert "topsecret" not in repr(secret)
        secret.clear()

    def test_no_secrets_logged(self, alice, bob, shared_key, caplog):
        """Test debug logging never includes keys or plaintext."""
        caplog.set_level("DEBUG", logger="boxcrypt")
        sealed = AsymmetricCipher().encrypt("plaintext-marker", bob.public_key, alice.private_key)
        AsymmetricCipher().decrypt(sealed.ciphertext, sealed.nonce, alice.public_key, bob.private_key)
        SymmetricCipher(BoxcryptConfig()).encrypt("plaintext-marker", shared_key)

        assert caplog.records
        for secret in ("plaintext-marker", alice.private_key, bob.private_key,
                       shared_key, sealed.nonce):
            assert secret not in caplog.text
