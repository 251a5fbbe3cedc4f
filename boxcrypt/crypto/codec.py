"""
Text codecs for key material and ciphertexts.

Asymmetric artifacts travel as standard padded base64, symmetric keys as hex
and plaintext as UTF-8. Decoding is strict: anything that is not exactly
well-formed raises EncodingError instead of yielding partial bytes.
"""

import base64
import binascii

from .errors import EncodingError


BASE64 = "base64"
HEX = "hex"
TEXT_ENCODINGS = (BASE64, HEX)


def encode_base64(data: bytes) -> str:
    """Encode bytes as standard padded base64."""
    return base64.b64encode(data).decode('ascii')


def decode_base64(text: str) -> bytes:
    """
    Decode standard padded base64.

    Raises:
        EncodingError: If `text` is not a str of valid base64
    """
    if not isinstance(text, str):
        raise EncodingError(f"Expected base64 str, got {type(text).__name__}")

    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise EncodingError(f"Invalid base64: {e}") from e


def encode_hex(data: bytes) -> str:
    """Encode bytes as lowercase hex."""
    return data.hex()


def decode_hex(text: str) -> bytes:
    """
    Decode hex without separators, in either case.

    Raises:
        EncodingError: If `text` is not a str of valid hex
    """
    if not isinstance(text, str):
        raise EncodingError(f"Expected hex str, got {type(text).__name__}")

    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError) as e:
        raise EncodingError(f"Invalid hex: {e}") from e


def encode_utf8(text: str) -> bytes:
    """
    Encode plaintext as UTF-8.

    Raises:
        EncodingError: If `text` is not a str or holds lone surrogates
    """
    if not isinstance(text, str):
        raise EncodingError(f"Plaintext must be str, got {type(text).__name__}")

    try:
        return text.encode('utf-8')
    except UnicodeEncodeError as e:
        raise EncodingError(f"Plaintext is not encodable as UTF-8: {e.reason}") from e


def decode_utf8(data: bytes) -> str:
    """
    Decode recovered plaintext bytes as UTF-8.

    Raises:
        EncodingError: If `data` is not valid UTF-8
    """
    try:
        return bytes(data).decode('utf-8')
    except UnicodeDecodeError as e:
        raise EncodingError(f"Recovered plaintext is not valid UTF-8: {e.reason}") from e


def encode_text(data: bytes, encoding: str) -> str:
    """Encode bytes with the named text encoding ("base64" or "hex")."""
    if encoding == BASE64:
        return encode_base64(data)
    if encoding == HEX:
        return encode_hex(data)
    raise ValueError(f"Unsupported text encoding: {encoding}")


def decode_text(text: str, encoding: str) -> bytes:
    """Decode text with the named text encoding ("base64" or "hex")."""
    if encoding == BASE64:
        return decode_base64(text)
    if encoding == HEX:
        return decode_hex(text)
    raise ValueError(f"Unsupported text encoding: {encoding}")
