"""HMAC signature utilities."""

import base64
import hmac
import hashlib
import string
from typing import Optional
from urllib.parse import quote_plus

from ..errors import InvalidSecretFormat, SecretNotConfigured

_HEX_DIGITS = frozenset(string.hexdigits)


def decode_secret(secret_hex: str) -> bytes:
    """
    Decode a hex-encoded secret into raw key bytes.

    Args:
        secret_hex: Secret as pairs of hex digits

    Returns:
        Key bytes

    Raises:
        InvalidSecretFormat: If the secret is empty, has an odd length or
            contains a non-hex character
    """
    if not secret_hex or len(secret_hex) % 2 != 0:
        raise InvalidSecretFormat("Secret must be non-empty and of even length")
    if not _HEX_DIGITS.issuperset(secret_hex):
        raise InvalidSecretFormat("Secret must contain only hex digits")
    return bytes.fromhex(secret_hex)


def compute_hmac(key: bytes, message: str) -> str:
    """Return the base64-encoded HMAC-SHA256 of ``message`` under ``key``."""
    digest = hmac.new(
        key,
        message.encode("utf-8"),
        hashlib.sha256
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def sign(secret_hex: Optional[str], message: str) -> str:
    """
    Sign a canonical data string.

    Args:
        secret_hex: Hex-encoded secret
        message: Canonical data string

    Returns:
        Base64 HMAC-SHA256 signature

    Raises:
        SecretNotConfigured: If no secret is given
        InvalidSecretFormat: If the secret is not valid hex
    """
    if not secret_hex:
        raise SecretNotConfigured("The secret must be specified before the HMAC can be created")
    return compute_hmac(decode_secret(secret_hex), message)


def verify_signature(expected: str, received: Optional[str]) -> bool:
    """Compare two signatures in constant time."""
    if not received:
        return False
    return hmac.compare_digest(expected.encode("ascii"), received.encode("ascii", "replace"))


def get_url_encoded_hmac(signature: str) -> str:
    """URL-encode a signature for use in a query string."""
    return quote_plus(signature)
