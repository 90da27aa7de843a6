"""HMAC signing for Adyen payment results."""

from .errors import InvalidSecretError, InvalidSecretFormat, SecretNotConfigured
from .signer import HmacSigner
from .types import PaymentResult
from .utils.canonical import canonicalize, create_data_string
from .utils.signature import decode_secret, get_url_encoded_hmac, sign
from .verifier import NotificationVerifier

__version__ = "1.0.0"
__all__ = [
    "HmacSigner",
    "NotificationVerifier",
    "PaymentResult",
    "InvalidSecretError",
    "InvalidSecretFormat",
    "SecretNotConfigured",
    "canonicalize",
    "create_data_string",
    "decode_secret",
    "get_url_encoded_hmac",
    "sign"
]
