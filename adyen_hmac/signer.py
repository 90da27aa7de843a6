"""Adyen HMAC signer."""

from typing import Mapping, Optional

from .errors import SecretNotConfigured
from .types import PaymentResult
from .utils.canonical import canonicalize
from .utils.signature import compute_hmac, decode_secret, verify_signature


class HmacSigner:
    """
    Signs and verifies Adyen payment result fields.

    The secret is fixed when the signer is built; use :meth:`with_secret`
    to get a signer for another secret.

    Example:
        >>> signer = HmacSigner("4468D9782DEF54FCD706C9100C71EC43932B1EBC2ACF6BA0560C05AAA7550C48")
        >>> signer.sign_fields({
        ...     "authResult": "AUTHORISED",
        ...     "pspReference": "1234567890",
        ...     "merchantReference": "ABC123FED098",
        ...     "skinCode": "asdfghj",
        ...     "shopperLocale": "en_GB",
        ...     "paymentMethod": "mc",
        ... })
        '6Vz8ncELWUSp0/mbMrS6a5O3Pj2XztQVUvJupbEgs1k='
    """

    __slots__ = ("_key",)

    def __init__(self, secret_hex: Optional[str] = None):
        """
        Initialize HmacSigner.

        Args:
            secret_hex: Hex-encoded HMAC key from the Adyen skin settings.
                If omitted, signing raises SecretNotConfigured.

        Raises:
            InvalidSecretFormat: If a secret is given but is not valid hex
        """
        self._key: Optional[bytes] = decode_secret(secret_hex) if secret_hex else None

    def __repr__(self) -> str:
        state = "configured" if self._key is not None else "unset"
        return f"HmacSigner(<secret {state}>)"

    @property
    def configured(self) -> bool:
        return self._key is not None

    def with_secret(self, secret_hex: Optional[str]) -> "HmacSigner":
        """Return a new signer using ``secret_hex``."""
        return HmacSigner(secret_hex)

    def sign(self, message: str) -> str:
        """
        Compute the HMAC of a canonical data string.

        Args:
            message: Data string built by canonicalize()

        Returns:
            Base64 HMAC-SHA256 signature
        """
        if self._key is None:
            raise SecretNotConfigured("The secret must be specified before the HMAC can be created")
        return compute_hmac(self._key, message)

    def sign_fields(self, fields: Mapping[str, str]) -> str:
        """Canonicalize ``fields`` and sign the result."""
        return self.sign(canonicalize(fields))

    def sign_result(self, result: PaymentResult) -> str:
        return self.sign_fields(result.to_fields())

    def verify_fields(
        self,
        fields: Mapping[str, str],
        signature: Optional[str] = None
    ) -> bool:
        """
        Verify the signature of a set of fields.

        Args:
            fields: Received fields, possibly including ``merchantSig``
            signature: Signature to check; defaults to ``fields["merchantSig"]``

        Returns:
            True if the signature matches
        """
        if signature is None:
            signature = fields.get("merchantSig")
        return verify_signature(self.sign_fields(fields), signature)
