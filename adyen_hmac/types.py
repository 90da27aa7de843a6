"""Type definitions for the Adyen HMAC helpers."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Protocol


@dataclass(frozen=True)
class PaymentResult:
    """Payment result fields returned by the Adyen hosted payment pages."""
    auth_result: str
    psp_reference: str
    merchant_reference: str
    skin_code: str
    shopper_locale: str
    payment_method: str
    merchant_sig: Optional[str] = None

    def to_fields(self) -> Dict[str, str]:
        """Return the signed fields keyed by their provider names."""
        return {
            "authResult": self.auth_result,
            "pspReference": self.psp_reference,
            "merchantReference": self.merchant_reference,
            "skinCode": self.skin_code,
            "shopperLocale": self.shopper_locale,
            "paymentMethod": self.payment_method,
        }

    @classmethod
    def from_fields(cls, fields: Mapping[str, str]) -> "PaymentResult":
        """
        Build a result from provider-named fields.

        Missing fields become empty strings; ``merchantSig`` is kept when present.
        """
        return cls(
            auth_result=fields.get("authResult", ""),
            psp_reference=fields.get("pspReference", ""),
            merchant_reference=fields.get("merchantReference", ""),
            skin_code=fields.get("skinCode", ""),
            shopper_locale=fields.get("shopperLocale", ""),
            payment_method=fields.get("paymentMethod", ""),
            merchant_sig=fields.get("merchantSig"),
        )


class Logger(Protocol):
    """Logger methods used by NotificationVerifier."""
    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
