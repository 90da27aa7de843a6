"""
Result page example for adyen-hmac

This is a minimal working example showing how to:
- Load the HMAC key from the environment or a .env file
- Verify the merchantSig of a payment result redirect
- Handle the verified result
"""

import sys
from urllib.parse import parse_qsl, urlsplit
from adyen_hmac import NotificationVerifier, PaymentResult
from adyen_hmac.config import load_settings

# Initialize verifier
verifier = NotificationVerifier(load_settings().signer())

# Handle verified results
@verifier.on_notification
def handle_result(result: PaymentResult):
    print(f"✅ Verified payment result: {result.psp_reference}")
    print(f"   Merchant reference: {result.merchant_reference}")
    print(f"   Method: {result.payment_method}")

    if result.auth_result == "AUTHORISED":
        print("   Payment authorised, fulfil the order")
    else:
        print(f"   Payment not authorised: {result.auth_result}")

# Start
if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python main.py '<result url>'")
        sys.exit(1)

    fields = dict(parse_qsl(urlsplit(sys.argv[1]).query, keep_blank_values=True))

    if not verifier.handle_notification(fields):
        print("❌ Result signature is invalid")
        sys.exit(1)
