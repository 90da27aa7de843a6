"""
Command line entry point.

Usage:
  adyen-hmac --secret 4468D978... AUTHORISED 1234567890 ABC123FED098 asdfghj en_GB mc

The secret may also come from ADYEN_HMAC_KEY in the environment or a .env file.

Exit codes:
  0 on success,
  2 on argument/config error.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import ENV_SECRET, load_settings
from .errors import InvalidSecretError
from .signer import HmacSigner
from .utils.canonical import create_data_string
from .utils.signature import get_url_encoded_hmac

logger = logging.getLogger(__name__)

FIELDS = (
    "authResult",
    "pspReference",
    "merchantReference",
    "skinCode",
    "shopperLocale",
    "paymentMethod",
)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="adyen-hmac",
        description="Generate the HMAC for an Adyen payment result.",
    )
    ap.add_argument("--secret", help=f"hex-encoded HMAC key (default: ${ENV_SECRET})")
    ap.add_argument("--env-file", help="load settings from this .env file")
    ap.add_argument("--url-encode", action="store_true", help="URL-encode the generated HMAC")
    ap.add_argument("--show-data", action="store_true", help="print the signed data string")
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    for field in FIELDS:
        ap.add_argument(field)
    return ap.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    secret = args.secret or load_settings(args.env_file).hmac_key
    if not secret:
        logger.error(f"No secret given; pass --secret or set {ENV_SECRET}")
        return 2

    data = create_data_string(*(getattr(args, field) for field in FIELDS))
    try:
        hmac_value = HmacSigner(secret).sign(data)
    except InvalidSecretError as e:
        logger.error(f"Invalid secret: {e}")
        return 2

    logger.debug(f"Signed {len(data)} characters of data")
    if args.show_data:
        print(f"Data: {data}")
    if args.url_encode:
        hmac_value = get_url_encoded_hmac(hmac_value)
    print(f"Generated HMAC: {hmac_value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
