"""Canonical data string used as the HMAC message."""

from typing import Iterable, List, Mapping

DELIMITER = ":"
ESCAPE = "\\"

# Signature fields are never part of their own signed payload
IGNORED_FIELDS = frozenset({"sig", "merchantSig"})
IGNORED_PREFIX = "ignore."


def is_ignored_field(name: str) -> bool:
    """Return True if ``name`` is excluded from the signed payload."""
    return name in IGNORED_FIELDS or name.startswith(IGNORED_PREFIX)


def escape_value(value: str) -> str:
    """
    Escape a single field name or value.

    Backslashes are doubled before delimiters are escaped, so the
    backslashes inserted for the delimiter are not escaped again.
    """
    return value.replace(ESCAPE, ESCAPE * 2).replace(DELIMITER, ESCAPE + DELIMITER)


def unescape_value(token: str) -> str:
    """Reverse :func:`escape_value` for a single token."""
    chars: List[str] = []
    escaped = False
    for char in token:
        if escaped:
            chars.append(char)
            escaped = False
        elif char == ESCAPE:
            escaped = True
        else:
            chars.append(char)
    if escaped:
        chars.append(ESCAPE)
    return "".join(chars)


def _escape_all(items: Iterable[str]) -> List[str]:
    return [escape_value(item) for item in items]


def canonicalize(fields: Mapping[str, str]) -> str:
    """
    Build the canonical data string for a set of fields.

    Ignored fields are dropped, the remaining names are sorted by code
    point, and the escaped names are followed by the escaped values in the
    same order, all joined with ``:``.

    Example:
        >>> canonicalize({"b": "2", "a": "1"})
        'a:b:1:2'
    """
    keys = sorted(key for key in fields if not is_ignored_field(key))
    values = [fields[key] for key in keys]
    return DELIMITER.join(_escape_all(keys) + _escape_all(values))


def create_data_string(
    auth_result: str,
    psp_reference: str,
    merchant_reference: str,
    skin_code: str,
    shopper_locale: str,
    payment_method: str
) -> str:
    """
    Build the data string for an Adyen payment result.

    Args:
        auth_result: Authorisation result, e.g. "AUTHORISED"
        psp_reference: Provider reference, e.g. "1234567890"
        merchant_reference: Merchant's own reference, e.g. "ABC123FED098"
        skin_code: Code of the payment page skin, e.g. "asdfghj"
        shopper_locale: Locale code, e.g. "en_GB"
        payment_method: Payment method code, e.g. "mc"

    Returns:
        Canonical string ready for signing
    """
    return canonicalize({
        "authResult": auth_result,
        "pspReference": psp_reference,
        "merchantReference": merchant_reference,
        "skinCode": skin_code,
        "shopperLocale": shopper_locale,
        "paymentMethod": payment_method,
    })
