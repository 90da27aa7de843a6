"""Test HMAC signature helpers."""
import base64

import pytest

from adyen_hmac.errors import InvalidSecretError, InvalidSecretFormat, SecretNotConfigured
from adyen_hmac.utils.signature import (
    compute_hmac,
    decode_secret,
    get_url_encoded_hmac,
    sign,
    verify_signature,
)

from .constants import DATA_STRING, EMPTY_SIGNATURE, SECRET, SIGNATURE


@pytest.mark.parametrize("secret", ["", "a", "abc", "zz", "0g", "ab cd", " abc", "ab\n"])
def test_decode_secret_rejects_bad_format(secret):
    with pytest.raises(InvalidSecretFormat):
        decode_secret(secret)


def test_decode_secret_single_byte():
    assert decode_secret("ab") == b"\xab"


def test_decode_secret_is_case_insensitive():
    assert decode_secret("AbCd") == decode_secret("abcd") == b"\xab\xcd"


def test_decode_secret_length():
    assert len(decode_secret(SECRET)) == 32


def test_secret_errors_share_a_base_class():
    assert issubclass(InvalidSecretFormat, InvalidSecretError)
    assert issubclass(SecretNotConfigured, InvalidSecretError)
    assert issubclass(InvalidSecretError, ValueError)


def test_sign_known_payment_result():
    """Golden value for the documented example."""
    assert sign(SECRET, DATA_STRING) == SIGNATURE


def test_sign_empty_message():
    assert sign(SECRET, "") == EMPTY_SIGNATURE
    assert sign("ab", "") == "GwAOrQZTHgxfMUBE/yh6hyi8gj1J0L9gdbt2Qrbnvgo="


def test_sign_short_key():
    assert sign("ab", "a:b:1:2") == "RLaS8afT0BzS4LEHXPtMV0Y/LU/OUVW8ekJjASCGDzw="


def test_sign_encodes_message_as_utf8():
    message = "merchantReference:Café Zürich"
    assert sign("ab", message) == "EuJZOdr1pxuFNS9IfscXwQyUfNdP+HUxYZ7KKu5GURg="


def test_signature_is_padded_base64_of_sha256():
    raw = base64.b64decode(SIGNATURE, validate=True)
    assert len(raw) == 32
    assert SIGNATURE.endswith("=")


def test_sign_lower_case_secret():
    assert sign(SECRET.lower(), DATA_STRING) == SIGNATURE


@pytest.mark.parametrize("secret", [None, ""])
def test_sign_without_secret(secret):
    with pytest.raises(SecretNotConfigured):
        sign(secret, DATA_STRING)


@pytest.mark.parametrize("secret", ["a", "zz"])
def test_sign_with_bad_secret(secret):
    with pytest.raises(InvalidSecretFormat):
        sign(secret, DATA_STRING)


def test_compute_hmac_with_raw_key():
    assert compute_hmac(bytes.fromhex(SECRET), DATA_STRING) == SIGNATURE


def test_verify_signature():
    assert verify_signature(SIGNATURE, SIGNATURE) is True
    assert verify_signature(SIGNATURE, EMPTY_SIGNATURE) is False
    assert verify_signature(SIGNATURE, "") is False
    assert verify_signature(SIGNATURE, None) is False


def test_verify_signature_non_ascii_input():
    assert verify_signature(SIGNATURE, "é" * len(SIGNATURE)) is False


def test_url_encoded_hmac():
    assert get_url_encoded_hmac(SIGNATURE) == "6Vz8ncELWUSp0%2FmbMrS6a5O3Pj2XztQVUvJupbEgs1k%3D"
    assert get_url_encoded_hmac("a+b") == "a%2Bb"
