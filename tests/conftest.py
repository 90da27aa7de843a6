import pytest

from adyen_hmac.config import ENV_SECRET

from .constants import SIGNATURE


@pytest.fixture
def result_fields():
    return {
        "authResult": "AUTHORISED",
        "pspReference": "1234567890",
        "merchantReference": "ABC123FED098",
        "skinCode": "asdfghj",
        "shopperLocale": "en_GB",
        "paymentMethod": "mc",
    }

@pytest.fixture
def signed_fields(result_fields):
    return dict(result_fields, merchantSig=SIGNATURE)

@pytest.fixture
def clean_env(monkeypatch):
    """Make sure the secret variable is unset, and restored afterwards."""
    monkeypatch.setenv(ENV_SECRET, "")
    monkeypatch.delenv(ENV_SECRET)
