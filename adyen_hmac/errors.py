"""Exceptions raised by the Adyen HMAC helpers."""


class InvalidSecretError(ValueError):
    """Base class for problems with the HMAC secret."""


class InvalidSecretFormat(InvalidSecretError):
    """Secret is empty, has an odd length or contains non-hex characters."""


class SecretNotConfigured(InvalidSecretError):
    """Signing was attempted before a secret was configured."""
