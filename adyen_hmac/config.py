"""Environment configuration."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .signer import HmacSigner

ENV_SECRET = "ADYEN_HMAC_KEY"


@dataclass(frozen=True)
class Settings:
    """Settings read from the environment."""
    hmac_key: Optional[str] = None

    def signer(self) -> HmacSigner:
        return HmacSigner(self.hmac_key)


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Load settings from the environment.

    Variables already set in the environment take precedence over the
    ``.env`` file.

    Args:
        env_file: Path to a .env file (default: search from the working directory)
    """
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))

    return Settings(hmac_key=os.getenv(ENV_SECRET) or None)
