"""Tests for environment configuration."""
import pytest

from adyen_hmac.config import ENV_SECRET, Settings, load_settings
from adyen_hmac.errors import SecretNotConfigured

from .constants import DATA_STRING, SECRET, SIGNATURE


def test_load_from_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(ENV_SECRET, SECRET)

    assert load_settings().hmac_key == SECRET


def test_load_from_env_file(clean_env, tmp_path):
    env_file = tmp_path / "adyen.env"
    env_file.write_text(f"{ENV_SECRET}={SECRET}\n", encoding="utf-8")

    settings = load_settings(str(env_file))

    assert settings.hmac_key == SECRET
    assert settings.signer().sign(DATA_STRING) == SIGNATURE


def test_env_file_found_in_working_directory(clean_env, monkeypatch, tmp_path):
    (tmp_path / ".env").write_text(f'{ENV_SECRET}="{SECRET}"\n', encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert load_settings().hmac_key == SECRET


def test_environment_wins_over_env_file(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(f"{ENV_SECRET}=abcd\n", encoding="utf-8")
    monkeypatch.setenv(ENV_SECRET, SECRET)

    assert load_settings(str(env_file)).hmac_key == SECRET


def test_missing_secret(clean_env, tmp_path):
    settings = load_settings(str(tmp_path / "missing.env"))

    assert settings.hmac_key is None
    with pytest.raises(SecretNotConfigured):
        settings.signer().sign(DATA_STRING)


def test_empty_secret_is_unset(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(ENV_SECRET, "")

    assert load_settings().hmac_key is None


def test_settings_are_frozen():
    settings = Settings(hmac_key=SECRET)
    with pytest.raises(AttributeError):
        settings.hmac_key = "ab"
