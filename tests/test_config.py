from __future__ import annotations

import pytest

from ses_mailer.config import DEFAULT_AWS_REGION, Settings

ENV_VARS = (
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "AWS_REGION",
    "AWS_DEFAULT_REGION",
    "FROM_EMAIL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_from_env_reads_required_keys(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", " AKIAEXAMPLE ")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "secret")

    settings = Settings.from_env()

    assert settings.aws_access_key_id == "AKIAEXAMPLE"
    assert settings.aws_secret_access_key == "secret"
    assert settings.aws_region == DEFAULT_AWS_REGION
    assert settings.aws_session_token is None
    assert settings.from_email is None


@pytest.mark.parametrize("missing", ["AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY"])
def test_from_env_requires_credentials(monkeypatch, missing: str):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKIAEXAMPLE")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "secret")
    monkeypatch.setenv(missing, "   ")

    with pytest.raises(ValueError, match=missing):
        Settings.from_env()


def test_region_prefers_aws_region_over_default_region(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKIAEXAMPLE")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "secret")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-1")
    assert Settings.from_env().aws_region == "eu-west-1"

    monkeypatch.setenv("AWS_REGION", "ap-northeast-1")
    assert Settings.from_env().aws_region == "ap-northeast-1"


def test_credentials_carry_session_token(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "ASIAEXAMPLE")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "secret")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "token")
    monkeypatch.setenv("FROM_EMAIL", "noreply@example.com")

    settings = Settings.from_env()
    creds = settings.credentials()

    assert creds.aws_access_key_id == "ASIAEXAMPLE"
    assert creds.aws_session_token == "token"
    assert settings.from_email == "noreply@example.com"
    assert "secret" not in repr(settings)
