import pytest

from pytracker.auth import (
    HashedPasswordVerifier,
    SharedSecretVerifier,
    get_credential_verifier,
)
from pytracker.config import Settings
from pytracker.schemas import User

USER = User(id="42", name="Test User", email="test@pytracker.com", avatar="TU")


def test_shared_secret_accepts_only_the_secret():
    verifier = SharedSecretVerifier("password")

    assert verifier.verify(USER, "password") is True
    assert verifier.verify(USER, "Password") is False
    assert verifier.verify(USER, "") is False


def test_shared_secret_ignores_enrolled_password():
    verifier = SharedSecretVerifier("password")
    verifier.enroll(USER, "hunter2")

    assert verifier.verify(USER, "hunter2") is False
    assert verifier.verify(USER, "password") is True


def test_hashed_verifier_checks_per_user_password():
    verifier = HashedPasswordVerifier(iterations=1000)
    other = USER.model_copy(update={"id": "43"})
    verifier.enroll(USER, "hunter2")
    verifier.enroll(other, "swordfish")

    assert verifier.verify(USER, "hunter2") is True
    assert verifier.verify(USER, "swordfish") is False
    assert verifier.verify(other, "swordfish") is True


def test_hashed_verifier_rejects_unenrolled_and_cleared_users():
    verifier = HashedPasswordVerifier(iterations=1000)
    assert verifier.verify(USER, "anything") is False

    verifier.enroll(USER, "hunter2")
    verifier.clear()
    assert verifier.verify(USER, "hunter2") is False


def test_factory_picks_verifier_from_settings():
    assert isinstance(get_credential_verifier(Settings()), SharedSecretVerifier)
    assert isinstance(
        get_credential_verifier(Settings(auth_policy="hashed")), HashedPasswordVerifier
    )
    shared = get_credential_verifier(Settings(shared_password="letmein"))
    assert shared.verify(USER, "letmein") is True


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("TICKET_ID_POLICY", "COUNT")
    monkeypatch.setenv("AUTH_POLICY", "hashed")
    monkeypatch.setenv("LATENCY_SCALE", "0.5")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

    settings = Settings.from_env()

    assert settings.ticket_id_policy == "count"
    assert settings.auth_policy == "hashed"
    assert settings.latency_scale == 0.5
    assert settings.cors_origins == ["http://a.test", "http://b.test"]


@pytest.mark.parametrize(
    "kwargs",
    [{"ticket_id_policy": "random"}, {"auth_policy": "oauth"}, {"latency_scale": -1}],
)
def test_settings_reject_unknown_values(kwargs):
    with pytest.raises(ValueError):
        Settings(**kwargs)
