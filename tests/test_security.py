"""Tests for tokens and account validation."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from app.core.security import create_access_token, decode_token
from app.features.auth.schemas import RegisterRequest


def test_token_round_trip():
    token = create_access_token({"sub": "ayesha@example.com", "user_id": "u1"})

    payload = decode_token(token)

    assert payload["sub"] == "ayesha@example.com"
    assert payload["user_id"] == "u1"


def test_expired_or_garbage_tokens_are_rejected():
    expired = create_access_token({"sub": "a@example.com"}, expires_delta=timedelta(minutes=-1))

    assert decode_token(expired) is None
    assert decode_token("not-a-token") is None


@pytest.mark.parametrize("password", ["short1A", "alllowercase1", "ALLUPPERCASE1", "NoDigitsHere"])
def test_weak_passwords_are_rejected(password):
    with pytest.raises(ValidationError):
        RegisterRequest(name="Ayesha", email="ayesha@example.com", password=password)


def test_strong_password_is_accepted():
    request = RegisterRequest(name="Ayesha", email="ayesha@example.com", password="Str0ngPass")

    assert request.email == "ayesha@example.com"
