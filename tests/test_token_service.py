from datetime import datetime, timedelta, timezone

import pytest

from core.config import Settings
from services.auth_service import TokenService, RESET_TOKEN
from services.exceptions import InvalidTokenError, MissingTokenError


@pytest.fixture
def tokens():
    return TokenService(Settings(JWT_SECRET_KEY="unit-secret"))


def test_issue_and_verify(tokens):
    identity = tokens.verify(tokens.issue(42, "alice"))
    assert identity.id == 42
    assert identity.username == "alice"


def test_expired_token_rejected(tokens):
    two_hours_ago = datetime.now(timezone.utc) - timedelta(hours=2)
    token = tokens.issue(42, "alice", ttl=timedelta(minutes=60), issued_at=two_hours_ago)
    with pytest.raises(InvalidTokenError):
        tokens.verify(token)


def test_token_signed_with_other_secret_rejected(tokens):
    forged = TokenService(Settings(JWT_SECRET_KEY="another-secret")).issue(42, "alice")
    with pytest.raises(InvalidTokenError):
        tokens.verify(forged)


def test_garbage_token_rejected(tokens):
    with pytest.raises(InvalidTokenError):
        tokens.verify("not.a.token")


def test_reset_and_access_tokens_not_interchangeable(tokens):
    reset = tokens.issue_reset_token(7)
    assert tokens.verify(reset, RESET_TOKEN).id == 7
    with pytest.raises(InvalidTokenError):
        tokens.verify(reset)
    with pytest.raises(InvalidTokenError):
        tokens.verify(tokens.issue(7, "bob"), RESET_TOKEN)


def test_authenticate_request_header_forms(tokens):
    token = tokens.issue(3, "carol")
    assert tokens.authenticate_request(f"Bearer {token}").id == 3
    assert tokens.authenticate_request(f"bearer {token}").id == 3

    with pytest.raises(MissingTokenError):
        tokens.authenticate_request(None)
    with pytest.raises(MissingTokenError):
        tokens.authenticate_request("Bearer")
    with pytest.raises(InvalidTokenError):
        tokens.authenticate_request(f"Token {token}")
