"""
Tests for the signed bearer tokens: expiry, tampering, purpose.
"""

import json
from base64 import urlsafe_b64decode, urlsafe_b64encode

import pytest

from auth.jwt import InvalidToken, TokenIssuer, TokenPurpose


def _flip_last(text: str) -> str:
    return text[:-1] + ("0" if text[-1] != "0" else "1")


@pytest.fixture
def issuer(clock):
    return TokenIssuer("unit-secret", clock=clock)


class TestIssueAndVerify:
    def test_session_round_trip(self, issuer):
        token = issuer.issue_session("user-1")
        assert issuer.verify(token, TokenPurpose.SESSION) == "user-1"

    def test_claims_carry_purpose_and_window(self, issuer, clock):
        token = issuer.issue_password_reset("user-1")
        claims = json.loads(urlsafe_b64decode(token.split(".", 1)[0]))

        assert claims["sub"] == "user-1"
        assert claims["purpose"] == "password_reset"
        assert claims["exp"] - claims["iat"] == 3600
        assert claims["iat"] == int(clock.now)

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            TokenIssuer("")


class TestExpiry:
    def test_reset_token_valid_until_one_hour(self, issuer, clock):
        token = issuer.issue_password_reset("user-1")

        clock.advance(3599)
        assert issuer.verify(token, TokenPurpose.PASSWORD_RESET) == "user-1"

        clock.advance(1)
        with pytest.raises(InvalidToken):
            issuer.verify(token, TokenPurpose.PASSWORD_RESET)

    def test_session_token_lasts_a_day(self, issuer, clock):
        token = issuer.issue_session("user-1")

        clock.advance(86399)
        assert issuer.verify(token, TokenPurpose.SESSION) == "user-1"

        clock.advance(1)
        with pytest.raises(InvalidToken):
            issuer.verify(token, TokenPurpose.SESSION)


class TestTampering:
    def test_flipped_signature_byte(self, issuer):
        token = issuer.issue_session("user-1")
        with pytest.raises(InvalidToken):
            issuer.verify(_flip_last(token), TokenPurpose.SESSION)

    def test_rewritten_claims_keep_old_signature(self, issuer):
        token = issuer.issue_session("user-1")
        encoded, sig = token.split(".", 1)
        claims = json.loads(urlsafe_b64decode(encoded))
        claims["sub"] = "user-2"
        forged = urlsafe_b64encode(json.dumps(claims).encode()).decode() + "." + sig

        with pytest.raises(InvalidToken):
            issuer.verify(forged, TokenPurpose.SESSION)

    def test_other_secret(self, clock):
        token = TokenIssuer("other-secret", clock=clock).issue_session("user-1")
        with pytest.raises(InvalidToken):
            TokenIssuer("unit-secret", clock=clock).verify(token, TokenPurpose.SESSION)

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "....", "é.é"])
    def test_malformed(self, issuer, token):
        with pytest.raises(InvalidToken):
            issuer.verify(token, TokenPurpose.SESSION)


class TestPurpose:
    def test_reset_token_does_not_open_a_session(self, issuer):
        token = issuer.issue_password_reset("user-1")
        with pytest.raises(InvalidToken):
            issuer.verify(token, TokenPurpose.SESSION)

    def test_session_token_cannot_reset_password(self, issuer):
        token = issuer.issue_session("user-1")
        with pytest.raises(InvalidToken):
            issuer.verify(token, TokenPurpose.PASSWORD_RESET)

    def test_failure_message_does_not_reveal_cause(self, issuer, clock):
        expired = issuer.issue_session("user-1")
        clock.advance(86400)
        forged = _flip_last(issuer.issue_session("user-1"))

        messages = set()
        for token in (expired, forged):
            with pytest.raises(InvalidToken) as exc_info:
                issuer.verify(token, TokenPurpose.SESSION)
            messages.add(str(exc_info.value))
        assert len(messages) == 1
