"""
JWT-style token creation and verification.

Tokens are base64url-encoded JSON claims signed with HMAC-SHA256::

    <base64url(claims)>.<hex signature>

Claims are ``sub`` (user id), ``purpose``, ``iat`` and ``exp`` (epoch
seconds). The secret is handed to ``TokenIssuer`` at construction; nothing
here reads configuration on its own.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode
from enum import Enum
from typing import Callable


class TokenPurpose(str, Enum):
    SESSION = "session"
    PASSWORD_RESET = "password_reset"


class InvalidToken(Exception):
    """Malformed, forged, expired or wrong-purpose token."""


class TokenIssuer:
    def __init__(
        self,
        secret: str,
        *,
        session_ttl: int = 86400,
        reset_ttl: int = 3600,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret.encode()
        self._session_ttl = session_ttl
        self._reset_ttl = reset_ttl
        self._clock = clock

    def _sign(self, raw: bytes) -> str:
        return hmac.new(self._secret, raw, hashlib.sha256).hexdigest()

    def issue(self, subject: str, purpose: TokenPurpose, ttl_seconds: int) -> str:
        """Create a signed token for ``subject`` valid for ``ttl_seconds``."""
        now = int(self._clock())
        claims = {
            "sub": subject,
            "purpose": TokenPurpose(purpose).value,
            "iat": now,
            "exp": now + ttl_seconds,
        }
        raw = json.dumps(claims, separators=(",", ":"), sort_keys=True).encode()
        return urlsafe_b64encode(raw).decode() + "." + self._sign(raw)

    def issue_session(self, user_id: str) -> str:
        return self.issue(user_id, TokenPurpose.SESSION, self._session_ttl)

    def issue_password_reset(self, user_id: str) -> str:
        return self.issue(user_id, TokenPurpose.PASSWORD_RESET, self._reset_ttl)

    def verify(self, token: str, purpose: TokenPurpose) -> str:
        """
        Verify ``token`` for ``purpose`` and return its subject.

        Raises ``InvalidToken`` without saying which check failed.
        """
        try:
            encoded, sig = token.split(".", 1)
            raw = urlsafe_b64decode(encoded.encode())
            if not hmac.compare_digest(sig, self._sign(raw)):
                raise ValueError("bad signature")
            claims = json.loads(raw)
            if self._clock() >= claims["exp"]:
                raise ValueError("token expired")
            if claims["purpose"] != TokenPurpose(purpose).value:
                raise ValueError("wrong purpose")
            subject = claims["sub"]
            if not isinstance(subject, str) or not subject:
                raise ValueError("bad subject")
        except (ValueError, TypeError, KeyError, AttributeError) as exc:
            raise InvalidToken("Invalid or expired token") from exc
        return subject
