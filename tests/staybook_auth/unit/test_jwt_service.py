"""Unit tests for JWTService."""

import json
from datetime import timedelta

import jwt
from jwt.algorithms import RSAAlgorithm
import pytest

from staybook_auth import (
    ADMIN_SCOPE,
    InvalidTokenError,
    JWTService,
    RSAKeyPair,
)


@pytest.fixture(scope="module")
def key_pair() -> RSAKeyPair:
    return RSAKeyPair.generate()


class TestJWTServiceIssue:
    """Tests for issuing tokens."""

    @pytest.fixture(autouse=True)
    def _service(self, key_pair):
        self.key_pair = key_pair
        self.service = JWTService(key_pair=key_pair, expire_seconds=600)

    def test_issue_and_verify(self):
        token = self.service.issue(
            "alice", {"customer_id": "c-1", "email": "alice@example.com"}
        )

        payload = self.service.verify_token(token)

        assert payload.subject == "alice"
        assert payload.customer_id == "c-1"
        assert payload.email == "alice@example.com"
        assert payload.is_expired() is False
        assert payload.is_admin is False

    def test_token_is_rs256_with_key_id(self):
        token = self.service.issue("alice")

        header = jwt.get_unverified_header(token)

        assert header["alg"] == "RS256"
        assert header["kid"] == self.key_pair.key_id

    def test_lifetime(self):
        payload = self.service.verify_token(self.service.issue("alice"))

        assert payload.expires_at - payload.issued_at == timedelta(seconds=600)
        assert self.service.expire_seconds == 600

    def test_scope_claim(self):
        token = self.service.issue("ops", {"scope": f"{ADMIN_SCOPE} reports"})

        payload = self.service.verify_token(token)

        assert payload.is_admin is True
        assert payload.has_scope("reports") is True

    def test_reserved_claims_cannot_be_overridden(self):
        token = self.service.issue("alice", {"sub": "mallory", "iss": "evil"})

        assert self.service.verify_token(token).subject == "alice"

    def test_none_claims_are_dropped(self):
        token = self.service.issue("alice", {"customer_id": None})

        claims = jwt.decode(token, options={"verify_signature": False})

        assert "customer_id" not in claims

    def test_empty_subject_rejected(self):
        with pytest.raises(ValueError, match="subject"):
            self.service.issue("")

    def test_non_positive_lifetime_rejected(self):
        with pytest.raises(ValueError):
            JWTService(key_pair=self.key_pair, expire_seconds=0)


class TestJWTServiceVerify:
    """Tests for rejecting bad tokens."""

    @pytest.fixture(autouse=True)
    def _service(self, key_pair):
        self.key_pair = key_pair
        self.service = JWTService(key_pair=key_pair)

    def test_expired_token(self):
        token = self.service.issue("alice", expires_delta=timedelta(seconds=-1))

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify_token(token)

    def test_token_signed_by_other_key(self):
        other = JWTService(key_pair=RSAKeyPair.generate())
        token = other.issue("alice")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_wrong_issuer(self):
        other = JWTService(key_pair=self.key_pair, issuer="someone-else")
        token = other.issue("alice")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_tampered_token(self):
        token = self.service.issue("alice")
        header, payload, signature = token.split(".")
        tampered = f"{header}.{payload}x.{signature}"

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(tampered)

    def test_garbage(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("not.a.token")

    def test_hs256_token_rejected(self):
        """A token signed with a shared secret is never accepted."""
        token = jwt.encode(
            {"sub": "alice", "iat": 0, "exp": 9999999999, "iss": "staybook"},
            "secret",
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)


class TestJWTServiceJWKS:
    def test_jwks_verifies_issued_token(self, key_pair):
        """The published JWK alone is enough to verify a token."""
        service = JWTService(key_pair=key_pair)
        token = service.issue("alice")

        jwk = service.jwks()["keys"][0]
        public_key = RSAAlgorithm.from_jwk(json.dumps(jwk))
        claims = jwt.decode(
            token, public_key, algorithms=["RS256"], issuer="staybook"
        )

        assert claims["sub"] == "alice"
        assert jwk["kid"] == service.key_id
