"""JWT token service.

Issues RS256-signed bearer tokens and verifies them against the public
half of the signing key.
"""

import secrets
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from staybook_auth.exceptions import InvalidTokenError
from staybook_auth.keys import RSAKeyPair
from staybook_auth.schemas import TokenPayload

RESERVED_CLAIMS = frozenset({"sub", "iat", "exp", "iss", "jti"})


class JWTService:
    """Service for JWT token creation and verification.

    Tokens are short-lived and cannot be refreshed; a new login is
    required once a token expires.

    Examples
    --------
    >>> service = JWTService(key_pair=RSAKeyPair.generate())
    >>> token = service.issue("alice", {"customer_id": "c-1"})
    >>> service.verify_token(token).subject
    'alice'
    """

    DEFAULT_EXPIRE_SECONDS = 3600
    DEFAULT_ISSUER = "staybook"
    ALGORITHM = "RS256"

    def __init__(
        self,
        key_pair: RSAKeyPair,
        expire_seconds: int = DEFAULT_EXPIRE_SECONDS,
        issuer: str = DEFAULT_ISSUER,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        key_pair
            RSA key pair; the private key signs, the public key verifies.
        expire_seconds
            Validity window of issued tokens (default 3600)
        issuer
            Value of the ``iss`` claim, checked on verification
        """
        if expire_seconds <= 0:
            msg = "Token validity must be positive"
            raise ValueError(msg)

        self._key_pair = key_pair
        self._expire = timedelta(seconds=expire_seconds)
        self._issuer = issuer

    @property
    def expire_seconds(self) -> int:
        return int(self._expire.total_seconds())

    @property
    def key_id(self) -> str:
        return self._key_pair.key_id

    def issue(
        self,
        subject: str,
        extra_claims: Mapping[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed token.

        Parameters
        ----------
        subject
            The ``sub`` claim (customer username)
        extra_claims
            Additional claims such as ``customer_id``, ``email`` or
            ``scope``. Reserved claims cannot be overridden.
        expires_delta
            Custom validity (optional)

        Returns
        -------
        The encoded JWT token string
        """
        if not subject:
            msg = "Token subject cannot be empty"
            raise ValueError(msg)

        now = datetime.now(tz=timezone.utc)
        payload: dict[str, Any] = {
            key: value
            for key, value in (extra_claims or {}).items()
            if key not in RESERVED_CLAIMS and value is not None
        }
        payload.update(
            {
                "sub": subject,
                "iss": self._issuer,
                "iat": now,
                "exp": now + (expires_delta or self._expire),
                "jti": secrets.token_urlsafe(16),
            }
        )

        return jwt.encode(
            payload,
            self._key_pair.private_key,
            algorithm=self.ALGORITHM,
            headers={"kid": self._key_pair.key_id},
        )

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._key_pair.public_key,
                algorithms=[self.ALGORITHM],
                issuer=self._issuer,
                options={"require": ["sub", "iat", "exp"]},
            )

            scope = payload.get("scope") or ""
            return TokenPayload(
                subject=str(payload["sub"]),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                customer_id=payload.get("customer_id"),
                email=payload.get("email"),
                scopes=frozenset(scope.split()),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

    def jwks(self) -> dict[str, list[dict[str, Any]]]:
        """Public key set for independent verification."""
        return {"keys": [self._key_pair.public_jwk(self.ALGORITHM)]}
