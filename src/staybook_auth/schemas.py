"""Auth schemas and data structures.

Simple data classes used for transferring token data between components.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

ADMIN_SCOPE = "admin"


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    subject
        The token subject (the customer's username)
    issued_at
        Token issue timestamp
    expires_at
        Token expiration timestamp
    customer_id
        Identifier of the customer the token was issued to, if any
    email
        The customer's email address, if present
    scopes
        Granted scopes parsed from the space-separated ``scope`` claim
    """

    subject: str
    issued_at: datetime
    expires_at: datetime
    customer_id: str | None = None
    email: str | None = None
    scopes: frozenset[str] = field(default_factory=frozenset)

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=timezone.utc) >= self.expires_at

    def has_scope(self, scope: str) -> bool:
        return scope in self.scopes

    @property
    def is_admin(self) -> bool:
        return self.has_scope(ADMIN_SCOPE)
