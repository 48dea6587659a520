"""RSA key pair handling for token signing.

The private half signs tokens; the public half is published as a JSON
Web Key so any component can verify tokens without sharing a secret.
"""

from __future__ import annotations

import base64
import hashlib
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from jwt.algorithms import RSAAlgorithm

from staybook_auth.exceptions import SigningKeyError

DEFAULT_KEY_SIZE = 2048
PUBLIC_EXPONENT = 65537
KEY_ID_LENGTH = 16


@dataclass(frozen=True)
class RSAKeyPair:
    """An RSA private key together with its derived public key.

    Examples
    --------
    >>> pair = RSAKeyPair.generate()
    >>> pem = pair.private_pem()
    >>> RSAKeyPair.from_pem(pem).key_id == pair.key_id
    True
    """

    private_key: rsa.RSAPrivateKey

    @classmethod
    def generate(cls, key_size: int = DEFAULT_KEY_SIZE) -> RSAKeyPair:
        """Generate a fresh key pair."""
        private_key = rsa.generate_private_key(
            public_exponent=PUBLIC_EXPONENT,
            key_size=key_size,
        )
        return cls(private_key=private_key)

    @classmethod
    def from_pem(cls, pem: bytes, password: bytes | None = None) -> RSAKeyPair:
        """Load a key pair from a PEM encoded private key.

        Raises
        ------
        SigningKeyError
            If the data is not a readable RSA private key
        """
        try:
            key = serialization.load_pem_private_key(pem, password=password)
        except (ValueError, TypeError) as e:
            msg = f"Could not load private key: {e}"
            raise SigningKeyError(msg) from e

        if not isinstance(key, rsa.RSAPrivateKey):
            msg = "Signing key must be an RSA private key"
            raise SigningKeyError(msg)

        return cls(private_key=key)

    @classmethod
    def from_file(cls, path: Path, password: bytes | None = None) -> RSAKeyPair:
        try:
            pem = Path(path).read_bytes()
        except OSError as e:
            msg = f"Could not read private key file {path}: {e}"
            raise SigningKeyError(msg) from e
        return cls.from_pem(pem, password=password)

    @property
    def public_key(self) -> rsa.RSAPublicKey:
        return self.private_key.public_key()

    @property
    def key_id(self) -> str:
        """Stable identifier derived from the public key (``kid`` header)."""
        der = self.public_key.public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        digest = hashlib.sha256(der).digest()
        return base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")[
            :KEY_ID_LENGTH
        ]

    def private_pem(self, password: bytes | None = None) -> bytes:
        encryption: serialization.KeySerializationEncryption
        if password:
            encryption = serialization.BestAvailableEncryption(password)
        else:
            encryption = serialization.NoEncryption()

        return self.private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=encryption,
        )

    def public_pem(self) -> bytes:
        return self.public_key.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )

    def public_jwk(self, algorithm: str = "RS256") -> dict[str, Any]:
        """Return the public key as an RFC 7517 JSON Web Key."""
        jwk = json.loads(RSAAlgorithm.to_jwk(self.public_key))
        jwk.update({"kid": self.key_id, "alg": algorithm, "use": "sig"})
        return jwk
