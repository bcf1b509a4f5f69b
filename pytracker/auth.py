import hashlib
import hmac
import logging
import secrets
import threading

from pytracker.config import Settings
from pytracker.schemas import User

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 200_000


class CredentialVerifier:
    """Abstract base for credential verification policies."""

    def enroll(self, user: User, password: str) -> None:
        """
        Record a password for a newly registered user.

        Args:
            user: The registered user
            password: The plain-text password supplied at registration
        """
        raise NotImplementedError

    def verify(self, user: User, password: str) -> bool:
        """
        Check a login attempt.

        Args:
            user: The user found for the login email
            password: The plain-text password supplied at login

        Returns:
            True if the password is accepted for this user
        """
        raise NotImplementedError

    def clear(self) -> None:
        """Forget every enrolled credential."""


class SharedSecretVerifier(CredentialVerifier):
    """
    Demo policy: every user logs in with the same shared secret.

    Nothing is stored at enrollment. This is a mock login for exercising an
    authenticated session, not per-user credential storage.
    """

    def __init__(self, secret: str = "password"):
        self.secret = secret

    def enroll(self, user: User, password: str) -> None:
        pass

    def verify(self, user: User, password: str) -> bool:
        return hmac.compare_digest(password.encode(), self.secret.encode())


class HashedPasswordVerifier(CredentialVerifier):
    """
    Per-user salted PBKDF2-SHA256 password hashes, kept in memory.
    """

    def __init__(self, iterations: int = PBKDF2_ITERATIONS):
        self.iterations = iterations
        self._hashes: dict[str, tuple[bytes, bytes]] = {}
        self._lock = threading.Lock()

    def _hash(self, password: str, salt: bytes) -> bytes:
        return hashlib.pbkdf2_hmac("sha256", password.encode(), salt, self.iterations)

    def enroll(self, user: User, password: str) -> None:
        salt = secrets.token_bytes(16)
        digest = self._hash(password, salt)
        with self._lock:
            self._hashes[user.id] = (salt, digest)

    def verify(self, user: User, password: str) -> bool:
        with self._lock:
            record = self._hashes.get(user.id)
        if record is None:
            logger.warning("No credentials enrolled for user", extra={"user_id": user.id})
            return False
        salt, digest = record
        return hmac.compare_digest(self._hash(password, salt), digest)

    def clear(self) -> None:
        with self._lock:
            self._hashes.clear()


def get_credential_verifier(settings: Settings) -> CredentialVerifier:
    """
    Factory function to get the configured credential verifier.

    Uses settings.auth_policy:
    - "shared": SharedSecretVerifier with settings.shared_password
    - "hashed": HashedPasswordVerifier
    """
    if settings.auth_policy == "hashed":
        logger.info("Using hashed per-user password verification")
        return HashedPasswordVerifier()

    logger.info("Using shared demo secret for all logins")
    return SharedSecretVerifier(settings.shared_password)
