import logging

from passlib.context import CryptContext

from app.core.errors import HashingError

logger = logging.getLogger(__name__)

# bcrypt ignores everything past 72 bytes, so longer input is refused instead of truncated
BCRYPT_MAX_BYTES = 72
DEFAULT_ROUNDS = 12


class PasswordHasher:
    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self.pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise HashingError("Failed to hash password")
        try:
            return self.pwd_context.hash(password)
        except (ValueError, TypeError) as e:
            logger.error("bcrypt hashing failed: %s", e)
            raise HashingError("Failed to hash password") from e

    def verify(self, plain: str, hashed: str) -> bool:
        try:
            return self.pwd_context.verify(plain, hashed)
        except (ValueError, TypeError):
            return False
