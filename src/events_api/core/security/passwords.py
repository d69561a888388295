"""Password hashing with Argon2id."""

import argon2

from src.events_api.core.config import Settings


class PasswordHasher:
    """One-way salted hashing and verification of user passwords."""

    def __init__(self, settings: Settings):
        self._hasher = argon2.PasswordHasher(
            time_cost=settings.argon2_time_cost,
            memory_cost=settings.argon2_memory_cost,
            parallelism=settings.argon2_parallelism,
        )
        # Verified against when the user does not exist, so login takes the
        # same time for unknown usernames and bad passwords
        self.dummy_hash = self._hasher.hash("dummy-password-for-timing")

    def generate_hash(self, password: str) -> str:
        """Hash password using Argon2id. Every call uses a fresh salt."""
        return self._hasher.hash(password)

    def verify_password(self, password: str, hashed: str) -> bool:
        """Verify password against hash. Returns False on any error."""
        try:
            return self._hasher.verify(hashed, password)
        except argon2.exceptions.VerificationError:
            return False
        except argon2.exceptions.InvalidHashError:
            return False
