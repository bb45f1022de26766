# coworker/adapters/outbound/security/password_manager.py

from fastapi.concurrency import run_in_threadpool
from passlib.context import CryptContext


class PasswordManager:
    """
    Password hashing for user accounts.

    bcrypt is CPU bound, so hashing and verification run in the thread
    pool instead of on the event loop.
    """

    crypt_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

    @classmethod
    async def hash_password(cls, password: str) -> str:
        """Return the hash of a plain text password."""
        return await run_in_threadpool(cls.crypt_context.hash, password)

    @classmethod
    async def verify_password(cls, plain_password: str, hashed_password: str) -> bool:
        """Verify if the plain text password matches the stored hash."""
        return await run_in_threadpool(cls.crypt_context.verify, plain_password, hashed_password)
