# core/security.py

"""
Password hashing for the users table.
"""

from passlib.context import CryptContext

from core.logging_config import logger

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a submitted password against a stored bcrypt hash.
    Anything that is not a recognised hash never matches.
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        logger.warning("Stored password_hash is not a recognised hash")
        return False
