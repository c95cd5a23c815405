import logging
from typing import Optional

from fastapi import Request
from passlib.context import CryptContext

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["argon2", "bcrypt"], deprecated="auto")

SESSION_ADMIN_KEY = "admin"


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_admin_password(password: str, hashed_password: Optional[str]) -> bool:
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(password, hashed_password)
    except ValueError:
        logger.error("ADMIN_PASSWORD_HASH is not a recognised password hash")
        return False


def is_admin(request: Request) -> bool:
    return request.session.get(SESSION_ADMIN_KEY) is True


def mark_admin(request: Request) -> None:
    request.session[SESSION_ADMIN_KEY] = True


def clear_admin(request: Request) -> None:
    request.session.clear()
