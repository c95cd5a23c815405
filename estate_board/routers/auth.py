import logging
from fastapi import APIRouter, Depends, Request

from estate_board.config import Settings, get_settings
from estate_board.errors import Unauthorized
from estate_board.schemas.auth import LoginRequest, AuthStatus
from estate_board.security import verify_admin_password, is_admin, mark_admin, clear_admin

router = APIRouter(prefix="/api", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/login")
def login(
    payload: LoginRequest,
    request: Request,
    settings: Settings = Depends(get_settings)
):
    """Вход в панель администратора"""
    if not verify_admin_password(payload.password, settings.admin_password_hash):
        logger.warning(f"Failed admin login from {request.client.host if request.client else 'unknown'}")
        raise Unauthorized("Invalid password")

    mark_admin(request)
    logger.info("Admin logged in")
    return {"success": True}


@router.post("/logout")
def logout(request: Request):
    """Выход из панели"""
    clear_admin(request)
    return {"success": True}


@router.get("/me", response_model=AuthStatus)
def me(request: Request):
    return AuthStatus(authed=is_admin(request))
