import logging
import secrets
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from estate_board.config import Settings, get_settings
from estate_board.database import Base, make_engine, make_session_factory
from estate_board.errors import register_error_handlers
from estate_board.routers import listings_router, images_router, auth_router, feed_router
from estate_board.services.feed_cache import TTLCache

settings = get_settings()

log_level = logging.DEBUG if settings.debug else logging.INFO
logging.basicConfig(
    level=log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

SESSION_COOKIE = "estate_admin"


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=app.state.engine)
    yield
    app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Объявления о недвижимости с панелью администратора",
        version="1.0.0",
        lifespan=lifespan,
    )

    session_secret = settings.session_secret
    if not session_secret:
        # Без постоянного секрета сессии админа живут до перезапуска процесса
        logger.warning("SESSION_SECRET is not set, using a random per-process secret")
        session_secret = secrets.token_urlsafe(32)
    if not settings.admin_password_hash:
        logger.warning("ADMIN_PASSWORD_HASH is not set, admin login is disabled")

    app.add_middleware(
        SessionMiddleware,
        secret_key=session_secret,
        session_cookie=SESSION_COOKIE,
        max_age=settings.session_max_age,
        same_site="lax",
        https_only=settings.session_https_only,
    )
    register_error_handlers(app)

    app.state.engine = make_engine(settings.database_url)
    app.state.session_factory = make_session_factory(app.state.engine)
    app.state.feed_cache = TTLCache(ttl=settings.feed_ttl)
    # Зависимости получают те же настройки, с которыми собрано приложение
    app.dependency_overrides[get_settings] = lambda: settings

    app.include_router(listings_router)
    app.include_router(images_router)
    app.include_router(auth_router)
    app.include_router(feed_router)

    return app


app = create_app(settings)


def run() -> None:
    uvicorn.run("estate_board.main:app", host=settings.host, port=settings.port)
