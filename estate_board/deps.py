from fastapi import Depends, Request
from sqlalchemy.orm import Session

from estate_board.config import Settings, get_settings
from estate_board.database import get_db
from estate_board.errors import Unauthorized
from estate_board.security import is_admin
from estate_board.services.feed_cache import TTLCache
from estate_board.services.listing_store import ListingStore
from estate_board.services.uploads import Submission, read_submission


def get_listing_store(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ListingStore:
    return ListingStore(db, default_type=settings.default_listing_type)


def require_admin(request: Request) -> None:
    """Пропускает запрос только с cookie-сессией администратора"""
    if not is_admin(request):
        raise Unauthorized()


def get_feed_cache(request: Request) -> TTLCache:
    return request.app.state.feed_cache


async def get_submission(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> Submission:
    return await read_submission(
        request,
        max_file_size=settings.upload_max_file_size,
        max_files=settings.upload_max_files,
    )
