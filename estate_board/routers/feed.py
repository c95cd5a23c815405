from fastapi import APIRouter, Depends

from estate_board.config import Settings, get_settings
from estate_board.deps import get_feed_cache
from estate_board.errors import FeedDisabled
from estate_board.services.feed_cache import TTLCache, fetch_feed

router = APIRouter(prefix="/api/feed", tags=["feed"])


@router.get("")
def get_feed(
    settings: Settings = Depends(get_settings),
    cache: TTLCache = Depends(get_feed_cache)
):
    """Ответ внешнего вебхука, кешируется на feed_ttl секунд"""
    if not settings.feed_url:
        raise FeedDisabled()
    return cache.get_or_load(lambda: fetch_feed(settings.feed_url, settings.feed_timeout))
