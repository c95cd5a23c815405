from estate_board.routers.listings import router as listings_router
from estate_board.routers.images import router as images_router
from estate_board.routers.auth import router as auth_router
from estate_board.routers.feed import router as feed_router

__all__ = ["listings_router", "images_router", "auth_router", "feed_router"]
