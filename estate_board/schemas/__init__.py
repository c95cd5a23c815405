from estate_board.schemas.listing import (
    ListingBase, ListingCreate, ListingUpdate, ListingFilter, ListingResponse
)
from estate_board.schemas.auth import LoginRequest, AuthStatus

__all__ = [
    "ListingBase", "ListingCreate", "ListingUpdate", "ListingFilter", "ListingResponse",
    "LoginRequest", "AuthStatus"
]
