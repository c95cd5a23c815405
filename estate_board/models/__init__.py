from estate_board.models.listing import Listing
from estate_board.models.image import Image

__all__ = ["Listing", "Image"]
