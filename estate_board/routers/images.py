from fastapi import APIRouter, Depends
from fastapi.responses import Response

from estate_board.deps import get_listing_store, require_admin
from estate_board.services.listing_store import ListingStore

router = APIRouter(prefix="/api/images", tags=["images"])


@router.get("/{image_id}")
def get_image(image_id: int, store: ListingStore = Depends(get_listing_store)):
    """Отдать байты фотографии с сохранённым content-type"""
    image = store.get_image(image_id)
    return Response(content=image.data, media_type=image.mime)


@router.delete("/{image_id}", dependencies=[Depends(require_admin)])
def delete_image(image_id: int, store: ListingStore = Depends(get_listing_store)):
    listing_id = store.delete_image(image_id)
    return {"success": True, "id": image_id, "listing_id": listing_id}
