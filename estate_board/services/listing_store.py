"""
Хранилище объявлений и их фотографий.

Все изменения одного объявления (поля + фото) фиксируются одной транзакцией:
при ошибке откатывается всё целиком.
"""
import logging
from typing import List, Optional, Sequence

from sqlalchemy import or_, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload, undefer

from estate_board.config import get_settings
from estate_board.errors import NotFound, StorageError
from estate_board.models import Listing, Image
from estate_board.schemas.listing import ListingCreate, ListingUpdate, ListingFilter
from estate_board.services.uploads import UploadedImage

logger = logging.getLogger(__name__)


class ListingStore:
    """CRUD для объявлений и привязанных к ним фото"""

    SEARCH_FIELDS = ("title", "city", "district", "street", "description")

    def __init__(self, db: Session, default_type: Optional[str] = None):
        self.db = db
        self.default_type = default_type or get_settings().default_listing_type

    def _commit(self, action: str):
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Failed to {action}")
            raise StorageError()

    def _query(self):
        return self.db.query(Listing).options(selectinload(Listing.images))

    def list_all(self, filters: Optional[ListingFilter] = None) -> List[Listing]:
        """Объявления от новых к старым, с необязательной фильтрацией"""
        query = self._query()
        f = filters or ListingFilter()

        if f.q:
            query = query.filter(or_(*[
                getattr(Listing, name).icontains(f.q, autoescape=True) for name in self.SEARCH_FIELDS
            ]))
        if f.city:
            query = query.filter(Listing.city.icontains(f.city, autoescape=True))
        if f.type:
            query = query.filter(func.lower(Listing.type) == func.lower(f.type))
        if f.rooms is not None:
            query = query.filter(Listing.rooms == f.rooms)
        if f.min_area is not None:
            query = query.filter(Listing.area >= f.min_area)
        if f.max_area is not None:
            query = query.filter(Listing.area <= f.max_area)
        if f.min_price is not None:
            query = query.filter(Listing.price >= f.min_price)
        if f.max_price is not None:
            query = query.filter(Listing.price <= f.max_price)

        return query.order_by(Listing.created_at.desc(), Listing.id.desc()).all()

    def get_one(self, listing_id: int) -> Listing:
        listing = self._query().filter(Listing.id == listing_id).first()
        if not listing:
            raise NotFound("Listing not found")
        return listing

    def _attach_images(self, listing: Listing, images: Sequence[UploadedImage]):
        for upload in images:
            listing.images.append(Image(mime=upload.mime, data=upload.data))

    def create(self, data: ListingCreate, images: Sequence[UploadedImage] = ()) -> Listing:
        fields = data.model_dump()
        if not fields.get("type"):
            fields["type"] = self.default_type

        listing = Listing(**fields)
        self._attach_images(listing, images)
        self.db.add(listing)
        self._commit("create listing")
        self.db.refresh(listing)

        logger.info(f"Created listing {listing.id} with {len(images)} image(s)")
        return listing

    def update(
        self,
        listing_id: int,
        data: ListingUpdate,
        images: Sequence[UploadedImage] = (),
        remove_image_ids: Sequence[int] = (),
    ) -> Listing:
        """
        Частичное обновление: поля, которых нет в запросе, не меняются.

        Из remove_image_ids удаляются только фото этого объявления,
        чужие и несуществующие id пропускаются.
        """
        listing = self.get_one(listing_id)

        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        for key, value in update_data.items():
            setattr(listing, key, value)

        removed = 0
        if remove_image_ids:
            wanted = set(remove_image_ids)
            for image in list(listing.images):
                if image.id in wanted:
                    listing.images.remove(image)
                    removed += 1

        self._attach_images(listing, images)
        self._commit(f"update listing {listing_id}")
        self.db.refresh(listing)

        logger.info(
            f"Updated listing {listing_id}: fields={sorted(update_data)}, "
            f"added {len(images)} image(s), removed {removed}"
        )
        return listing

    def delete(self, listing_id: int) -> None:
        """Удаляет объявление вместе со всеми фото"""
        listing = self.get_one(listing_id)
        self.db.delete(listing)
        self._commit(f"delete listing {listing_id}")
        logger.info(f"Deleted listing {listing_id}")

    def get_image(self, image_id: int) -> Image:
        image = self.db.query(Image).options(undefer(Image.data)).filter(Image.id == image_id).first()
        if not image:
            raise NotFound("Image not found")
        return image

    def delete_image(self, image_id: int) -> int:
        """Удаляет одно фото, возвращает id объявления-владельца"""
        image = self.db.query(Image).filter(Image.id == image_id).first()
        if not image:
            raise NotFound("Image not found")
        listing_id = image.listing_id
        self.db.delete(image)
        self._commit(f"delete image {image_id}")
        logger.info(f"Deleted image {image_id} of listing {listing_id}")
        return listing_id
