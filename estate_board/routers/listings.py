from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError as SchemaError

from estate_board.deps import get_listing_store, get_submission, require_admin
from estate_board.errors import ValidationError, format_validation_errors
from estate_board.schemas.listing import (
    ListingCreate, ListingUpdate, ListingFilter, ListingResponse, INT_MIN, INT_MAX, PRICE_MAX
)
from estate_board.services.listing_store import ListingStore
from estate_board.services.uploads import Submission

router = APIRouter(prefix="/api/listings", tags=["listings"])


def validate_fields(schema, fields: dict):
    """Проверяет поля формы по схеме, ошибки pydantic превращает в 400"""
    try:
        return schema.model_validate(fields)
    except SchemaError as e:
        raise ValidationError(format_validation_errors(e.errors()))


@router.get("", response_model=List[ListingResponse])
def get_listings(
    q: Optional[str] = None,
    city: Optional[str] = None,
    type: Optional[str] = None,
    rooms: Optional[int] = Query(None, ge=INT_MIN, le=INT_MAX),
    min_area: Optional[float] = Query(None, allow_inf_nan=False),
    max_area: Optional[float] = Query(None, allow_inf_nan=False),
    min_price: Optional[int] = Query(None, ge=-PRICE_MAX, le=PRICE_MAX),
    max_price: Optional[int] = Query(None, ge=-PRICE_MAX, le=PRICE_MAX),
    store: ListingStore = Depends(get_listing_store)
):
    """Получить список объявлений, новые первыми"""
    filters = ListingFilter(
        q=q or None,
        city=city or None,
        type=type or None,
        rooms=rooms,
        min_area=min_area,
        max_area=max_area,
        min_price=min_price,
        max_price=max_price,
    )
    return store.list_all(filters)


@router.get("/{listing_id}", response_model=ListingResponse)
def get_listing(listing_id: int, store: ListingStore = Depends(get_listing_store)):
    """Получить объявление по ID"""
    return store.get_one(listing_id)


@router.post(
    "",
    response_model=ListingResponse,
    status_code=201,
    dependencies=[Depends(require_admin)],
)
def create_listing(
    submission: Submission = Depends(get_submission),
    store: ListingStore = Depends(get_listing_store)
):
    """Создать объявление с фотографиями"""
    data = validate_fields(ListingCreate, submission.fields)
    return store.create(data, submission.images)


@router.put(
    "/{listing_id}",
    response_model=ListingResponse,
    dependencies=[Depends(require_admin)],
)
def update_listing(
    listing_id: int,
    submission: Submission = Depends(get_submission),
    store: ListingStore = Depends(get_listing_store)
):
    """Обновить объявление: изменённые поля, новые фото, удаление фото"""
    data = validate_fields(ListingUpdate, submission.fields)
    return store.update(listing_id, data, submission.images, submission.remove_images)


@router.delete("/{listing_id}", dependencies=[Depends(require_admin)])
def delete_listing(listing_id: int, store: ListingStore = Depends(get_listing_store)):
    """Удалить объявление вместе с фото"""
    store.delete(listing_id)
    return {"success": True, "id": listing_id}
