from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

# Границы целочисленных колонок: BigInteger для цены, Integer для комнат и этажа
PRICE_MAX = 2 ** 63 - 1
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


class ListingBase(BaseModel):
    """Базовая схема объявления"""
    model_config = ConfigDict(str_strip_whitespace=True, allow_inf_nan=False)

    description: Optional[str] = None
    district: Optional[str] = Field(None, max_length=255)
    street: Optional[str] = Field(None, max_length=255)
    rooms: Optional[int] = Field(None, ge=0, le=INT_MAX)
    area: Optional[float] = Field(None, ge=0)
    floor: Optional[int] = Field(None, ge=INT_MIN, le=INT_MAX)


class ListingCreate(ListingBase):
    """Схема для создания объявления"""
    title: str = Field(..., min_length=1, max_length=500)
    city: str = Field(..., min_length=1, max_length=255)
    price: int = Field(..., ge=0, le=PRICE_MAX)
    type: Optional[str] = Field(None, max_length=100)
    balcony: bool = False
    terrace: bool = False
    garden: bool = False


class ListingUpdate(ListingBase):
    """Схема для частичного обновления объявления"""
    title: Optional[str] = Field(None, min_length=1, max_length=500)
    city: Optional[str] = Field(None, min_length=1, max_length=255)
    price: Optional[int] = Field(None, ge=0, le=PRICE_MAX)
    type: Optional[str] = Field(None, min_length=1, max_length=100)
    balcony: Optional[bool] = None
    terrace: Optional[bool] = None
    garden: Optional[bool] = None


class ListingFilter(BaseModel):
    """Параметры фильтрации списка объявлений"""
    model_config = ConfigDict(allow_inf_nan=False)

    q: Optional[str] = None
    city: Optional[str] = None
    type: Optional[str] = None
    rooms: Optional[int] = Field(None, ge=INT_MIN, le=INT_MAX)
    min_area: Optional[float] = None
    max_area: Optional[float] = None
    min_price: Optional[int] = Field(None, ge=-PRICE_MAX, le=PRICE_MAX)
    max_price: Optional[int] = Field(None, ge=-PRICE_MAX, le=PRICE_MAX)


class ListingResponse(BaseModel):
    """Схема ответа с объявлением"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    city: str
    district: Optional[str] = None
    street: Optional[str] = None
    price: int
    rooms: Optional[int] = None
    area: Optional[float] = None
    type: str
    floor: Optional[int] = None
    balcony: bool
    terrace: bool
    garden: bool
    description: Optional[str] = None
    created_at: datetime
    image_ids: List[int] = []
