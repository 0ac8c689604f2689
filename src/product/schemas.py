from datetime import datetime
from typing import List, Optional
from pydantic import Field, field_validator

from src.common.schemas import CamelModel, DocumentModel
from src.review.schemas import ReviewModel


class ProductCharacteristic(CamelModel):
    name: str
    value: str


class ProductCreateModel(CamelModel):
    image: str
    title: str
    price: float = Field(ge=0)
    old_price: Optional[float] = Field(default=None, ge=0)
    credit: float = Field(ge=0)
    description: str
    advantages: str = ""
    dis_advantages: str = ""
    categories: List[str] = []
    tags: List[str] = []
    characteristics: List[ProductCharacteristic] = []


class ProductUpdateModel(CamelModel):
    image: Optional[str] = None
    title: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    old_price: Optional[float] = Field(default=None, ge=0)
    credit: Optional[float] = Field(default=None, ge=0)
    description: Optional[str] = None
    advantages: Optional[str] = None
    dis_advantages: Optional[str] = None
    categories: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    characteristics: Optional[List[ProductCharacteristic]] = None

    # Only oldPrice may be cleared; null elsewhere would break a NOT NULL column
    @field_validator(
        "image", "title", "price", "credit", "description", "advantages",
        "dis_advantages", "categories", "tags", "characteristics",
        mode="before"
    )
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value


class ProductModel(DocumentModel):
    image: str
    title: str
    price: float
    old_price: Optional[float] = None
    credit: float
    description: str
    advantages: str
    dis_advantages: str
    categories: List[str]
    tags: List[str]
    characteristics: List[ProductCharacteristic]
    created_at: datetime
    updated_at: datetime


class ProductDetailModel(ProductModel):
    review_count: int = 0
    review_avg: Optional[float] = None


class ProductWithReviewsModel(ProductDetailModel):
    reviews: List[ReviewModel] = []


class FindProductModel(CamelModel):
    category: str
    limit: int = Field(gt=0, le=100)
