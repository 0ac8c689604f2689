from datetime import datetime
from typing import Any

from src.common.schemas import CamelModel, DocumentModel


class CreateReviewModel(CamelModel):
    """Inbound review payload.

    Fields are only required to be present. Their types, lengths and ranges
    are checked by the rules in ``review.validators``, which keep the raw JSON
    values so that ``true`` or ``"5"`` is never coerced into a rating and
    every violation is reported together.
    """
    author_name: Any
    title: Any
    description: Any
    rating: Any
    product_id: Any


class ReviewModel(DocumentModel):
    author_name: str
    title: str
    description: str
    rating: int
    product_id: str
    created_at: datetime


class DeletedReviewsModel(CamelModel):
    message: str
    deleted_count: int
