import logging
from typing import List

from sqlmodel.ext.asyncio.session import AsyncSession

from src.db.models import Review
from src.errors import ReviewValidationError, ReviewNotFound, ProductIdNotFound
from .repository import ReviewRepository
from .schemas import CreateReviewModel
from .validators import validate_review

logger = logging.getLogger(__name__)


class ReviewService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.repository = ReviewRepository(session)

    async def create(self, review_data: CreateReviewModel) -> Review:
        messages = validate_review(review_data)
        if messages:
            raise ReviewValidationError(messages)

        new_review = Review(**review_data.model_dump())
        new_review = await self.repository.create(new_review)

        logger.info(f"Created review {new_review.id} for product {new_review.product_id}")
        return new_review

    async def find_by_product(self, product_id: str) -> List[Review]:
        reviews = await self.repository.find_by_product_id(product_id)

        # An unknown product and a product without reviews look the same here
        if not reviews:
            raise ProductIdNotFound()

        return reviews

    async def delete_by_id(self, review_id: str) -> Review:
        deleted_review = await self.repository.delete_by_id(review_id)
        if deleted_review is None:
            raise ReviewNotFound()

        logger.info(f"Deleted review {review_id}")
        return deleted_review

    async def delete_by_product(self, product_id: str) -> int:
        deleted_count = await self.repository.delete_by_product_id(product_id)
        if not deleted_count:
            raise ProductIdNotFound()

        logger.info(f"Deleted {deleted_count} reviews for product {product_id}")
        return deleted_count

