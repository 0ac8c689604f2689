from typing import Dict, List, Optional, Tuple
import logging

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy import delete, func

from src.db.models import Review

logger = logging.getLogger(__name__)


class ReviewRepository:
    """Store access for review documents.

    Every method commits its own unit of work. Rating aggregates are computed
    by the database on each call and never stored.
    """
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, review: Review) -> Review:
        self.session.add(review)
        await self.session.commit()
        await self.session.refresh(review)

        return review

    async def delete_by_id(self, review_id: str) -> Optional[Review]:
        review = await self.session.get(Review, review_id)
        if review is None:
            return None

        await self.session.delete(review)
        await self.session.commit()

        return review

    async def delete_by_product_id(self, product_id: str) -> int:
        """Remove all reviews of a product in one statement; returns how many went."""
        statement = delete(Review).where(Review.product_id == product_id)
        result = await self.session.exec(statement)
        await self.session.commit()

        return result.rowcount or 0

    async def find_by_product_id(self, product_id: str) -> List[Review]:
        statement = (
            select(Review)
            .where(Review.product_id == product_id)
            .order_by(Review.created_at, Review.id)
        )
        result = await self.session.exec(statement)

        return list(result.all())

    async def find_by_product_ids(self, product_ids: List[str]) -> Dict[str, List[Review]]:
        """Reviews of several products at once, newest first within each product."""
        grouped: Dict[str, List[Review]] = {product_id: [] for product_id in product_ids}
        if not product_ids:
            return grouped

        statement = (
            select(Review)
            .where(Review.product_id.in_(product_ids))
            .order_by(Review.created_at.desc(), Review.id.desc())
        )
        result = await self.session.exec(statement)

        for review in result.all():
            grouped[review.product_id].append(review)

        return grouped

    async def rating_summary(self, product_ids: List[str]) -> Dict[str, Tuple[int, Optional[float]]]:
        """Review count and mean rating per product id.

        Products without reviews map to ``(0, None)``.
        """
        summary: Dict[str, Tuple[int, Optional[float]]] = {
            product_id: (0, None) for product_id in product_ids
        }
        if not product_ids:
            return summary

        statement = (
            select(Review.product_id, func.count(Review.id), func.avg(Review.rating))
            .where(Review.product_id.in_(product_ids))
            .group_by(Review.product_id)
        )
        result = await self.session.exec(statement)

        for product_id, review_count, review_avg in result.all():
            summary[product_id] = (review_count, float(review_avg) if review_avg is not None else None)

        return summary
