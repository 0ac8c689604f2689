import logging
from datetime import datetime
from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.db.models import Product
from src.errors import ProductNotFound
from src.review.repository import ReviewRepository
from .schemas import (
    ProductCreateModel,
    ProductUpdateModel,
    ProductDetailModel,
    ProductWithReviewsModel,
    FindProductModel,
)

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.review_repository = ReviewRepository(session)

    async def get_product(self, product_id: str) -> Product:
        product = await self.session.get(Product, product_id)
        if product is None:
            raise ProductNotFound()

        return product

    async def create_product(self, product_data: ProductCreateModel) -> Product:
        new_product = Product(**product_data.model_dump())

        self.session.add(new_product)
        await self.session.commit()
        await self.session.refresh(new_product)

        logger.info(f"Created product {new_product.id}")
        return new_product

    async def get_product_details(self, product_id: str) -> ProductDetailModel:
        product = await self.get_product(product_id)
        summary = await self.review_repository.rating_summary([product.id])
        review_count, review_avg = summary[product.id]

        return ProductDetailModel.model_validate(
            {**product.model_dump(), "review_count": review_count, "review_avg": review_avg}
        )

    async def update_product(self, product_id: str, product_data: ProductUpdateModel) -> Product:
        product = await self.get_product(product_id)

        update_data = product_data.model_dump(exclude_unset=True)
        for k, v in update_data.items():
            setattr(product, k, v)
        product.updated_at = datetime.now()

        self.session.add(product)
        await self.session.commit()
        await self.session.refresh(product)

        return product

    async def delete_product(self, product_id: str) -> None:
        # Reviews are kept; they are removed through the review endpoints
        product = await self.get_product(product_id)

        await self.session.delete(product)
        await self.session.commit()

        logger.info(f"Deleted product {product_id}")

    async def find_with_reviews(self, query: FindProductModel) -> List[ProductWithReviewsModel]:
        """Products of a category in id order, each with its reviews and rating."""
        statement = select(Product).order_by(Product.id)
        result = await self.session.exec(statement)

        # categories is a JSON array column, matched here rather than in SQL
        products = [p for p in result.all() if query.category in (p.categories or [])]
        products = products[:query.limit]

        product_ids = [p.id for p in products]
        reviews = await self.review_repository.find_by_product_ids(product_ids)
        summary = await self.review_repository.rating_summary(product_ids)

        found = []
        for product in products:
            review_count, review_avg = summary[product.id]
            found.append(ProductWithReviewsModel.model_validate({
                **product.model_dump(),
                "reviews": [review.model_dump() for review in reviews[product.id]],
                "review_count": review_count,
                "review_avg": review_avg,
            }))

        return found
