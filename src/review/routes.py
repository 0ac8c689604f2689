from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession
from typing import List

from src.db.main import get_session
from src.auth.dependencies import access_token_bearer
from src.common.dependencies import validate_id, validate_product_id
from src.common.schemas import MessageResponse
from .schemas import CreateReviewModel, ReviewModel, DeletedReviewsModel
from .service import ReviewService

review_router = APIRouter()


@review_router.post('/create', status_code=status.HTTP_201_CREATED, response_model=ReviewModel)
async def create_review(
    review_data: CreateReviewModel,
    session: AsyncSession = Depends(get_session)
):
    service = ReviewService(session)
    new_review = await service.create(review_data)

    return new_review


# Guards run in parameter order: bearer token first, then the id format.

@review_router.get('/byProduct/{product_id}', response_model=List[ReviewModel])
async def get_reviews_by_product(
    token_details: dict = Depends(access_token_bearer),
    product_id: str = Depends(validate_product_id),
    session: AsyncSession = Depends(get_session)
):
    service = ReviewService(session)
    reviews = await service.find_by_product(product_id)

    return reviews


@review_router.delete('/byProduct/{product_id}', response_model=DeletedReviewsModel)
async def delete_reviews_by_product(
    token_details: dict = Depends(access_token_bearer),
    product_id: str = Depends(validate_product_id),
    session: AsyncSession = Depends(get_session)
):
    service = ReviewService(session)
    deleted_count = await service.delete_by_product(product_id)

    return {"message": "Reviews deleted successfully", "deleted_count": deleted_count}


@review_router.delete('/{id}', response_model=MessageResponse)
async def delete_review(
    token_details: dict = Depends(access_token_bearer),
    review_id: str = Depends(validate_id),
    session: AsyncSession = Depends(get_session)
):
    service = ReviewService(session)
    await service.delete_by_id(review_id)

    return {"message": "Review deleted successfully"}
