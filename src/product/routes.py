from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession
from typing import List

from src.db.main import get_session
from src.auth.dependencies import access_token_bearer
from src.common.dependencies import validate_id
from src.common.schemas import MessageResponse
from .schemas import (
    ProductCreateModel,
    ProductUpdateModel,
    ProductModel,
    ProductDetailModel,
    ProductWithReviewsModel,
    FindProductModel,
)
from .service import ProductService

product_router = APIRouter()


@product_router.post('/create', status_code=status.HTTP_201_CREATED, response_model=ProductModel)
async def create_product(
    product_data: ProductCreateModel,
    token_details: dict = Depends(access_token_bearer),
    session: AsyncSession = Depends(get_session)
):
    service = ProductService(session)
    return await service.create_product(product_data)


@product_router.post('/find', status_code=status.HTTP_200_OK, response_model=List[ProductWithReviewsModel])
async def find_products(
    query: FindProductModel,
    session: AsyncSession = Depends(get_session)
):
    service = ProductService(session)
    return await service.find_with_reviews(query)


@product_router.get('/{id}', response_model=ProductDetailModel)
async def get_product(
    product_id: str = Depends(validate_id),
    session: AsyncSession = Depends(get_session)
):
    service = ProductService(session)
    return await service.get_product_details(product_id)


@product_router.patch('/{id}', response_model=ProductModel)
async def update_product(
    product_data: ProductUpdateModel,
    token_details: dict = Depends(access_token_bearer),
    product_id: str = Depends(validate_id),
    session: AsyncSession = Depends(get_session)
):
    service = ProductService(session)
    return await service.update_product(product_id, product_data)


@product_router.delete('/{id}', response_model=MessageResponse)
async def delete_product(
    token_details: dict = Depends(access_token_bearer),
    product_id: str = Depends(validate_id),
    session: AsyncSession = Depends(get_session)
):
    service = ProductService(session)
    await service.delete_product(product_id)

    return {"message": "Product deleted successfully"}
