from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession
from typing import List

from src.db.main import get_session
from src.auth.dependencies import access_token_bearer
from src.common.dependencies import validate_id
from src.common.schemas import MessageResponse
from .schemas import (
    TopPageCreateModel,
    TopPageUpdateModel,
    TopPageModel,
    FindTopPageModel,
    TopPageGroupModel,
)
from .service import TopPageService

top_page_router = APIRouter()


@top_page_router.post('/create', status_code=status.HTTP_201_CREATED, response_model=TopPageModel)
async def create_page(
    page_data: TopPageCreateModel,
    token_details: dict = Depends(access_token_bearer),
    session: AsyncSession = Depends(get_session)
):
    service = TopPageService(session)
    return await service.create_page(page_data)


@top_page_router.post('/find', status_code=status.HTTP_200_OK, response_model=List[TopPageGroupModel])
async def find_pages(
    query: FindTopPageModel,
    session: AsyncSession = Depends(get_session)
):
    service = TopPageService(session)
    return await service.find_by_category(query.first_category)


@top_page_router.get('/byAlias/{alias}', response_model=TopPageModel)
async def get_page_by_alias(alias: str, session: AsyncSession = Depends(get_session)):
    service = TopPageService(session)
    return await service.find_by_alias(alias)


@top_page_router.get('/textSearch/{text}', response_model=List[TopPageModel])
async def text_search(text: str, session: AsyncSession = Depends(get_session)):
    service = TopPageService(session)
    return await service.text_search(text)


@top_page_router.get('/{id}', response_model=TopPageModel)
async def get_page(
    token_details: dict = Depends(access_token_bearer),
    page_id: str = Depends(validate_id),
    session: AsyncSession = Depends(get_session)
):
    service = TopPageService(session)
    return await service.get_page(page_id)


@top_page_router.patch('/{id}', response_model=TopPageModel)
async def update_page(
    page_data: TopPageUpdateModel,
    token_details: dict = Depends(access_token_bearer),
    page_id: str = Depends(validate_id),
    session: AsyncSession = Depends(get_session)
):
    service = TopPageService(session)
    return await service.update_page(page_id, page_data)


@top_page_router.delete('/{id}', response_model=MessageResponse)
async def delete_page(
    token_details: dict = Depends(access_token_bearer),
    page_id: str = Depends(validate_id),
    session: AsyncSession = Depends(get_session)
):
    service = TopPageService(session)
    await service.delete_page(page_id)

    return {"message": "Page deleted successfully"}
