import logging
from datetime import datetime
from itertools import groupby
from typing import List, Optional

from sqlmodel import select, or_
from sqlmodel.ext.asyncio.session import AsyncSession

from src.db.models import TopPage, TopLevelCategory
from src.errors import TopPageNotFound, TopPageAliasExists
from .schemas import TopPageCreateModel, TopPageUpdateModel, TopPageGroupModel

logger = logging.getLogger(__name__)


class TopPageService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_page(self, page_id: str) -> TopPage:
        page = await self.session.get(TopPage, page_id)
        if page is None:
            raise TopPageNotFound()

        return page

    async def get_page_by_alias(self, alias: str) -> Optional[TopPage]:
        statement = select(TopPage).where(TopPage.alias == alias)
        result = await self.session.exec(statement)

        return result.first()

    async def create_page(self, page_data: TopPageCreateModel) -> TopPage:
        if await self.get_page_by_alias(page_data.alias) is not None:
            raise TopPageAliasExists()

        # mode="json" keeps nested datetimes storable in the JSON columns
        new_page = TopPage(**page_data.model_dump(mode="json"))

        self.session.add(new_page)
        await self.session.commit()
        await self.session.refresh(new_page)

        logger.info(f"Created top page {new_page.alias}")
        return new_page

    async def find_by_alias(self, alias: str) -> TopPage:
        page = await self.get_page_by_alias(alias)
        if page is None:
            raise TopPageNotFound()

        return page

    async def update_page(self, page_id: str, page_data: TopPageUpdateModel) -> TopPage:
        page = await self.get_page(page_id)

        update_data = page_data.model_dump(mode="json", exclude_unset=True)
        new_alias = update_data.get("alias")
        if new_alias and new_alias != page.alias and await self.get_page_by_alias(new_alias) is not None:
            raise TopPageAliasExists()

        for k, v in update_data.items():
            setattr(page, k, v)
        page.updated_at = datetime.now()

        self.session.add(page)
        await self.session.commit()
        await self.session.refresh(page)

        return page

    async def delete_page(self, page_id: str) -> None:
        page = await self.get_page(page_id)

        await self.session.delete(page)
        await self.session.commit()

        logger.info(f"Deleted top page {page_id}")

    async def find_by_category(self, first_category: TopLevelCategory) -> List[TopPageGroupModel]:
        """Pages of a top-level category grouped by their second category."""
        statement = (
            select(TopPage)
            .where(TopPage.first_category == int(first_category))
            .order_by(TopPage.second_category, TopPage.id)
        )
        result = await self.session.exec(statement)

        groups = []
        for second_category, pages in groupby(result.all(), key=lambda page: page.second_category):
            groups.append(TopPageGroupModel.model_validate({
                "_id": {"second_category": second_category},
                "pages": [
                    {"id": page.id, "alias": page.alias, "title": page.title, "category": page.category}
                    for page in pages
                ],
            }))

        return groups

    async def find_all(self) -> List[TopPage]:
        statement = select(TopPage).order_by(TopPage.id)
        result = await self.session.exec(statement)

        return list(result.all())

    async def text_search(self, text: str) -> List[TopPage]:
        pattern = f"%{text}%"
        statement = (
            select(TopPage)
            .where(or_(TopPage.title.ilike(pattern), TopPage.seo_text.ilike(pattern)))
            .order_by(TopPage.id)
        )
        result = await self.session.exec(statement)

        return list(result.all())
