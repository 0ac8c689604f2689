from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from src.db.main import get_session
from src.top_page.service import TopPageService
from .service import sitemap_entries, build_sitemap

sitemap_router = APIRouter()


@sitemap_router.get('/xml')
async def get_sitemap(session: AsyncSession = Depends(get_session)):
    pages = await TopPageService(session).find_all()
    xml = build_sitemap(sitemap_entries(pages))

    return Response(content=xml, media_type="text/xml")
