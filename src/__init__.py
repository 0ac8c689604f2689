from contextlib import asynccontextmanager
import logging
import os

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from src.auth.routes import auth_router
from src.review.routes import review_router
from src.product.routes import product_router
from src.top_page.routes import top_page_router
from src.files.routes import files_router
from src.sitemap.routes import sitemap_router

from .config import Config
from .db.main import init_db
from .errors import register_all_errors
from .middleware import register_middleware

logging.basicConfig(level=logging.INFO)

version = "v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    yield


app = FastAPI(
    title = "Top Catalog",
    description = "A REST API for a product catalog with reviews and static pages",
    version = version,
    lifespan = lifespan,
)

# Uploaded files are served back from the upload folder
os.makedirs(Config.UPLOAD_DIR, exist_ok=True)
app.mount(Config.STATIC_URL, StaticFiles(directory=Config.UPLOAD_DIR), name="static")


register_all_errors(app)
register_middleware(app)


app.include_router(auth_router, prefix="/auth", tags=['auth'])
app.include_router(review_router, prefix="/review", tags=['review'])
app.include_router(product_router, prefix="/product", tags=['product'])
app.include_router(top_page_router, prefix="/top-page", tags=['top page'])
app.include_router(files_router, prefix="/files", tags=['files'])
app.include_router(sitemap_router, prefix="/sitemap", tags=['sitemap'])
