from fastapi import FastAPI
from fastapi.requests import Request
from fastapi.middleware.cors import CORSMiddleware
import time
import logging

from src.config import Config

logger = logging.getLogger('uvicorn.access')
logger.disabled = True

request_logger = logging.getLogger(__name__)
request_logger.setLevel(logging.INFO)


def register_middleware(app: FastAPI):

    @app.middleware("http")
    async def custom_logging(request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)
        processing_time = time.time() - start_time

        client = request.client
        host, port = (client.host, client.port) if client else ("-", "-")
        message = f"{host}:{port} - {request.method} - {request.url.path} - {response.status_code} completed after {processing_time}s"

        request_logger.info(message)
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_credentials=True,
        allow_origins=Config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=600  # Cache preflight requests for 10 minutes
    )
