from fastapi import APIRouter, Depends, File, UploadFile, status
from typing import List

from src.auth.dependencies import access_token_bearer
from .schemas import FileElementResponse
from .service import FilesService

files_router = APIRouter()
files_service = FilesService()


@files_router.post('/upload', status_code=status.HTTP_200_OK, response_model=List[FileElementResponse])
async def upload_files(
    token_details: dict = Depends(access_token_bearer),
    files: List[UploadFile] = File(...)
):
    return await files_service.save_files(files)
