from fastapi import APIRouter, Depends, status

from sqlmodel.ext.asyncio.session import AsyncSession

from .schemas import AuthModel, UserModel, TokenModel
from .service import UserService

from src.db.main import get_session


auth_router = APIRouter()
user_service = UserService()


@auth_router.post('/register', status_code=status.HTTP_201_CREATED, response_model=UserModel)
async def register(user_data: AuthModel, session: AsyncSession = Depends(get_session)):
    new_user = await user_service.create_user(user_data, session)

    return new_user


@auth_router.post('/login', status_code=status.HTTP_200_OK, response_model=TokenModel)
async def login(login_data: AuthModel, session: AsyncSession = Depends(get_session)):
    access_token = await user_service.login(login_data, session)

    return {"access_token": access_token}
