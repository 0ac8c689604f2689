import logging
from src.db.models import User
from src.errors import UserAlreadyExists, UserNotFound, WrongPassword
from .schemas import AuthModel
from .utils import generate_passwd_hash, verify_password, create_access_token
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select

logger = logging.getLogger(__name__)


class UserService:
    async def get_user_by_email(self, email : str, session: AsyncSession):
        statement = select(User).where(User.email == email)
        result = await session.exec(statement)
        user = result.first()

        return user

    async def user_exists(self, email, session: AsyncSession):
        user = await self.get_user_by_email(email, session)

        return True if user is not None else False

    async def create_user(self, user_data: AuthModel, session: AsyncSession):
        if await self.user_exists(user_data.email, session):
            raise UserAlreadyExists()

        new_user = User(
            email=user_data.email,
            password_hash=generate_passwd_hash(user_data.password)
        )

        session.add(new_user)
        await session.commit()
        await session.refresh(new_user)

        logger.info(f"Registered user {new_user.email}")
        return new_user

    async def login(self, login_data: AuthModel, session: AsyncSession) -> str:
        user = await self.get_user_by_email(login_data.email, session)

        if user is None:
            raise UserNotFound()

        if not verify_password(login_data.password, user.password_hash):
            raise WrongPassword()

        return create_access_token(
            user_data={
                'email': user.email,
                'user_id': user.id
            }
        )
