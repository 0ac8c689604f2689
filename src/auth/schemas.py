from pydantic import BaseModel, EmailStr, Field

from src.common.schemas import DocumentModel


class AuthModel(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class UserModel(DocumentModel):
    email: str


class TokenModel(BaseModel):
    access_token: str
