# Authentication Dependencies

from fastapi import Request
from fastapi.security import HTTPBearer

from .utils import decode_token
from src.errors import Unauthorized


class TokenBearer(HTTPBearer):
    """Bearer token guard.

    Extends FastAPI's HTTPBearer so that a missing header, a non-Bearer scheme
    and a token failing verification all end in the same 401 "Unauthorized"
    answer, raised before the route handler runs. Any authenticated caller
    passes; there is no per-resource ownership check.
    """
    def __init__(self):
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> dict:
        """Validate the Bearer token from the Authorization header.

        Args:
            request (Request): The incoming HTTP request

        Returns:
            dict: Decoded token data if valid

        Raises:
            Unauthorized: If the header is missing or the token is invalid
        """
        creds = await super().__call__(request)
        if creds is None or not creds.credentials:
            raise Unauthorized()

        token_data = decode_token(creds.credentials)
        self.verify_token_data(token_data)

        return token_data

    def verify_token_data(self, token_data: dict) -> None:
        """Token-specific checks, run after signature and expiry verification."""
        pass


class AccessTokenBearer(TokenBearer):
    def verify_token_data(self, token_data: dict) -> None:
        user = token_data.get("user")
        if not isinstance(user, dict) or not user.get("email"):
            raise Unauthorized()


access_token_bearer = AccessTokenBearer()
