from typing import Any, Callable, List
from enum import Enum
import logging
from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.requests import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CommonErrorMessages(str, Enum):
    ID_VALIDATION_ERROR = "ID_VALIDATION_ERROR"


class ReviewErrorMessages(str, Enum):
    AUTHOR_NAME_LONG = "AUTHOR_NAME_LONG"
    TITLE_EMPTY = "TITLE_EMPTY"
    DESCRIPTION_LONG = "DESCRIPTION_LONG"
    RATING_COUNT = "RATING_COUNT"
    REVIEW_NOT_FOUND = "REVIEW_NOT_FOUND"
    PRODUCT_ID_NOT_FOUND = "PRODUCT_ID_NOT_FOUND"


class AuthErrorMessages(str, Enum):
    UNAUTHORIZED = "Unauthorized"
    ALREADY_REGISTERED_ERROR = "ALREADY_REGISTERED_ERROR"
    USER_NOT_FOUND_ERROR = "USER_NOT_FOUND_ERROR"
    WRONG_PASSWORD_ERROR = "WRONG_PASSWORD_ERROR"


class ProductErrorMessages(str, Enum):
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"


class TopPageErrorMessages(str, Enum):
    TOP_PAGE_NOT_FOUND = "TOP_PAGE_NOT_FOUND"
    TOP_PAGE_ALIAS_EXISTS = "TOP_PAGE_ALIAS_EXISTS"


class CatalogException(Exception):
    """This is the base class for all catalog errors"""
    message: Any = None

    def __init__(self, message: Any = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ReviewValidationError(CatalogException):
    """Review payload broke one or more validation rules.

    Carries every violated rule message, in rule order.
    """
    def __init__(self, messages: List[str]):
        super().__init__(list(messages))


class IdValidationError(CatalogException):
    """Path parameter is not a well-formed document identifier."""
    message = CommonErrorMessages.ID_VALIDATION_ERROR.value


class Unauthorized(CatalogException):
    """Bearer token is missing, malformed, expired or signed with another key."""
    message = AuthErrorMessages.UNAUTHORIZED.value


class UserAlreadyExists(CatalogException):
    """User has been provided an email for a user who exists during sign up."""
    message = AuthErrorMessages.ALREADY_REGISTERED_ERROR.value


class UserNotFound(CatalogException):
    message = AuthErrorMessages.USER_NOT_FOUND_ERROR.value


class WrongPassword(CatalogException):
    """User has been provided wrong password during login."""
    message = AuthErrorMessages.WRONG_PASSWORD_ERROR.value


class ReviewNotFound(CatalogException):
    message = ReviewErrorMessages.REVIEW_NOT_FOUND.value


class ProductIdNotFound(CatalogException):
    """No reviews are stored for the requested product id."""
    message = ReviewErrorMessages.PRODUCT_ID_NOT_FOUND.value


class ProductNotFound(CatalogException):
    message = ProductErrorMessages.PRODUCT_NOT_FOUND.value


class TopPageNotFound(CatalogException):
    message = TopPageErrorMessages.TOP_PAGE_NOT_FOUND.value


class TopPageAliasExists(CatalogException):
    message = TopPageErrorMessages.TOP_PAGE_ALIAS_EXISTS.value


def error_body(status_code: int, message: Any) -> dict:
    return {"statusCode": status_code, "message": message}


def create_exception_handler(status_code: int) -> Callable[[Request, Exception], JSONResponse]:
    async def exception_handler(request: Request, exc: CatalogException):
        return JSONResponse(
            content=error_body(status_code, exc.message),
            status_code=status_code
        )

    return exception_handler


def format_request_errors(exc: RequestValidationError) -> List[str]:
    messages = []
    for error in exc.errors():
        # drop the "body" / "path" / "query" prefix
        location = [str(part) for part in error.get("loc", ())[1:]]
        field = ".".join(location)
        messages.append(f"{field} {error.get('msg', '')}".strip())
    return messages


def register_all_errors(app: FastAPI):
    handlers = [
        (ReviewValidationError, status.HTTP_400_BAD_REQUEST),
        (IdValidationError, status.HTTP_400_BAD_REQUEST),
        (UserAlreadyExists, status.HTTP_400_BAD_REQUEST),
        (TopPageAliasExists, status.HTTP_400_BAD_REQUEST),
        (Unauthorized, status.HTTP_401_UNAUTHORIZED),
        (UserNotFound, status.HTTP_401_UNAUTHORIZED),
        (WrongPassword, status.HTTP_401_UNAUTHORIZED),
        (ReviewNotFound, status.HTTP_404_NOT_FOUND),
        (ProductIdNotFound, status.HTTP_404_NOT_FOUND),
        (ProductNotFound, status.HTTP_404_NOT_FOUND),
        (TopPageNotFound, status.HTTP_404_NOT_FOUND),
    ]

    for exception_class, status_code in handlers:
        app.add_exception_handler(
            exception_class,
            create_exception_handler(status_code=status_code)
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(status.HTTP_400_BAD_REQUEST, format_request_errors(exc))
        )

    @app.exception_handler(500)
    async def internal_server_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
        )

    @app.exception_handler(404)
    async def not_found_error_handler(request: Request, exc: Exception):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=error_body(status.HTTP_404_NOT_FOUND, "Not Found")
        )
