# Request guards shared by every feature router

from fastapi import Request
from bson import ObjectId

from src.errors import IdValidationError


def is_valid_object_id(value: str) -> bool:
    return isinstance(value, str) and ObjectId.is_valid(value)


class ObjectIdValidator:
    """Path parameter guard for document identifiers.

    Used as a dependency; passes the identifier through unchanged when it is a
    24-character hexadecimal ObjectId and short-circuits the request with
    ID_VALIDATION_ERROR otherwise. Existence is not checked here.
    """
    def __init__(self, param_name: str = "id") -> None:
        self.param_name = param_name

    async def __call__(self, request: Request) -> str:
        value = request.path_params.get(self.param_name, "")

        if not is_valid_object_id(value):
            raise IdValidationError()

        return value


validate_id = ObjectIdValidator("id")
validate_product_id = ObjectIdValidator("product_id")
