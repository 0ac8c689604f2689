from pydantic import BaseModel


class FileElementResponse(BaseModel):
    url: str
    name: str
