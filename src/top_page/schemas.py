from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from src.db.models import TopLevelCategory
from src.common.schemas import CamelModel, DocumentModel


class HhData(CamelModel):
    count: int = Field(ge=0)
    junior_salary: int = Field(ge=0)
    middle_salary: int = Field(ge=0)
    senior_salary: int = Field(ge=0)
    updated_at: Optional[datetime] = None


class TopPageAdvantage(CamelModel):
    title: str
    description: str


class TopPageCreateModel(CamelModel):
    first_category: TopLevelCategory
    second_category: str
    alias: str = Field(min_length=1)
    title: str
    meta_title: str = ""
    meta_description: str = ""
    category: str
    hh: Optional[HhData] = None
    advantages: List[TopPageAdvantage] = []
    seo_text: Optional[str] = None
    tags_title: str
    tags: List[str] = []


class TopPageUpdateModel(CamelModel):
    first_category: Optional[TopLevelCategory] = None
    second_category: Optional[str] = None
    alias: Optional[str] = Field(default=None, min_length=1)
    title: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    category: Optional[str] = None
    hh: Optional[HhData] = None
    advantages: Optional[List[TopPageAdvantage]] = None
    seo_text: Optional[str] = None
    tags_title: Optional[str] = None
    tags: Optional[List[str]] = None

    # Only hh and seoText may be cleared
    @field_validator(
        "first_category", "second_category", "alias", "title", "meta_title",
        "meta_description", "category", "advantages", "tags_title", "tags",
        mode="before"
    )
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value


class TopPageModel(DocumentModel):
    first_category: TopLevelCategory
    second_category: str
    alias: str
    title: str
    meta_title: str
    meta_description: str
    category: str
    hh: Optional[HhData] = None
    advantages: List[TopPageAdvantage]
    seo_text: Optional[str] = None
    tags_title: str
    tags: List[str]
    created_at: datetime
    updated_at: datetime


class FindTopPageModel(CamelModel):
    first_category: TopLevelCategory


class TopPageSummary(DocumentModel):
    alias: str
    title: str
    category: str


class SecondCategoryKey(CamelModel):
    second_category: str


class TopPageGroupModel(BaseModel):
    id: SecondCategoryKey = Field(alias="_id")
    pages: List[TopPageSummary]

    model_config = {"populate_by_name": True}
