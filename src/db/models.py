from sqlmodel import SQLModel, Field
from datetime import datetime
from typing import List, Optional
from sqlalchemy import Column, String, Integer, Float, DateTime, Text, JSON
from bson import ObjectId
from enum import IntEnum


def generate_object_id() -> str:
    """Return a new 24-character hexadecimal document identifier."""
    return str(ObjectId())


def object_id_column() -> Column:
    return Column(String(24), primary_key=True, nullable=False)


"""
___________________________________________________

1.  User Table
___________________________________________________

"""
class User(SQLModel, table = True):
    __tablename__ = 'users'
    id : str = Field(default_factory = generate_object_id, sa_column = object_id_column())
    email : str = Field(sa_column=Column(String, unique=True, index=True, nullable=False))
    password_hash : str = Field(exclude=True)
    created_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime, nullable=False))
    updated_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime, nullable=False))

    def __repr__(self):
        return f'<User {self.email}>'



"""
___________________________________________________

2.  Product Table
___________________________________________________

"""
class Product(SQLModel, table=True):
    __tablename__ = "products"

    id: str = Field(default_factory=generate_object_id, sa_column=object_id_column())
    image: str
    title: str
    price: float = Field(sa_column=Column(Float, nullable=False))
    old_price: Optional[float] = Field(default=None, sa_column=Column(Float, nullable=True))
    credit: float = Field(sa_column=Column(Float, nullable=False))
    description: str = Field(sa_column=Column(Text, nullable=False))
    advantages: str = Field(default="", sa_column=Column(Text, nullable=False))
    dis_advantages: str = Field(default="", sa_column=Column(Text, nullable=False))
    # Stored as JSON arrays, the same shape the API exposes
    categories: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    characteristics: List[dict] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    created_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime, nullable=False))
    updated_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime, nullable=False))

    def __repr__(self):
        return f"<Product {self.title}>"



"""
___________________________________________________

3.  Review Table
___________________________________________________

"""
class Review(SQLModel, table=True):
    __tablename__ = "reviews"

    id: str = Field(default_factory=generate_object_id, sa_column=object_id_column())
    author_name: str = Field(sa_column=Column(String(30), nullable=False))
    title: str
    description: str = Field(sa_column=Column(Text, nullable=False))
    rating: int = Field(sa_column=Column(Integer, nullable=False))
    # Plain reference, reviews may point at products this service never stored
    product_id: str = Field(sa_column=Column(String(24), nullable=False, index=True))
    created_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime, nullable=False))

    def __repr__(self):
        return f"<Review {self.title} ({self.rating})>"



"""
___________________________________________________

4.  Top Page Table
___________________________________________________

"""
class TopLevelCategory(IntEnum):
    COURSES = 0
    SERVICES = 1
    BOOKS = 2
    PRODUCTS = 3


class TopPage(SQLModel, table=True):
    __tablename__ = "top_pages"

    id: str = Field(default_factory=generate_object_id, sa_column=object_id_column())
    first_category: int = Field(sa_column=Column(Integer, nullable=False, index=True))
    second_category: str
    alias: str = Field(sa_column=Column(String, unique=True, index=True, nullable=False))
    title: str
    meta_title: str = ""
    meta_description: str = ""
    category: str
    hh: Optional[dict] = Field(default=None, sa_column=Column(JSON, nullable=True))
    advantages: List[dict] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    seo_text: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    tags_title: str
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    created_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime, nullable=False))
    updated_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime, nullable=False))

    def __repr__(self):
        return f"<TopPage {self.alias}>"
