"""
Pydantic schemas for post service request/response validation
"""
from pydantic import BaseModel, Field

from typing import List, Literal, Optional


# Posts
class PostIn(BaseModel):
    title: str = Field(..., min_length=1)
    text: str
    new_col: Optional[int] = None


class PostUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    text: Optional[str] = None
    new_col: Optional[int] = None


class PostOut(BaseModel):
    id: int
    title: str
    text: str
    new_col: int

    model_config = {"from_attributes": True}


class PaginationPost(BaseModel):
    posts: List[PostOut]
    page: int
    posts_per_page: int
    num_pages: int


class FlashData(BaseModel):
    kind: Literal["success", "error"] = "success"
    message: str


# Accounts
class UserCreate(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=8)


class UserLogin(BaseModel):
    email: str
    password: str


class UserOut(BaseModel):
    id: int
    email: str

    model_config = {"from_attributes": True}


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
