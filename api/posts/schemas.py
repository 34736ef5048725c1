"""
Post API schemas.

The stored `author` is either a user's ObjectId or a raw name string. On the
wire it is a tagged union so clients branch on `kind` instead of guessing.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostCreateRequest(BaseModel):
    title: str | None = None
    content: str | None = None
    author: str | None = None
    category: str | None = None
    createdAt: datetime | None = None
    thumbnail: str | None = None
    images: list[str] | None = None
    keywords: str | None = None
    subtitle: str | None = None
    authorGmail: str | None = None


class PostUpdateFields(BaseModel):
    """
    Casting rules for the schema keys of an update body.

    Numbers become strings and a single image becomes a one-item list; values
    that cannot be cast are rejected before anything is written.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    title: str | None = None
    content: str | None = None
    category: str | None = None
    thumbnail: str | None = None
    images: list[str] | None = None
    keywords: str | None = None
    subtitle: str | None = None
    authorGmail: str | None = None
    createdAt: datetime | None = None
    updatedAt: datetime | None = None

    @field_validator("images", mode="before")
    @classmethod
    def _wrap_single_image(cls, value: Any) -> Any:
        if isinstance(value, (str, int, float)) and not isinstance(value, bool):
            return [value]
        return value


class UserAuthor(BaseModel):
    kind: Literal["user"] = "user"
    id: str


class NameAuthor(BaseModel):
    kind: Literal["name"] = "name"
    name: str


Author = Annotated[Union[UserAuthor, NameAuthor], Field(discriminator="kind")]


def author_from_stored(value: Any) -> UserAuthor | NameAuthor | None:
    if value is None:
        return None
    if isinstance(value, ObjectId):
        return UserAuthor(id=str(value))
    return NameAuthor(name=str(value))


class PostResponse(BaseModel):
    # Updates overlay arbitrary fields, so unknown keys are passed through.
    model_config = ConfigDict(extra="allow")

    id: str
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    category: str | None = None
    createdAt: datetime | None = None
    updatedAt: datetime | None = None
    thumbnail: str | None = None
    images: list[str] = Field(default_factory=list)
    keywords: str | None = None
    subtitle: str | None = None
    authorGmail: str | None = None


class MessageResponse(BaseModel):
    message: str
