"""
Pydantic schema for blog posts.

A post is identified by a caller-supplied unsigned integer ``Id``.
Posts are created once and never modified, so the model is frozen.
Fields missing from a payload take their unset value (``0``, ``""``
or :data:`UNSET_TIMESTAMP`); post creation does not reject them.
"""

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from .common import UINT64_MAX, UNSET_TIMESTAMP


class Post(BaseModel):
    """A blog post."""

    model_config = ConfigDict(populate_by_name=True, strict=True, frozen=True)

    id: int = Field(0, alias="Id", ge=0, le=UINT64_MAX, description="Unique post identifier")
    title: str = Field("", alias="Title")
    content: str = Field("", alias="Content")
    creation_date: AwareDatetime = Field(
        UNSET_TIMESTAMP,
        alias="CreationDate",
        description="RFC 3339 timestamp with offset",
    )
