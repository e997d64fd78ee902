"""
Pydantic schema for comments.

``PostId`` points at the post a comment belongs to, but it is not
checked against the posts collection: a comment may reference a post
that does not exist.
"""

from typing import List

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from .common import UINT64_MAX, UNSET_TIMESTAMP


class Comment(BaseModel):
    """A comment left on a post."""

    model_config = ConfigDict(populate_by_name=True, strict=True, frozen=True)

    id: int = Field(0, alias="Id", ge=0, le=UINT64_MAX, description="Unique comment identifier")
    post_id: int = Field(0, alias="PostId", ge=0, le=UINT64_MAX)
    comment: str = Field("", alias="Comment", description="Comment text")
    author: str = Field("", alias="Author")
    creation_date: AwareDatetime = Field(
        UNSET_TIMESTAMP,
        alias="CreationDate",
        description="RFC 3339 timestamp with offset",
    )

    def unset_fields(self) -> List[str]:
        """Return the wire names of fields still holding their unset value."""
        unset = []
        if self.id == 0:
            unset.append("Id")
        if self.post_id == 0:
            unset.append("PostId")
        if self.comment == "":
            unset.append("Comment")
        if self.author == "":
            unset.append("Author")
        if self.creation_date == UNSET_TIMESTAMP:
            unset.append("CreationDate")
        return unset
