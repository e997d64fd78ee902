"""
Pydantic schema definitions for API payloads.

Posts and comments are plain records; the same models are used for
request bodies, storage and responses.  Field names on the wire are
the capitalised identifiers (``Id``, ``PostId``, ``CreationDate``...)
while Python code uses snake_case attribute names.
"""

from .ack import AckResponse
from .comment import Comment
from .post import Post

__all__ = ["AckResponse", "Comment", "Post"]
