"""
Repository holding comments.

Besides the id-keyed insert and lookup shared with posts, comments can
be listed by the post they reference.  ``post_id`` is not checked
against the posts collection.
"""

from typing import List

from ..schemas.comment import Comment
from .base import InMemoryRepository


class CommentRepository(InMemoryRepository[Comment]):
    """In-memory store of :class:`Comment` entities keyed by ``id``."""

    entity_name = "Comment"

    def get_all_by_post_id(self, post_id: int) -> List[Comment]:
        """Return every comment on ``post_id`` in insertion order.

        Returns an empty list when the post has no comments.
        """
        return [comment for comment in self.snapshot() if comment.post_id == post_id]
