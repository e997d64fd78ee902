"""
Repository holding blog posts.
"""

from ..schemas.post import Post
from .base import InMemoryRepository


class PostRepository(InMemoryRepository[Post]):
    """In-memory store of :class:`Post` entities keyed by ``id``."""

    entity_name = "Post"
