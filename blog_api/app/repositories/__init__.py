"""
In-memory repositories.

The application owns exactly one repository of each kind for its whole
lifetime; they are created by ``create_app`` and handed to endpoints
through FastAPI dependencies, never looked up as module globals.
"""

from .comment_repository import CommentRepository
from .post_repository import PostRepository
from .result import ErrorKind, RepositoryError, Result

__all__ = [
    "CommentRepository",
    "ErrorKind",
    "PostRepository",
    "RepositoryError",
    "Result",
]
