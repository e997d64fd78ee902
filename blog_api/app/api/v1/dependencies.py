"""
FastAPI dependencies giving endpoints access to the repositories.

``create_app`` stores one repository of each kind on ``app.state``;
these providers hand them to the route functions.
"""

import logging

from fastapi import HTTPException, Request, status

from blog_api.app.repositories import CommentRepository, PostRepository

logger = logging.getLogger(__name__)


def get_post_repository(request: Request) -> PostRepository:
    repository = getattr(request.app.state, "post_repository", None)
    if repository is None:
        logger.error("Post repository not initialised on application state.")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Post storage unavailable")
    return repository


def get_comment_repository(request: Request) -> CommentRepository:
    repository = getattr(request.app.state, "comment_repository", None)
    if repository is None:
        logger.error("Comment repository not initialised on application state.")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Comment storage unavailable")
    return repository
