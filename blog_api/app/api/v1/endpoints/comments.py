"""
Comment endpoints for API v1.

Comments are created with ``POST /api/comments`` and listed per post
with ``GET /api/comments?postId=<id>``.  A comment body must carry
every field; an incomplete body is rejected with the same message as
one that is not valid JSON.  The post a comment points at is not
required to exist.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError

from blog_api.app.api.v1.dependencies import get_comment_repository
from blog_api.app.api.v1.responses import (
    RequestError,
    ack,
    entities,
    json_body_schema,
    plain_error,
    request_error,
)
from blog_api.app.repositories import CommentRepository
from blog_api.app.schemas import AckResponse, Comment
from blog_api.app.schemas.common import parse_uint64

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/comments",
    response_model=AckResponse,
    summary="Create a comment",
    openapi_extra=json_body_schema(Comment),
    responses={
        400: {"model": AckResponse},
        500: {"description": "Storage failure", "content": {"text/plain": {}}},
    },
)
async def create_comment(
    request: Request,
    comments: CommentRepository = Depends(get_comment_repository),
) -> Response:
    """Store a new comment."""
    body = await request.body()
    try:
        comment = Comment.model_validate_json(body)
    except ValidationError as e:
        logger.warning("Rejected comment payload with %d error(s)", e.error_count())
        return request_error(RequestError.MALFORMED_PAYLOAD)

    unset = comment.unset_fields()
    if unset:
        logger.warning("Rejected comment payload, unset fields: %s", ", ".join(unset))
        return request_error(RequestError.MISSING_FIELD)

    if comments.get_by_id(comment.id).ok:
        logger.warning("Comment %s already exists", comment.id)
        return ack(f"Comment with id: {comment.id} already exists", status.HTTP_400_BAD_REQUEST)

    # Another request may have stored the same id since the check above.
    result = comments.insert(comment)
    if not result.ok:
        return plain_error(result.error.message)
    return ack(f"Comment with id: {comment.id} successfully added")


@router.get(
    "/comments",
    response_model=List[Comment],
    summary="List comments of a post",
    responses={400: {"model": AckResponse}},
    openapi_extra={
        "parameters": [
            {
                "name": "postId",
                "in": "query",
                "required": True,
                "description": "Id of the post; the first value wins when repeated",
                "schema": {"type": "string"},
            }
        ]
    },
)
async def list_comments(
    request: Request,
    comments: CommentRepository = Depends(get_comment_repository),
) -> Response:
    """Return the comments of a post in the order they were added.

    An empty list is returned when the post has no comments.
    """
    values = request.query_params.getlist("postId")
    post_id = values[0] if values else None
    if not post_id:
        return request_error(RequestError.MISSING_QUERY_PARAM, "postId")

    parsed_id = parse_uint64(post_id)
    if parsed_id is None:
        logger.warning("Invalid postId query parameter %r", post_id)
        return request_error(RequestError.INVALID_ID_FORMAT, post_id)

    return entities(comments.get_all_by_post_id(parsed_id))
