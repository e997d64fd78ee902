"""
Post endpoints for API v1.

``POST /api/posts`` stores a post with a caller-supplied id and
``GET /api/posts/{id}`` returns it.  Request bodies are read raw and
validated here so malformed input maps to the exact responses clients
expect rather than FastAPI's generic 422.

A duplicate post id is answered with a plain-text 500 carrying the
repository error; comments answer a duplicate with a 400 envelope.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError

from blog_api.app.api.v1.dependencies import get_post_repository
from blog_api.app.api.v1.responses import (
    RequestError,
    ack,
    entity,
    json_body_schema,
    plain_error,
    request_error,
)
from blog_api.app.repositories import ErrorKind, PostRepository
from blog_api.app.schemas import AckResponse, Post
from blog_api.app.schemas.common import parse_uint64

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/posts",
    response_model=AckResponse,
    summary="Create a post",
    openapi_extra=json_body_schema(Post),
    responses={
        400: {"description": "Body is not a valid post", "content": {"text/plain": {}}},
        500: {"description": "A post with this id already exists", "content": {"text/plain": {}}},
    },
)
async def create_post(
    request: Request,
    posts: PostRepository = Depends(get_post_repository),
) -> Response:
    """Store a new post.

    Fields missing from the body keep their unset value; only the body
    shape and field types are checked.
    """
    body = await request.body()
    try:
        post = Post.model_validate_json(body)
    except ValidationError as e:
        logger.warning("Rejected post payload with %d error(s)", e.error_count())
        return plain_error("400 Bad Request", status.HTTP_400_BAD_REQUEST)

    result = posts.insert(post)
    if not result.ok:
        return plain_error(result.error.message)
    return ack(f"Post with id: {post.id} successfully added")


@router.get(
    "/posts/{post_id}",
    response_model=Post,
    summary="Get a post by id",
    responses={400: {"model": AckResponse}, 404: {"model": AckResponse}},
)
async def get_post(
    post_id: str,
    request: Request,
    posts: PostRepository = Depends(get_post_repository),
) -> Response:
    """Return the post with the given id.

    Answers 400 when the id is not an unsigned integer and 404 when no
    such post exists, both with the message envelope.
    """
    parsed_id = parse_uint64(post_id)
    if parsed_id is None:
        logger.warning("Invalid post id in path %s", request.url.path)
        return request_error(RequestError.INVALID_ID_FORMAT, request.url.path)

    result = posts.get_by_id(parsed_id)
    if result.error is not None:
        if result.error.kind is ErrorKind.NOT_FOUND:
            return ack(result.error.message, status.HTTP_404_NOT_FOUND)
        return plain_error(result.error.message)
    return entity(result.value)
