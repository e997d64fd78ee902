"""
Top-level router for version 1 of the API.

Aggregates the domain routers.  When new domains are introduced,
include their routers here.
"""

from fastapi import APIRouter

from .endpoints import comments, posts

router = APIRouter()

router.include_router(posts.router, tags=["posts"])
router.include_router(comments.router, tags=["comments"])
