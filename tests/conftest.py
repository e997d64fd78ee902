from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from blog_api.app.main import create_app
from blog_api.app.repositories import CommentRepository, PostRepository
from blog_api.app.schemas import Comment, Post

TEST_DATE = datetime(2018, 9, 16, 12, 0, 0, tzinfo=timezone.utc)


def make_post(id, title="title", content="content", creation_date=TEST_DATE):
    return Post(id=id, title=title, content=content, creation_date=creation_date)


def make_comment(id, post_id, comment="comment", author="author", creation_date=TEST_DATE):
    return Comment(id=id, post_id=post_id, comment=comment, author=author, creation_date=creation_date)


@pytest.fixture
def post_repository():
    """Fresh, empty post store per test."""
    return PostRepository()


@pytest.fixture
def comment_repository():
    return CommentRepository()


@pytest.fixture
def client(post_repository, comment_repository):
    app = create_app(post_repository=post_repository, comment_repository=comment_repository)
    with TestClient(app) as test_client:
        yield test_client
