"""
Tests for the post and comment schemas.
"""
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from blog_api.app.schemas import Comment, Post
from blog_api.app.schemas.common import UNSET_TIMESTAMP

from conftest import make_comment, make_post

PLUS_0105 = timezone(timedelta(hours=1, minutes=5))


class TestRoundTrip:

    def test_post_round_trip(self):
        post = make_post(34, title="test title", creation_date=datetime(1970, 1, 1, 3, 46, 40, tzinfo=PLUS_0105))

        assert Post.model_validate_json(post.model_dump_json(by_alias=True)) == post

    @pytest.mark.parametrize(
        "creation_date",
        [
            datetime(2018, 9, 16, 12, 0, 0, tzinfo=timezone.utc),
            datetime(1970, 1, 1, 3, 46, 40, tzinfo=PLUS_0105),
            datetime(2024, 2, 29, 23, 59, 59, 500000, tzinfo=timezone(timedelta(hours=-7))),
        ],
    )
    def test_comment_round_trip(self, creation_date):
        comment = make_comment(1, 101, comment="comment1", author="author5", creation_date=creation_date)

        encoded = comment.model_dump_json(by_alias=True)

        assert Comment.model_validate_json(encoded) == comment

    def test_comment_keeps_offset_on_the_wire(self):
        comment = make_comment(1, 101, creation_date=datetime(1970, 1, 1, 3, 46, 40, tzinfo=PLUS_0105))

        dumped = comment.model_dump(mode="json", by_alias=True)

        assert dumped["CreationDate"] == "1970-01-01T03:46:40+01:05"
        assert set(dumped) == {"Id", "PostId", "Comment", "Author", "CreationDate"}


class TestUnsetFields:

    def test_complete_comment(self):
        assert make_comment(1, 2).unset_fields() == []

    def test_empty_payload_is_all_unset(self):
        comment = Comment.model_validate_json(b"{}")

        assert comment.unset_fields() == ["Id", "PostId", "Comment", "Author", "CreationDate"]
        assert comment.creation_date == UNSET_TIMESTAMP

    def test_null_field_is_rejected(self):
        with pytest.raises(ValidationError):
            Post.model_validate_json(b'{"Id": 5, "Title": null}')
