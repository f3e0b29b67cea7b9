"""Unit tests for row mappers."""

from datetime import datetime
from uuid import uuid4

from forum.domain.value import Anonymity
from forum.persistence.mappers import (
    row_to_comment,
    row_to_discussion,
    row_to_discussion_preference,
)


class TestRowToComment:
    """Tests for row_to_comment."""

    def test_maps_votes_and_string_ids(self):
        # Arrange
        comment_id, voter_id = uuid4(), uuid4()
        now = datetime.now()
        row = {
            "id": str(comment_id),
            "discussion_id": uuid4(),
            "parent_id": None,
            "user_id": uuid4(),
            "content": "Hello",
            "published": True,
            "admin_unpublished": False,
            "up_votes": 2,
            "down_votes": 1,
            "hotness": 1.5,
            "votes": [{"user_id": str(voter_id), "vote": -1}],
            "created_at": now,
            "updated_at": now,
        }

        # Act
        comment = row_to_comment(row)

        # Assert
        assert comment.id == comment_id
        assert comment.parent_id is None
        assert comment.score == 1
        assert len(comment.votes) == 1
        assert comment.votes[0].user_id == voter_id
        assert comment.votes[0].vote == -1

    def test_null_votes_column(self):
        now = datetime.now()
        parent_id = uuid4()
        row = {
            "id": uuid4(),
            "discussion_id": uuid4(),
            "parent_id": parent_id,
            "user_id": uuid4(),
            "content": "Reply",
            "published": False,
            "admin_unpublished": False,
            "up_votes": 0,
            "down_votes": 0,
            "hotness": 0.0,
            "votes": None,
            "created_at": now,
            "updated_at": now,
        }

        comment = row_to_comment(row)

        assert comment.parent_id == parent_id
        assert comment.votes == ()
        assert comment.is_visible is False


class TestOtherMappers:
    """Tests for discussion and preference mappers."""

    def test_discussion_anonymity(self):
        row = {
            "id": uuid4(),
            "title": "Paper",
            "document_path": None,
            "closed": False,
            "anonymity": "ENFORCED",
        }

        assert row_to_discussion(row).anonymity == Anonymity.ENFORCED

    def test_preference_without_credential(self):
        row = {
            "user_id": uuid4(),
            "discussion_id": uuid4(),
            "anonymous": None,
            "credential_id": None,
        }

        preference = row_to_discussion_preference(row)

        assert preference.anonymous is None
        assert preference.credential_id is None
