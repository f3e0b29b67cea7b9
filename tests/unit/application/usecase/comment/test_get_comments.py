"""Unit tests for GetCommentsUseCase."""

from uuid import uuid4

import pytest

from forum.application.usecase.comment import GetCommentsRequest, GetCommentsUseCase
from forum.config import CommentSettings
from forum.domain.error import NotFoundError
from forum.domain.model import Vote
from forum.domain.service import JWTService
from forum.domain.value import CommentOrder, Cursor, OrderDirection
from forum.persistence.repository.inmemory import InMemoryStore
from tests.conftest import cid, make_comment, make_discussion, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_returns_nested_response(self, unit_env):
        """Response mirrors the tree with string IDs and nested connections."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        store = await unit_env.get(InMemoryStore)
        user = store.add_user(make_user("Ada", "Lovelace"))
        discussion = store.add_discussion(make_discussion())
        for n, parent in [(1, None), (2, 1), (3, None)]:
            store.add_comment(
                make_comment(
                    n, parent=parent, discussion_id=discussion.id, user_id=user.id
                )
            )

        # Act
        response = await use_case.execute(
            GetCommentsRequest(
                discussion_id=str(discussion.id),
                order_by=CommentOrder.DATE,
                order_direction=OrderDirection.ASC,
            )
        )

        # Assert
        assert response.total_count == 3
        assert [c.id for c in response.nodes] == [str(cid(1)), str(cid(3))]
        reply = response.nodes[0].comments.nodes[0]
        assert reply.id == str(cid(2))
        assert reply.parent_id == str(cid(1))
        assert reply.parent_ids == [str(cid(1))]
        assert reply.display_author.name == "Ada Lovelace"
        assert reply.author is None

    @pytest.mark.asyncio
    async def test_applies_default_ordering(self, unit_env):
        """Without an ordering the configured default (hot, descending) applies."""
        use_case = await unit_env.get(GetCommentsUseCase)
        settings = await unit_env.get(CommentSettings)
        store = await unit_env.get(InMemoryStore)
        discussion = store.add_discussion(make_discussion())
        for n, hotness in [(1, 0.1), (2, 5.0), (3, 1.0)]:
            store.add_comment(
                make_comment(n, discussion_id=discussion.id, hotness=hotness)
            )

        response = await use_case.execute(
            GetCommentsRequest(discussion_id=str(discussion.id), first=1)
        )

        assert settings.default_order_by == CommentOrder.HOT
        assert [c.id for c in response.nodes] == [str(cid(2))]
        cursor = Cursor.decode(response.page_info.end_cursor)
        assert cursor is not None
        assert cursor.order_by == CommentOrder.HOT
        assert cursor.order_direction == OrderDirection.DESC

    @pytest.mark.asyncio
    async def test_first_is_capped(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)
        settings = await unit_env.get(CommentSettings)
        store = await unit_env.get(InMemoryStore)
        discussion = store.add_discussion(make_discussion())
        for n in range(1, settings.max_first + 3):
            store.add_comment(make_comment(n, discussion_id=discussion.id))

        response = await use_case.execute(
            GetCommentsRequest(
                discussion_id=str(discussion.id), first=settings.max_first + 100
            )
        )

        assert len(response.nodes) == settings.max_first
        assert response.page_info.has_next_page is True

    @pytest.mark.asyncio
    async def test_first_zero_returns_no_comments(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)
        store = await unit_env.get(InMemoryStore)
        discussion = store.add_discussion(make_discussion())
        store.add_comment(make_comment(1, discussion_id=discussion.id))

        response = await use_case.execute(
            GetCommentsRequest(discussion_id=str(discussion.id), first=0)
        )

        assert response.nodes == []
        assert response.total_count == 1
        assert response.page_info.has_next_page is True

    @pytest.mark.asyncio
    async def test_authenticated_viewer_sees_vote(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        jwt_service = await unit_env.get(JWTService)
        store = await unit_env.get(InMemoryStore)
        viewer = make_user()
        discussion = store.add_discussion(make_discussion())
        store.add_comment(
            make_comment(
                1,
                discussion_id=discussion.id,
                votes=(Vote(user_id=viewer.id, vote=1),),
            )
        )
        store.add_comment(
            make_comment(2, discussion_id=discussion.id, user_id=viewer.id)
        )
        token = jwt_service.create_token(str(viewer.id))

        # Act
        response = await use_case.execute(
            GetCommentsRequest(
                discussion_id=str(discussion.id),
                order_by=CommentOrder.DATE,
                order_direction=OrderDirection.ASC,
                auth_token=token,
            )
        )

        # Assert
        assert response.nodes[0].user_vote == "UP"
        assert response.nodes[0].user_can_edit is False
        assert response.nodes[1].user_can_edit is True

    @pytest.mark.asyncio
    async def test_invalid_token_is_anonymous(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)
        store = await unit_env.get(InMemoryStore)
        discussion = store.add_discussion(make_discussion())
        store.add_comment(make_comment(1, discussion_id=discussion.id))

        response = await use_case.execute(
            GetCommentsRequest(discussion_id=str(discussion.id), auth_token="nope")
        )

        assert response.nodes[0].user_vote is None
        assert response.nodes[0].user_can_edit is False

    @pytest.mark.asyncio
    async def test_editor_sees_real_author(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)
        jwt_service = await unit_env.get(JWTService)
        store = await unit_env.get(InMemoryStore)
        author = store.add_user(make_user("Alan", "Turing"))
        discussion = store.add_discussion(make_discussion())
        store.add_comment(
            make_comment(1, discussion_id=discussion.id, user_id=author.id)
        )
        token = jwt_service.create_token(str(uuid4()), roles=["editor"])

        response = await use_case.execute(
            GetCommentsRequest(discussion_id=str(discussion.id), auth_token=token)
        )

        assert response.nodes[0].author is not None
        assert response.nodes[0].author.id == str(author.id)
        assert response.nodes[0].author.name == "Alan Turing"

    @pytest.mark.asyncio
    async def test_unknown_discussion(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentsRequest(discussion_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_malformed_ids(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)
        store = await unit_env.get(InMemoryStore)
        discussion = store.add_discussion(make_discussion())

        with pytest.raises(ValueError):
            await use_case.execute(GetCommentsRequest(discussion_id="not-a-uuid"))
        with pytest.raises(ValueError):
            await use_case.execute(
                GetCommentsRequest(
                    discussion_id=str(discussion.id), focus_id="not-a-uuid"
                )
            )
