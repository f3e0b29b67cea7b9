"""Viewer-specific presentation of comment trees."""

from dataclasses import dataclass, replace
from typing import Iterable, Optional

import logfire

from forum.config import CommentSettings
from forum.domain.model import (
    Comment,
    CommentConnection,
    CommentNode,
    CommentView,
    Credential,
    Discussion,
    DiscussionPreference,
    DisplayAuthor,
    PageInfo,
    PublicUser,
    Viewer,
)
from forum.domain.repository import (
    CredentialRepository,
    DiscussionPreferenceRepository,
    UserRepository,
)
from forum.domain.value import (
    Anonymity,
    CommentId,
    CommentVote,
    CredentialId,
    UserId,
)

from .base import Service
from .comment_tree import iter_tree

_VOTES = {1: CommentVote.UP, -1: CommentVote.DOWN}


def _find(root: CommentNode, comment_id: CommentId) -> Optional[CommentNode]:
    return next((n for n in iter_tree(root) if n.id == comment_id), None)


@dataclass(frozen=True)
class ReferenceData:
    """Everything needed to present the authors of a set of comments."""

    users: dict[UserId, PublicUser]
    preferences: dict[UserId, DiscussionPreference]
    credentials: dict[CredentialId, Credential]


class CommentDecorator(Service):
    """Turns a windowed comment tree into what one viewer gets to see.

    Reference data is loaded in batches for all covered comments up front,
    so the number of queries does not grow with the size of the tree.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        discussion_preference_repository: DiscussionPreferenceRepository,
        credential_repository: CredentialRepository,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment decorator.

        Args:
            user_repository: Public user lookups
            discussion_preference_repository: Commenter preference lookups
            credential_repository: Credential lookups
            comment_settings: Placeholder texts and elevated roles
        """
        self.user_repository = user_repository
        self.discussion_preference_repository = discussion_preference_repository
        self.credential_repository = credential_repository
        self.settings = comment_settings

    async def load_reference_data(
        self, comments: Iterable[Comment], discussion: Discussion
    ) -> ReferenceData:
        """Batch-load users, preferences and credentials for the commenters.

        The reads run one after another since they share the request's
        database session.
        """
        user_ids = list(dict.fromkeys(c.user_id for c in comments))
        if not user_ids:
            return ReferenceData(users={}, preferences={}, credentials={})

        with logfire.span(
            "comment_decorator.load_reference_data",
            discussion_id=str(discussion.id),
            user_count=len(user_ids),
        ):
            users = {u.id: u for u in await self.user_repository.find_by_ids(user_ids)}
            preferences = {
                p.user_id: p
                for p in await self.discussion_preference_repository.find_for_users(
                    user_ids, discussion.id
                )
            }
            credential_ids = list(
                dict.fromkeys(
                    p.credential_id
                    for p in preferences.values()
                    if p.credential_id is not None
                )
            )
            credentials = (
                {
                    c.id: c
                    for c in await self.credential_repository.find_by_ids(
                        credential_ids
                    )
                }
                if credential_ids
                else {}
            )

            missing_users = [str(uid) for uid in user_ids if uid not in users]
            if missing_users:
                logfire.warn(
                    "Commenters missing from users",
                    discussion_id=str(discussion.id),
                    user_ids=missing_users,
                )
            without_preference = sum(1 for uid in user_ids if uid not in preferences)
            if without_preference:
                logfire.info(
                    "Commenters without discussion preference",
                    discussion_id=str(discussion.id),
                    count=without_preference,
                )

            return ReferenceData(
                users=users, preferences=preferences, credentials=credentials
            )

    async def decorate(
        self,
        root: CommentNode,
        covered: Iterable[CommentNode],
        discussion: Discussion,
        viewer: Viewer,
        focus_id: Optional[CommentId] = None,
        measured: Optional[CommentNode] = None,
    ) -> CommentConnection:
        """Render a windowed tree for a viewer.

        Args:
            root: Pruned and cut tree
            covered: Every node assembled for this request, before pruning
            discussion: Discussion the comments belong to
            viewer: Requesting user
            focus_id: Focused comment to expose on the root connection
            measured: Measured tree before pruning and cutting, used to show
                a focus the depth cut removed. Defaults to ``root``.

        Returns:
            Connection of the root's children, recursively decorated

        Raises:
            ValueError: If a node below the root carries no comment
        """
        covered = list(covered)
        reference = await self.load_reference_data(
            (n.comment for n in covered if n.comment is not None), discussion
        )
        show_real_user = viewer.has_any_role(set(self.settings.author_visible_roles))

        def view(node: CommentNode) -> CommentView:
            comment = node.comment
            if comment is None:
                raise ValueError("Only comment nodes can be decorated")
            return CommentView(
                comment=comment,
                content=(
                    comment.content
                    if comment.is_visible
                    else self.settings.removed_placeholder
                ),
                depth=node.depth,
                parent_ids=node.parent_ids,
                display_author=self.display_author(comment, discussion, reference),
                author=reference.users.get(comment.user_id) if show_real_user else None,
                user_vote=self.user_vote(comment, viewer),
                user_can_edit=(
                    viewer.user_id is not None and comment.user_id == viewer.user_id
                ),
                comments=connection(node),
            )

        def connection(node: CommentNode) -> CommentConnection:
            return CommentConnection(
                total_count=node.total_count,
                direct_total_count=node.direct_total_count,
                page_info=node.page_info,
                nodes=tuple(view(child) for child in node.children),
            )

        result = connection(root)

        if focus_id is not None:
            focus = _find(root, focus_id)
            if focus is None:
                # Cut away; keep its counts and point at its replies
                focus = _find(measured or root, focus_id)
                if focus is not None:
                    focus = replace(
                        focus,
                        children=(),
                        page_info=PageInfo(has_next_page=focus.total_count > 0),
                    )
            if focus is not None and focus.comment is not None:
                result = replace(result, focus=view(focus))

        return result

    def display_author(
        self, comment: Comment, discussion: Discussion, reference: ReferenceData
    ) -> DisplayAuthor:
        """Identity of the commenter as shown to everyone."""
        user = reference.users.get(comment.user_id)
        preference = reference.preferences.get(comment.user_id)

        if discussion.anonymity == Anonymity.ENFORCED:
            anonymous = True
        elif preference is not None and preference.anonymous is not None:
            anonymous = preference.anonymous
        else:
            anonymous = False

        credential = (
            reference.credentials.get(preference.credential_id)
            if preference is not None and preference.credential_id is not None
            else None
        )

        if anonymous or user is None:
            return DisplayAuthor(
                name=self.settings.anonymous_display_name,
                anonymity=anonymous,
                credential=credential,
            )
        return DisplayAuthor(
            name=user.name,
            anonymity=False,
            profile_picture=user.avatar_url,
            credential=credential,
        )

    @staticmethod
    def user_vote(comment: Comment, viewer: Viewer) -> Optional[CommentVote]:
        """Vote the viewer cast on the comment, if any."""
        if viewer.user_id is None:
            return None
        vote = next((v for v in comment.votes if v.user_id == viewer.user_id), None)
        return _VOTES.get(vote.vote) if vote else None
