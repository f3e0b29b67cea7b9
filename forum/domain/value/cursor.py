"""Opaque pagination cursor.

A cursor scopes a resume position to one sibling list: ``parent_id`` names
the list (``None`` is the discussion root) and ``after_id`` the last comment
already delivered from it under the encoded ordering.

Wire format is URL-safe base64 of a JSON object with camelCase keys, e.g.
``{"v": 1, "orderBy": "HOT", "orderDirection": "DESC", "parentId": null,
"afterId": "..."}``.
"""

import base64
import binascii
from typing import Literal, Optional

import logfire
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from forum.domain.value.common import ValueObject
from forum.domain.value.identifiers import CommentId
from forum.domain.value.types import CommentOrder, OrderDirection

CURSOR_VERSION = 1


class Cursor(ValueObject):
    """Resume position inside one sibling list."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    v: Literal[1] = CURSOR_VERSION
    order_by: CommentOrder
    order_direction: OrderDirection
    parent_id: Optional[CommentId] = None
    after_id: CommentId

    def encode(self) -> str:
        """Serialize the cursor into an opaque token."""
        payload = self.model_dump_json(by_alias=True)
        return base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii")

    @classmethod
    def decode(cls, token: str | None) -> Optional["Cursor"]:
        """Parse a token produced by :meth:`encode`.

        Never raises: anything that is not a well-formed cursor of the
        current version is reported and treated as no cursor at all.

        Args:
            token: Opaque cursor string from the client

        Returns:
            The cursor, or None if the token is missing or malformed
        """
        if not token:
            return None

        try:
            raw = base64.urlsafe_b64decode(token.encode("ascii"))
            return cls.model_validate_json(raw)
        except (binascii.Error, UnicodeError, ValueError) as e:
            # pydantic.ValidationError is a ValueError
            logfire.warn("Ignoring malformed cursor", error=str(e))
            return None
