"""Unit tests for JWTService."""

from datetime import datetime, timedelta
from uuid import uuid4

import jwt
import pytest

from forum.config import AuthSettings
from forum.domain.service import JWTService
from forum.util.jwt import JWTError


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(auth_settings=AuthSettings(jwt_secret="test-secret"))


class TestViewerFromToken:
    """Tests for get_viewer_from_token."""

    def test_valid_token(self, jwt_service):
        user_id = uuid4()
        token = jwt_service.create_token(str(user_id), roles=["admin"])

        viewer = jwt_service.get_viewer_from_token(token)

        assert viewer.user_id == user_id
        assert viewer.roles == frozenset({"admin"})

    def test_missing_token_is_anonymous(self, jwt_service):
        viewer = jwt_service.get_viewer_from_token(None)

        assert viewer.user_id is None
        assert viewer.roles == frozenset()

    def test_garbage_token_is_anonymous(self, jwt_service):
        assert jwt_service.get_viewer_from_token("not.a.jwt").user_id is None

    def test_token_signed_with_other_secret_is_anonymous(self, jwt_service):
        other = JWTService(auth_settings=AuthSettings(jwt_secret="other-secret"))
        token = other.create_token(str(uuid4()))

        assert jwt_service.get_viewer_from_token(token).user_id is None

    def test_expired_token_is_anonymous(self, jwt_service):
        token = jwt.encode(
            {
                "user_id": str(uuid4()),
                "roles": [],
                "exp": datetime.now() - timedelta(days=1),
            },
            "test-secret",
            algorithm="HS256",
        )

        assert jwt_service.get_viewer_from_token(token).user_id is None

    def test_token_without_user_uuid_is_anonymous(self, jwt_service):
        token = jwt_service.create_token("not-a-uuid")

        assert jwt_service.get_viewer_from_token(token).user_id is None


class TestVerifyToken:
    """Tests for verify_token."""

    def test_invalid_token_raises(self, jwt_service):
        with pytest.raises(JWTError):
            jwt_service.verify_token("not.a.jwt")
