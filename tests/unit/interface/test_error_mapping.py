"""Unit tests for domain error to HTTP status mapping."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from inkwell.domain.error import (
    AuthenticationRequiredError,
    CommentsDisabledError,
    ConflictError,
    DomainError,
    InvalidModerationActionError,
    NotAuthorizedError,
    NotFoundError,
    NotLikedError,
    ThreadDepthExceededError,
    ValidationError,
)
from inkwell.domain.value import parse_id
from inkwell.interface.error import setup_error_handlers, status_for


class TestStatusFor:
    """Tests for status_for."""

    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (NotFoundError("Post", "x"), 404),
            (AuthenticationRequiredError(), 401),
            (NotAuthorizedError("nope"), 403),
            (CommentsDisabledError("x"), 403),
            (ConflictError("dup"), 409),
            (ValidationError("bad"), 400),
            (ThreadDepthExceededError(5), 400),
            (InvalidModerationActionError("delete"), 400),
            (NotLikedError(), 400),
            (DomainError("other"), 400),
        ],
    )
    def test_maps_error_to_status(self, error, expected):
        """Each domain error family has its own status."""
        assert status_for(error) == expected

    def test_messages_are_user_facing(self):
        """Error messages read as API messages."""
        assert str(NotFoundError("Comment", "abc")) == "Comment not found"
        assert str(ThreadDepthExceededError(5)) == "Maximum thread depth of 5 levels reached"
        assert str(InvalidModerationActionError("x")) == (
            'Invalid action. Must be "approve" or "hide"'
        )


class TestErrorHandlers:
    """Tests for the registered exception handlers."""

    @pytest.fixture
    def client(self):
        app = FastAPI()
        setup_error_handlers(app)

        class Page(BaseModel):
            number: int

        @app.get("/domain")
        async def domain():
            raise ConflictError("You have already liked this comment")

        @app.get("/identifier")
        async def identifier():
            parse_id("not-a-uuid")

        @app.get("/model")
        async def model():
            Page(number="first")

        return TestClient(app, raise_server_exceptions=False)

    def test_domain_error_body(self, client):
        """Domain errors render their class name and message."""
        response = client.get("/domain")

        assert response.status_code == 409
        assert response.json() == {
            "error": "ConflictError",
            "message": "You have already liked this comment",
        }

    def test_malformed_identifier_is_bad_request(self, client):
        """Identifiers that are not UUIDs become a validation error."""
        response = client.get("/identifier")

        assert response.status_code == 400
        assert response.json()["error"] == "ValidationError"

    def test_model_validation_bug_is_internal_error(self, client):
        """A pydantic error raised inside a handler is not a client mistake."""
        response = client.get("/model")

        assert response.status_code == 500
        assert response.json() == {
            "error": "InternalServerError",
            "message": "Internal server error",
        }
