"""Tests for the error taxonomy."""

import pytest

from chirp.shared.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BadRequestError,
    ChirpException,
    ConflictError,
    DuplicateResourceError,
    FollowNotFoundError,
    InternalServerError,
    NotFoundError,
    PostNotFoundError,
)


@pytest.mark.parametrize(
    "exc, status_code, error_code",
    [
        (BadRequestError(), 400, "BAD_REQUEST"),
        (AuthenticationError(), 401, "AUTHENTICATION_ERROR"),
        (AuthorizationError(), 403, "AUTHORIZATION_ERROR"),
        (PostNotFoundError(), 404, "NOT_FOUND"),
        (DuplicateResourceError(), 409, "CONFLICT"),
        (InternalServerError(), 500, "INTERNAL_ERROR"),
    ],
)
def test_status_and_code(exc, status_code, error_code):
    assert isinstance(exc, ChirpException)
    assert exc.status_code == status_code
    assert exc.error_code == error_code


def test_not_found_message_includes_id():
    assert NotFoundError("Post", "abc").message == "Post with id 'abc' not found"
    assert NotFoundError("Post").message == "Post not found"
    assert FollowNotFoundError().message == "Follow relationship not found"


def test_to_dict_shape():
    exc = BadRequestError("You cannot follow yourself", details={"field": "user_id"})
    assert exc.to_dict() == {
        "error": {
            "code": "BAD_REQUEST",
            "message": "You cannot follow yourself",
            "details": {"field": "user_id"},
        }
    }


def test_duplicate_is_conflict():
    assert isinstance(DuplicateResourceError(), ConflictError)
