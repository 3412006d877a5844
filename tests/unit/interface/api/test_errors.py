"""Unit tests for the domain error to HTTP status mapping."""

import json

import pytest
from starlette.requests import Request

from quill.domain.error import (
    ConflictError,
    InvalidCredentialsError,
    InvalidIdError,
    NotFoundError,
    NotFoundOrForbiddenError,
    StoreError,
    UnauthenticatedError,
    ValidationError,
)
from quill.interface.api.errors import (
    domain_error_handler,
    unhandled_exception_handler,
)


def _request() -> Request:
    return Request({"type": "http", "method": "GET", "path": "/x", "headers": []})


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "status_code", "message"),
    [
        (ValidationError("Title and content required"), 400, "Title and content required"),
        (InvalidIdError("comment", "nope"), 400, "Invalid comment ID"),
        (UnauthenticatedError(), 401, "User not authenticated"),
        (InvalidCredentialsError(), 401, "Invalid email or password"),
        (NotFoundError("Journal", "abc"), 404, "Journal not found"),
        (
            NotFoundOrForbiddenError("Comment", "edit"),
            404,
            "Comment not found or you don't have permission to edit it",
        ),
        (ConflictError("Email is already registered"), 409, "Email is already registered"),
        (StoreError("connection reset"), 500, "Server error"),
    ],
)
async def test_domain_error_mapping(error, status_code, message):
    response = await domain_error_handler(_request(), error)

    assert response.status_code == status_code
    assert json.loads(response.body) == {"message": message}


@pytest.mark.asyncio
async def test_unhandled_exception_hides_details():
    response = await unhandled_exception_handler(_request(), RuntimeError("secret"))

    assert response.status_code == 500
    assert json.loads(response.body) == {"message": "Server error"}
