"""Comment routes.

Journal-scoped routes (`/journals/{journal_id}/comments`) create and list
comment threads; `/comments/{comment_id}` reads, edits and deletes a
single comment.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from quill.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentUseCase,
    GetJournalCommentsRequest,
    GetJournalCommentsResponse,
    GetJournalCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from quill.application.usecase.common import ApiModel
from quill.domain.service import AuthService
from quill.interface.api.security import BearerCredentials, current_user

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(ApiModel):
    """API request for creating a comment.

    Content is validated by the domain so that blank content gets the
    same message whichever way it is sent.
    """

    content: str | None = None
    parent_comment_id: str | None = None  # Set for replies


class UpdateCommentAPIRequest(ApiModel):
    """API request for editing a comment."""

    content: str | None = None


@router.post(
    "/journals/{journal_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    journal_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    auth_service: FromDishka[AuthService],
    credentials: BearerCredentials,
) -> CreateCommentResponse:
    """Comment on a journal, or reply to a top-level comment.

    Requires authentication.
    """
    user = await current_user(auth_service, credentials)
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            journal_id=journal_id,
            author_id=str(user.id),
            content=request.content,
            parent_comment_id=request.parent_comment_id,
        )
    )


@router.get(
    "/journals/{journal_id}/comments",
    response_model=GetJournalCommentsResponse,
)
async def get_journal_comments(
    journal_id: str,
    get_journal_comments_use_case: FromDishka[GetJournalCommentsUseCase],
    page: str | None = None,
    limit: str | None = None,
) -> GetJournalCommentsResponse:
    """Get one page of a journal's comment threads.

    Public. Pagination covers top-level comments (newest first); each carries
    all of its replies (oldest first). Unparseable page/limit values fall
    back to the defaults.
    """
    return await get_journal_comments_use_case.execute(
        GetJournalCommentsRequest(journal_id=journal_id, page=page, limit=limit)
    )


@router.get("/comments/{comment_id}", response_model=GetCommentResponse)
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> GetCommentResponse:
    """Get a comment, with its replies when it is top-level. Public."""
    return await get_comment_use_case.execute(GetCommentRequest(comment_id=comment_id))


@router.put("/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    auth_service: FromDishka[AuthService],
    credentials: BearerCredentials,
) -> UpdateCommentResponse:
    """Edit a comment. Only its author may do so."""
    user = await current_user(auth_service, credentials)
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id,
            user_id=str(user.id),
            content=request.content,
        )
    )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    auth_service: FromDishka[AuthService],
    credentials: BearerCredentials,
) -> DeleteCommentResponse:
    """Delete a comment and its replies. Only its author may do so."""
    user = await current_user(auth_service, credentials)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, user_id=str(user.id))
    )
