"""Get user comments use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.application.usecase.common import (
    ApiModel,
    CommentItem,
    PaginationItem,
    to_comment_item,
)
from quill.config import CommentSettings
from quill.domain.service import CommentTreeService, JournalService, UserService
from quill.domain.value import PageWindow, parse_user_id


class GetUserCommentsRequest(BaseModel):
    """Get user comments request."""

    user_id: str  # Current user ID
    page: str | None = None
    limit: str | None = None


class GetUserCommentsResponse(ApiModel):
    """One page of a user's comments, each with its journal summary."""

    comments: list[CommentItem]
    pagination: PaginationItem


class GetUserCommentsUseCase(
    BaseUseCase[GetUserCommentsRequest, GetUserCommentsResponse]
):
    """Use case for the "my comments" page."""

    def __init__(
        self,
        comment_tree_service: CommentTreeService,
        user_service: UserService,
        journal_service: JournalService,
        comment_settings: CommentSettings,
    ) -> None:
        self.comment_tree_service = comment_tree_service
        self.user_service = user_service
        self.journal_service = journal_service
        self.comment_settings = comment_settings

    async def execute(self, request: GetUserCommentsRequest) -> GetUserCommentsResponse:
        """Execute get user comments flow.

        Lists top-level comments and replies alike, newest first. Journal
        titles are resolved in one batch; a comment whose journal is gone
        carries a null journal summary.
        """
        user_id = parse_user_id(request.user_id)
        window = PageWindow.from_query(
            request.page,
            request.limit,
            default_page_size=self.comment_settings.default_page_size,
        )

        comments, pagination = await self.comment_tree_service.list_comments_by_author(
            user_id, window
        )
        authors = await self.user_service.get_users_by_ids([user_id])
        journals = await self.journal_service.get_journals_by_ids(
            list(dict.fromkeys(comment.journal_id for comment in comments))
        )

        return GetUserCommentsResponse(
            comments=[
                to_comment_item(comment, authors, journals) for comment in comments
            ],
            pagination=PaginationItem.from_pagination(pagination),
        )
