"""Get journal comments use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.application.usecase.common import (
    ApiModel,
    CommentThreadItem,
    PaginationItem,
    thread_author_ids,
    to_thread_item,
)
from quill.config import CommentSettings
from quill.domain.service import CommentTreeService, UserService
from quill.domain.value import PageWindow, parse_journal_id


class GetJournalCommentsRequest(BaseModel):
    """Get journal comments request.

    Page and limit are passed through raw so that garbage input falls
    back to the defaults instead of failing.
    """

    journal_id: str  # UUID string
    page: str | None = None
    limit: str | None = None


class GetJournalCommentsResponse(ApiModel):
    """One page of comment threads."""

    comments: list[CommentThreadItem]
    pagination: PaginationItem


class GetJournalCommentsUseCase(
    BaseUseCase[GetJournalCommentsRequest, GetJournalCommentsResponse]
):
    """Use case for reading the comment tree of a journal, one page at a time."""

    def __init__(
        self,
        comment_tree_service: CommentTreeService,
        user_service: UserService,
        comment_settings: CommentSettings,
    ) -> None:
        self.comment_tree_service = comment_tree_service
        self.user_service = user_service
        self.comment_settings = comment_settings

    async def execute(
        self, request: GetJournalCommentsRequest
    ) -> GetJournalCommentsResponse:
        """Execute get journal comments flow.

        Top-level comments are newest first; replies under each are oldest
        first. Authors of every listed comment are resolved in one batch.

        Raises:
            InvalidIdError: If the journal ID is malformed
            NotFoundError: If the journal doesn't exist
        """
        journal_id = parse_journal_id(request.journal_id)
        window = PageWindow.from_query(
            request.page,
            request.limit,
            default_page_size=self.comment_settings.default_page_size,
        )

        page = await self.comment_tree_service.list_journal_comments(
            journal_id, window
        )
        authors = await self.user_service.get_users_by_ids(
            thread_author_ids(page.threads)
        )

        return GetJournalCommentsResponse(
            comments=[to_thread_item(thread, authors) for thread in page.threads],
            pagination=PaginationItem.from_pagination(page.pagination),
        )
