"""Get single comment use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.application.usecase.common import (
    ApiModel,
    CommentThreadItem,
    thread_author_ids,
    to_thread_item,
)
from quill.domain.service import CommentTreeService, JournalService, UserService
from quill.domain.value import parse_comment_id


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str  # UUID string


class GetCommentResponse(ApiModel):
    """Get comment response."""

    comment: CommentThreadItem


class GetCommentUseCase(BaseUseCase[GetCommentRequest, GetCommentResponse]):
    """Use case for reading one comment, with replies when it is top-level."""

    def __init__(
        self,
        comment_tree_service: CommentTreeService,
        user_service: UserService,
        journal_service: JournalService,
    ) -> None:
        self.comment_tree_service = comment_tree_service
        self.user_service = user_service
        self.journal_service = journal_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        """Execute get comment flow.

        Raises:
            InvalidIdError: If the comment ID is malformed
            NotFoundError: If the comment doesn't exist
        """
        comment_id = parse_comment_id(request.comment_id)
        thread = await self.comment_tree_service.get_comment_thread(comment_id)

        authors = await self.user_service.get_users_by_ids(thread_author_ids([thread]))
        journals = await self.journal_service.get_journals_by_ids(
            [thread.comment.journal_id]
        )
        return GetCommentResponse(comment=to_thread_item(thread, authors, journals))
