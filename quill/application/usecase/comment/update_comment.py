"""Update comment use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.application.usecase.common import ApiModel, CommentItem, to_comment_item
from quill.domain.service import CommentService, UserService
from quill.domain.value import parse_comment_id, parse_user_id


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str | None = None


class UpdateCommentResponse(ApiModel):
    """Update comment response."""

    message: str
    comment: CommentItem


class UpdateCommentUseCase(BaseUseCase[UpdateCommentRequest, UpdateCommentResponse]):
    """Use case for editing one's own comment."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            ValidationError: If the new content is empty
            InvalidIdError: If the comment ID is malformed
            NotFoundOrForbiddenError: If the comment doesn't exist or belongs
                to someone else
        """
        comment_id = parse_comment_id(request.comment_id)
        user_id = parse_user_id(request.user_id)

        comment = await self.comment_service.update_comment(
            principal_id=user_id,
            comment_id=comment_id,
            content=request.content,
        )

        authors = await self.user_service.get_users_by_ids([comment.author_id])
        return UpdateCommentResponse(
            message="Comment updated successfully",
            comment=to_comment_item(comment, authors),
        )
