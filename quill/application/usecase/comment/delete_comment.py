"""Delete comment use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.application.usecase.common import ApiModel
from quill.domain.service import CommentService
from quill.domain.value import parse_comment_id, parse_user_id


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteCommentResponse(ApiModel):
    """Delete comment response."""

    message: str
    replies_deleted: int
    cascade_complete: bool


class DeleteCommentUseCase(BaseUseCase[DeleteCommentRequest, DeleteCommentResponse]):
    """Use case for deleting one's own comment together with its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            InvalidIdError: If the comment ID is malformed
            NotFoundOrForbiddenError: If the comment doesn't exist or belongs
                to someone else
            StoreError: If the comment itself could not be deleted
        """
        comment_id = parse_comment_id(request.comment_id)
        user_id = parse_user_id(request.user_id)

        deletion = await self.comment_service.delete_comment(
            principal_id=user_id,
            comment_id=comment_id,
        )

        if deletion.cascade_complete:
            message = "Comment and its replies deleted successfully"
        else:
            message = "Comment deleted, but some replies could not be removed"
        return DeleteCommentResponse(
            message=message,
            replies_deleted=deletion.replies_deleted,
            cascade_complete=deletion.cascade_complete,
        )
