"""Create comment use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.application.usecase.common import ApiModel, CommentItem, to_comment_item
from quill.domain.service import CommentService, UserService
from quill.domain.value import parse_comment_id, parse_journal_id, parse_user_id


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    journal_id: str  # UUID string from the path
    author_id: str  # User ID from authenticated user
    content: str | None = None
    parent_comment_id: str | None = None  # Set for replies


class CreateCommentResponse(ApiModel):
    """Create comment response."""

    message: str
    comment: CommentItem


class CreateCommentUseCase(BaseUseCase[CreateCommentRequest, CreateCommentResponse]):
    """Use case for commenting on a journal or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User service for the author summary
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Parse identifiers (malformed IDs fail before any lookup)
        2. Create the comment (service validates content, journal and parent)
        3. Attach the author summary

        Raises:
            InvalidIdError: If an identifier is malformed
            ValidationError: If content is empty or the parent is invalid
            NotFoundError: If the journal or parent comment doesn't exist
        """
        journal_id = parse_journal_id(request.journal_id)
        author_id = parse_user_id(request.author_id)
        parent_id = (
            parse_comment_id(request.parent_comment_id)
            if request.parent_comment_id
            else None
        )

        comment = await self.comment_service.create_comment(
            principal_id=author_id,
            journal_id=journal_id,
            content=request.content,
            parent_id=parent_id,
        )

        authors = await self.user_service.get_users_by_ids([comment.author_id])
        return CreateCommentResponse(
            message="Comment created successfully",
            comment=to_comment_item(comment, authors),
        )
