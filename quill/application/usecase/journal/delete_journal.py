"""Delete journal use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.application.usecase.common import ApiModel
from quill.domain.service import JournalService
from quill.domain.value import parse_journal_id, parse_user_id


class DeleteJournalRequest(BaseModel):
    """Delete journal request."""

    journal_id: str  # UUID string
    author_id: str  # User ID from authenticated user


class DeleteJournalResponse(ApiModel):
    """Delete journal response."""

    message: str
    comments_deleted: int


class DeleteJournalUseCase(BaseUseCase[DeleteJournalRequest, DeleteJournalResponse]):
    """Use case for deleting one of the caller's journals and its comments."""

    def __init__(self, journal_service: JournalService) -> None:
        self.journal_service = journal_service

    async def execute(self, request: DeleteJournalRequest) -> DeleteJournalResponse:
        """Execute delete journal flow.

        Raises:
            InvalidIdError: If the journal ID is malformed
            NotFoundError: If the journal doesn't exist or belongs to someone else
        """
        journal_id = parse_journal_id(request.journal_id)
        author_id = parse_user_id(request.author_id)

        comments_deleted = await self.journal_service.delete_journal(
            journal_id, author_id
        )
        return DeleteJournalResponse(
            message="Journal deleted successfully",
            comments_deleted=comments_deleted,
        )
