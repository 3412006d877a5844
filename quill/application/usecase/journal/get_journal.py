"""Get journal use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.application.usecase.common import JournalItem
from quill.domain.service import JournalService, UserService
from quill.domain.value import parse_journal_id, parse_user_id


class GetJournalRequest(BaseModel):
    """Get journal request."""

    journal_id: str  # UUID string
    author_id: str  # User ID from authenticated user


class GetJournalUseCase(BaseUseCase[GetJournalRequest, JournalItem]):
    """Use case for reading one of the caller's journals."""

    def __init__(
        self,
        journal_service: JournalService,
        user_service: UserService,
    ) -> None:
        self.journal_service = journal_service
        self.user_service = user_service

    async def execute(self, request: GetJournalRequest) -> JournalItem:
        """Execute get journal flow.

        Raises:
            InvalidIdError: If the journal ID is malformed
            NotFoundError: If the journal doesn't exist or belongs to someone else
        """
        journal_id = parse_journal_id(request.journal_id)
        author_id = parse_user_id(request.author_id)

        journal = await self.journal_service.get_owned_journal(journal_id, author_id)
        author = await self.user_service.get_user_by_id(author_id)
        return JournalItem.from_journal(journal, author)
