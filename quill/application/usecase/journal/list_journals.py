"""List journals use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.application.usecase.common import ApiModel, JournalItem
from quill.domain.service import JournalService, UserService
from quill.domain.value import parse_user_id


class ListJournalsRequest(BaseModel):
    """List journals request."""

    author_id: str  # User ID from authenticated user


class ListJournalsResponse(ApiModel):
    """The caller's journals, newest first."""

    count: int
    journals: list[JournalItem]


class ListJournalsUseCase(BaseUseCase[ListJournalsRequest, ListJournalsResponse]):
    """Use case for listing the caller's own journals."""

    def __init__(
        self,
        journal_service: JournalService,
        user_service: UserService,
    ) -> None:
        self.journal_service = journal_service
        self.user_service = user_service

    async def execute(self, request: ListJournalsRequest) -> ListJournalsResponse:
        """Execute list journals flow."""
        author_id = parse_user_id(request.author_id)
        journals = await self.journal_service.list_journals(author_id)
        author = await self.user_service.get_user_by_id(author_id)

        return ListJournalsResponse(
            count=len(journals),
            journals=[JournalItem.from_journal(j, author) for j in journals],
        )
