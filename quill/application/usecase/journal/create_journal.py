"""Create journal use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.application.usecase.common import JournalItem
from quill.domain.service import JournalService, UserService
from quill.domain.value import parse_user_id


class CreateJournalRequest(BaseModel):
    """Create journal request."""

    author_id: str  # User ID from authenticated user
    title: str | None = None
    content: str | None = None


class CreateJournalUseCase(BaseUseCase[CreateJournalRequest, JournalItem]):
    """Use case for writing a new journal entry."""

    def __init__(
        self,
        journal_service: JournalService,
        user_service: UserService,
    ) -> None:
        self.journal_service = journal_service
        self.user_service = user_service

    async def execute(self, request: CreateJournalRequest) -> JournalItem:
        """Execute create journal flow.

        Raises:
            ValidationError: If title or content is missing
        """
        author_id = parse_user_id(request.author_id)
        journal = await self.journal_service.create_journal(
            author_id=author_id,
            title=request.title,
            content=request.content,
        )
        author = await self.user_service.get_user_by_id(author_id)
        return JournalItem.from_journal(journal, author)
