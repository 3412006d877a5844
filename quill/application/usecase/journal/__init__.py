"""Journal use cases."""

from .create_journal import CreateJournalRequest, CreateJournalUseCase
from .delete_journal import (
    DeleteJournalRequest,
    DeleteJournalResponse,
    DeleteJournalUseCase,
)
from .get_journal import GetJournalRequest, GetJournalUseCase
from .list_journals import ListJournalsRequest, ListJournalsResponse, ListJournalsUseCase
from .update_journal import UpdateJournalRequest, UpdateJournalUseCase

__all__ = [
    "CreateJournalRequest",
    "CreateJournalUseCase",
    "DeleteJournalRequest",
    "DeleteJournalResponse",
    "DeleteJournalUseCase",
    "GetJournalRequest",
    "GetJournalUseCase",
    "ListJournalsRequest",
    "ListJournalsResponse",
    "ListJournalsUseCase",
    "UpdateJournalRequest",
    "UpdateJournalUseCase",
]
