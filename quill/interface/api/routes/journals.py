"""Journal routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from quill.application.usecase.common import ApiModel, JournalItem
from quill.application.usecase.journal import (
    CreateJournalRequest,
    CreateJournalUseCase,
    DeleteJournalRequest,
    DeleteJournalResponse,
    DeleteJournalUseCase,
    GetJournalRequest,
    GetJournalUseCase,
    ListJournalsRequest,
    ListJournalsResponse,
    ListJournalsUseCase,
    UpdateJournalRequest,
    UpdateJournalUseCase,
)
from quill.domain.service import AuthService
from quill.interface.api.security import BearerCredentials, current_user

router = APIRouter(prefix="/journals", tags=["journals"], route_class=DishkaRoute)


class JournalAPIRequest(ApiModel):
    """API request for creating or updating a journal."""

    title: str | None = None
    content: str | None = None


@router.post(
    "",
    response_model=JournalItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_journal(
    request: JournalAPIRequest,
    create_journal_use_case: FromDishka[CreateJournalUseCase],
    auth_service: FromDishka[AuthService],
    credentials: BearerCredentials,
) -> JournalItem:
    """Create a journal entry owned by the authenticated user."""
    user = await current_user(auth_service, credentials)
    return await create_journal_use_case.execute(
        CreateJournalRequest(
            author_id=str(user.id),
            title=request.title,
            content=request.content,
        )
    )


@router.get("", response_model=ListJournalsResponse)
async def list_journals(
    list_journals_use_case: FromDishka[ListJournalsUseCase],
    auth_service: FromDishka[AuthService],
    credentials: BearerCredentials,
) -> ListJournalsResponse:
    """List the authenticated user's journals, newest first."""
    user = await current_user(auth_service, credentials)
    return await list_journals_use_case.execute(
        ListJournalsRequest(author_id=str(user.id))
    )


@router.get("/{journal_id}", response_model=JournalItem)
async def get_journal(
    journal_id: str,
    get_journal_use_case: FromDishka[GetJournalUseCase],
    auth_service: FromDishka[AuthService],
    credentials: BearerCredentials,
) -> JournalItem:
    """Get one of the authenticated user's journals.

    Journals of other users are reported as not found.
    """
    user = await current_user(auth_service, credentials)
    return await get_journal_use_case.execute(
        GetJournalRequest(journal_id=journal_id, author_id=str(user.id))
    )


@router.put("/{journal_id}", response_model=JournalItem)
async def update_journal(
    journal_id: str,
    request: JournalAPIRequest,
    update_journal_use_case: FromDishka[UpdateJournalUseCase],
    auth_service: FromDishka[AuthService],
    credentials: BearerCredentials,
) -> JournalItem:
    """Update the title and/or content of an owned journal."""
    user = await current_user(auth_service, credentials)
    return await update_journal_use_case.execute(
        UpdateJournalRequest(
            journal_id=journal_id,
            author_id=str(user.id),
            title=request.title,
            content=request.content,
        )
    )


@router.delete("/{journal_id}", response_model=DeleteJournalResponse)
async def delete_journal(
    journal_id: str,
    delete_journal_use_case: FromDishka[DeleteJournalUseCase],
    auth_service: FromDishka[AuthService],
    credentials: BearerCredentials,
) -> DeleteJournalResponse:
    """Delete an owned journal together with all of its comments."""
    user = await current_user(auth_service, credentials)
    return await delete_journal_use_case.execute(
        DeleteJournalRequest(journal_id=journal_id, author_id=str(user.id))
    )
