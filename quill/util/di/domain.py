"""Domain layer DI providers."""

from dishka import Scope, provide

from quill.config import AuthSettings
from quill.domain.repository import (
    CommentRepository,
    JournalRepository,
    UserRepository,
)
from quill.domain.service import (
    AuthService,
    CommentService,
    CommentTreeService,
    JournalService,
    JWTService,
    UserService,
)
from quill.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, auth_settings=auth_settings
        )

    @provide
    def get_auth_service(
        self, jwt_service: JWTService, user_service: UserService
    ) -> AuthService:
        """Provide bearer-token authentication service."""
        return AuthService(jwt_service=jwt_service, user_service=user_service)

    @provide
    def get_journal_service(
        self,
        journal_repository: JournalRepository,
        comment_repository: CommentRepository,
    ) -> JournalService:
        """Provide journal domain service."""
        return JournalService(
            journal_repository=journal_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        journal_service: JournalService,
    ) -> CommentService:
        """Provide comment lifecycle service."""
        return CommentService(
            comment_repository=comment_repository,
            journal_service=journal_service,
        )

    @provide
    def get_comment_tree_service(
        self,
        comment_repository: CommentRepository,
        journal_service: JournalService,
    ) -> CommentTreeService:
        """Provide comment tree read service."""
        return CommentTreeService(
            comment_repository=comment_repository,
            journal_service=journal_service,
        )
