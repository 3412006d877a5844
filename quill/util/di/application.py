"""Application layer DI providers."""

from dishka import Scope, provide

from quill.application.usecase.auth import (
    ChangePasswordUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from quill.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    GetJournalCommentsUseCase,
    GetUserCommentsUseCase,
    UpdateCommentUseCase,
)
from quill.application.usecase.journal import (
    CreateJournalUseCase,
    DeleteJournalUseCase,
    GetJournalUseCase,
    ListJournalsUseCase,
    UpdateJournalUseCase,
)
from quill.application.usecase.user import GetUserProfileUseCase
from quill.config import CommentSettings
from quill.domain.service import (
    AuthService,
    CommentService,
    CommentTreeService,
    JournalService,
    UserService,
)
from quill.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self, user_service: UserService, auth_service: AuthService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service, auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, auth_service: AuthService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_change_password_use_case(
        self, user_service: UserService
    ) -> ChangePasswordUseCase:
        """Provide change password use case."""
        return ChangePasswordUseCase(user_service=user_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    # Journal use cases
    @provide(scope=Scope.REQUEST)
    def get_create_journal_use_case(
        self, journal_service: JournalService, user_service: UserService
    ) -> CreateJournalUseCase:
        """Provide create journal use case."""
        return CreateJournalUseCase(
            journal_service=journal_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_journals_use_case(
        self, journal_service: JournalService, user_service: UserService
    ) -> ListJournalsUseCase:
        """Provide list journals use case."""
        return ListJournalsUseCase(
            journal_service=journal_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_journal_use_case(
        self, journal_service: JournalService, user_service: UserService
    ) -> GetJournalUseCase:
        """Provide get journal use case."""
        return GetJournalUseCase(
            journal_service=journal_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_journal_use_case(
        self, journal_service: JournalService, user_service: UserService
    ) -> UpdateJournalUseCase:
        """Provide update journal use case."""
        return UpdateJournalUseCase(
            journal_service=journal_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_journal_use_case(
        self, journal_service: JournalService
    ) -> DeleteJournalUseCase:
        """Provide delete journal use case."""
        return DeleteJournalUseCase(journal_service=journal_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_journal_comments_use_case(
        self,
        comment_tree_service: CommentTreeService,
        user_service: UserService,
        comment_settings: CommentSettings,
    ) -> GetJournalCommentsUseCase:
        """Provide journal comment tree use case."""
        return GetJournalCommentsUseCase(
            comment_tree_service=comment_tree_service,
            user_service=user_service,
            comment_settings=comment_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_comment_use_case(
        self,
        comment_tree_service: CommentTreeService,
        user_service: UserService,
        journal_service: JournalService,
    ) -> GetCommentUseCase:
        """Provide single comment use case."""
        return GetCommentUseCase(
            comment_tree_service=comment_tree_service,
            user_service=user_service,
            journal_service=journal_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_user_comments_use_case(
        self,
        comment_tree_service: CommentTreeService,
        user_service: UserService,
        journal_service: JournalService,
        comment_settings: CommentSettings,
    ) -> GetUserCommentsUseCase:
        """Provide "my comments" use case."""
        return GetUserCommentsUseCase(
            comment_tree_service=comment_tree_service,
            user_service=user_service,
            journal_service=journal_service,
            comment_settings=comment_settings,
        )
