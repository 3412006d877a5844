"""Comment tree domain service.

Assembles the two-level read view of comments: a page of top-level
comments (newest first), each carrying all of its replies (oldest first).
"""

import logfire

from quill.domain.error import NotFoundError
from quill.domain.model.comment import Comment
from quill.domain.model.thread import CommentPage, CommentThread
from quill.domain.repository import CommentRepository
from quill.domain.value import CommentId, JournalId, PageWindow, Pagination, UserId

from .base import Service
from .journal_service import JournalService


class CommentTreeService(Service):
    """Domain service for reading comment threads."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        journal_service: JournalService,
    ) -> None:
        """Initialize comment tree service.

        Args:
            comment_repository: Comment repository
            journal_service: Journal service, used for existence checks
        """
        self.comment_repository = comment_repository
        self.journal_service = journal_service

    async def list_journal_comments(
        self, journal_id: JournalId, window: PageWindow
    ) -> CommentPage:
        """Get one page of comment threads for a journal.

        Pagination applies to top-level comments only; every reply of a
        listed comment is included and replies do not count toward totals.

        Args:
            journal_id: Journal ID
            window: Page number and page size

        Returns:
            Threads for the requested page with pagination metadata

        Raises:
            NotFoundError: If the journal doesn't exist
        """
        with logfire.span(
            "comment_tree_service.list_journal_comments",
            journal_id=str(journal_id),
            page=window.page,
            page_size=window.page_size,
        ):
            if not await self.journal_service.journal_exists(journal_id):
                logfire.warn("Journal not found for listing", journal_id=str(journal_id))
                raise NotFoundError("Journal", str(journal_id))

            top_level = await self.comment_repository.find_by_journal(
                journal_id=journal_id,
                limit=window.page_size,
                offset=window.offset,
            )

            # Sequential on purpose: one session per request, no concurrent statements
            threads = [await self._with_replies(comment) for comment in top_level]

            total = await self.comment_repository.count_by_journal(journal_id)
            pagination = Pagination.for_window(window, total)

            logfire.info(
                "Comment threads listed",
                journal_id=str(journal_id),
                count=len(threads),
                replies=sum(len(t.replies) for t in threads),
                total=total,
            )
            return CommentPage(threads=threads, pagination=pagination)

    async def get_comment_thread(self, comment_id: CommentId) -> CommentThread:
        """Get a single comment, with its replies when it is top-level.

        Args:
            comment_id: Comment ID

        Returns:
            The comment and its replies (empty for a reply)

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span(
            "comment_tree_service.get_comment_thread", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            if comment.is_reply:
                return CommentThread(comment=comment, replies=[])
            return await self._with_replies(comment)

    async def list_comments_by_author(
        self, author_id: UserId, window: PageWindow
    ) -> tuple[list[Comment], Pagination]:
        """Get one page of an author's comments, newest first.

        Args:
            author_id: Author user ID
            window: Page number and page size

        Returns:
            Comments for the page and pagination metadata
        """
        with logfire.span(
            "comment_tree_service.list_comments_by_author",
            author_id=str(author_id),
            page=window.page,
            page_size=window.page_size,
        ):
            comments = await self.comment_repository.find_by_author(
                author_id=author_id,
                limit=window.page_size,
                offset=window.offset,
            )
            total = await self.comment_repository.count_by_author(author_id)
            logfire.info(
                "Author comments listed",
                author_id=str(author_id),
                count=len(comments),
                total=total,
            )
            return comments, Pagination.for_window(window, total)

    async def _with_replies(self, comment: Comment) -> CommentThread:
        replies = await self.comment_repository.find_replies(comment.id)
        return CommentThread(comment=comment, replies=replies)
