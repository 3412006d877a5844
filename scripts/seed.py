#!/usr/bin/env python3
"""Seed the database with demo users, journals and comments.

Wipes existing data first. Creates a regular user and an admin, then
random journals (and optionally comments with replies) spread across them.
"""

import argparse
import asyncio
import random
import sys

import logfire
from faker import Faker
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from quill.config import Settings
from quill.domain.model import User
from quill.domain.service import CommentService, JournalService, UserService
from quill.domain.value import UserRole
from quill.util.di.container import create_container
from quill.util.observability import configure_logfire

SEED_USERS = [
    ("user", "user@gmail.com", "user1234", UserRole.USER),
    ("admin", "admin@gmail.com", "admin1234", UserRole.ADMIN),
]


async def seed(journal_count: int, comment_count: int, seed_value: int | None) -> None:
    """Replace all data with freshly generated demo content."""
    fake = Faker()
    rng = random.Random(seed_value)
    if seed_value is not None:
        Faker.seed(seed_value)

    container = create_container()
    try:
        async with container() as request_container:
            session = await request_container.get(AsyncSession)
            await session.execute(text("TRUNCATE comments, journals, users CASCADE"))
            logfire.info("Old data cleared")

            user_service = await request_container.get(UserService)
            journal_service = await request_container.get(JournalService)
            comment_service = await request_container.get(CommentService)

            users: list[User] = []
            for username, email, password, role in SEED_USERS:
                users.append(
                    await user_service.register(username, email, password, role=role)
                )
            logfire.info("Users seeded", emails=[u.email for u in users])

            journals = []
            for _ in range(journal_count):
                journals.append(
                    await journal_service.create_journal(
                        author_id=rng.choice(users).id,
                        title=fake.sentence(nb_words=5),
                        content="\n\n".join(fake.paragraphs(nb=2)),
                    )
                )
            logfire.info("Journals seeded", count=len(journals))

            top_level = []
            for i in range(comment_count if journals else 0):
                journal = rng.choice(journals)
                # Roughly a third of comments reply to an earlier one on the same journal
                candidates = [c for c in top_level if c.journal_id == journal.id]
                parent = rng.choice(candidates) if candidates and i % 3 == 2 else None
                comment = await comment_service.create_comment(
                    principal_id=rng.choice(users).id,
                    journal_id=journal.id,
                    content=fake.sentence(nb_words=12),
                    parent_id=parent.id if parent else None,
                )
                if parent is None:
                    top_level.append(comment)
            logfire.info("Comments seeded", count=comment_count)
    finally:
        await container.close()


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--journals", type=int, default=20)
    parser.add_argument("--comments", type=int, default=0)
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    configure_logfire(Settings())

    try:
        asyncio.run(seed(args.journals, args.comments, args.seed))
    except Exception as e:
        logfire.error(
            "Seeding failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    logfire.info("Seeding completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
