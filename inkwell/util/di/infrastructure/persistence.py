"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from inkwell.config import Settings
from inkwell.domain.repository import (
    CommentLikeRepository,
    CommentReportRepository,
    CommentRepository,
    CommenterStatsRepository,
    NotificationRepository,
    PostRepository,
    UserRepository,
)
from inkwell.domain.service import AfterCommitHooks
from inkwell.persistence.database import (
    create_engine,
    create_session_factory,
    transaction,
)
from inkwell.persistence.repository import (
    PostgresCommentLikeRepository,
    PostgresCommentReportRepository,
    PostgresCommentRepository,
    PostgresCommenterStatsRepository,
    PostgresNotificationRepository,
    PostgresPostRepository,
    PostgresUserRepository,
)
from inkwell.util.di.base import ProviderBase
from inkwell.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    def get_after_commit_hooks(self) -> AfterCommitHooks:
        """Provide the request's after-commit hooks."""
        return AfterCommitHooks()

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        after_commit: AfterCommitHooks,
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        A comment write and its ledger update therefore land together or
        not at all.

        Cache invalidations registered during the request run after the
        commit.
        """
        async with transaction(session_factory, after_commit) as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_like_repository(
        self, session: AsyncSession
    ) -> CommentLikeRepository:
        """Provide CommentLike repository."""
        return PostgresCommentLikeRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_commenter_stats_repository(
        self, session: AsyncSession
    ) -> CommenterStatsRepository:
        """Provide commenter ledger repository."""
        return PostgresCommenterStatsRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_report_repository(
        self, session: AsyncSession
    ) -> CommentReportRepository:
        """Provide CommentReport repository."""
        return PostgresCommentReportRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, session: AsyncSession
    ) -> NotificationRepository:
        """Provide Notification repository."""
        return PostgresNotificationRepository(session)
