"""Mock persistence providers for testing."""

from dishka import Scope, provide

from forum.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    PostTagRepository,
    UserRepository,
)
from forum.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryLikeRepository,
    InMemoryPostRepository,
    InMemoryPostTagRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from forum.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Without a store, each request scope gets a fresh one, which isolates
    tests. Passing a store shares it across requests, which end-to-end
    tests need.
    """

    __is_mock__ = True

    def __init__(self, store: InMemoryStore | None = None) -> None:
        super().__init__()
        self._store = store

    @provide(scope=Scope.REQUEST)
    def get_store(self) -> InMemoryStore:
        """Provide the in-memory tables."""
        return self._store if self._store is not None else InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, store: InMemoryStore) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_like_repository(self, store: InMemoryStore) -> LikeRepository:
        """Provide in-memory like repository."""
        return InMemoryLikeRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_post_tag_repository(self, store: InMemoryStore) -> PostTagRepository:
        """Provide in-memory post tag repository."""
        return InMemoryPostTagRepository(store)
