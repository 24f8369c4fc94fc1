"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import AuthSettings, PaginationSettings
from forum.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    PostTagRepository,
    UserRepository,
)
from forum.domain.service import (
    AuthService,
    CommentService,
    LikeService,
    ModerationService,
    PostService,
    SecurityService,
    UserService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services are REQUEST-scoped to share the request's repositories and
    transaction. SecurityService holds no state and lives for the app.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_security_service(self, auth_settings: AuthSettings) -> SecurityService:
        """Provide hashing and token primitives."""
        return SecurityService(auth_settings=auth_settings)

    @provide
    def get_auth_service(
        self, user_repository: UserRepository, security_service: SecurityService
    ) -> AuthService:
        """Provide auth domain service."""
        return AuthService(
            user_repository=user_repository, security_service=security_service
        )

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        pagination: PaginationSettings,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            post_repository=post_repository,
            pagination=pagination,
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        pagination: PaginationSettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            user_repository=user_repository,
            pagination=pagination,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
        pagination: PaginationSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            user_repository=user_repository,
            pagination=pagination,
        )

    @provide
    def get_like_service(
        self, like_repository: LikeRepository, post_repository: PostRepository
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository, post_repository=post_repository
        )

    @provide
    def get_moderation_service(
        self,
        post_tag_repository: PostTagRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
        pagination: PaginationSettings,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            post_tag_repository=post_tag_repository,
            post_repository=post_repository,
            user_repository=user_repository,
            pagination=pagination,
        )
