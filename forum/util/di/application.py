"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RefreshTokenUseCase,
    RegisterUseCase,
)
from forum.application.usecase.comment import CreateCommentUseCase, GetCommentsUseCase
from forum.application.usecase.like import (
    ListLikesUseCase,
    ToggleLikeUseCase,
    UnlikeUseCase,
)
from forum.application.usecase.moderation import (
    GetHistoryUseCase,
    ListTaggedPostsUseCase,
    TagPostUseCase,
    UntagPostUseCase,
)
from forum.application.usecase.post import (
    CreatePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
)
from forum.application.usecase.user import GetUserPostsUseCase, GetUserProfileUseCase
from forum.domain.service import (
    AuthService,
    CommentService,
    LikeService,
    ModerationService,
    PostService,
    UserService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(self, auth_service: AuthService) -> RegisterUseCase:
        return RegisterUseCase(auth_service=auth_service)

    @provide
    def get_login_use_case(self, auth_service: AuthService) -> LoginUseCase:
        return LoginUseCase(auth_service=auth_service)

    @provide
    def get_refresh_token_use_case(
        self, auth_service: AuthService
    ) -> RefreshTokenUseCase:
        return RefreshTokenUseCase(auth_service=auth_service)

    @provide
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(user_service=user_service)

    # Post use cases
    @provide
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        return CreatePostUseCase(post_service=post_service)

    @provide
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        return GetPostUseCase(post_service=post_service)

    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        return ListPostsUseCase(post_service=post_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        return GetCommentsUseCase(comment_service=comment_service)

    # Like use cases
    @provide
    def get_toggle_like_use_case(self, like_service: LikeService) -> ToggleLikeUseCase:
        return ToggleLikeUseCase(like_service=like_service)

    @provide
    def get_unlike_use_case(self, like_service: LikeService) -> UnlikeUseCase:
        return UnlikeUseCase(like_service=like_service)

    @provide
    def get_list_likes_use_case(
        self, like_service: LikeService, user_service: UserService
    ) -> ListLikesUseCase:
        return ListLikesUseCase(like_service=like_service, user_service=user_service)

    # Moderation use cases
    @provide
    def get_tag_post_use_case(
        self, moderation_service: ModerationService
    ) -> TagPostUseCase:
        return TagPostUseCase(moderation_service=moderation_service)

    @provide
    def get_untag_post_use_case(
        self, moderation_service: ModerationService
    ) -> UntagPostUseCase:
        return UntagPostUseCase(moderation_service=moderation_service)

    @provide
    def get_list_tagged_posts_use_case(
        self, moderation_service: ModerationService
    ) -> ListTaggedPostsUseCase:
        return ListTaggedPostsUseCase(moderation_service=moderation_service)

    @provide
    def get_history_use_case(
        self, moderation_service: ModerationService, user_service: UserService
    ) -> GetHistoryUseCase:
        return GetHistoryUseCase(
            moderation_service=moderation_service, user_service=user_service
        )

    # User use cases
    @provide
    def get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        return GetUserProfileUseCase(user_service=user_service)

    @provide
    def get_user_posts_use_case(self, user_service: UserService) -> GetUserPostsUseCase:
        return GetUserPostsUseCase(user_service=user_service)
