"""Domain layer DI providers."""

from dishka import Scope, provide

from specdit.config import AuthSettings
from specdit.domain.repository import (
    CommentRepository,
    PostRepository,
    SubredditRepository,
    SubscriptionRepository,
    UserRepository,
    VoteRepository,
)
from specdit.domain.service import (
    CommentService,
    JWTService,
    PostService,
    SubredditService,
    SubscriptionService,
    UserService,
    VoteService,
)
from specdit.util.di.base import ProviderBase


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
    def get_subreddit_service(
        self, subreddit_repository: SubredditRepository
    ) -> SubredditService:
        """Provide subreddit domain service."""
        return SubredditService(subreddit_repository=subreddit_repository)

    @provide
    def get_subscription_service(
        self,
        subscription_repository: SubscriptionRepository,
        subreddit_service: SubredditService,
    ) -> SubscriptionService:
        """Provide subscription domain service."""
        return SubscriptionService(
            subscription_repository=subscription_repository,
            subreddit_service=subreddit_service,
        )

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        comment_service: CommentService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            post_service=post_service,
            comment_service=comment_service,
        )
