"""Application layer DI providers."""

from dishka import Scope, provide

from specdit.application.usecase.auth import (
    ChangePasswordUseCase,
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from specdit.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    ListVotedCommentsUseCase,
)
from specdit.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListUserPostsUseCase,
    ListVotedPostsUseCase,
    UpdatePostUseCase,
)
from specdit.application.usecase.subreddit import (
    CreateSubredditUseCase,
    DeleteSubredditUseCase,
    GetSubredditUseCase,
    ListSubredditsUseCase,
    UpdateSubredditUseCase,
)
from specdit.application.usecase.subscription import (
    ListSubscriptionsUseCase,
    SubscribeUseCase,
    UnsubscribeUseCase,
)
from specdit.application.usecase.vote import CastVoteUseCase, GetVotesUseCase
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_change_password_use_case(
        self, user_service: UserService
    ) -> ChangePasswordUseCase:
        """Provide change password use case."""
        return ChangePasswordUseCase(user_service=user_service)

    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service, user_service=user_service
        )

    # Subreddit use cases
    @provide
    def get_create_subreddit_use_case(
        self, subreddit_service: SubredditService
    ) -> CreateSubredditUseCase:
        """Provide create subreddit use case."""
        return CreateSubredditUseCase(subreddit_service=subreddit_service)

    @provide
    def get_update_subreddit_use_case(
        self, subreddit_service: SubredditService
    ) -> UpdateSubredditUseCase:
        """Provide update subreddit use case."""
        return UpdateSubredditUseCase(subreddit_service=subreddit_service)

    @provide
    def get_delete_subreddit_use_case(
        self,
        subreddit_service: SubredditService,
        post_service: PostService,
        vote_service: VoteService,
    ) -> DeleteSubredditUseCase:
        """Provide delete subreddit use case."""
        return DeleteSubredditUseCase(
            subreddit_service=subreddit_service,
            post_service=post_service,
            vote_service=vote_service,
        )

    @provide
    def get_list_subreddits_use_case(
        self, subreddit_service: SubredditService
    ) -> ListSubredditsUseCase:
        """Provide list subreddits use case."""
        return ListSubredditsUseCase(subreddit_service=subreddit_service)

    @provide
    def get_get_subreddit_use_case(
        self,
        subreddit_service: SubredditService,
        subscription_service: SubscriptionService,
        user_service: UserService,
    ) -> GetSubredditUseCase:
        """Provide get subreddit use case."""
        return GetSubredditUseCase(
            subreddit_service=subreddit_service,
            subscription_service=subscription_service,
            user_service=user_service,
        )

    # Subscription use cases
    @provide
    def get_subscribe_use_case(
        self, subscription_service: SubscriptionService
    ) -> SubscribeUseCase:
        """Provide subscribe use case."""
        return SubscribeUseCase(subscription_service=subscription_service)

    @provide
    def get_unsubscribe_use_case(
        self, subscription_service: SubscriptionService
    ) -> UnsubscribeUseCase:
        """Provide unsubscribe use case."""
        return UnsubscribeUseCase(subscription_service=subscription_service)

    @provide
    def get_list_subscriptions_use_case(
        self,
        subscription_service: SubscriptionService,
        subreddit_service: SubredditService,
    ) -> ListSubscriptionsUseCase:
        """Provide list subscriptions use case."""
        return ListSubscriptionsUseCase(
            subscription_service=subscription_service,
            subreddit_service=subreddit_service,
        )

    # Post use cases
    @provide
    def get_create_post_use_case(
        self, post_service: PostService, subreddit_service: SubredditService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service, subreddit_service=subreddit_service
        )

    @provide
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(
        self, post_service: PostService, vote_service: VoteService
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service, vote_service=vote_service)

    @provide
    def get_get_post_use_case(
        self,
        post_service: PostService,
        subreddit_service: SubredditService,
        comment_service: CommentService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service,
            subreddit_service=subreddit_service,
            comment_service=comment_service,
            vote_service=vote_service,
            user_service=user_service,
        )

    @provide
    def get_list_user_posts_use_case(
        self,
        post_service: PostService,
        subreddit_service: SubredditService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> ListUserPostsUseCase:
        """Provide list user posts use case."""
        return ListUserPostsUseCase(
            post_service=post_service,
            subreddit_service=subreddit_service,
            vote_service=vote_service,
            user_service=user_service,
        )

    @provide
    def get_list_voted_posts_use_case(
        self, vote_service: VoteService, subreddit_service: SubredditService
    ) -> ListVotedPostsUseCase:
        """Provide list voted posts use case."""
        return ListVotedPostsUseCase(
            vote_service=vote_service, subreddit_service=subreddit_service
        )

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService, vote_service: VoteService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, vote_service=vote_service
        )

    @provide
    def get_get_comments_use_case(
        self,
        post_service: PostService,
        comment_service: CommentService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            post_service=post_service,
            comment_service=comment_service,
            vote_service=vote_service,
            user_service=user_service,
        )

    @provide
    def get_list_voted_comments_use_case(
        self, vote_service: VoteService
    ) -> ListVotedCommentsUseCase:
        """Provide list voted comments use case."""
        return ListVotedCommentsUseCase(vote_service=vote_service)

    # Vote use cases
    @provide
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide
    def get_get_votes_use_case(
        self,
        vote_service: VoteService,
        post_service: PostService,
        comment_service: CommentService,
    ) -> GetVotesUseCase:
        """Provide get votes use case."""
        return GetVotesUseCase(
            vote_service=vote_service,
            post_service=post_service,
            comment_service=comment_service,
        )
