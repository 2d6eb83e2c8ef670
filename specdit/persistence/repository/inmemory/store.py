"""Shared in-memory tables for the in-memory repositories.

One store stands in for one database: repositories built on the same store
see each other's rows, and deletes cascade the way the foreign keys in
``specdit.persistence.tables`` do.
"""

import itertools
from typing import Iterator

from specdit.domain.model import Comment, Post, Subreddit, Subscription, User, Vote


class InMemoryStore:
    """Rows keyed by ID plus one ID sequence per table."""

    def __init__(self) -> None:
        self.users: dict[int, User] = {}
        self.subreddits: dict[int, Subreddit] = {}
        self.subscriptions: dict[int, Subscription] = {}
        self.posts: dict[int, Post] = {}
        self.comments: dict[int, Comment] = {}
        self.votes: dict[int, Vote] = {}
        self._sequences: dict[str, Iterator[int]] = {}

    def next_id(self, table: str) -> int:
        """Next identity value for a table, starting at 1."""
        sequence = self._sequences.setdefault(table, itertools.count(1))
        return next(sequence)

    def cascade_delete_subreddit(self, subreddit_id: int) -> None:
        """Delete a subreddit with its subscriptions, posts and comments."""
        self.subreddits.pop(subreddit_id, None)
        for key, subscription in list(self.subscriptions.items()):
            if subscription.subreddit_id == subreddit_id:
                del self.subscriptions[key]
        for post_id, post in list(self.posts.items()):
            if post.subreddit_id == subreddit_id:
                self.cascade_delete_post(post_id)

    def cascade_delete_post(self, post_id: int) -> None:
        """Delete a post with its comments."""
        self.posts.pop(post_id, None)
        for comment_id, comment in list(self.comments.items()):
            if comment.post_id == post_id:
                self.comments.pop(comment_id, None)

    def cascade_delete_comment(self, comment_id: int) -> None:
        """Delete a comment with every reply below it."""
        self.comments.pop(comment_id, None)
        for reply_id, reply in list(self.comments.items()):
            if reply.reply_to_id == comment_id:
                self.cascade_delete_comment(reply_id)
