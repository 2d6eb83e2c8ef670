"""Strongly typed identifiers for Specdit domain entities.

All identifiers are sequential integers assigned by the database. They never
leave the service as-is: the interface layer encodes them with the id codec.
"""

from typing import NewType

# Core domain entity identifiers
UserId = NewType("UserId", int)
SubredditId = NewType("SubredditId", int)
SubscriptionId = NewType("SubscriptionId", int)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
VoteId = NewType("VoteId", int)
