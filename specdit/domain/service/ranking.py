"""Comment tree ranking.

A post's comments are rendered as two levels: top-level comments, each with
a flat list of its direct replies. Both levels are ordered by descending
score. Ties keep the order the comments were fetched in, so the sort must be
stable; Python's sorted() is.
"""

from dataclasses import dataclass, field
from typing import Mapping, Sequence

from specdit.domain.model.comment import Comment
from specdit.domain.value import Tally


@dataclass
class CommentNode:
    """Comment with its live tally and ranked direct replies."""

    comment: Comment
    votes: Tally
    replies: list["CommentNode"] = field(default_factory=list)

    @property
    def score(self) -> int:
        return self.votes.score


def rank_nodes(nodes: Sequence[CommentNode]) -> list[CommentNode]:
    """Sort sibling nodes by descending score, keeping input order on ties."""
    return sorted(nodes, key=lambda node: node.score, reverse=True)


def rank_comment_tree(
    comments: Sequence[Comment],
    tallies: Mapping[int, Tally],
) -> list[CommentNode]:
    """Build the ranked two-level comment tree of a post.

    Replies to replies are dropped. Reply ranking never crosses parents.

    Args:
        comments: Flat comment list in fetch order
        tallies: Tally per comment ID (missing IDs count as no votes)

    Returns:
        Ranked top-level nodes, each with ranked replies
    """
    top_level: list[CommentNode] = []
    by_id: dict[int, CommentNode] = {}

    for comment in comments:
        if comment.is_top_level:
            node = CommentNode(comment=comment, votes=tallies.get(comment.id, Tally()))
            top_level.append(node)
            by_id[comment.id] = node

    for comment in comments:
        if comment.is_top_level:
            continue
        parent = by_id.get(comment.reply_to_id)
        if parent is None:
            # Nested deeper than one level
            continue
        parent.replies.append(
            CommentNode(comment=comment, votes=tallies.get(comment.id, Tally()))
        )

    for node in top_level:
        node.replies = rank_nodes(node.replies)

    return rank_nodes(top_level)
