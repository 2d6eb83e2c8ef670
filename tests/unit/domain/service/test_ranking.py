"""Unit tests for comment tree ranking."""

from datetime import datetime, timedelta

from specdit.domain.model import Comment
from specdit.domain.service import rank_comment_tree
from specdit.domain.value import CommentId, PostId, Tally, UserId

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


def make_comment(comment_id: int, reply_to_id: int | None = None) -> Comment:
    return Comment(
        id=CommentId(comment_id),
        post_id=PostId(1),
        author_id=UserId(1),
        text=f"comment {comment_id}",
        reply_to_id=CommentId(reply_to_id) if reply_to_id else None,
        created_at=BASE_TIME + timedelta(minutes=comment_id),
    )


def tally(score: int) -> Tally:
    if score >= 0:
        return Tally(upvotes=score, downvotes=0)
    return Tally(upvotes=0, downvotes=-score)


class TestRankCommentTree:
    """Tests for rank_comment_tree."""

    def test_ties_keep_fetch_order(self):
        """Scores [5, -1, 5] should rank both 5s first in their original order."""
        comments = [make_comment(1), make_comment(2), make_comment(3)]
        tallies = {1: tally(5), 2: tally(-1), 3: tally(5)}

        tree = rank_comment_tree(comments, tallies)

        assert [node.comment.id for node in tree] == [1, 3, 2]

    def test_unvoted_comments_score_zero(self):
        """Comments without votes rank as score 0."""
        comments = [make_comment(1), make_comment(2), make_comment(3)]
        tallies = {1: tally(-2), 3: tally(1)}

        tree = rank_comment_tree(comments, tallies)

        assert [node.comment.id for node in tree] == [3, 2, 1]
        assert tree[1].votes == Tally()

    def test_replies_ranked_within_parent(self):
        """Replies are sorted by score under their own parent only."""
        comments = [
            make_comment(1),
            make_comment(2),
            make_comment(3, reply_to_id=1),
            make_comment(4, reply_to_id=1),
            make_comment(5, reply_to_id=2),
        ]
        tallies = {1: tally(0), 2: tally(1), 3: tally(1), 4: tally(9), 5: tally(-9)}

        tree = rank_comment_tree(comments, tallies)

        assert [node.comment.id for node in tree] == [2, 1]
        assert [reply.comment.id for reply in tree[0].replies] == [5]
        assert [reply.comment.id for reply in tree[1].replies] == [4, 3]

    def test_replies_to_replies_are_dropped(self):
        """Only two levels are rendered."""
        comments = [
            make_comment(1),
            make_comment(2, reply_to_id=1),
            make_comment(3, reply_to_id=2),
        ]

        tree = rank_comment_tree(comments, {})

        assert len(tree) == 1
        assert [reply.comment.id for reply in tree[0].replies] == [2]
        assert tree[0].replies[0].replies == []

    def test_empty_input(self):
        """No comments gives an empty tree."""
        assert rank_comment_tree([], {}) == []

    def test_node_score_is_tally_score(self):
        """Node score is derived from its tally."""
        tree = rank_comment_tree(
            [make_comment(1)], {1: Tally(upvotes=4, downvotes=1)}
        )

        assert tree[0].score == 3
