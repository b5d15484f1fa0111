"""Reply tree assembly for article comments."""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional

from portal.domain.model import Comment
from portal.domain.value import CommentId

# Shown for comments whose stored author name is empty
ANONYMOUS_READER_NAME = "Leitor"

COMMENT_DATE_FORMAT = "%d/%m/%Y %H:%M"


@dataclass
class CommentTreeNode:
    """Node in an article's comment tree.

    Represents a comment and its replies, oldest reply first.
    """

    id: CommentId
    content: str
    date: str
    author_name: str
    created_at: datetime
    replies: list["CommentTreeNode"] = field(default_factory=list)

    def count(self) -> int:
        """Number of comments in this subtree, itself included."""
        return 1 + sum(reply.count() for reply in self.replies)


def _sort_key(comment: Comment) -> tuple[datetime, int]:
    return comment.created_at, comment.id or 0


def build_comment_tree(comments: Iterable[Comment]) -> list[CommentTreeNode]:
    """Build the reply forest for one article.

    Algorithm:
    1. Index comments by parent in one pass (roots under None)
    2. Sort each sibling list by creation time (ID as tiebreaker)
    3. Walk the index top-down from the roots

    Comments whose parent is not in the input (e.g. the parent is no longer
    approved) are never reached from a root and so are left out of the tree.

    Args:
        comments: Approved comments of a single article

    Returns:
        Root nodes ordered by creation time, replies attached recursively
    """
    children: dict[Optional[CommentId], list[Comment]] = defaultdict(list)
    for comment in comments:
        children[comment.parent_id or None].append(comment)

    for siblings in children.values():
        siblings.sort(key=_sort_key)

    seen: set[CommentId] = set()

    def build_subtree(comment: Comment) -> CommentTreeNode:
        """Build tree recursively from a comment node."""
        seen.add(comment.id)
        replies = [
            build_subtree(child)
            for child in children.get(comment.id, [])
            if child.id not in seen
        ]
        return CommentTreeNode(
            id=comment.id,
            content=comment.content,
            date=comment.created_at.strftime(COMMENT_DATE_FORMAT),
            author_name=comment.author_name or ANONYMOUS_READER_NAME,
            created_at=comment.created_at,
            replies=replies,
        )

    return [build_subtree(root) for root in children.get(None, [])]
