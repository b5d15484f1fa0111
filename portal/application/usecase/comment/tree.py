"""Response shapes for comment trees."""

from pydantic import BaseModel

from portal.domain.service import CommentTreeNode


class CommentAuthor(BaseModel):
    """Comment author as shown to readers."""

    name: str


class CommentNodeResponse(BaseModel):
    """Comment tree node for API response.

    Recursive structure mirroring the domain tree.
    """

    id: int
    content: str
    date: str
    author: CommentAuthor
    replies: list["CommentNodeResponse"]

    @classmethod
    def from_domain(cls, node: CommentTreeNode) -> "CommentNodeResponse":
        """Convert a domain CommentTreeNode to its response model.

        Args:
            node: Domain comment tree node

        Returns:
            API response model with replies recursively converted
        """
        return cls(
            id=node.id,
            content=node.content,
            date=node.date,
            author=CommentAuthor(name=node.author_name),
            replies=[cls.from_domain(reply) for reply in node.replies],
        )
