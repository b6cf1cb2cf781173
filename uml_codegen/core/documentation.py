"""
Transfer of model comments into documentation comment nodes.
"""

import re
from typing import Iterable, List, Optional

from .model import Comment
from .tree import Javadoc

_LINE_BREAK = re.compile(r"\r?\n")


def split_comment_body(body: Optional[str]) -> List[str]:
    """Split a comment body into lines, dropping trailing empty lines."""
    if not body:
        return []
    lines = _LINE_BREAK.split(body)
    while lines and not lines[-1]:
        lines.pop()
    return lines


class DocumentationTransfer:
    """
    Builds a ``Javadoc`` node from the comments of a model element.

    With the default ``line`` style every line of a comment body becomes
    one tag. The ``block`` style joins each comment into a single tag.
    All comments of an element accumulate into the same node.
    """

    def __init__(self, style: str = "line", enabled: bool = True):
        if style not in ("line", "block"):
            raise ValueError(f"Unknown documentation style: {style}")
        self.style = style
        self.enabled = enabled

    def to_javadoc(self, comments: Iterable[Comment]) -> Optional[Javadoc]:
        """Return None when the element carries no comment at all."""
        comments = list(comments or [])
        if not self.enabled or not comments:
            return None

        javadoc = Javadoc()
        for comment in comments:
            javadoc.tags.extend(self._tags_for(comment))
        return javadoc

    def _tags_for(self, comment: Comment) -> List[str]:
        lines = split_comment_body(comment.body)
        if self.style == "line":
            return lines

        paragraph = " ".join(line.strip() for line in lines if line.strip())
        return [paragraph] if paragraph else []
