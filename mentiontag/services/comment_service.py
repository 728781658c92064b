"""In-memory store for posted comments."""

import logging
from typing import List

from ..config import CommentsConfig
from ..models import Comment
from .directory_service import DirectoryService

logger = logging.getLogger(__name__)


class CommentService:
    """Append-only comment sink."""

    def __init__(self):
        self._comments: List[Comment] = []

    @classmethod
    def from_config(cls, config: CommentsConfig, directory: DirectoryService) -> "CommentService":
        """Create a store pre-loaded with the configured seed comments."""
        service = cls()
        for seed in config.seed:
            tags = {}
            for user_id in seed.tagged_user_ids:
                user = directory.get_user(user_id)
                if user is not None:
                    tags[user_id] = user
            service._comments.append(Comment(author_id=seed.author_id, text=seed.text, tags=tags))
        return service

    def post(self, comment: Comment) -> None:
        """Append a submitted comment."""
        self._comments.append(comment)
        logger.info(
            "Posted comment from author %d with %d tag(s)", comment.author_id, len(comment.tags)
        )

    def list_comments(self) -> List[Comment]:
        """Get all comments, oldest first."""
        return list(self._comments)

    def __len__(self) -> int:
        return len(self._comments)
