"""Reconciliation of tagged users against the final text."""

import logging

from .models import TaggedUsers, User
from .tokenizer import MENTION_PREFIX, is_word_char

logger = logging.getLogger(__name__)


def is_mentioned(text: str, user: User) -> bool:
    """Check whether text contains "@<name>" (any case) as a whole token."""
    haystack = text.casefold()
    needle = (MENTION_PREFIX + user.name).casefold()
    start = haystack.find(needle)
    while start != -1:
        end = start + len(needle)
        if end >= len(haystack) or not is_word_char(haystack[end]):
            return True
        start = haystack.find(needle, start + 1)
    return False


def validate(text: str, tags: TaggedUsers) -> TaggedUsers:
    """
    Drop tagged users whose mention no longer appears in the text.

    Args:
        text: The final comment text.
        tags: Users committed while editing.

    Returns:
        A new mapping holding only the users still mentioned.
    """
    valid: TaggedUsers = {}
    for user_id, user in tags.items():
        if is_mentioned(text, user):
            valid[user_id] = user
        else:
            logger.debug("Dropping tag for %s, mention was removed", user)
    return valid
