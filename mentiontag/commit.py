"""Splicing a selected user into the draft."""

import logging
from dataclasses import replace

from .models import Draft, QueryState, User

logger = logging.getLogger(__name__)


def commit(draft: Draft, query_state: QueryState, user: User) -> Draft:
    """
    Replace the typed "@" and partial query with the user's full mention.

    Args:
        draft: Current draft. It is not modified.
        query_state: State of the search being completed.
        user: The selected candidate.

    Returns:
        A new draft whose text ends with "@<name>" and whose tags include the user.
    """
    trigger_index = min(max(query_state.trigger_index, 0), len(draft.text))
    text = draft.text[:trigger_index] + "@" + user.name

    tags = dict(draft.tags)
    tags[user.user_id] = user

    logger.debug("Committed %s at index %d", user, trigger_index)
    return replace(draft, text=text, tags=tags)
