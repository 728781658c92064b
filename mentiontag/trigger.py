"""Mention trigger detection for text typed one character at a time."""

import logging
from enum import Enum

from .matching import normalize
from .models import QueryState

logger = logging.getLogger(__name__)

TRIGGER = "@"


class TriggerAction(Enum):
    """Outcome of classifying an edit."""

    START_SEARCH = "start_search"
    CONTINUE_QUERY = "continue_query"
    STOP_SEARCH = "stop_search"
    RESET_TO_IDLE = "reset_to_idle"


def _opens_trigger(text: str, index: int) -> bool:
    """True when text[index] is an "@" at the start of the text or after a space."""
    if index < 0 or index >= len(text) or text[index] != TRIGGER:
        return False
    return index == 0 or text[index - 1] == " "


def _query_from(text: str, trigger_index: int) -> str:
    return normalize(text[trigger_index + 1 :])


def _stop(state: QueryState, length: int) -> tuple[QueryState, TriggerAction]:
    action = TriggerAction.STOP_SEARCH if state.searching else TriggerAction.RESET_TO_IDLE
    return QueryState.idle(length - 1), action


def handle_character_inserted(
    current_text: str, inserted_char: str, state: QueryState
) -> tuple[QueryState, TriggerAction]:
    """
    Classify a character insertion and compute the next query state.

    Args:
        current_text: Full text after the character was appended.
        inserted_char: The character just typed (last character of current_text).
        state: Query state before the insertion.

    Returns:
        Tuple of (next state, action taken).

    Examples:
        >>> state, action = handle_character_inserted("Hi @", "@", QueryState())
        >>> action == TriggerAction.START_SEARCH, state.trigger_index
        (True, 3)
        >>> state, action = handle_character_inserted("Hi @J", "J", state)
        >>> state.query
        'j'
    """
    length = len(current_text)
    if length == 0:
        return QueryState.idle(), TriggerAction.RESET_TO_IDLE

    if inserted_char == TRIGGER and _opens_trigger(current_text, length - 1):
        logger.debug("Search started at index %d", length - 1)
        return QueryState(searching=True, query="", trigger_index=length - 1), TriggerAction.START_SEARCH

    if inserted_char.isalpha():
        if _opens_trigger(current_text, length - 2):
            trigger_index = length - 2
        elif state.searching:
            trigger_index = state.trigger_index
        else:
            return _stop(state, length)

        query = _query_from(current_text, trigger_index)
        logger.debug("Query is now %r", query)
        return QueryState(searching=True, query=query, trigger_index=trigger_index), TriggerAction.CONTINUE_QUERY

    if state.searching:
        logger.debug("Search stopped by %r", inserted_char)
    return _stop(state, length)


def handle_text_deleted(current_text: str, state: QueryState) -> tuple[QueryState, TriggerAction]:
    """
    Recompute the query state after characters were removed from the end.

    The search survives as long as its "@" is still in place; the query is
    re-derived from whatever follows it. Backspacing onto an "@" that could
    open a mention starts a new search.
    """
    length = len(current_text)
    if state.searching and _opens_trigger(current_text, state.trigger_index):
        query = _query_from(current_text, state.trigger_index)
        return (
            QueryState(searching=True, query=query, trigger_index=state.trigger_index),
            TriggerAction.CONTINUE_QUERY,
        )

    if _opens_trigger(current_text, length - 1):
        logger.debug("Search reopened at index %d", length - 1)
        return QueryState(searching=True, query="", trigger_index=length - 1), TriggerAction.START_SEARCH

    if not state.searching:
        return QueryState.idle(length - 1), TriggerAction.RESET_TO_IDLE

    logger.debug("Trigger at index %d was deleted", state.trigger_index)
    return QueryState.idle(length - 1), TriggerAction.STOP_SEARCH
