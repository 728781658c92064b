"""Live @mention tagging for free-form comment text."""

from .commit import commit
from .matching import find_candidates, normalize
from .models import CaretPlacement, Comment, Draft, QueryState, RenderDirective, TaggedUsers, User
from .renderer import render
from .session import (
    BufferRenderTarget,
    CandidateSelected,
    CharacterInserted,
    EditingSession,
    EnterPressed,
    TextDeleted,
)
from .trigger import TriggerAction, handle_character_inserted, handle_text_deleted
from .validator import validate

__all__ = [
    "BufferRenderTarget",
    "CandidateSelected",
    "CaretPlacement",
    "CharacterInserted",
    "Comment",
    "Draft",
    "EditingSession",
    "EnterPressed",
    "QueryState",
    "RenderDirective",
    "TaggedUsers",
    "TextDeleted",
    "TriggerAction",
    "User",
    "commit",
    "find_candidates",
    "handle_character_inserted",
    "handle_text_deleted",
    "normalize",
    "render",
    "validate",
]
