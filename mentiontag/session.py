"""Editing session: the live draft, its search state and the submit flow."""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Union

from .commit import commit
from .matching import find_candidates
from .models import Comment, Draft, QueryState, RenderDirective, TaggedUsers, User
from .renderer import render
from .services import CommentService, DirectoryService, NotificationService, format_alert
from .trigger import TriggerAction, handle_character_inserted, handle_text_deleted
from .validator import validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CharacterInserted:
    """A character was typed; text is the full text after the insertion."""

    text: str


@dataclass(frozen=True)
class TextDeleted:
    """Characters were removed from the end; text is what remains."""

    text: str


@dataclass(frozen=True)
class CandidateSelected:
    """A user was picked from the candidate list."""

    user: User


@dataclass(frozen=True)
class EnterPressed:
    """Submit the draft."""


InputEvent = Union[CharacterInserted, TextDeleted, CandidateSelected, EnterPressed]


class RenderTarget(Protocol):
    def set_markup(self, directive: RenderDirective) -> None: ...


class BufferRenderTarget:
    """Render target that keeps the most recent directive."""

    def __init__(self) -> None:
        self.last: Optional[RenderDirective] = None
        self.renders = 0

    def set_markup(self, directive: RenderDirective) -> None:
        self.last = directive
        self.renders += 1

    @property
    def markup(self) -> str:
        return str(self.last.markup) if self.last else ""


class EditingSession:
    """Owns the single live draft and drives it from input events."""

    def __init__(
        self,
        directory: DirectoryService,
        comments: CommentService,
        notifier: NotificationService,
        render_target: Optional[RenderTarget] = None,
        author_id: int = 0,
        emphasis_tag: str = "b",
        alert_header: str = "Sending alerts to:",
    ) -> None:
        self.directory = directory
        self.comments = comments
        self.notifier = notifier
        self.render_target = render_target or BufferRenderTarget()
        self.author_id = author_id
        self.emphasis_tag = emphasis_tag
        self.alert_header = alert_header

        self.draft = Draft(author_id=author_id)
        self.query_state = QueryState.idle()
        self.last_action: Optional[TriggerAction] = None

    @property
    def searching(self) -> bool:
        return self.query_state.searching

    @property
    def candidates(self) -> list[User]:
        """Users matching the current query; empty when not searching."""
        if not self.query_state.searching:
            return []
        return find_candidates(self.directory.list_users(), self.query_state.query)

    def handle(self, event: InputEvent) -> Optional[Comment]:
        """
        Apply one input event.

        Returns:
            The posted comment when the event was a submission that posted one.
        """
        if isinstance(event, EnterPressed):
            return self.submit()
        if isinstance(event, CharacterInserted):
            self.insert(event.text)
        elif isinstance(event, TextDeleted):
            self.delete(event.text)
        elif isinstance(event, CandidateSelected):
            self.select(event.user)
        else:
            raise TypeError(f"Unknown input event: {event!r}")
        return None

    def insert(self, text: str) -> TriggerAction:
        """Handle a typed character, text being the full text after it."""
        inserted = text[-1] if text else ""
        self.query_state, action = handle_character_inserted(text, inserted, self.query_state)
        self.last_action = action
        self.draft.text = text
        self._render(self.draft.tags)
        return action

    def type_text(self, chars: str) -> None:
        """Type characters one at a time after the current text."""
        for ch in chars:
            self.insert(self.draft.text + ch)

    def delete(self, text: str) -> TriggerAction:
        """Handle deletion, text being what remains."""
        self.query_state, action = handle_text_deleted(text, self.query_state)
        self.last_action = action
        self.draft.text = text
        self._render(self.draft.tags)
        return action

    def backspace(self, count: int = 1) -> None:
        for _ in range(min(count, len(self.draft.text))):
            self.delete(self.draft.text[:-1])

    def select(self, user: User) -> bool:
        """Commit a candidate into the draft.

        Returns:
            False when no search is active and the selection was ignored.
        """
        if not self.query_state.searching:
            logger.warning("Ignoring selection of %s, no active search", user)
            return False

        self.draft = commit(self.draft, self.query_state, user)
        self.query_state = QueryState.idle(len(self.draft.text) - 1)
        self.last_action = TriggerAction.STOP_SEARCH
        self._render(self.draft.tags)
        return True

    def submit(self) -> Optional[Comment]:
        """
        Validate tags, post the draft and reset it.

        Empty drafts post nothing. An alert goes out only when at least one
        tagged user is still mentioned.

        Returns:
            The posted comment, or None.
        """
        tags = validate(self.draft.text, self.draft.tags)
        posted: Optional[Comment] = None

        if self.draft.text:
            posted = Comment.from_draft(self.draft, tags)
            if posted.tags:
                self.notifier.notify(format_alert(posted.tagged_names, self.alert_header))
            self.comments.post(posted)
        else:
            logger.debug("Empty draft submitted, nothing posted")

        self._render(tags)

        self.draft = Draft(author_id=self.author_id)
        self.query_state = QueryState.idle()
        self.last_action = None
        return posted

    def render_comment(self, comment: Comment) -> str:
        return str(render(comment.text, comment.tags, self.emphasis_tag))

    def _render(self, tags: TaggedUsers) -> None:
        markup = render(self.draft.text, tags, self.emphasis_tag)
        self.render_target.set_markup(RenderDirective(markup=markup))
