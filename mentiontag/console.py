"""Line-oriented console front end for an editing session."""

import logging
from typing import Callable, Iterable

from .command_router import CommandRouter, CommandType, ParsedCommand
from .config import Config
from .services import CommentService, DirectoryService, NotificationService
from .session import BufferRenderTarget, CandidateSelected, EditingSession, EnterPressed

logger = logging.getLogger(__name__)


def build_session(config: Config) -> EditingSession:
    """Wire an editing session from configuration."""
    directory = DirectoryService.from_config(config.directory)
    return EditingSession(
        directory=directory,
        comments=CommentService.from_config(config.comments, directory),
        notifier=NotificationService.from_config(config.notifications),
        render_target=BufferRenderTarget(),
        author_id=config.session.author_id,
        emphasis_tag=config.rendering.emphasis_tag,
        alert_header=config.notifications.header,
    )


class Console:
    """Feed input lines to a session and print what the editing surface would show."""

    def __init__(self, session: EditingSession, output: Callable[[str], None] = print) -> None:
        self.session = session
        self.output = output
        self.command_router = CommandRouter()

    def run(self, lines: Iterable[str]) -> int:
        """
        Process input lines until they run out or :quit is entered.

        Returns:
            Number of comments posted.
        """
        posted = 0
        for raw_line in lines:
            line = raw_line.rstrip("\r\n")
            command = self.command_router.parse_command(line)
            if command is None:
                if line:
                    self.session.type_text(self._separated(line))
                    self._show_draft()
                continue

            if command.command_type == CommandType.QUIT:
                break
            if self._handle_command(command):
                posted += 1
        return posted

    def _separated(self, line: str) -> str:
        """Lines continue the draft after a space, like words on one line."""
        text = self.session.draft.text
        if text and not text[-1].isspace():
            return " " + line
        return line

    def _handle_command(self, command: ParsedCommand) -> bool:
        """Run a command. Returns True when a comment was posted."""
        if command.command_type == CommandType.SEND:
            notifications_before = len(self.session.notifier.sent)
            comment = self.session.handle(EnterPressed())
            self._show_markup()
            if len(self.session.notifier.sent) > notifications_before:
                self.output(self.session.notifier.latest.message)
            if comment is None:
                self.output("(nothing to post)")
                return False
            return True

        if command.command_type == CommandType.PICK:
            self._pick(command)
        elif command.command_type == CommandType.BACK:
            count = command.int_argument(default=1)
            if count is None:
                self.output(f"Invalid count: {command.arguments}")
            else:
                self.session.backspace(count)
                self._show_draft()
        elif command.command_type == CommandType.COMMENTS:
            for comment in self.session.comments.list_comments():
                self.output(f"[{comment.author_id}] {self.session.render_comment(comment)}")
        return False

    def _pick(self, command: ParsedCommand) -> None:
        candidates = self.session.candidates
        if not candidates:
            self.output("No candidates; type @ to start a mention")
            return
        index = command.int_argument(default=1)
        if index is None or index > len(candidates):
            self.output(f"Pick a number between 1 and {len(candidates)}")
            return
        self.session.handle(CandidateSelected(candidates[index - 1]))
        self._show_draft()

    def _show_markup(self) -> None:
        self.output(self.session.render_target.markup)

    def _show_draft(self) -> None:
        self._show_markup()
        for number, user in enumerate(self.session.candidates, start=1):
            self.output(f"  {number}. {user.name}")
