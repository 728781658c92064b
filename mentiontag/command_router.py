"""Command router for parsing console commands."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CommandType(Enum):
    """Available console command types."""

    PICK = "pick"
    BACK = "back"
    SEND = "send"
    COMMENTS = "comments"
    QUIT = "quit"


@dataclass
class ParsedCommand:
    """Parsed console command with its arguments."""

    command_type: CommandType
    arguments: str
    raw_text: str

    def int_argument(self, default: int) -> Optional[int]:
        """Parse the argument as a positive integer.

        Returns:
            The default when no argument was given, None when it is not a positive integer.
        """
        if not self.arguments:
            return default
        try:
            value = int(self.arguments)
        except ValueError:
            return None
        return value if value > 0 else None


class CommandRouter:
    """Tell console commands apart from text to be typed."""

    COMMAND_PREFIX = ":"

    def __init__(self):
        """Initialize the command router."""
        # Build regex pattern from available commands
        command_names = "|".join(cmd.value for cmd in CommandType)
        # Match: :command followed by optional whitespace and arguments
        self.command_pattern = re.compile(
            rf"{re.escape(self.COMMAND_PREFIX)}({command_names})(?:\s+(.*))?$",
            re.IGNORECASE,
        )

    def parse_command(self, text: Optional[str]) -> Optional[ParsedCommand]:
        """
        Extract a console command from an input line.

        Args:
            text: One line of console input.

        Returns:
            ParsedCommand if the line is a valid command, else None.

        Examples:
            >>> router = CommandRouter()
            >>> cmd = router.parse_command(":pick 2")
            >>> cmd.command_type == CommandType.PICK
            True
            >>> cmd.arguments
            '2'
        """
        if not text:
            return None

        match = self.command_pattern.match(text.strip())
        if not match:
            return None

        command_name = match.group(1).lower()
        arguments = (match.group(2) or "").strip()

        return ParsedCommand(
            command_type=CommandType(command_name),
            arguments=arguments,
            raw_text=text,
        )
