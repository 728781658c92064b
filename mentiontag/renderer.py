"""HTML rendering of text with tagged mentions emphasized."""

from markupsafe import Markup, escape

from .models import TaggedUsers
from .tokenizer import scan

EMPHASIS_TAGS = ("b", "strong", "em", "mark")


def render(text: str, tags: TaggedUsers, tag: str = "b") -> Markup:
    """
    Render text as safe markup, wrapping mentions of tagged users.

    Mentions keep the casing they were typed with. "@word" tokens that do
    not name a tagged user are left as plain text.

    Args:
        text: Comment text.
        tags: Users whose mentions should be emphasized.
        tag: Emphasis element name.

    Returns:
        Escaped markup.
    """
    if tag not in EMPHASIS_TAGS:
        raise ValueError(f"Unsupported emphasis tag: {tag}")

    names = {user.name.casefold() for user in tags.values()}
    parts: list[Markup] = []
    for segment in scan(text):
        if segment.is_mention and segment.name.casefold() in names:
            parts.append(Markup("<{0}>{1}</{0}>").format(Markup(tag), segment.text))
        else:
            parts.append(escape(segment.text))
    return Markup("").join(parts)
