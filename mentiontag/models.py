"""Value types shared by the tagging pipeline."""

from dataclasses import dataclass, field
from enum import Enum

from markupsafe import Markup


@dataclass(frozen=True)
class User:
    """A directory entry that can be mentioned."""

    user_id: int
    name: str

    def __str__(self) -> str:
        return f"@{self.name}"


# Tagged users keyed by user_id.
TaggedUsers = dict[int, User]


@dataclass
class Draft:
    """The in-progress comment being edited."""

    author_id: int = 0
    text: str = ""
    tags: TaggedUsers = field(default_factory=dict)


@dataclass(frozen=True)
class QueryState:
    """Search state derived from the text around the caret."""

    searching: bool = False
    query: str = ""
    trigger_index: int = 0

    @classmethod
    def idle(cls, trigger_index: int = 0) -> "QueryState":
        return cls(searching=False, query="", trigger_index=max(trigger_index, 0))


@dataclass(frozen=True)
class Comment:
    """A submitted draft."""

    author_id: int
    text: str
    tags: TaggedUsers

    @classmethod
    def from_draft(cls, draft: Draft, tags: TaggedUsers | None = None) -> "Comment":
        return cls(
            author_id=draft.author_id,
            text=draft.text,
            tags=dict(draft.tags if tags is None else tags),
        )

    @property
    def tagged_names(self) -> list[str]:
        return [user.name for user in self.tags.values()]


class CaretPlacement(Enum):
    """Where the editing surface should put the caret after a render."""

    END = "end"


@dataclass(frozen=True)
class RenderDirective:
    """Markup for the editing surface plus a caret instruction."""

    markup: Markup
    caret: CaretPlacement = CaretPlacement.END
