"""Read-only user directory."""

from typing import Iterable, Optional

from ..config import DirectoryConfig
from ..models import User
from ..tokenizer import is_mention_name


class DirectoryService:
    """Ordered list of users that can be mentioned."""

    def __init__(self, users: Iterable[User]):
        self._users: list[User] = list(users)
        self._by_id: dict[int, User] = {}
        for user in self._users:
            if user.user_id in self._by_id:
                raise ValueError(f"Duplicate user_id: {user.user_id}")
            if not is_mention_name(user.name):
                raise ValueError(f"User name cannot be mentioned: {user.name!r}")
            self._by_id[user.user_id] = user

    @classmethod
    def from_config(cls, config: DirectoryConfig) -> "DirectoryService":
        return cls(User(user_id=entry.user_id, name=entry.name) for entry in config.users)

    def list_users(self) -> list[User]:
        """Return all users in directory order."""
        return list(self._users)

    def get_user(self, user_id: int) -> Optional[User]:
        """Look up a user by id."""
        return self._by_id.get(user_id)

    def __len__(self) -> int:
        return len(self._users)
