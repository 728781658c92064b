"""Prefix matching of queries against the user directory."""

import unicodedata
from typing import Iterable

from .models import User


def normalize(text: str) -> str:
    """Fold case and strip diacritics so "Élodie" and "elodie" compare equal."""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def is_match(user: User, query: str) -> bool:
    """Check whether the user's name starts with the query."""
    if not query:
        return True
    return normalize(user.name).startswith(normalize(query))


def find_candidates(directory: Iterable[User], query: str) -> list[User]:
    """
    Return the directory entries matching a search query.

    Args:
        directory: Users in display order.
        query: Text typed after the "@" trigger. Empty matches everyone.

    Returns:
        Matching users, in directory order.
    """
    return [user for user in directory if is_match(user, query)]
