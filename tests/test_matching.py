"""Tests for prefix matching."""

from mentiontag.matching import find_candidates, is_match, normalize
from mentiontag.models import User

DIRECTORY = [
    User(1, "Kevin"),
    User(2, "Jeff"),
    User(3, "Bryan"),
    User(4, "Gabbey"),
]


class TestNormalize:
    """Test case and diacritic folding."""

    def test_lowercases(self):
        assert normalize("JeFF") == "jeff"

    def test_strips_diacritics(self):
        assert normalize("Élodie") == "elodie"
        assert normalize("Zoë") == "zoe"

    def test_idempotent(self):
        assert normalize(normalize("Ångström")) == normalize("Ångström")


class TestFindCandidates:
    """Test directory filtering."""

    def test_empty_query_returns_full_directory(self):
        """Test that an empty query shows every user."""
        assert find_candidates(DIRECTORY, "") == DIRECTORY

    def test_prefix_match(self):
        """Test that "je" matches only Jeff."""
        assert find_candidates(DIRECTORY, "je") == [User(2, "Jeff")]

    def test_case_insensitive(self):
        """Test that query case does not matter."""
        assert find_candidates(DIRECTORY, "BR") == [User(3, "Bryan")]

    def test_diacritic_insensitive(self):
        """Test that accents on either side are ignored."""
        directory = [User(1, "Élodie"), User(2, "Eli")]
        assert find_candidates(directory, "elo") == [User(1, "Élodie")]
        assert find_candidates(directory, "él") == directory

    def test_no_match(self):
        """Test that an unknown prefix yields nothing."""
        assert find_candidates(DIRECTORY, "zz") == []

    def test_preserves_directory_order(self):
        """Test that results follow directory order."""
        directory = [User(5, "Bob"), User(6, "Ann"), User(7, "Bea")]
        assert find_candidates(directory, "b") == [User(5, "Bob"), User(7, "Bea")]

    def test_longer_query_narrows_results(self):
        """Test that extending a query never adds candidates."""
        directory = DIRECTORY + [User(5, "Jeffrey"), User(6, "Jenna")]
        previous = find_candidates(directory, "")
        for query in ["j", "je", "jef", "jeff", "jeffr"]:
            current = find_candidates(directory, query)
            assert all(user in previous for user in current)
            previous = current

    def test_is_match(self):
        assert is_match(User(1, "Kevin"), "kev") is True
        assert is_match(User(1, "Kevin"), "") is True
        assert is_match(User(1, "Kevin"), "kevinx") is False
